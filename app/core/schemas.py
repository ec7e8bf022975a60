from typing import Annotated, Any, List, Literal, Optional, Union
from enum import Enum

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# =========================
# Enums
# =========================
class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Category(str, Enum):
    ALERTS = "alerts"
    ASSETS = "assets"
    VULNERABILITIES = "vulnerabilities"
    COMPLIANCE_ISSUES = "compliance-issues"
    MISCONFIGURATIONS = "misconfigurations"

    @property
    def label(self) -> str:
        """Human-readable name used in chat replies ("compliance issues")."""
        return self.value.replace("-", " ")


class FailureReason(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_ERROR = "transport_error"
    REMOTE_STATUS_ERROR = "remote_status_error"
    DECODE_ERROR = "decode_error"


# =========================
# CHAT (request boundary)
# =========================
class ChatMessage(BaseModel):
    role: MessageRole
    content: str

    model_config = ConfigDict(frozen=True)


class ChatRequest(BaseModel):
    messages: Optional[List[ChatMessage]] = None
    # The browser client sends camelCase keys
    orca_api_key: Optional[str] = Field(default=None, alias="orcaApiKey")
    orca_api_url: Optional[str] = Field(default=None, alias="orcaApiUrl")

    model_config = ConfigDict(populate_by_name=True)


class ChatResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


# =========================
# QUERY / FETCH
# =========================
class QuerySpec(BaseModel):
    """Where to look (endpoint, optional type filter) and what we are looking for."""

    endpoint: str
    category: Category

    model_config = ConfigDict(frozen=True)


class RemoteCredentials(BaseModel):
    # Keep the key out of logs and tracebacks
    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: str

    model_config = ConfigDict(frozen=True)


class FetchSuccess(BaseModel):
    kind: Literal["success"] = "success"
    items: List[Any] = []


class FetchFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    reason: FailureReason
    detail: str


FetchOutcome = Union[FetchSuccess, FetchFailure]


# =========================
# ORCA RECORDS
# =========================
def _as_text(value: Any) -> Optional[str]:
    """Orca fields are shown as text; empty values (None, "", 0, False) mean "not there"."""
    if isinstance(value, (str, int, float, bool, type(None))) and not value:
        return None
    return str(value)


DisplayText = Annotated[Optional[str], BeforeValidator(_as_text)]


class AssetRecord(BaseModel):
    """One row of `/assets`."""

    id: DisplayText = Field(default=None, alias="asset_unique_id")
    name: DisplayText = Field(default=None, alias="asset_name")
    type: DisplayText = Field(default=None, alias="asset_type")
    cloud_provider: DisplayText = None
    state: DisplayText = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AlertRecord(BaseModel):
    """One row of `/alerts` (also used for the vulnerability, compliance and misconfiguration filters)."""

    id: DisplayText = None
    type_label: DisplayText = Field(default=None, alias="type_string")
    severity: DisplayText = None
    state: DisplayText = None
    asset_name: DisplayText = None
    description: DisplayText = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
