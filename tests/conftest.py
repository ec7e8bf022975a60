from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.http import get_http_client


class FakeOrca:
    """Stands in for the Orca API; records every request it gets."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"data": []}
        self.raw_body: bytes = b""
        self.error: Optional[Exception] = None

    def reply(self, status_code: int = 200, json_body: Any = None, raw_body: bytes = b""):
        self.status_code = status_code
        self.json_body = json_body
        self.raw_body = raw_body

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, content=self.raw_body)


def make_alerts(count: int, **overrides) -> List[Dict[str, Any]]:
    alerts = []
    for i in range(count):
        alert = {
            "id": f"orca-{i + 1}",
            "type_string": f"Finding {i + 1}",
            "severity": "high",
            "state": "open",
            "asset_name": f"vm-{i + 1}",
            "description": f"Description {i + 1}",
        }
        alert.update(overrides)
        alerts.append(alert)
    return alerts


@pytest.fixture
def fake_orca() -> FakeOrca:
    return FakeOrca()


# Client that talks to fake_orca instead of the real API
@pytest_asyncio.fixture(scope="function")
async def orca_client(fake_orca: FakeOrca):
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(fake_orca.handler), follow_redirects=True
    ) as oc:
        yield oc


# Client
@pytest_asyncio.fixture(scope="function")
async def client(orca_client: httpx.AsyncClient):
    async def override_get_http_client():
        yield orca_client

    app.dependency_overrides[get_http_client] = override_get_http_client

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def alerts_factory() -> Callable[..., List[Dict[str, Any]]]:
    return make_alerts
