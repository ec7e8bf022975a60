from typing import Optional
from enum import Enum
import logging

import httpx

from app.core.schemas import QuerySpec, RemoteCredentials
from app.core.orca import classify, fetch, render


# -----------------------------------------------------------------------------
# PIPELINE MODULE - Orchestration
# Purpose: answer one chat question: classify -> fetch -> render
# Holds nothing between calls; every request brings its own credentials
# -----------------------------------------------------------------------------


class PipelineStep(Enum):
    """Individual pipeline steps."""

    CLASSIFY = "classify"
    FETCH = "fetch"
    RENDER = "render"


logger = logging.getLogger(__name__)


def log_step(step: PipelineStep, message: str, level: str = "info"):
    if level == "warning":
        logger.warning(f"{step.value}: {message}")
    else:
        logger.info(f"{step.value}: {message}")


async def run_chat_pipeline(
    query: str,
    creds: RemoteCredentials,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Produce the assistant reply for one user question.

    Example:
        text = await run_chat_pipeline(
            "list my assets",
            RemoteCredentials(api_key="...", base_url="https://api.orcasecurity.io/api"),
        )
    """
    spec: QuerySpec = classify.classify_query(query)
    log_step(PipelineStep.CLASSIFY, f"category={spec.category.value} endpoint={spec.endpoint}")

    outcome = await fetch.fetch_report(spec, creds, client=client)
    if outcome.kind == "failure":
        log_step(PipelineStep.FETCH, f"failed: {outcome.reason.value}", level="warning")
    else:
        log_step(PipelineStep.FETCH, f"{len(outcome.items)} records")

    reply = render.render_report(outcome, spec.category)
    log_step(PipelineStep.RENDER, f"{len(reply)} characters")
    return reply
