# app/core/orca/fetch.py
"""
FETCH MODULE - One authenticated read against the Orca API

Purpose:
    1. Refuse early when there is no API key (no network call at all)
    2. GET {base_url}{endpoint} with a bearer token
    3. Turn every way this can go wrong into a FetchFailure value

Nothing here raises for remote problems; the caller always gets a
FetchOutcome back. No retries, no custom timeout.
"""

import logging
from typing import Optional

import httpx

from app.core.schemas import (
    FailureReason,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    QuerySpec,
    RemoteCredentials,
)

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Orca API key not configured. Please set it in the settings."


def build_headers(api_key: str) -> dict:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def _failure(reason: FailureReason, detail: str) -> FetchFailure:
    logger.warning(f"Orca fetch failed ({reason.value}): {detail}")
    return FetchFailure(reason=reason, detail=detail)


def parse_body(response: httpx.Response) -> FetchOutcome:
    """
    Read the `data` array out of a successful Orca response.

    Expected body:
        {"data": [{...}, {...}], ...}

    A missing or null `data` is just an empty result.
    """
    try:
        body = response.json()
    except ValueError as e:
        return _failure(
            FailureReason.DECODE_ERROR, f"Failed to decode Orca response: {e}"
        )

    if not isinstance(body, dict):
        return _failure(
            FailureReason.DECODE_ERROR,
            f"Failed to decode Orca response: expected an object, got {type(body).__name__}",
        )

    items = body.get("data")
    if items is None:
        items = []
    elif not isinstance(items, list):
        return _failure(
            FailureReason.DECODE_ERROR,
            f"Failed to decode Orca response: 'data' is {type(items).__name__}, not a list",
        )

    return FetchSuccess(items=items)


async def _get(client: httpx.AsyncClient, url: str, api_key: str) -> FetchOutcome:
    try:
        response = await client.get(url, headers=build_headers(api_key))
    except (httpx.RequestError, httpx.InvalidURL) as e:
        message = str(e) or e.__class__.__name__
        return _failure(
            FailureReason.TRANSPORT_ERROR, f"Failed to fetch from Orca: {message}"
        )

    if not response.is_success:
        return _failure(
            FailureReason.REMOTE_STATUS_ERROR,
            f"Orca API error: {response.status_code} {response.reason_phrase}",
        )

    outcome = parse_body(response)
    if isinstance(outcome, FetchSuccess):
        logger.info(f"Fetched {len(outcome.items)} records from {url}")
    return outcome


async def fetch_report(
    spec: QuerySpec,
    creds: RemoteCredentials,
    client: Optional[httpx.AsyncClient] = None,
) -> FetchOutcome:
    """
    Run the query described by `spec` against Orca.

    Args:
        spec: endpoint to call (category is not needed here)
        creds: API key + base URL for this one request
        client: shared client from the request scope; a throwaway one is
            opened when not given

    Returns:
        FetchSuccess with the records in the order Orca sent them,
        or FetchFailure with a one-line message for the chat.
    """
    if not creds.api_key:
        return _failure(FailureReason.MISSING_CREDENTIAL, MISSING_KEY_MESSAGE)

    url = f"{creds.base_url}{spec.endpoint}"
    logger.info(f"Fetching from Orca: {url}")

    if client is not None:
        return await _get(client, url, creds.api_key)

    async with httpx.AsyncClient(follow_redirects=True) as own_client:
        return await _get(own_client, url, creds.api_key)
