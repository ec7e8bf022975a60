# app/core/orca/classify.py
"""
CLASSIFY MODULE - Turn a free-text question into an Orca query

Purpose:
    1. Lower-case the question
    2. Walk INTENT_RULES top to bottom
    3. Return the QuerySpec of the FIRST rule with a matching keyword

Order matters: "alert" is checked before "vuln", so
"show vulnerability alerts" is answered from the plain alerts list.
Keep the list in this order.
"""

import logging
from typing import List, Tuple

from app.core.schemas import Category, QuerySpec

logger = logging.getLogger(__name__)


DEFAULT_QUERY = QuerySpec(endpoint="/alerts", category=Category.ALERTS)

INTENT_RULES: List[Tuple[Tuple[str, ...], QuerySpec]] = [
    (("alert", "issue"), QuerySpec(endpoint="/alerts", category=Category.ALERTS)),
    (
        ("asset", "resource", "inventory"),
        QuerySpec(endpoint="/assets", category=Category.ASSETS),
    ),
    (
        ("vulnerability", "vuln", "cve"),
        QuerySpec(
            endpoint="/alerts?type=vulnerability", category=Category.VULNERABILITIES
        ),
    ),
    (
        ("compliance", "policy"),
        QuerySpec(
            endpoint="/alerts?type=compliance", category=Category.COMPLIANCE_ISSUES
        ),
    ),
    (
        ("misconfiguration", "config"),
        QuerySpec(
            endpoint="/alerts?type=misconfiguration",
            category=Category.MISCONFIGURATIONS,
        ),
    ),
]


def classify_query(query: str) -> QuerySpec:
    """
    Pick the Orca endpoint for a chat question.

    Example:
        classify_query("show me critical vulnerabilities")
        -> QuerySpec(endpoint="/alerts?type=vulnerability", category=VULNERABILITIES)
    """
    lowered = query.lower()

    for keywords, spec in INTENT_RULES:
        if any(keyword in lowered for keyword in keywords):
            logger.debug(f"Query matched '{spec.category.value}' via {keywords}")
            return spec

    logger.debug("No keyword matched, falling back to alerts")
    return DEFAULT_QUERY
