# app/core/orca/render.py
"""
RENDER MODULE - Turn a FetchOutcome into the chat reply text

Output for a successful fetch:

    Found 2 alerts:

    1. Exposed S3 bucket
       Severity: high
       State: open
       Asset: prod-logs

    2. ...

Only the first PREVIEW_LIMIT records are shown; the rest are counted
in a trailing "... and N more" line.
"""

from typing import Any, List

from app.core.schemas import (
    AlertRecord,
    AssetRecord,
    Category,
    FetchFailure,
    FetchOutcome,
)

PREVIEW_LIMIT = 10
INDENT = "   "


def _as_dict(item: Any) -> dict:
    return item if isinstance(item, dict) else {}


def render_asset(index: int, record: AssetRecord) -> str:
    lines = [
        f"{index}. {record.name or record.id or 'Unknown asset'}",
        f"{INDENT}Type: {record.type or 'unknown'}",
    ]
    if record.cloud_provider:
        lines.append(f"{INDENT}Provider: {record.cloud_provider}")
    if record.state:
        lines.append(f"{INDENT}State: {record.state}")
    return "\n".join(lines) + "\n\n"


def render_alert(index: int, record: AlertRecord) -> str:
    lines = [
        f"{index}. {record.type_label or 'Alert'}",
        f"{INDENT}Severity: {record.severity or 'unknown'}",
        f"{INDENT}State: {record.state or 'unknown'}",
    ]
    if record.asset_name:
        lines.append(f"{INDENT}Asset: {record.asset_name}")
    if record.description:
        lines.append(f"{INDENT}Description: {record.description}")
    return "\n".join(lines) + "\n\n"


def render_entries(items: List[Any], category: Category) -> str:
    # The category, not the record contents, decides the shape
    if category is Category.ASSETS:
        return "".join(
            render_asset(i, AssetRecord.model_validate(_as_dict(item)))
            for i, item in enumerate(items, start=1)
        )
    return "".join(
        render_alert(i, AlertRecord.model_validate(_as_dict(item)))
        for i, item in enumerate(items, start=1)
    )


def render_report(outcome: FetchOutcome, category: Category) -> str:
    """Build the reply. Failures come back as their detail text, untouched."""
    if isinstance(outcome, FetchFailure):
        return outcome.detail

    label = category.label
    total = len(outcome.items)

    if total == 0:
        return f"No {label} found in your Orca Security account."

    response = f"Found {total} {label}:\n\n"
    response += render_entries(outcome.items[:PREVIEW_LIMIT], category)

    if total > PREVIEW_LIMIT:
        response += f"\n... and {total - PREVIEW_LIMIT} more {label}."

    return response
