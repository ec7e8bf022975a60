import pytest

from app.core.orca.pipeline import run_chat_pipeline
from app.core.schemas import RemoteCredentials

CREDS = RemoteCredentials(api_key="secret-key", base_url="https://orca.test/api")


@pytest.mark.asyncio
async def test_assets_question(fake_orca, orca_client):
    fake_orca.reply(
        json_body={
            "data": [
                {
                    "asset_unique_id": "vm_1",
                    "asset_name": "web-01",
                    "asset_type": "VM",
                    "cloud_provider": "gcp",
                }
            ]
        }
    )

    reply = await run_chat_pipeline("what's in my inventory?", CREDS, client=orca_client)

    assert reply == "Found 1 assets:\n\n1. web-01\n   Type: VM\n   Provider: gcp\n\n"
    assert str(fake_orca.requests[0].url) == "https://orca.test/api/assets"


@pytest.mark.asyncio
async def test_alert_keyword_beats_vuln(fake_orca, orca_client):
    fake_orca.reply(json_body={"data": []})

    reply = await run_chat_pipeline("vuln alerts please", CREDS, client=orca_client)

    assert reply == "No alerts found in your Orca Security account."
    assert str(fake_orca.requests[0].url) == "https://orca.test/api/alerts"


@pytest.mark.asyncio
async def test_failure_text_passes_through(fake_orca, orca_client):
    fake_orca.reply(status_code=503, json_body={})

    reply = await run_chat_pipeline("compliance", CREDS, client=orca_client)

    assert reply == "Orca API error: 503 Service Unavailable"
