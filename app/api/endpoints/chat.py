import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.core import schemas
from app.core.config import settings
from app.core.http import get_http_client
from app.core.orca.pipeline import run_chat_pipeline

router = APIRouter(prefix="/api", tags=["Chat"])

http_dep = Annotated[httpx.AsyncClient, Depends(get_http_client)]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=schemas.ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/chat",
    response_model=schemas.ChatResponse,
    responses={
        400: {"model": schemas.ErrorResponse},
        500: {"model": schemas.ErrorResponse},
    },
)
async def chat(payload: schemas.ChatRequest, client: http_dep):
    """
    Answer the latest user message with a summary from Orca Security.
    Only the last message is read; earlier turns are ignored.
    """
    if not payload.messages:
        return error_response(status.HTTP_400_BAD_REQUEST, "No messages provided")

    last_message = payload.messages[-1]
    if last_message.role != schemas.MessageRole.USER:
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Last message must be from user"
        )

    creds = schemas.RemoteCredentials(
        api_key=payload.orca_api_key or "",
        base_url=payload.orca_api_url or settings.ORCA_API_URL,
    )

    try:
        reply = await run_chat_pipeline(last_message.content, creds, client=client)
    except Exception as error:
        logging.exception(f"Chat API error: {error}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )

    return schemas.ChatResponse(message=reply)


@router.get("/health")
async def health_check():
    """Liveness probe; does not touch Orca."""
    return {"status": "ok"}
