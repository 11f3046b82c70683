from __future__ import annotations

import json
import logging
from typing import Any, cast

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask

from ragchat.schemas.chat import ChatRequest
from ragchat.schemas.errors import ApiErrorResponse, error_response
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator

logger = logging.getLogger(__name__)


def _get_orchestrator(request: Request) -> RagChatOrchestrator:
    orchestrator = getattr(request.app.state, "rag_orchestrator", None)
    if orchestrator is None:  # pragma: no cover
        raise RuntimeError("RAG orchestrator not configured")
    return cast(RagChatOrchestrator, orchestrator)


ORCHESTRATOR_DEPENDENCY = Depends(_get_orchestrator)


async def _read_body(request: Request) -> dict[str, Any]:
    """Decode the JSON body, treating anything unusable as an empty object."""

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring chat request body that is not valid JSON")
        return {}
    if not isinstance(payload, dict):
        logger.warning("Ignoring chat request body that is not a JSON object")
        return {}
    return payload


def build_chat_router() -> APIRouter:
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post(
        "/chat",
        response_model=None,
        status_code=200,
        responses={
            500: {"model": ApiErrorResponse},
        },
        summary="Stream a knowledge-base grounded chat completion",
    )
    async def post_chat(
        request: Request,
        orchestrator: RagChatOrchestrator = ORCHESTRATOR_DEPENDENCY,
    ) -> Response:
        try:
            chat_request = ChatRequest.model_validate(await _read_body(request))
            stream = await orchestrator.handle_chat(chat_request.messages)
        except Exception:
            logger.exception("Error processing chat request")
            return JSONResponse(status_code=500, content=error_response().model_dump())

        return StreamingResponse(
            stream.iter_bytes(),
            status_code=stream.status_code,
            media_type=stream.media_type,
            background=BackgroundTask(stream.aclose),
        )

    return router
