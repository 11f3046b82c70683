from typing import Final, Literal

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from ragchat import __version__
from ragchat.api.chat import ORCHESTRATOR_DEPENDENCY
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator

STATUS_OK: Final[Literal["ok"]] = "ok"


class HealthResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["ok"]
    service: str
    version: str
    chat_model: str


def build_health_router(*, service_name: str) -> APIRouter:
    router = APIRouter(tags=["system"])

    @router.get("/health", response_model=HealthResponse, summary="Liveness probe")
    async def health(
        orchestrator: RagChatOrchestrator = ORCHESTRATOR_DEPENDENCY,
    ) -> HealthResponse:
        return HealthResponse(
            status=STATUS_OK,
            service=service_name,
            version=__version__,
            chat_model=orchestrator.config.model_identifier,
        )

    return router
