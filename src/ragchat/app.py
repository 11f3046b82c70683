from __future__ import annotations

import logging
import os
from typing import Final

import uvicorn
from fastapi import FastAPI
from openai import AsyncOpenAI

from ragchat import __version__
from ragchat.api import build_chat_router, build_health_router
from ragchat.config import (
    read_openai_settings,
    read_orchestrator_config,
    read_server_binding,
)
from ragchat.generation.openai_chat_stream import OpenAIChatStreamGenerator
from ragchat.retrieval.openai_vector_store_search import OpenAIVectorStoreSearch
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator

DEFAULT_SERVICE_NAME: Final[str] = "ragchat"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
APP_FACTORY: Final[str] = "ragchat.app:create_app"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def build_orchestrator_from_env() -> RagChatOrchestrator:
    openai_settings = read_openai_settings()
    client = AsyncOpenAI(api_key=openai_settings.api_key, base_url=openai_settings.base_url)
    return RagChatOrchestrator(
        search=OpenAIVectorStoreSearch(
            client=client,
            vector_store_id=openai_settings.vector_store_id,
        ),
        generator=OpenAIChatStreamGenerator(client=client),
        config=read_orchestrator_config(),
    )


def create_app(
    *,
    service_name: str = DEFAULT_SERVICE_NAME,
    orchestrator: RagChatOrchestrator | None = None,
) -> FastAPI:
    normalized_service_name = service_name.strip()
    if not normalized_service_name:
        raise ValueError("service_name must not be empty")

    app = FastAPI(
        title="ragchat",
        version=__version__,
    )

    app.state.rag_orchestrator = orchestrator or build_orchestrator_from_env()

    app.include_router(build_health_router(service_name=normalized_service_name))
    app.include_router(build_chat_router())
    return app


def configure_logging() -> None:
    level_name = os.getenv("RAGCHAT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"RAGCHAT_LOG_LEVEL is not a valid level: {level_name!r}")

    logger = logging.getLogger("ragchat")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(level)


def run_server(*, host: str, port: int) -> None:
    configure_logging()
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=host,
        port=port,
        reload=False,
    )


def main() -> None:
    binding = read_server_binding()
    run_server(host=binding.host, port=binding.port)
