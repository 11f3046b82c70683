from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ragchat.app import create_app
from ragchat.config import OrchestratorConfig
from ragchat.generation.types import GenerationOptions, GenerationStream
from ragchat.retrieval.types import EvidenceMatch, SearchOptions
from ragchat.schemas.chat import ChatMessage
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator


class FakeEvidenceSearch:
    def __init__(self) -> None:
        self.matches: list[EvidenceMatch] = []
        self.error: Exception | None = None
        self.calls: list[tuple[str, SearchOptions]] = []

    async def search(self, query: str, *, options: SearchOptions) -> list[EvidenceMatch]:
        self.calls.append((query, options))
        if self.error is not None:
            raise self.error
        return list(self.matches)


class FakeTextGenerator:
    def __init__(self) -> None:
        self.chunks: list[bytes] = [
            b'data: {"choices":[{"delta":{"content":"Hel"}}]}\n\n',
            b'data: {"choices":[{"delta":{"content":"lo"}}]}\n\n',
            b"data: [DONE]\n\n",
        ]
        self.media_type = "text/event-stream; charset=utf-8"
        self.error: Exception | None = None
        self.calls: list[tuple[list[ChatMessage], GenerationOptions]] = []
        self.closed = False

    async def generate(
        self,
        messages: Sequence[ChatMessage],
        *,
        options: GenerationOptions,
    ) -> GenerationStream:
        self.calls.append((list(messages), options))
        if self.error is not None:
            raise self.error

        chunks = list(self.chunks)

        async def _iterate() -> AsyncIterator[bytes]:
            for chunk in chunks:
                yield chunk

        async def _close() -> None:
            self.closed = True

        return GenerationStream(chunks=_iterate(), media_type=self.media_type, on_close=_close)


@pytest.fixture
def fake_search() -> FakeEvidenceSearch:
    return FakeEvidenceSearch()


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def orchestrator_config() -> OrchestratorConfig:
    return OrchestratorConfig(
        default_system_instruction="You are a test assistant.",
        model_identifier="test-model",
    )


@pytest.fixture
def orchestrator(
    fake_search: FakeEvidenceSearch,
    fake_generator: FakeTextGenerator,
    orchestrator_config: OrchestratorConfig,
) -> RagChatOrchestrator:
    return RagChatOrchestrator(
        search=fake_search,
        generator=fake_generator,
        config=orchestrator_config,
    )


@pytest.fixture
def app(orchestrator: RagChatOrchestrator) -> FastAPI:
    return create_app(service_name="ragchat-test", orchestrator=orchestrator)


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as async_client:
        yield async_client
