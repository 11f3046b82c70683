from __future__ import annotations

from collections.abc import Sequence

from ragchat.config import OrchestratorConfig
from ragchat.generation.types import GenerationOptions, GenerationStream, TextGenerator
from ragchat.retrieval.types import EvidenceSearch, SearchOptions
from ragchat.schemas.chat import ChatMessage
from ragchat.services.evidence_formatter import format_evidence
from ragchat.services.generation_forwarder import GenerationForwarder
from ragchat.services.message_list import ensure_system_message, insert_context_message
from ragchat.services.prompt_assembler import build_context_message
from ragchat.services.retrieval_coordinator import RetrievalCoordinator


class RagChatOrchestrator:
    """Augments a conversation with knowledge base evidence and streams the reply.

    Each call is independent: nothing is cached or shared between requests,
    and retrieval always completes before generation starts.
    """

    def __init__(
        self,
        *,
        search: EvidenceSearch,
        generator: TextGenerator,
        config: OrchestratorConfig | None = None,
    ) -> None:
        self._config = config or OrchestratorConfig()
        self._retrieval = RetrievalCoordinator(
            search=search,
            options=SearchOptions(
                max_results=self._config.retrieval_result_limit,
                rewrite_query=self._config.rewrite_query,
                score_threshold=self._config.score_threshold,
            ),
        )
        self._forwarder = GenerationForwarder(
            generator=generator,
            options=GenerationOptions(
                model=self._config.model_identifier,
                max_output_tokens=self._config.max_output_tokens,
            ),
        )

    @property
    def config(self) -> OrchestratorConfig:
        return self._config

    async def augment(self, messages: Sequence[ChatMessage]) -> list[ChatMessage]:
        normalized = ensure_system_message(
            messages,
            instruction=self._config.default_system_instruction,
        )
        matches = await self._retrieval.retrieve(normalized)
        context = build_context_message(format_evidence(matches))
        return insert_context_message(normalized, context)

    async def handle_chat(self, messages: Sequence[ChatMessage]) -> GenerationStream:
        augmented = await self.augment(messages)
        return await self._forwarder.forward(augmented)
