from __future__ import annotations

from collections.abc import Sequence

from ragchat.generation.types import GenerationOptions, GenerationStream, TextGenerator
from ragchat.schemas.chat import ChatMessage


class GenerationForwarder:
    """Hands the final conversation to the generator and returns its stream as-is."""

    def __init__(self, *, generator: TextGenerator, options: GenerationOptions) -> None:
        self._generator = generator
        self._options = options

    async def forward(self, messages: Sequence[ChatMessage]) -> GenerationStream:
        return await self._generator.generate(list(messages), options=self._options)
