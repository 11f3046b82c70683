from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ragchat.schemas.chat import ChatMessage

DEFAULT_STREAM_MEDIA_TYPE = "text/event-stream"


@dataclass(frozen=True)
class GenerationOptions:
    model: str
    max_output_tokens: int
    stream: bool = True


@dataclass
class GenerationStream:
    """Opaque handle over a live upstream response body.

    Whoever consumes ``iter_bytes`` owns the upstream connection; it is
    released when iteration finishes, fails, or is abandoned.
    """

    chunks: AsyncIterator[bytes]
    media_type: str = DEFAULT_STREAM_MEDIA_TYPE
    status_code: int = 200
    on_close: Callable[[], Awaitable[None]] | None = None
    _closed: bool = field(default=False, init=False, repr=False)

    async def iter_bytes(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self.chunks:
                yield chunk
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.on_close is not None:
            await self.on_close()


class TextGenerator(Protocol):
    async def generate(
        self,
        messages: Sequence[ChatMessage],
        *,
        options: GenerationOptions,
    ) -> GenerationStream: ...
