from __future__ import annotations

from collections.abc import Sequence
from contextlib import AsyncExitStack
from typing import Any, cast

from openai import AsyncOpenAI

from ragchat.generation.types import (
    DEFAULT_STREAM_MEDIA_TYPE,
    GenerationOptions,
    GenerationStream,
)
from ragchat.schemas.chat import ChatMessage


class OpenAIChatStreamGenerator:
    """Streams chat completions as raw server-sent event bytes."""

    def __init__(self, *, client: AsyncOpenAI) -> None:
        self._client = client

    async def generate(
        self,
        messages: Sequence[ChatMessage],
        *,
        options: GenerationOptions,
    ) -> GenerationStream:
        payload = [message.model_dump() for message in messages]
        exit_stack = AsyncExitStack()
        try:
            response = await exit_stack.enter_async_context(
                self._client.chat.completions.with_streaming_response.create(
                    model=options.model,
                    messages=cast(Any, payload),
                    max_completion_tokens=options.max_output_tokens,
                    stream=options.stream,
                )
            )
        except BaseException:
            await exit_stack.aclose()
            raise

        media_type = response.headers.get("content-type") or DEFAULT_STREAM_MEDIA_TYPE
        return GenerationStream(
            chunks=response.iter_bytes(),
            media_type=media_type,
            status_code=response.status_code,
            on_close=exit_stack.aclose,
        )
