from __future__ import annotations

from collections.abc import Sequence

from ragchat.schemas.chat import ChatMessage

CONTEXT_MESSAGE_INDEX = 1


def ensure_system_message(
    messages: Sequence[ChatMessage],
    *,
    instruction: str,
) -> list[ChatMessage]:
    """Return a copy of ``messages`` that starts with a system instruction.

    Only the absence case is handled: existing system messages are kept
    exactly where the caller put them, duplicates included.
    """

    normalized = list(messages)
    if not any(message.role == "system" for message in normalized):
        normalized.insert(0, ChatMessage(role="system", content=instruction))
    return normalized


def insert_context_message(
    messages: Sequence[ChatMessage],
    context: ChatMessage,
) -> list[ChatMessage]:
    """Return a copy with ``context`` placed immediately after message 0."""

    augmented = list(messages)
    augmented.insert(min(CONTEXT_MESSAGE_INDEX, len(augmented)), context)
    return augmented


def latest_user_query(messages: Sequence[ChatMessage]) -> str:
    for message in reversed(messages):
        if message.role == "user":
            return message.content
    return ""
