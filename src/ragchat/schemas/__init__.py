"""Pydantic schemas for the ragchat API."""

from ragchat.schemas.chat import ChatMessage, ChatRequest, ChatRole
from ragchat.schemas.errors import CHAT_FAILED_MESSAGE, ApiErrorResponse, error_response

__all__ = [
    "CHAT_FAILED_MESSAGE",
    "ApiErrorResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatRole",
    "error_response",
]
