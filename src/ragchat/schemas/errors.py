from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

CHAT_FAILED_MESSAGE: Final[str] = "Failed to process request"


class ApiErrorResponse(BaseModel):
    """Error payload returned by the chat endpoint.

    Retrieval and generation failures share the same message.
    """

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Human-friendly error message")


def error_response(message: str = CHAT_FAILED_MESSAGE) -> ApiErrorResponse:
    return ApiErrorResponse(error=message)
