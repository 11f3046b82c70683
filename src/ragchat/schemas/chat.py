from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """A single conversation turn. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: list[ChatMessage] = Field(default_factory=list)
