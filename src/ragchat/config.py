from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

DEFAULT_SYSTEM_INSTRUCTION: Final[str] = (
    "You are a helpful, friendly assistant. Provide concise and accurate responses."
)
DEFAULT_CHAT_MODEL: Final[str] = "gpt-4o-mini"
DEFAULT_RETRIEVAL_RESULT_LIMIT: Final[int] = 3
DEFAULT_SCORE_THRESHOLD: Final[float] = 0.3
DEFAULT_MAX_OUTPUT_TOKENS: Final[int] = 1024
DEFAULT_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 8000

_SYSTEM_PROMPT_ENV = "RAGCHAT_SYSTEM_PROMPT"
_RETRIEVAL_LIMIT_ENV = "RAGCHAT_RETRIEVAL_LIMIT"
_SCORE_THRESHOLD_ENV = "RAGCHAT_SCORE_THRESHOLD"
_REWRITE_QUERY_ENV = "RAGCHAT_REWRITE_QUERY"
_MAX_OUTPUT_TOKENS_ENV = "RAGCHAT_MAX_OUTPUT_TOKENS"
_CHAT_MODEL_ENV = "RAGCHAT_CHAT_MODEL"
_VECTOR_STORE_ID_ENV = "RAGCHAT_VECTOR_STORE_ID"
_OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
_AZURE_OPENAI_API_KEY_ENV = "AZURE_OPENAI_API_KEY"
_OPENAI_BASE_URL_ENV = "OPENAI_BASE_URL"
_HOST_ENV = "RAGCHAT_HOST"
_PORT_ENV = "RAGCHAT_PORT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigurationError(RuntimeError):
    """Raised when required service configuration is missing or invalid."""


@dataclass(frozen=True)
class OrchestratorConfig:
    """Per-deployment knobs for the retrieval-augmented chat pipeline."""

    default_system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION
    retrieval_result_limit: int = DEFAULT_RETRIEVAL_RESULT_LIMIT
    score_threshold: float = DEFAULT_SCORE_THRESHOLD
    rewrite_query: bool = True
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    model_identifier: str = DEFAULT_CHAT_MODEL

    def __post_init__(self) -> None:
        if not self.default_system_instruction.strip():
            raise ValueError("default_system_instruction must not be empty")
        if self.retrieval_result_limit <= 0:
            raise ValueError("retrieval_result_limit must be greater than zero")
        if self.score_threshold < 0:
            raise ValueError("score_threshold must not be negative")
        if self.max_output_tokens <= 0:
            raise ValueError("max_output_tokens must be greater than zero")
        if not self.model_identifier.strip():
            raise ValueError("model_identifier must not be empty")


@dataclass(frozen=True)
class ServerBinding:
    host: str
    port: int


@dataclass(frozen=True)
class OpenAISettings:
    api_key: str
    base_url: str | None
    vector_store_id: str


def _read_str(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    if not value:
        raise ValueError(f"{name} must not be empty")
    return value


def _read_int(name: str, default: int) -> int:
    raw = _read_str(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _read_float(name: str, default: float) -> float:
    raw = _read_str(name, str(default))
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def read_orchestrator_config() -> OrchestratorConfig:
    return OrchestratorConfig(
        default_system_instruction=_read_str(_SYSTEM_PROMPT_ENV, DEFAULT_SYSTEM_INSTRUCTION),
        retrieval_result_limit=_read_int(_RETRIEVAL_LIMIT_ENV, DEFAULT_RETRIEVAL_RESULT_LIMIT),
        score_threshold=_read_float(_SCORE_THRESHOLD_ENV, DEFAULT_SCORE_THRESHOLD),
        rewrite_query=_read_bool(_REWRITE_QUERY_ENV, True),
        max_output_tokens=_read_int(_MAX_OUTPUT_TOKENS_ENV, DEFAULT_MAX_OUTPUT_TOKENS),
        model_identifier=_read_str(_CHAT_MODEL_ENV, DEFAULT_CHAT_MODEL),
    )


def read_openai_settings() -> OpenAISettings:
    """Resolve OpenAI credentials and the knowledge base vector store.

    ``AZURE_OPENAI_API_KEY`` is accepted as an alias when ``OPENAI_API_KEY``
    is unset.
    """

    api_key = (
        os.getenv(_OPENAI_API_KEY_ENV, "").strip()
        or os.getenv(_AZURE_OPENAI_API_KEY_ENV, "").strip()
    )
    if not api_key:
        raise ConfigurationError(
            f"Missing OpenAI API key. Set {_OPENAI_API_KEY_ENV} or {_AZURE_OPENAI_API_KEY_ENV}."
        )

    vector_store_id = os.getenv(_VECTOR_STORE_ID_ENV, "").strip()
    if not vector_store_id:
        raise ConfigurationError(f"{_VECTOR_STORE_ID_ENV} is not configured")

    base_url = os.getenv(_OPENAI_BASE_URL_ENV, "").strip() or None
    return OpenAISettings(api_key=api_key, base_url=base_url, vector_store_id=vector_store_id)


def read_server_binding() -> ServerBinding:
    port = _read_int(_PORT_ENV, DEFAULT_PORT)
    if port <= 0:
        raise ValueError(f"{_PORT_ENV} must be greater than zero")
    return ServerBinding(host=_read_str(_HOST_ENV, DEFAULT_HOST), port=port)
