from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from ragchat.retrieval.types import EvidenceMatch, SearchOptions


def _read_field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


def match_from_result(item: Any) -> EvidenceMatch:
    """Convert one vector store search hit (SDK object or plain dict)."""

    raw_score = _read_field(item, "score")
    score = float(raw_score) if raw_score is not None else 0.0

    segments: list[str] = []
    for segment in _read_field(item, "content") or []:
        segment_text = _read_field(segment, "text")
        if segment_text:
            segments.append(str(segment_text))

    return EvidenceMatch(
        filename=_optional_str(_read_field(item, "filename")),
        file_id=_optional_str(_read_field(item, "file_id")),
        score=score,
        text_segments=tuple(segments),
    )


class OpenAIVectorStoreSearch:
    """Semantic search over a single OpenAI vector store."""

    def __init__(self, *, client: AsyncOpenAI, vector_store_id: str) -> None:
        normalized_id = vector_store_id.strip()
        if not normalized_id:
            raise ValueError("vector_store_id must not be empty")
        self._client = client
        self._vector_store_id = normalized_id

    async def search(self, query: str, *, options: SearchOptions) -> list[EvidenceMatch]:
        results = await self._client.vector_stores.search(
            vector_store_id=self._vector_store_id,
            query=query,
            max_num_results=max(1, options.max_results),
            rewrite_query=options.rewrite_query,
            ranking_options={"score_threshold": options.score_threshold},
        )
        return [match_from_result(item) for item in getattr(results, "data", None) or []]
