from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol

UNKNOWN_IDENTIFIER: Final[str] = "Unknown"


@dataclass(frozen=True)
class EvidenceMatch:
    filename: str | None
    file_id: str | None
    score: float
    text_segments: tuple[str, ...] = ()

    @property
    def identifier(self) -> str:
        return self.filename or self.file_id or UNKNOWN_IDENTIFIER


@dataclass(frozen=True)
class SearchOptions:
    max_results: int
    rewrite_query: bool
    score_threshold: float


class EvidenceSearch(Protocol):
    async def search(self, query: str, *, options: SearchOptions) -> list[EvidenceMatch]: ...
