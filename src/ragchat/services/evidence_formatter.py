from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ragchat.retrieval.types import EvidenceMatch

SEGMENT_SEPARATOR = "\n\n"
MATCH_SEPARATOR = "\n\n---\n\n"
PROVENANCE_TABLE_HEADER = "| Filename | Score |\n|----------|-------|"


@dataclass(frozen=True)
class FormattedEvidence:
    evidence_block: str
    provenance_table: str


def render_match(match: EvidenceMatch) -> str:
    body = SEGMENT_SEPARATOR.join(match.text_segments)
    return f"Source: {match.identifier}\nScore: {match.score}\n\n{body}"


def render_evidence_block(matches: Sequence[EvidenceMatch]) -> str:
    """Render matches in retrieval order with full-precision scores."""

    return MATCH_SEPARATOR.join(render_match(match) for match in matches)


def render_provenance_table(matches: Sequence[EvidenceMatch]) -> str:
    """Render a markdown table of sources, highest score first.

    ``sorted`` is stable, so tied scores keep their retrieval order.
    """

    ranked = sorted(matches, key=lambda match: match.score, reverse=True)
    rows = [f"| {match.identifier} | {match.score:.3f} |" for match in ranked]
    return "\n".join([PROVENANCE_TABLE_HEADER, *rows])


def format_evidence(matches: Sequence[EvidenceMatch]) -> FormattedEvidence | None:
    if not matches:
        return None
    return FormattedEvidence(
        evidence_block=render_evidence_block(matches),
        provenance_table=render_provenance_table(matches),
    )
