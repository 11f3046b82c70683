from __future__ import annotations

from typing import Final

from ragchat.schemas.chat import ChatMessage
from ragchat.services.evidence_formatter import FormattedEvidence

NO_EVIDENCE_INSTRUCTION: Final[str] = (
    "No relevant documents were found in the knowledge base for this question. "
    "Tell the user that no knowledge base information will be used in your answer, "
    "then answer from general knowledge."
)

_EVIDENCE_PREAMBLE = (
    "The following documents were retrieved from the knowledge base to help answer "
    "the user's question. Each document lists its source and a relevance score "
    "between 0 and 1. Prioritize information from documents with higher scores."
)

_TABLE_OBLIGATION = (
    "Your final answer must end with two blank lines, a horizontal rule (---), "
    "and then the following table of sources, reproduced exactly as written:"
)


def build_context_message(evidence: FormattedEvidence | None) -> ChatMessage:
    if evidence is None:
        return ChatMessage(role="system", content=NO_EVIDENCE_INSTRUCTION)

    content = "\n\n".join(
        [
            _EVIDENCE_PREAMBLE,
            evidence.evidence_block,
            _TABLE_OBLIGATION,
            evidence.provenance_table,
        ]
    )
    return ChatMessage(role="system", content=content)
