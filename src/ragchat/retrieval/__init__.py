from ragchat.retrieval.openai_vector_store_search import OpenAIVectorStoreSearch
from ragchat.retrieval.types import (
    UNKNOWN_IDENTIFIER,
    EvidenceMatch,
    EvidenceSearch,
    SearchOptions,
)

__all__ = [
    "UNKNOWN_IDENTIFIER",
    "EvidenceMatch",
    "EvidenceSearch",
    "OpenAIVectorStoreSearch",
    "SearchOptions",
]
