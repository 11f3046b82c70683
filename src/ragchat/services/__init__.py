from ragchat.services.evidence_formatter import FormattedEvidence, format_evidence
from ragchat.services.generation_forwarder import GenerationForwarder
from ragchat.services.message_list import (
    ensure_system_message,
    insert_context_message,
    latest_user_query,
)
from ragchat.services.prompt_assembler import NO_EVIDENCE_INSTRUCTION, build_context_message
from ragchat.services.rag_chat_orchestrator import RagChatOrchestrator
from ragchat.services.retrieval_coordinator import RetrievalCoordinator

__all__ = [
    "NO_EVIDENCE_INSTRUCTION",
    "FormattedEvidence",
    "GenerationForwarder",
    "RagChatOrchestrator",
    "RetrievalCoordinator",
    "build_context_message",
    "ensure_system_message",
    "format_evidence",
    "insert_context_message",
    "latest_user_query",
]
