from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import asdict

from ragchat.retrieval.types import EvidenceMatch, EvidenceSearch, SearchOptions
from ragchat.schemas.chat import ChatMessage
from ragchat.services.message_list import latest_user_query

logger = logging.getLogger(__name__)


class RetrievalCoordinator:
    """Derives a search query from the conversation and fetches evidence."""

    def __init__(self, *, search: EvidenceSearch, options: SearchOptions) -> None:
        self._search = search
        self._options = options

    async def retrieve(self, messages: Sequence[ChatMessage]) -> list[EvidenceMatch]:
        query = latest_user_query(messages)
        logger.debug("Retrieval query: %r", query)

        matches = list(await self._search.search(query, options=self._options))

        logger.info("Retrieved %d evidence match(es)", len(matches))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Retrieval payload: %s",
                json.dumps([asdict(match) for match in matches], indent=2),
            )
        return matches
