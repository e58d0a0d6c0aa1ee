"""Trade recommendation evaluator.

Runs after each inbound message:

1. eligibility: long enough, not written by the agent, storage compatible
2. gate: a cheap yes/no call on the small model
3. extraction: the large model lists candidates, primed with the room's
   known recommendations
4. validation: malformed and already-known candidates are dropped

Nothing is persisted here; the caller decides what to do with the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tradewatch.recommendations.extractor import extract_candidates
from tradewatch.recommendations.gate import should_process
from tradewatch.recommendations.history import format_recommendations
from tradewatch.recommendations.validator import filter_recommendations

if TYPE_CHECKING:
    from tradewatch.memory.models import Memory
    from tradewatch.recommendations.interfaces import (
        ConversationComposer,
        GenerativeBackend,
        MemoryReader,
    )
    from tradewatch.recommendations.models import Recommendation

logger = logging.getLogger(__name__)

RECOMMENDATIONS_TABLE = "recommendations"


class TradeEvaluator:
    """Extracts token recommendations from a room's conversation."""

    name = "EXTRACT_RECOMMENDATIONS"
    similes = ("GET_RECOMMENDATIONS", "EXTRACT_TOKEN_RECS", "EXTRACT_MEMECOIN_RECS")
    description = (
        "Extract recommendations to buy or sell memecoins/tokens from the conversation, "
        "including details like ticker, contract address, conviction level, "
        "and recommender username."
    )
    always_run = True

    def __init__(
        self,
        *,
        backend: GenerativeBackend,
        memories: MemoryReader,
        composer: ConversationComposer,
        skip_incompatible_storage: bool = False,
        history_limit: int = 20,
        min_message_length: int = 5,
    ) -> None:
        self._backend = backend
        self._memories = memories
        self._composer = composer
        self._skip_incompatible_storage = skip_incompatible_storage
        self._history_limit = history_limit
        self._min_message_length = min_message_length

    def is_applicable(self, message: Memory) -> bool:
        """Cheap precondition: enough text, and not the agent talking to itself."""
        if len(message.content.text) < self._min_message_length:
            return False
        return message.user_id != message.agent_id

    async def evaluate(self, message: Memory) -> list[Recommendation]:
        """Return the new recommendations found around *message*.

        Backend and store failures propagate; everything else degrades to
        an empty list.
        """
        if not self.is_applicable(message):
            return []

        if self._skip_incompatible_storage:
            logger.warning("Skipping trust evaluator because storage backend is incompatible")
            return []

        logger.info("Evaluating for trust")
        state = await self._composer.compose(message)

        if not await should_process(state, self._backend):
            logger.info("Skipping process")
            return []

        logger.info("Processing recommendations")
        known = await self._memories.get_recent(
            state.get("roomId", message.room_id),
            RECOMMENDATIONS_TABLE,
            self._history_limit,
        )
        candidates = await extract_candidates(
            state,
            format_recommendations(known),
            self._backend,
        )
        recommendations = filter_recommendations(candidates)
        logger.info(
            "Kept %d of %d extracted recommendation(s)", len(recommendations), len(candidates)
        )
        return recommendations
