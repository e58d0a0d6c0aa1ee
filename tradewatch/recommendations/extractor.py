"""Candidate extraction from a conversation window."""

import logging

from pydantic import ValidationError

from tradewatch.llm.prompt import compose_context
from tradewatch.memory.state import ConversationState
from tradewatch.recommendations.interfaces import GenerativeBackend
from tradewatch.recommendations.models import Candidate
from tradewatch.recommendations.templates import (
    RECOMMENDATION_TEMPLATE,
    format_evaluation_examples,
)

logger = logging.getLogger(__name__)


def build_extraction_prompt(state: ConversationState, history_text: str) -> str:
    """Render the extraction template with examples and known recommendations."""
    return compose_context(
        {
            **state,
            "evaluationExamples": format_evaluation_examples(),
            "recentRecommendations": history_text,
        },
        RECOMMENDATION_TEMPLATE,
    )


async def extract_candidates(
    state: ConversationState,
    history_text: str,
    backend: GenerativeBackend,
) -> list[Candidate]:
    """Run structured extraction. Unusable output yields an empty list."""
    prompt = build_extraction_prompt(state, history_text)
    records = await backend.extract_structured(prompt)
    if not records:
        return []

    candidates: list[Candidate] = []
    for record in records:
        try:
            candidates.append(Candidate.model_validate(record))
        except ValidationError:
            logger.debug("Discarding non-record extraction item: %r", record)
    logger.debug("Extracted candidates: %s", [c.model_dump(by_alias=True) for c in candidates])
    return candidates
