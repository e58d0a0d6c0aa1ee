"""Validation of extracted candidates.

Already-known and malformed candidates are expected noise from the model.
They are dropped without raising; the reason is only logged at DEBUG.
"""

import logging
from typing import Any

from pydantic import ValidationError

from tradewatch.recommendations.models import (
    Candidate,
    Conviction,
    Recommendation,
    RecommendationType,
)

logger = logging.getLogger(__name__)

_CONVICTIONS = frozenset(c.value for c in Conviction)
_TYPES = frozenset(t.value for t in RecommendationType)


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _identifier(value: Any) -> Any:
    # Any truthy value counts as present and is kept as given; a non-string
    # one (e.g. a numeric ticker) then fails promotion to the typed record.
    return value or None


def _vocab(value: Any, vocabulary: frozenset[str]) -> Any:
    """Normalise a known vocabulary value; pass anything else through."""
    if isinstance(value, str) and value.strip().lower() in vocabulary:
        return value.strip().lower()
    return value


def rejection_reason(candidate: Candidate) -> str | None:
    """Why *candidate* would be dropped, or None if it is acceptable."""
    if candidate.already_known:
        return "already known"
    if not (candidate.ticker or candidate.contract_address):
        return "no ticker or contract address"
    if not _text(candidate.recommender):
        return "blank recommender"
    if not candidate.conviction:
        return "missing conviction"
    return None


def _promote(candidate: Candidate) -> Recommendation:
    return Recommendation(
        recommender=candidate.recommender,
        ticker=_identifier(candidate.ticker),
        contract_address=_identifier(candidate.contract_address),
        type=_vocab(candidate.type, _TYPES),
        conviction=_vocab(candidate.conviction, _CONVICTIONS),
        already_known=False,
    )


def filter_recommendations(candidates: list[Candidate]) -> list[Recommendation]:
    """Keep the candidates that pass every check, in their original order.

    No deduplication happens here: several recommenders may each recommend
    the same token in one batch.
    """
    accepted: list[Recommendation] = []
    for candidate in candidates:
        reason = rejection_reason(candidate)
        if reason is None:
            try:
                accepted.append(_promote(candidate))
                continue
            except ValidationError as exc:
                reason = f"invalid record: {exc.error_count()} error(s)"
        logger.debug("Dropping candidate (%s): %r", reason, candidate.model_dump(by_alias=True))
    return accepted
