"""Tests for the recommendation vocabulary and records."""

import pytest
from pydantic import ValidationError

from tradewatch.recommendations.models import (
    Candidate,
    Conviction,
    Recommendation,
    RecommendationType,
)


def test_conviction_is_ordinal() -> None:
    ranks = [c.rank for c in (Conviction.NONE, Conviction.LOW, Conviction.MEDIUM, Conviction.HIGH)]
    assert ranks == [0, 1, 2, 3]


def test_vocabularies() -> None:
    assert {c.value for c in Conviction} == {"none", "low", "medium", "high"}
    assert {t.value for t in RecommendationType} == {"buy", "dont_buy", "sell", "dont_sell"}


def test_candidate_tolerates_anything() -> None:
    c = Candidate.model_validate({"ticker": 42, "alreadyKnown": "maybe", "extra": [1, 2]})
    assert c.ticker == 42
    assert c.already_known == "maybe"
    assert c.recommender is None
    assert c.model_extra == {"extra": [1, 2]}


def test_recommendation_keeps_unknown_vocabulary_as_text() -> None:
    rec = Recommendation(recommender="dave", ticker="X", conviction="extreme", type="hold")
    assert rec.conviction == "extreme"
    assert rec.type == "hold"


def test_recommendation_known_vocabulary_becomes_enum() -> None:
    rec = Recommendation(recommender="dave", ticker="X", conviction="low", type="sell")
    assert rec.conviction is Conviction.LOW
    assert rec.type is RecommendationType.SELL


def test_recommendation_to_record_uses_camel_case() -> None:
    rec = Recommendation(
        recommender="user1",
        ticker="ROULETTE",
        contract_address="48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2",
        type="buy",
        conviction="high",
    )
    assert rec.to_record() == {
        "recommender": "user1",
        "ticker": "ROULETTE",
        "contractAddress": "48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2",
        "type": "buy",
        "conviction": "high",
        "alreadyKnown": False,
    }


def test_recommendation_is_frozen() -> None:
    rec = Recommendation(recommender="dave", ticker="X", conviction="low")
    with pytest.raises(ValidationError):
        rec.ticker = "Y"
