"""Recommendation vocabulary and records."""

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class Conviction(StrEnum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Ordinal strength: none < low < medium < high."""
        return list(Conviction).index(self)


class RecommendationType(StrEnum):
    BUY = "buy"
    DONT_BUY = "dont_buy"
    SELL = "sell"
    DONT_SELL = "dont_sell"


class Candidate(BaseModel):
    """An unvalidated record as the model produced it.

    Nothing here is trusted: any field may be missing or of the wrong type.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    recommender: Any = None
    ticker: Any = None
    contract_address: Any = Field(default=None, alias="contractAddress")
    type: Any = None
    conviction: Any = None
    already_known: Any = Field(default=None, alias="alreadyKnown")


class Recommendation(BaseModel):
    """A candidate that passed validation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    recommender: str
    ticker: str | None = None
    contract_address: str | None = Field(default=None, alias="contractAddress")
    # Known values become enum members; anything else the model invented is
    # kept verbatim as a plain string.
    type: Annotated[RecommendationType | str | None, Field(union_mode="left_to_right")] = None
    conviction: Annotated[Conviction | str, Field(union_mode="left_to_right")]
    already_known: bool = Field(default=False, alias="alreadyKnown")

    def to_record(self) -> dict[str, Any]:
        """camelCase dict in the same shape the model was asked to produce."""
        return self.model_dump(by_alias=True, mode="json")
