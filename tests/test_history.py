"""Tests for the known-recommendations narrative."""

from tradewatch.memory.models import Memory, MemoryContent
from tradewatch.recommendations.history import format_recommendations


def _rec(narrative: str | None) -> Memory:
    return Memory(
        user_id="user1",
        agent_id="agent-1",
        room_id="room-1",
        content=MemoryContent(content=narrative),
    )


def test_reverses_store_order() -> None:
    # Store order is newest-first: C was recorded last
    recs = [_rec("C"), _rec("B"), _rec("A")]
    assert format_recommendations(recs) == "A\nB\nC"


def test_newest_first_abc_reads_c_b_a() -> None:
    recs = [_rec("A"), _rec("B"), _rec("C")]
    assert format_recommendations(recs) == "C\nB\nA"


def test_empty_input() -> None:
    assert format_recommendations([]) == ""


def test_does_not_mutate_input_and_is_repeatable() -> None:
    recs = [_rec("A"), _rec("B")]
    first = format_recommendations(recs)
    second = format_recommendations(recs)
    assert first == second == "B\nA"
    assert [r.content.content for r in recs] == ["A", "B"]


def test_missing_content_renders_blank_line() -> None:
    recs = [_rec("A"), _rec(None)]
    assert format_recommendations(recs) == "\nA"
