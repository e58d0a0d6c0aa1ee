"""End-to-end tests: CLI entry point over a real store and a faked Claude."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from tradewatch.main import _parse_args, main, run
from tradewatch.memory.models import Memory, MemoryContent
from tradewatch.memory.store import MemoryStore

pytestmark = pytest.mark.usefixtures("_no_turso")

ROULETTE_RECORD = {
    "recommender": "dave",
    "ticker": "ROULETTE",
    "contractAddress": "48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2",
    "type": "buy",
    "conviction": "high",
    "alreadyKnown": False,
}


@pytest.fixture
def store(tmp_path: Path):
    MemoryStore._reset()
    s = MemoryStore(db_path=tmp_path / "test.db")
    MemoryStore._instance = s
    yield s
    MemoryStore._reset()


def _args(text: str) -> list[str]:
    return ["--room", "lounge", "--user", "u42", "--name", "dave", text]


async def test_run_extracts_and_records_message(store: MemoryStore) -> None:
    replies = ["YES", f"```json\n{json.dumps([ROULETTE_RECORD])}\n```"]
    with patch(
        "tradewatch.llm.client.complete_text", new_callable=AsyncMock, side_effect=replies
    ) as mock_complete:
        records = await run(_parse_args(_args("$ROULETTE is going to send it")))

    assert records == [ROULETTE_RECORD]
    assert mock_complete.await_count == 2
    extraction_prompt = mock_complete.call_args_list[1].args[0][0]["content"]
    assert "dave: $ROULETTE is going to send it" in extraction_prompt

    [saved] = await store.get_recent("lounge", "messages", 10)
    assert saved.content.text == "$ROULETTE is going to send it"


async def test_run_includes_known_recommendations(store: MemoryStore) -> None:
    for i, narrative in enumerate(["dave recommended $SAMOYED", "dave recommended $PIXELAPE"]):
        await store.create(
            Memory(
                user_id="u42",
                agent_id="agent",
                room_id="lounge",
                content=MemoryContent(content=narrative),
                created_at=f"2025-01-0{i + 1}T00:00:00",
            ),
            "recommendations",
        )

    with patch(
        "tradewatch.llm.client.complete_text",
        new_callable=AsyncMock,
        side_effect=["YES", "[]"],
    ) as mock_complete:
        assert await run(_parse_args(_args("what about $SAMOYED again?"))) == []

    extraction_prompt = mock_complete.call_args_list[1].args[0][0]["content"]
    assert "dave recommended $SAMOYED\ndave recommended $PIXELAPE" in extraction_prompt


async def test_run_skips_short_message(store: MemoryStore) -> None:
    with patch("tradewatch.llm.client.complete_text", new_callable=AsyncMock) as mock_complete:
        assert await run(_parse_args(_args("gm"))) == []
    mock_complete.assert_not_awaited()
    assert await store.get_recent("lounge", "messages", 10) == []


def test_main_prints_json(store: MemoryStore, capsys) -> None:
    with patch(
        "tradewatch.llm.client.complete_text", new_callable=AsyncMock, return_value="NO"
    ):
        main(_args("$SAMOYED chart looks bullish"))

    assert json.loads(capsys.readouterr().out) == []
