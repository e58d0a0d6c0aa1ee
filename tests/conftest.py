"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from tradewatch.recommendations import TradeEvaluator

AGENT_ID = "agent-1"
ROOM_ID = "room-1"


@pytest.fixture
def backend() -> AsyncMock:
    """Generative backend double: gate says yes, extraction finds nothing."""
    b = AsyncMock()
    b.classify_boolean.return_value = True
    b.extract_structured.return_value = []
    return b


@pytest.fixture
def memories() -> AsyncMock:
    m = AsyncMock()
    m.get_recent.return_value = []
    return m


@pytest.fixture
def composer() -> AsyncMock:
    c = AsyncMock()
    c.compose.return_value = {
        "agentId": AGENT_ID,
        "roomId": ROOM_ID,
        "recentMessages": "user1: have you seen $ROULETTE lately?",
    }
    return c


@pytest.fixture
def evaluator(backend: AsyncMock, memories: AsyncMock, composer: AsyncMock) -> TradeEvaluator:
    return TradeEvaluator(backend=backend, memories=memories, composer=composer)


@pytest.fixture(autouse=False)
def _no_turso(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure tests use local file, not remote Turso."""
    monkeypatch.setattr("tradewatch.config.settings.turso_database_url", "")
