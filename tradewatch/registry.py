"""Evaluator registry and the plugin bundle that ships the trade evaluator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tradewatch.config import settings
from tradewatch.llm.client import ClaudeBackend
from tradewatch.memory.state import StateComposer
from tradewatch.memory.store import MemoryStore
from tradewatch.recommendations import TradeEvaluator

if TYPE_CHECKING:
    from tradewatch.config import Settings

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Catalog of evaluators, addressable by name or simile.

    Usage::

        registry = EvaluatorRegistry()
        registry.register(build_trade_evaluator())
        evaluator = registry.get("EXTRACT_TOKEN_RECS")
    """

    def __init__(self) -> None:
        self._evaluators: dict[str, TradeEvaluator] = {}
        self._aliases: dict[str, str] = {}

    def register(self, evaluator: TradeEvaluator) -> TradeEvaluator:
        self._evaluators[evaluator.name] = evaluator
        for simile in evaluator.similes:
            self._aliases[simile] = evaluator.name
        logger.info("Registered evaluator: %s", evaluator.name)
        return evaluator

    def get(self, name: str) -> TradeEvaluator | None:
        """Look up an evaluator by its name or one of its similes."""
        return self._evaluators.get(self._aliases.get(name, name))

    @property
    def names(self) -> list[str]:
        """All registered evaluator names."""
        return list(self._evaluators)


@dataclass
class Plugin:
    name: str
    description: str
    evaluators: list[TradeEvaluator] = field(default_factory=list)

    def install(self, registry: EvaluatorRegistry) -> None:
        for evaluator in self.evaluators:
            registry.register(evaluator)


def build_trade_evaluator(config: Settings | None = None) -> TradeEvaluator:
    """Wire the trade evaluator to Claude and the libsql memory store."""
    config = config or settings
    store = MemoryStore.get()
    return TradeEvaluator(
        backend=ClaudeBackend(classify_attempts=config.classify_attempts),
        memories=store,
        composer=StateComposer(
            store,
            agent_name=config.agent_name,
            window_size=config.conversation_window_size,
        ),
        skip_incompatible_storage=not config.recommendations_supported(),
        history_limit=config.recommendation_history_limit,
        min_message_length=config.min_message_length,
    )


def sui_plugin(config: Settings | None = None) -> Plugin:
    return Plugin(
        name="sui",
        description="Sui trade recommendation tracking",
        evaluators=[build_trade_evaluator(config)],
    )
