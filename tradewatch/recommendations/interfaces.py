"""Protocols for the collaborators the trade evaluator depends on."""

from typing import Any, Protocol, runtime_checkable

from tradewatch.memory.models import Memory
from tradewatch.memory.state import ConversationState


@runtime_checkable
class MemoryReader(Protocol):
    """Room-scoped read access to stored memories."""

    async def get_recent(self, room_id: str, table_name: str, count: int) -> list[Memory]:
        """Return up to *count* memories, newest first.

        The ordering is load-bearing: the known-recommendations narrative
        is built by reversing this list. A store that returns oldest-first
        makes the narrative read backwards without any error.
        """
        ...


@runtime_checkable
class ConversationComposer(Protocol):
    """Turns an incoming message into prompt template variables."""

    async def compose(self, message: Memory) -> ConversationState:
        """Must provide at least ``agentId``, ``roomId`` and ``recentMessages``."""
        ...


@runtime_checkable
class GenerativeBackend(Protocol):
    """Text model offering yes/no classification and structured extraction.

    Both calls raise on transport failure or timeout and are cancellable.
    """

    async def classify_boolean(self, prompt: str) -> bool:
        ...

    async def extract_structured(self, prompt: str) -> list[dict[str, Any]] | None:
        """Return decoded records, or None if the output was unusable."""
        ...
