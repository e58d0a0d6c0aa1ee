"""Conversation state composition for prompt templates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tradewatch.config import settings

if TYPE_CHECKING:
    from tradewatch.memory.models import Memory
    from tradewatch.memory.store import MemoryStore

logger = logging.getLogger(__name__)

ConversationState = dict[str, Any]


def _speaker(memory: Memory, agent_name: str) -> str:
    if memory.user_id == memory.agent_id:
        return agent_name
    return memory.user_name or memory.user_id


def format_messages(messages: list[Memory], agent_name: str) -> str:
    """Render messages oldest-first as ``name: text`` lines."""
    lines = [
        f"{_speaker(m, agent_name)}: {m.content.text}"
        for m in messages
        if m.content.text.strip()
    ]
    return "\n".join(lines)


class StateComposer:
    """Builds the template variables for a message from its room's history."""

    def __init__(
        self,
        store: MemoryStore,
        *,
        agent_name: str | None = None,
        window_size: int | None = None,
    ) -> None:
        self._store = store
        self._agent_name = agent_name or settings.agent_name
        self._window_size = window_size or settings.conversation_window_size

    async def compose(self, message: Memory) -> ConversationState:
        recent = await self._store.get_recent(message.room_id, "messages", self._window_size)
        # Store order is newest-first; conversations read oldest-first.
        chronological = list(reversed(recent))
        if not any(m.id == message.id for m in chronological):
            chronological.append(message)

        actors: list[str] = []
        for m in chronological:
            name = _speaker(m, self._agent_name)
            if name not in actors:
                actors.append(name)

        return {
            "agentId": message.agent_id,
            "roomId": message.room_id,
            "agentName": self._agent_name,
            "senderName": _speaker(message, self._agent_name),
            "actors": "\n".join(actors),
            "recentMessages": format_messages(chronological, self._agent_name),
        }
