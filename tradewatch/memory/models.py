"""Data models for conversational and recommendation memories."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class MemoryContent(BaseModel):
    """Free-form payload of a memory.

    Chat messages carry ``text``; stored recommendations carry their
    narrative in ``content``. Anything else is kept as extra keys.
    """

    model_config = ConfigDict(extra="allow")

    text: str = ""
    content: str | None = None


class Memory(BaseModel):
    """A single timestamped record in a room."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str
    agent_id: str
    room_id: str
    content: MemoryContent = Field(default_factory=MemoryContent)
    created_at: str = ""
    user_name: str = ""
