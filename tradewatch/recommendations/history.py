"""Known-recommendation narrative for the extraction prompt."""

from collections.abc import Sequence

from tradewatch.memory.models import Memory


def format_recommendations(recommendations: Sequence[Memory]) -> str:
    """Join recommendation memories into one oldest-first narrative.

    *recommendations* must be newest-first, the order
    ``MemoryStore.get_recent`` returns. The input is not modified.
    """
    return "\n".join(
        rec.content.content or "" for rec in reversed(recommendations)
    )
