"""Prompt template rendering."""

import re
from collections.abc import Mapping
from typing import Any

BOOLEAN_FOOTER = "Respond with only a YES or a NO."

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def compose_context(state: Mapping[str, Any], template: str) -> str:
    """Fill ``{{key}}`` placeholders from *state*. Missing keys render empty."""

    def _sub(match: re.Match[str]) -> str:
        value = state.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_sub, template)
