"""Parsing of free-text model output into booleans and JSON arrays."""

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_AFFIRMATIVE = frozenset({"YES", "Y", "TRUE", "T", "1", "ON", "ENABLE"})
_NEGATIVE = frozenset({"NO", "N", "FALSE", "F", "0", "OFF", "DISABLE"})

_JSON_BLOCK = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def parse_boolean(text: str) -> bool | None:
    """Interpret a YES/NO style answer. Returns None when it is neither."""
    if not text:
        return None
    answer = text.strip().upper().rstrip(".!")
    if answer in _AFFIRMATIVE:
        return True
    if answer in _NEGATIVE:
        return False
    return None


def parse_json_array(text: str) -> list[dict[str, Any]] | None:
    """Pull a JSON array of objects out of a model response.

    A fenced ```json block wins; otherwise the whole text is tried.
    Returns None if no array can be decoded. Non-object items are dropped.
    """
    if not text or not text.strip():
        return None

    match = _JSON_BLOCK.search(text)
    raw = match.group(1) if match else text.strip()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # Fall back to the outermost brackets, e.g. prose around the array
        start = raw.find("[")
        end = raw.rfind("]") + 1
        if start < 0 or end <= start:
            return None
        try:
            data = json.loads(raw[start:end])
        except json.JSONDecodeError:
            return None

    if not isinstance(data, list):
        return None
    return [item for item in data if isinstance(item, dict)]
