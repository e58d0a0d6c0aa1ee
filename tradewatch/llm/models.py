"""Model classes and their mapping to Claude model ids."""

import logging
from enum import StrEnum

from tradewatch.config import settings

logger = logging.getLogger(__name__)

MODEL_MAP: dict[str, str] = {
    "haiku": "claude-haiku-4-5-20251001",
    "sonnet": "claude-sonnet-4-5-20250929",
    "opus": "claude-opus-4-6-20250612",
}

# Reverse lookup: full model string → friendly name
FRIENDLY_NAMES: dict[str, str] = {v: k for k, v in MODEL_MAP.items()}


class ModelClass(StrEnum):
    """Cost tier of a backend call. SMALL answers yes/no, LARGE extracts."""

    SMALL = "small"
    LARGE = "large"


def _resolve(name_or_id: str) -> str | None:
    """Resolve a friendly name or full model ID. Returns full ID or None."""
    if name_or_id in MODEL_MAP:
        return MODEL_MAP[name_or_id]
    if name_or_id in FRIENDLY_NAMES or name_or_id.startswith("claude-"):
        return name_or_id
    return None


def friendly(model_id: str) -> str:
    """Return the friendly name for a model ID, or the ID itself."""
    return FRIENDLY_NAMES.get(model_id, model_id)


class ModelManager:
    """Singleton that tracks which model serves each model class."""

    _instance: "ModelManager | None" = None

    def __init__(self) -> None:
        self._models = {
            ModelClass.SMALL: _resolve(settings.small_model) or MODEL_MAP["haiku"],
            ModelClass.LARGE: _resolve(settings.large_model) or MODEL_MAP["sonnet"],
        }
        logger.info(
            "Models: small=%s, large=%s",
            friendly(self._models[ModelClass.SMALL]),
            friendly(self._models[ModelClass.LARGE]),
        )

    @classmethod
    def get(cls) -> "ModelManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_model(self, model_class: ModelClass) -> str:
        return self._models[model_class]

