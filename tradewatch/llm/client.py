"""Async Claude client and the generative backend used by the evaluator."""

from __future__ import annotations

import logging
from typing import Any

import anthropic

from tradewatch.config import settings
from tradewatch.llm.models import ModelClass, ModelManager
from tradewatch.llm.parsing import parse_boolean, parse_json_array

logger = logging.getLogger(__name__)

_client: anthropic.AsyncAnthropic | None = None


class BackendUnavailableError(Exception):
    """The model could not be reached (transport failure or timeout)."""


def _get_client() -> anthropic.AsyncAnthropic:
    """Lazily initialize the Anthropic client."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = anthropic.AsyncAnthropic(
            api_key=settings.anthropic_api_key,
            timeout=settings.llm_timeout_seconds,
        )
    return _client


async def complete_text(
    messages: list[dict[str, Any]],
    *,
    system: str | None = None,
    model_class: ModelClass = ModelClass.LARGE,
    max_tokens: int | None = None,
) -> str:
    """Single-shot Claude call, no tools and no streaming.

    SDK connection, timeout and API errors are re-raised as
    ``BackendUnavailableError``.
    """
    client = _get_client()
    kwargs: dict[str, Any] = {
        "model": ModelManager.get().get_model(model_class),
        "max_tokens": max_tokens or settings.llm_max_tokens,
        "messages": messages,
    }
    if system is not None:
        kwargs["system"] = system
    try:
        response = await client.messages.create(**kwargs)
    except anthropic.APIError as exc:
        raise BackendUnavailableError(f"Claude request failed: {exc}") from exc

    return "".join(block.text for block in response.content if block.type == "text")


class ClaudeBackend:
    """Boolean classification and structured extraction over Claude."""

    def __init__(self, *, classify_attempts: int | None = None) -> None:
        self._classify_attempts = max(1, classify_attempts or settings.classify_attempts)

    async def classify_boolean(self, prompt: str) -> bool:
        """Ask a YES/NO question on the small model.

        Re-asks when the answer can't be parsed; after the last attempt the
        answer counts as NO.
        """
        messages = [{"role": "user", "content": prompt}]
        for attempt in range(1, self._classify_attempts + 1):
            text = await complete_text(messages, model_class=ModelClass.SMALL, max_tokens=16)
            answer = parse_boolean(text)
            if answer is not None:
                return answer
            logger.warning(
                "Unparseable yes/no answer (attempt %d/%d): %r",
                attempt,
                self._classify_attempts,
                text[:80],
            )
        return False

    async def extract_structured(self, prompt: str) -> list[dict[str, Any]] | None:
        """Ask the large model for a JSON array. None if nothing parseable came back."""
        text = await complete_text(
            [{"role": "user", "content": prompt}],
            model_class=ModelClass.LARGE,
        )
        records = parse_json_array(text)
        if records is None:
            logger.warning("Failed to parse structured output: %r", text[:200])
        return records
