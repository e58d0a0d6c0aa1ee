"""Evaluate one chat message for trade recommendations.

Usage::

    python -m tradewatch.main --room lounge --user u42 --name degen_dave \\
        "$ROULETTE at 48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2 is going to send it"

The message is appended to the room's history before evaluation. Extracted
recommendations are printed as a JSON array; they are not stored.
"""

import argparse
import asyncio
import json
import logging

from tradewatch.config import settings
from tradewatch.memory.models import Memory, MemoryContent
from tradewatch.memory.store import MemoryStore
from tradewatch.registry import EvaluatorRegistry, sui_plugin

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract trade recommendations from a message")
    parser.add_argument("text", help="Message text")
    parser.add_argument("--room", required=True, help="Room ID")
    parser.add_argument("--user", required=True, help="Author user ID")
    parser.add_argument("--name", default="", help="Author display name")
    parser.add_argument("--agent", default="agent", help="Agent ID")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> list[dict]:
    registry = EvaluatorRegistry()
    sui_plugin().install(registry)
    evaluator = registry.get("EXTRACT_RECOMMENDATIONS")

    message = Memory(
        user_id=args.user,
        agent_id=args.agent,
        room_id=args.room,
        user_name=args.name,
        content=MemoryContent(text=args.text),
    )
    if not evaluator.is_applicable(message):
        logger.info("Message not applicable for evaluation")
        return []

    await MemoryStore.get().create(message, "messages")
    recommendations = await evaluator.evaluate(message)
    return [rec.to_record() for rec in recommendations]


def main(argv: list[str] | None = None) -> None:
    records = asyncio.run(run(_parse_args(argv)))
    print(json.dumps(records, indent=2))


if __name__ == "__main__":
    main()
