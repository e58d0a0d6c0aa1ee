"""Yes/no pre-filter deciding whether a conversation is worth extracting from."""

from tradewatch.llm.prompt import compose_context
from tradewatch.memory.state import ConversationState
from tradewatch.recommendations.interfaces import GenerativeBackend
from tradewatch.recommendations.templates import SHOULD_PROCESS_TEMPLATE


def build_gate_prompt(state: ConversationState) -> str:
    return compose_context(state, SHOULD_PROCESS_TEMPLATE)


async def should_process(state: ConversationState, backend: GenerativeBackend) -> bool:
    """Ask the backend whether the recent messages talk about trading tokens.

    Backend failures propagate.
    """
    return await backend.classify_boolean(build_gate_prompt(state))
