"""Input validation guardrails using OpenAI Agents SDK."""

import logging
import re

from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    TResponseInputItem,
    input_guardrail,
)

from smiles.config import get_config
from smiles.guardrails._messages import latest_user_message

logger = logging.getLogger(__name__)

# Patterns that indicate potential abuse or inappropriate content
BLOCKED_PATTERNS = [
    r"<script",
    r"javascript:",
    r"onclick",
    r"onerror",
    r"eval\(",
    r"exec\(",
]

DEFAULT_MAX_INPUT_LENGTH = 1000


def validate_user_input(
    text: str, max_length: int = DEFAULT_MAX_INPUT_LENGTH
) -> tuple[bool, str | None]:
    """Check a chat message for emptiness, length and script injection.

    Args:
        text: The user's message
        max_length: Longest accepted message

    Returns:
        Tuple of (is_valid, reason); reason is None when valid
    """
    if not text or not text.strip():
        return False, "Input cannot be empty. Please ask a question."

    if len(text) > max_length:
        return (
            False,
            f"Input too long (max {max_length} characters). Please shorten your question.",
        )

    lowered = text.lower()
    for pattern in BLOCKED_PATTERNS:
        if re.search(pattern, lowered):
            return False, "Input contains suspicious content. Please rephrase your question."

    return True, None


@input_guardrail
async def input_validation_guardrail(
    context: RunContextWrapper[None],
    agent: Agent,
    input: str | list[TResponseInputItem],
) -> GuardrailFunctionOutput:
    """Validate user input for security and abuse prevention.

    Args:
        context: The guardrail context
        agent: The agent being run
        input: User input (can be string or list of messages)

    Returns:
        GuardrailFunctionOutput indicating if validation passed
    """
    input_text = latest_user_message(input)
    is_valid, reason = validate_user_input(
        input_text, max_length=get_config().max_input_length
    )

    if not is_valid:
        logger.warning(f"Guardrail triggered: {reason}")
        return GuardrailFunctionOutput(output_info=reason, tripwire_triggered=True)

    return GuardrailFunctionOutput(
        output_info="Input validation passed",
        tripwire_triggered=False,
    )
