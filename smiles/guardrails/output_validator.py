"""Output validation guardrails using OpenAI Agents SDK."""

import logging
import re

from agents import GuardrailFunctionOutput, output_guardrail

logger = logging.getLogger(__name__)

# Patterns that might indicate sensitive information
SENSITIVE_PATTERNS = [
    # Case-sensitive: upper-case tokens only, not long lower-case words
    (re.compile(r"\b[A-Z0-9]{20,}\b"), "API key or token"),
    (re.compile(r"sk-[a-zA-Z0-9]{48}"), "OpenAI API key"),
    (re.compile(r"password\s*[:=]\s*\S+", re.IGNORECASE), "Password"),
    (re.compile(r"secret\s*[:=]\s*\S+", re.IGNORECASE), "Secret"),
    (re.compile(r"\b\d{3}-\d{2}-\d{4}\b"), "SSN"),
    (re.compile(r"\b(?:\d{4}[-\s]?){3}\d{4}\b"), "Credit card"),
]


def validate_output(text: str) -> tuple[bool, list[str]]:
    """Scan assistant output for sensitive information.

    Args:
        text: The assistant's reply

    Returns:
        Tuple of (is_safe, descriptions of what was found)
    """
    warnings = [
        description
        for pattern, description in SENSITIVE_PATTERNS
        if pattern.search(text)
    ]
    return not warnings, warnings


@output_guardrail(name="output_validation_guardrail")
def output_validation_guardrail(_context, _agent, output) -> GuardrailFunctionOutput:
    """Validate agent output for sensitive information.

    Args:
        context: The guardrail context
        agent: The agent being run
        output: The output to validate (can be string or other format)

    Returns:
        GuardrailFunctionOutput indicating if validation passed
    """
    output_text = str(output) if output else ""
    is_safe, warnings = validate_output(output_text)

    if not is_safe:
        logger.warning(
            f"Guardrail triggered: Sensitive information detected ({'; '.join(warnings)})"
        )
        return GuardrailFunctionOutput(
            output_info=f"Security warning: {'; '.join(warnings)}. Output blocked.",
            tripwire_triggered=True,
        )

    return GuardrailFunctionOutput(
        output_info="Output validation passed",
        tripwire_triggered=False,
    )
