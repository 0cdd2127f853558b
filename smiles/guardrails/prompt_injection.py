"""Prompt-injection detection guardrail."""

import logging
import re

from agents import GuardrailFunctionOutput, input_guardrail

from smiles.guardrails._messages import latest_user_message

logger = logging.getLogger(__name__)

INJECTION_PATTERNS = [
    r"ignore\s+(all\s+)?(the\s+)?(previous|prior|above)\s+(instructions|prompts?|rules)",
    r"disregard\s+(all\s+)?(your|the)\s+(previous\s+)?(instructions|rules)",
    r"forget\s+(all\s+)?(your|the)\s+(previous\s+)?(instructions|rules)",
    r"\byou\s+are\s+now\s+(an?\s+)?(unrestricted|jailbroken|different|dan|in\s+developer)\b",
    r"\bpretend\s+(to\s+be|you\s+are)\b",
    r"\bact\s+as\s+(an?\s+)?(unrestricted|jailbroken|different)\b",
    r"(reveal|show|print|repeat)\s+(me\s+)?(your|the)\s+(system\s+)?(prompt|instructions)",
    r"\bdeveloper\s+mode\b",
    r"\bjailbreak",
]

_COMPILED = [re.compile(p, re.IGNORECASE) for p in INJECTION_PATTERNS]


def detect_prompt_injection(text: str) -> tuple[bool, str | None]:
    """Look for common prompt-injection phrasings.

    Returns:
        Tuple of (is_valid, reason); reason is None when valid
    """
    for pattern in _COMPILED:
        if pattern.search(text):
            return False, f"Possible prompt injection ({pattern.pattern})"
    return True, None


@input_guardrail(name="prompt_injection_guardrail")
def prompt_injection_guardrail(_context, _agent, user_input) -> GuardrailFunctionOutput:
    """Block messages that try to override the assistant's instructions."""
    is_valid, reason = detect_prompt_injection(latest_user_message(user_input))

    if not is_valid:
        logger.warning(f"Guardrail triggered: {reason}")
        return GuardrailFunctionOutput(output_info=reason, tripwire_triggered=True)

    return GuardrailFunctionOutput(
        output_info="No prompt injection detected",
        tripwire_triggered=False,
    )
