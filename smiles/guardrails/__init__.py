"""Guardrails for the Miles of Smiles assistants using OpenAI Agents SDK."""

from smiles.guardrails.input_validator import (
    input_validation_guardrail,
    validate_user_input,
)
from smiles.guardrails.output_validator import (
    output_validation_guardrail,
    validate_output,
)
from smiles.guardrails.prompt_injection import (
    detect_prompt_injection,
    prompt_injection_guardrail,
)

__all__ = [
    "detect_prompt_injection",
    "input_validation_guardrail",
    "output_validation_guardrail",
    "prompt_injection_guardrail",
    "validate_output",
    "validate_user_input",
]
