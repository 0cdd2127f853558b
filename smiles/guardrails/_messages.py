"""Helpers shared by the input guardrails."""

from agents import TResponseInputItem


def latest_user_message(input: str | list[TResponseInputItem]) -> str:
    """Return the text of the most recent user message.

    Earlier turns were already checked when they arrived, so only the
    last one is inspected.
    """
    if not isinstance(input, list):
        return str(input)

    for msg in reversed(input):
        if isinstance(msg, dict) and msg.get("role") == "user":
            return str(msg.get("content", ""))
        if hasattr(msg, "role") and msg.role == "user":
            return str(msg.content)
    return ""
