"""Miles of Smiles agents using OpenAI Agents SDK."""

from smiles.agents.customer_support_agent import CustomerSupportAgent
from smiles.agents.poet_agent import PoetAgent
from smiles.agents.tools import (
    cancel_booking,
    get_booking_details,
    send_poem_by_email,
)

__all__ = [
    # Classes
    "CustomerSupportAgent",
    "PoetAgent",
    # Tools
    "cancel_booking",
    "get_booking_details",
    "send_poem_by_email",
]
