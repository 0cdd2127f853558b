"""Chat connection handler for the customer support websocket."""

import logging
from typing import Protocol

from smiles.exceptions import GuardrailViolation

logger = logging.getLogger(__name__)

GREETING = "Hello from Miles of Smiles, how can we help you?"
SECURITY_ALERT_REPLY = (
    "Sorry, your request triggered a security alert. Please rephrase your question."
)
UNAVAILABLE_REPLY = (
    "Sorry, I am unable to process your request at the moment. "
    "Please try again later."
)


class ChatAssistant(Protocol):
    async def chat(self, message: str) -> str: ...


class ChatSocket:
    """Handles one chat connection.

    Every message is answered independently; any conversation memory
    lives in the assistant.
    """

    def __init__(self, assistant: ChatAssistant) -> None:
        self.assistant = assistant

    def on_open(self) -> str:
        return GREETING

    async def on_message(self, user_message: str) -> str:
        """Forward a message to the assistant, turning failures into replies.

        Args:
            user_message: Raw text received from the client

        Returns:
            The assistant's reply, or a fixed apology if the call failed
        """
        try:
            return await self.assistant.chat(user_message)
        except GuardrailViolation:
            logger.exception("Error calling the LLM")
            return SECURITY_ALERT_REPLY
        except Exception:
            logger.exception("Error calling the LLM")
            return UNAVAILABLE_REPLY
