"""Assistants that run the Miles of Smiles agents.

The websocket and HTTP layers only see two small interfaces:
``chat(message) -> str`` and ``write_a_poem(topic, stanza_count) -> str``.
SDK guardrail tripwires are turned into ``GuardrailViolation`` here so
callers never depend on the SDK's exception types.
"""

import logging

from agents import (
    Agent,
    InputGuardrailTripwireTriggered,
    OutputGuardrailTripwireTriggered,
    Runner,
    Session,
)

from smiles.exceptions import GuardrailViolation
from smiles.prompts import load_prompt

logger = logging.getLogger(__name__)


class AssistantForCustomerSupport:
    """Customer support assistant bound to one conversation.

    Attributes:
        agent: The customer support agent (with guardrails attached)
        session: SDK session holding this conversation's memory
    """

    def __init__(self, agent: Agent, session: Session | None = None) -> None:
        self.agent = agent
        self.session = session

    async def chat(self, message: str) -> str:
        """Send one user message and return the assistant's reply.

        Raises:
            GuardrailViolation: If an input or output guardrail trips
        """
        try:
            result = await Runner.run(
                starting_agent=self.agent, input=message, session=self.session
            )
        except InputGuardrailTripwireTriggered as e:
            name = e.guardrail_result.guardrail.get_name()
            raise GuardrailViolation(name, f"Input rejected by {name}") from e
        except OutputGuardrailTripwireTriggered as e:
            name = e.guardrail_result.guardrail.get_name()
            raise GuardrailViolation(name, f"Output rejected by {name}") from e

        return str(result.final_output)


class AssistantWithContextAndTool:
    """Poet assistant that e-mails what it writes."""

    def __init__(self, agent: Agent) -> None:
        self.agent = agent

    async def write_a_poem(self, topic: str, stanza_count: int) -> str:
        """Write a poem about ``topic`` and e-mail it.

        Args:
            topic: What the poem is about
            stanza_count: Number of stanzas

        Returns:
            The poem text
        """
        if stanza_count < 1:
            raise ValueError(f"stanza_count must be positive, got {stanza_count}")

        logger.info(f"Writing a {stanza_count}-stanza poem about {topic}")
        request = load_prompt("poem_request", topic=topic, stanza_count=stanza_count)
        result = await Runner.run(starting_agent=self.agent, input=request)
        return str(result.final_output)
