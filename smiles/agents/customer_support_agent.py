"""Customer support agent for Miles of Smiles bookings using OpenAI Agents SDK."""

import logging
from collections.abc import Callable
from datetime import date

from agents import Agent, ModelSettings

from smiles.config import get_config
from smiles.prompts import load_prompt

logger = logging.getLogger(__name__)


class CustomerSupportAgent:
    """Customer support agent that answers booking questions.

    This agent:
    - Looks up bookings for a named customer
    - Cancels bookings within the cancellation policy
    - Redirects unrelated questions politely

    Attributes:
        booking_details_tool: The booking lookup function tool
        cancel_booking_tool: The booking cancellation function tool
        today: Callable returning the current date
        config: Application configuration
        _agent: The underlying Agent instance (created lazily)
    """

    def __init__(
        self,
        booking_details_tool: Callable,
        cancel_booking_tool: Callable,
        input_guardrails: list | None = None,
        output_guardrails: list | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the customer support agent.

        Args:
            booking_details_tool: The booking lookup function tool
            cancel_booking_tool: The booking cancellation function tool
            input_guardrails: List of input guardrails to apply (optional)
            output_guardrails: List of output guardrails to apply (optional)
            today: Callable returning the current date
        """
        self.booking_details_tool = booking_details_tool
        self.cancel_booking_tool = cancel_booking_tool
        self.input_guardrails = input_guardrails or []
        self.output_guardrails = output_guardrails or []
        self.today = today
        self.config = get_config()
        self._agent: Agent | None = None

        logger.info("CustomerSupportAgent initialized")

    def render_instructions(self, _context, _agent) -> str:
        """Render the instructions with today's date.

        Passed to the SDK as a callable so each run sees the current date.
        """
        return load_prompt(
            "customer_support_agent",
            current_date=self.today().strftime("%A, %B %d, %Y"),
        )

    def create(self) -> Agent:
        """Create and return the configured customer support agent.

        Returns:
            Configured customer support agent

        Note:
            The agent is created lazily on first call and cached.
        """
        if self._agent is None:
            self._agent = Agent(
                name="Miles of Smiles Customer Support",
                model=self.config.agent_model,
                model_settings=ModelSettings(
                    temperature=self.config.agent_temperature
                ),
                instructions=self.render_instructions,
                tools=[self.booking_details_tool, self.cancel_booking_tool],
                input_guardrails=self.input_guardrails,
                output_guardrails=self.output_guardrails,
            )
            logger.info("Customer support agent created successfully")
            logger.info(
                f"  with {len(self.input_guardrails)} input guardrails and {len(self.output_guardrails)} output guardrails"
            )

        return self._agent

    @property
    def agent(self) -> Agent:
        """Get the agent instance (creates it if needed).

        Returns:
            The customer support agent
        """
        return self.create()
