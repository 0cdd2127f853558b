"""Poet agent that writes poems and e-mails them."""

import logging

from agents import Agent, ModelSettings

from smiles.config import get_config
from smiles.prompts import load_prompt

logger = logging.getLogger(__name__)


class PoetAgent:
    """Poet agent with an e-mail tool.

    Attributes:
        send_email_tool: The send_poem_by_email tool function
        config: Application configuration
        _agent: The underlying Agent instance (created lazily)
    """

    def __init__(self, send_email_tool) -> None:
        self.send_email_tool = send_email_tool
        self.config = get_config()
        self._agent: Agent | None = None

        logger.info("PoetAgent initialized")

    def create(self) -> Agent:
        """Create and return the configured poet agent."""
        if self._agent is None:
            self._agent = Agent(
                name="Poet",
                model=self.config.agent_model,
                model_settings=ModelSettings(
                    temperature=self.config.agent_temperature
                ),
                instructions=load_prompt("poet_agent"),
                tools=[self.send_email_tool],
            )
            logger.info("Poet agent created successfully")

        return self._agent

    @property
    def agent(self) -> Agent:
        return self.create()
