"""Tests for Miles of Smiles agents using OpenAI Agents SDK."""

from datetime import date

import pytest
from agents import Agent

from smiles.agents import (
    CustomerSupportAgent,
    PoetAgent,
    cancel_booking,
    get_booking_details,
    send_poem_by_email,
)
from smiles.guardrails import (
    input_validation_guardrail,
    output_validation_guardrail,
    prompt_injection_guardrail,
)
from smiles.prompts import load_prompt


class TestAgentCreation:
    """Tests for agent creation using the SDK."""

    def test_create_customer_support_agent(self):
        """Test customer support agent creation."""
        support_agent = CustomerSupportAgent(
            get_booking_details, cancel_booking
        ).create()

        assert isinstance(support_agent, Agent)
        assert support_agent.name == "Miles of Smiles Customer Support"
        assert len(support_agent.tools) == 2
        assert "Miles of Smiles" in support_agent.instructions(None, support_agent)

    def test_customer_support_agent_guardrails(self):
        """Test that guardrails are attached to the agent."""
        instance = CustomerSupportAgent(
            get_booking_details,
            cancel_booking,
            input_guardrails=[input_validation_guardrail, prompt_injection_guardrail],
            output_guardrails=[output_validation_guardrail],
        )
        support_agent = instance.create()

        assert len(support_agent.input_guardrails) == 2
        assert support_agent.output_guardrails == [output_validation_guardrail]
        # Test property access
        assert instance.agent is support_agent

    def test_instructions_use_current_date(self):
        """Test that the date in the instructions follows the clock."""
        current = [date(2025, 3, 1)]
        support_agent = CustomerSupportAgent(
            get_booking_details, cancel_booking, today=lambda: current[0]
        ).create()

        assert "March 01, 2025" in support_agent.instructions(None, support_agent)

        current[0] = date(2025, 3, 2)
        assert "March 02, 2025" in support_agent.instructions(None, support_agent)

    def test_create_poet_agent(self):
        """Test poet agent creation."""
        instance = PoetAgent(send_poem_by_email)
        poet = instance.create()

        assert isinstance(poet, Agent)
        assert poet.name == "Poet"
        assert len(poet.tools) == 1
        assert instance.agent is poet


class TestPrompts:
    """Tests for prompt templates."""

    def test_load_poem_request(self):
        """Test formatting of the poem request."""
        prompt = load_prompt("poem_request", topic="Quarkus", stanza_count=4)

        assert "Quarkus" in prompt
        assert "4 stanzas" in prompt

    def test_missing_prompt(self):
        """Test that an unknown template raises."""
        with pytest.raises(FileNotFoundError):
            load_prompt("does_not_exist")
