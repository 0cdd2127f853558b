"""FastAPI server for the Miles of Smiles chat websocket and poem endpoint."""

import logging
import os
import uuid
from contextlib import asynccontextmanager

import uvicorn
from agents import Agent, SQLiteSession
from fastapi import Depends, FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.requests import HTTPConnection

from smiles.agents import (
    CustomerSupportAgent,
    PoetAgent,
    cancel_booking,
    get_booking_details,
    send_poem_by_email,
)
from smiles.assistants import AssistantForCustomerSupport, AssistantWithContextAndTool
from smiles.chat_socket import ChatSocket
from smiles.config import get_config, setup_logging
from smiles.guardrails import (
    input_validation_guardrail,
    output_validation_guardrail,
    prompt_injection_guardrail,
)

logger = logging.getLogger(__name__)

POEM_TOPIC = "Quarkus"
POEM_STANZAS = 4


def _export_openai_key() -> None:
    # The SDK reads the key from os.environ, not from our Config
    config = get_config()
    if config.openai_api_key and "OPENAI_API_KEY" not in os.environ:
        os.environ["OPENAI_API_KEY"] = config.openai_api_key
        logger.info("OpenAI API key loaded into environment")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan manager."""
    config = get_config()
    logger.info(
        f"Starting Miles of Smiles server on {config.server_host}:{config.server_port}"
    )
    _export_openai_key()

    logger.info("Initializing AI agents...")

    support_agent = CustomerSupportAgent(
        get_booking_details,
        cancel_booking,
        input_guardrails=[input_validation_guardrail, prompt_injection_guardrail],
        output_guardrails=[output_validation_guardrail],
    ).create()
    logger.info("Customer Support Agent initialized")

    poet_agent = PoetAgent(send_poem_by_email).create()
    logger.info("Poet Agent initialized")

    # Store agents in app state for dependency injection
    _app.state.support_agent = support_agent
    _app.state.poet_agent = poet_agent

    yield

    logger.info("Shutting down Miles of Smiles server")


app = FastAPI(
    title="Miles of Smiles API",
    description="Customer support chat and poetry for Miles of Smiles",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _agent_from_state(connection: HTTPConnection, name: str) -> Agent:
    agent = getattr(connection.app.state, name, None)
    if agent is None:
        raise HTTPException(status_code=503, detail="Agents not initialized yet")
    return agent


def get_support_assistant(connection: HTTPConnection) -> AssistantForCustomerSupport:
    """Dependency building a customer support assistant for one connection.

    Each connection gets its own session so conversations do not mix.

    Raises:
        HTTPException: If agents are not initialized
    """
    agent = _agent_from_state(connection, "support_agent")
    session_id = f"chat-{uuid.uuid4().hex[:12]}"
    logger.debug(f"Created session: {session_id}")
    session = SQLiteSession(session_id, get_config().conversation_db)
    return AssistantForCustomerSupport(agent, session=session)


def get_poem_assistant(connection: HTTPConnection) -> AssistantWithContextAndTool:
    """Dependency returning the poet assistant.

    Raises:
        HTTPException: If agents are not initialized
    """
    return AssistantWithContextAndTool(_agent_from_state(connection, "poet_agent"))


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "miles-of-smiles"}


@app.get("/email-me-a-poem", response_class=PlainTextResponse)
async def email_me_a_poem(
    assistant: AssistantWithContextAndTool = Depends(get_poem_assistant),
) -> str:
    """Ask the poet for a poem, have it e-mailed, and return its text."""
    return await assistant.write_a_poem(POEM_TOPIC, POEM_STANZAS)


@app.websocket("/chat")
async def chat(
    websocket: WebSocket,
    assistant: AssistantForCustomerSupport = Depends(get_support_assistant),
):
    """Customer support chat.

    Sends a greeting on connect, then one reply per text message.
    """
    await websocket.accept()
    logger.debug(f"WebSocket connection from {websocket.client}")

    socket = ChatSocket(assistant)
    try:
        await websocket.send_text(socket.on_open())
        while True:
            user_message = await websocket.receive_text()
            await websocket.send_text(await socket.on_message(user_message))
    except WebSocketDisconnect:
        logger.info("WebSocket disconnected")


def run_server():
    """Run the FastAPI server using uvicorn.

    This is the main entry point for the server.
    """
    setup_logging()
    config = get_config()
    _export_openai_key()

    uvicorn.run(
        "smiles.server:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run_server()
