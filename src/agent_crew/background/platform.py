"""Execution platform seam for background tasks.

The task manager only talks to a ``SessionPlatform``. ``StrandsSessionPlatform``
is the in-process implementation: each session runs its prompt with a Strands
agent built from the role's definition.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Protocol
from uuid import uuid4

from strands import Agent
from strands.models import BedrockModel

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from strands.models.model import Model

    from agent_crew.models.agents import AgentDefinition
    from agent_crew.models.roles import AgentRole

logger = logging.getLogger(__name__)

SessionState = Literal["idle", "busy", "error"]
Message = dict[str, Any]


class SessionPlatform(Protocol):
    """Host system that runs agent prompts inside sessions."""

    async def create_session(self, parent_id: str, title: str) -> str:
        """Create a child session and return its identifier."""
        ...

    async def prompt(self, session_id: str, agent: AgentRole, text: str) -> None:
        """Start running ``text`` under ``agent`` in the session."""
        ...

    async def get_session_status(self, session_id: str) -> SessionState:
        """Return the session's current state."""
        ...

    async def get_messages(self, session_id: str) -> list[Message]:
        """Return the session's messages, oldest first."""
        ...

    async def send_notice(self, session_id: str, text: str) -> None:
        """Post an informational message into a session."""
        ...


def extract_result_text(messages: Iterable[Message]) -> str:
    """Return the text of the last assistant message, or an empty string."""
    for message in reversed(list(messages)):
        if message.get("role") == "assistant" and message.get("text"):
            return str(message["text"])
    return ""


DEFAULT_REGION = "eu-central-1"
DEFAULT_MAX_TOKENS = 8192
API_KEY_ENV = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "google": "GOOGLE_API_KEY",
}
SUPPORTED_PROVIDERS = ("bedrock", *API_KEY_ENV)


def split_model_ref(model_ref: str) -> tuple[str, str]:
    """Split ``provider/model_id``; bare ids and ARNs are Bedrock model ids."""
    provider, sep, model_id = model_ref.partition("/")
    if not sep or ":" in provider:
        return "bedrock", model_ref
    return provider, model_id


def _require_api_key(provider: str) -> str:
    env_name = API_KEY_ENV[provider]
    api_key = os.getenv(env_name)
    if not api_key:
        msg = f"Missing API key: set {env_name}"
        raise ValueError(msg)
    return api_key


def default_model_factory(model_ref: str, temperature: float | None) -> Model:
    """Build a Strands model for a ``provider/model_id`` reference.

    ``bedrock`` (or no provider) maps to ``BedrockModel``; ``anthropic``,
    ``openai`` and ``google`` map to the matching Strands provider and read
    their API key from the environment.
    """
    provider, model_id = split_model_ref(model_ref)
    params: dict[str, Any] = {} if temperature is None else {"temperature": temperature}

    if provider == "bedrock":
        return BedrockModel(
            model_id=model_id,
            region_name=os.getenv("AWS_REGION", DEFAULT_REGION),
            **params,
        )
    if provider not in API_KEY_ENV:
        msg = (
            f"Unsupported model provider '{provider}'. "
            f"Supported providers: {list(SUPPORTED_PROVIDERS)}"
        )
        raise ValueError(msg)

    client_args = {"api_key": _require_api_key(provider)}
    if provider == "anthropic":
        from strands.models.anthropic import AnthropicModel  # noqa: PLC0415

        return AnthropicModel(
            client_args=client_args,
            model_id=model_id,
            max_tokens=DEFAULT_MAX_TOKENS,
            params=params,
        )
    if provider == "openai":
        from strands.models.openai import OpenAIModel  # noqa: PLC0415

        return OpenAIModel(client_args=client_args, model_id=model_id, params=params)

    from strands.models.gemini import GeminiModel  # noqa: PLC0415

    return GeminiModel(client_args=client_args, model_id=model_id, params=params)


@dataclass
class _Session:
    session_id: str
    parent_id: str
    title: str
    state: SessionState = "idle"
    messages: list[Message] = field(default_factory=list)
    error: str | None = None


class StrandsSessionPlatform:
    """Run sessions in-process with Strands agents."""

    def __init__(
        self,
        definitions: Iterable[AgentDefinition],
        *,
        model_factory: Callable[[str, float | None], Any] | None = None,
    ) -> None:
        self._definitions = {definition.name: definition for definition in definitions}
        self._model_factory = model_factory or default_model_factory
        self._sessions: dict[str, _Session] = {}
        self._runs: set[asyncio.Task[None]] = set()

    async def create_session(self, parent_id: str, title: str) -> str:
        session_id = f"ses_{uuid4().hex[:12]}"
        self._sessions[session_id] = _Session(
            session_id=session_id, parent_id=parent_id, title=title
        )
        logger.debug("Created session %s (parent=%s)", session_id, parent_id)
        return session_id

    async def prompt(self, session_id: str, agent: AgentRole, text: str) -> None:
        session = self._get_session(session_id)
        definition = self._definitions.get(agent)
        if definition is None:
            msg = f"No definition for agent: {agent}"
            raise ValueError(msg)

        session.messages.append({"role": "user", "agent": agent.value, "text": text})
        session.state = "busy"
        run = asyncio.get_running_loop().create_task(self._run(session, definition, text))
        self._runs.add(run)
        run.add_done_callback(self._runs.discard)

    async def get_session_status(self, session_id: str) -> SessionState:
        return self._get_session(session_id).state

    async def get_messages(self, session_id: str) -> list[Message]:
        return list(self._get_session(session_id).messages)

    async def send_notice(self, session_id: str, text: str) -> None:
        session = self._sessions.get(session_id)
        if session is None:
            # Root sessions live outside this platform.
            logger.info("Notice for session %s: %s", session_id, text)
            return
        session.messages.append({"role": "system", "text": text})

    def build_agent(self, definition: AgentDefinition) -> Agent:
        """Create the Strands agent used to run a session prompt."""
        model = self._model_factory(definition.config.model, definition.config.temperature)
        return Agent(
            model=model,
            system_prompt=definition.config.prompt,
            name=definition.name.value,
            description=definition.description,
            callback_handler=None,
        )

    async def _run(self, session: _Session, definition: AgentDefinition, text: str) -> None:
        try:
            agent = self.build_agent(definition)
            result = await agent.invoke_async(text)
        except Exception as exc:
            logger.exception("Session %s failed", session.session_id)
            session.error = str(exc)
            session.state = "error"
            return
        session.messages.append({"role": "assistant", "text": str(result).strip()})
        session.state = "idle"

    def _get_session(self, session_id: str) -> _Session:
        session = self._sessions.get(session_id)
        if session is None:
            msg = f"Unknown session: {session_id}"
            raise KeyError(msg)
        return session
