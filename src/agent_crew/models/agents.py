"""Pydantic models for built agent definitions."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from agent_crew.models.roles import AgentRole  # noqa: TC001 - pydantic resolves at runtime

PermissionValue = Literal["ask", "allow", "deny"]
AgentMode = Literal["primary", "subagent"]


class AgentConfig(BaseModel, frozen=True):
    """Model, prompt and permissions for a single agent."""

    model: str
    prompt: str
    temperature: float | None = None
    permission: dict[str, Any] = Field(default_factory=dict)


class AgentDefinition(BaseModel, frozen=True):
    """Immutable agent definition produced by the builder."""

    name: AgentRole
    description: str
    config: AgentConfig

    def with_config(self, **updates: Any) -> AgentDefinition:
        """Return a copy with ``updates`` applied to the nested config."""
        return self.model_copy(update={"config": self.config.model_copy(update=updates)})
