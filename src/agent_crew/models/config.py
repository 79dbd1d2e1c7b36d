"""Pydantic models for crew configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AgentOverrideConfig(BaseModel, frozen=True):
    """Per-role overrides supplied by the user or project configuration."""

    model: str | None = None
    temperature: float | None = None
    prompt: str | None = None
    prompt_append: str | None = None
    skills: list[str] | None = None
    mcps: list[str] | None = None

    model_config = {"extra": "forbid"}


class ExperimentalConfig(BaseModel, frozen=True):
    """Feature flags for experimental roles."""

    granular_fixers: bool = Field(default=False, alias="granularFixers")

    model_config = {"populate_by_name": True, "extra": "ignore"}


class PluginConfig(BaseModel, frozen=True):
    """Complete configuration input for building the agent crew."""

    agents: dict[str, AgentOverrideConfig] = Field(default_factory=dict)
    disabled_agents: list[str] = Field(default_factory=list)
    experimental: ExperimentalConfig = Field(default_factory=ExperimentalConfig)

    model_config = {"extra": "ignore"}
