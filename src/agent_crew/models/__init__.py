"""Pydantic models and role catalog for agent_crew."""

from agent_crew.models.agents import AgentConfig, AgentDefinition, AgentMode, PermissionValue
from agent_crew.models.config import AgentOverrideConfig, ExperimentalConfig, PluginConfig
from agent_crew.models.roles import (
    FALLBACK_ROLES,
    GRANULAR_ROLES,
    PRIMARY_ROLE,
    ROLE_ALIASES,
    SUBAGENT_ROLES,
    AgentRole,
    is_granular,
    is_subagent,
    parse_role,
)
from agent_crew.models.settings import Settings, load_settings

__all__ = [
    "FALLBACK_ROLES",
    "GRANULAR_ROLES",
    "PRIMARY_ROLE",
    "ROLE_ALIASES",
    "SUBAGENT_ROLES",
    "AgentConfig",
    "AgentDefinition",
    "AgentMode",
    "AgentOverrideConfig",
    "AgentRole",
    "ExperimentalConfig",
    "PermissionValue",
    "PluginConfig",
    "Settings",
    "is_granular",
    "is_subagent",
    "load_settings",
    "parse_role",
]
