"""Agent definitions: per-role factories and the configuration-driven builder."""

from agent_crew.agents.builder import (
    apply_default_permissions,
    apply_overrides,
    create_agents,
    get_agent_configs,
    get_enabled_roles,
)
from agent_crew.agents.factories import SUBAGENT_FACTORIES, AgentFactory, create_orchestrator_agent

__all__ = [
    "SUBAGENT_FACTORIES",
    "AgentFactory",
    "apply_default_permissions",
    "apply_overrides",
    "create_agents",
    "create_orchestrator_agent",
    "get_agent_configs",
    "get_enabled_roles",
]
