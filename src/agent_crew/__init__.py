from agent_crew.agents import create_agents, get_agent_configs
from agent_crew.background import (
    BackgroundTaskManager,
    LaunchRequest,
    SessionPlatform,
    StrandsSessionPlatform,
    TaskHandle,
    TaskSnapshot,
    TaskStatus,
)
from agent_crew.config import load_plugin_config, resolve_model
from agent_crew.delegation import allowed_targets
from agent_crew.models import (
    AgentDefinition,
    AgentRole,
    PluginConfig,
    Settings,
    is_subagent,
    load_settings,
)
from agent_crew.runtime import CrewRuntime
from agent_crew.tools import BackgroundTools

__all__ = [
    "AgentDefinition",
    "AgentRole",
    "BackgroundTaskManager",
    "BackgroundTools",
    "CrewRuntime",
    "LaunchRequest",
    "PluginConfig",
    "SessionPlatform",
    "Settings",
    "StrandsSessionPlatform",
    "TaskHandle",
    "TaskSnapshot",
    "TaskStatus",
    "allowed_targets",
    "create_agents",
    "get_agent_configs",
    "is_subagent",
    "load_plugin_config",
    "load_settings",
    "resolve_model",
]
