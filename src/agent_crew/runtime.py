"""Runtime wiring for the agent crew.

``CrewRuntime`` loads settings and configuration once, builds the agent
definitions and owns the platform, task manager and tool registry that serve
delegations for the lifetime of the process.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from agent_crew.agents.builder import create_agents, get_agent_configs, get_enabled_roles
from agent_crew.background.manager import BackgroundTaskManager
from agent_crew.background.platform import StrandsSessionPlatform
from agent_crew.config.loader import load_plugin_config
from agent_crew.models.settings import load_settings
from agent_crew.telemetry.logging_utils import configure_logging
from agent_crew.tools.background import BackgroundTools, register_background_tools

if TYPE_CHECKING:
    from pathlib import Path

    from agent_crew.background.platform import SessionPlatform
    from agent_crew.models.agents import AgentDefinition
    from agent_crew.models.config import PluginConfig
    from agent_crew.models.settings import Settings
    from agent_crew.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class CrewRuntime:
    """Own the configured agents and the services that run delegations."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        config: PluginConfig | None = None,
        cwd: str | Path | None = None,
        platform: SessionPlatform | None = None,
        setup_logging: bool = False,
    ) -> None:
        """Wire the crew; root logging is configured only when ``setup_logging`` is set."""
        self.settings = settings or load_settings()
        if setup_logging:
            configure_logging(self.settings.log_level)
        self.config = config if config is not None else load_plugin_config(cwd, self.settings)
        self.definitions: list[AgentDefinition] = create_agents(self.config, self.settings)
        self.platform: SessionPlatform = platform or StrandsSessionPlatform(self.definitions)
        self.manager = BackgroundTaskManager(
            self.platform,
            poll_interval=self.settings.poll_interval,
            notify_parent=self.settings.notify_parent,
            auto_poll=True,
        )
        self.tools = BackgroundTools(self.manager, get_enabled_roles(self.definitions))
        self.registry: ToolRegistry = register_background_tools(self.tools)
        logger.info(
            "Crew runtime ready with agents: %s",
            ", ".join(definition.name.value for definition in self.definitions),
        )

    def agent_configs(self) -> dict[str, dict[str, Any]]:
        """Return SDK-style agent configs for the built definitions."""
        return get_agent_configs(self.config, self.definitions)

    async def shutdown(self) -> None:
        """Stop background polling."""
        await self.manager.stop_polling()
