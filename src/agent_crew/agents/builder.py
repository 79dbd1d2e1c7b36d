"""Build agent definitions from configuration.

The builder is responsible for:
1. Resolving each role's model through the override cascade
2. Loading custom prompt files and instantiating the role factory
3. Dropping experimental and disabled roles
4. Applying configuration overrides and default permissions
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from agent_crew.agents.factories import SUBAGENT_FACTORIES, create_orchestrator_agent
from agent_crew.config.integrations import get_agent_mcp_list, get_skill_permissions_for_agent
from agent_crew.config.models import get_agent_override, resolve_model
from agent_crew.config.prompts import load_agent_prompt
from agent_crew.models.roles import (
    PRIMARY_ROLE,
    ROLE_ALIASES,
    SUBAGENT_ROLES,
    AgentRole,
    is_granular,
    is_subagent,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from agent_crew.models.agents import AgentDefinition
    from agent_crew.models.config import AgentOverrideConfig, PluginConfig
    from agent_crew.models.settings import Settings

logger = logging.getLogger(__name__)


def apply_overrides(definition: AgentDefinition, override: AgentOverrideConfig) -> AgentDefinition:
    """Return ``definition`` with model, temperature and prompt overrides applied."""
    updates: dict[str, Any] = {}
    if override.model:
        updates["model"] = override.model
    if override.temperature is not None:
        updates["temperature"] = override.temperature
    prompt = override.prompt or definition.config.prompt
    if override.prompt_append:
        prompt = f"{prompt}\n\n{override.prompt_append}"
    if prompt != definition.config.prompt:
        updates["prompt"] = prompt
    if not updates:
        return definition
    return definition.with_config(**updates)


def apply_default_permissions(
    definition: AgentDefinition, skills: list[str] | None = None
) -> AgentDefinition:
    """Allow the ``question`` tool and merge in the role's skill permissions."""
    existing = dict(definition.config.permission)
    prior_skills = existing.get("skill")
    skill_map = dict(prior_skills) if isinstance(prior_skills, dict) else {}
    skill_map.update(get_skill_permissions_for_agent(definition.name, skills))
    permission = {**existing, "question": "allow", "skill": skill_map}
    return definition.with_config(permission=permission)


def _enabled_subagents(config: PluginConfig | None) -> list[AgentRole]:
    granular_enabled = bool(config and config.experimental.granular_fixers)
    disabled = {
        ROLE_ALIASES[name].value if name in ROLE_ALIASES else name
        for name in (config.disabled_agents if config else [])
    }
    if PRIMARY_ROLE.value in disabled:
        logger.warning("Ignoring request to disable the %s agent", PRIMARY_ROLE.value)

    roles: list[AgentRole] = []
    for role in SUBAGENT_ROLES:
        if is_granular(role) and not granular_enabled:
            continue
        if role.value in disabled:
            logger.debug("Agent %s disabled by configuration", role.value)
            continue
        roles.append(role)
    return roles


def _finalize(definition: AgentDefinition, config: PluginConfig | None) -> AgentDefinition:
    override = get_agent_override(config, definition.name)
    if override is not None:
        definition = apply_overrides(definition, override)
    skills = override.skills if override is not None else None
    return apply_default_permissions(definition, skills)


def create_agents(
    config: PluginConfig | None = None, settings: Settings | None = None
) -> list[AgentDefinition]:
    """Build all enabled agent definitions, orchestrator first."""
    granular_enabled = bool(config and config.experimental.granular_fixers)

    orchestrator_prompt = load_agent_prompt(PRIMARY_ROLE.value, settings)
    orchestrator = create_orchestrator_agent(
        resolve_model(PRIMARY_ROLE, config),
        orchestrator_prompt.prompt,
        orchestrator_prompt.append,
        granular_fixers_enabled=granular_enabled,
    )
    definitions = [_finalize(orchestrator, config)]

    for role in _enabled_subagents(config):
        custom = load_agent_prompt(role.value, settings)
        factory = SUBAGENT_FACTORIES[role]
        definition = factory(resolve_model(role, config), custom.prompt, custom.append)
        definitions.append(_finalize(definition, config))

    logger.debug("Built %d agent definitions", len(definitions))
    return definitions


def get_enabled_roles(definitions: Iterable[AgentDefinition]) -> frozenset[AgentRole]:
    """Return the role set present in ``definitions``."""
    return frozenset(definition.name for definition in definitions)


def get_agent_configs(
    config: PluginConfig | None = None,
    definitions: list[AgentDefinition] | None = None,
    settings: Settings | None = None,
) -> dict[str, dict[str, Any]]:
    """Return SDK-style agent configs keyed by agent name."""
    if definitions is None:
        definitions = create_agents(config, settings)

    configs: dict[str, dict[str, Any]] = {}
    for definition in definitions:
        name = definition.name.value
        record = definition.config.model_dump(exclude_none=True)
        record["description"] = definition.description
        record["mcps"] = get_agent_mcp_list(definition.name, config)
        record["mode"] = "subagent" if is_subagent(name) else "primary"
        configs[name] = record
    return configs
