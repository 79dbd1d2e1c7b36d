"""Model resolution for agent roles.

Resolution order for a role:

1. explicit override for the role (new key beats legacy alias key)
2. granular variants: the base role's explicit override
3. the fallback role's explicit override (fixer -> librarian)
4. the built-in default table
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agent_crew.models.config import AgentOverrideConfig
from agent_crew.models.roles import FALLBACK_ROLES, GRANULAR_ROLES, AgentRole, aliases_for

if TYPE_CHECKING:
    from agent_crew.models.config import PluginConfig

_LIBRARIAN_DEFAULT = "google/gemini-3-flash"

DEFAULT_MODELS: dict[AgentRole, str] = {
    AgentRole.ORCHESTRATOR: "anthropic/claude-opus-4-5",
    AgentRole.EXPLORER: "google/gemini-3-flash",
    AgentRole.LIBRARIAN: _LIBRARIAN_DEFAULT,
    AgentRole.ORACLE: "openai/gpt-5.2-codex",
    AgentRole.DESIGNER: "google/gemini-3-flash",
    AgentRole.FIXER: _LIBRARIAN_DEFAULT,
    AgentRole.LONG_FIXER: _LIBRARIAN_DEFAULT,
    AgentRole.QUICK_FIXER: _LIBRARIAN_DEFAULT,
}

if set(DEFAULT_MODELS) != set(AgentRole):
    msg = "DEFAULT_MODELS must define a model for every AgentRole"
    raise RuntimeError(msg)


def get_agent_override(config: PluginConfig | None, role: AgentRole) -> AgentOverrideConfig | None:
    """Return the effective override for ``role``.

    Legacy alias entries are merged underneath the entry keyed by the role
    name, so fields set under the new name always win.
    """
    if config is None:
        return None
    merged: dict[str, object] = {}
    for key in [*aliases_for(role), role.value]:
        entry = config.agents.get(key)
        if entry is not None:
            merged.update(entry.model_dump(exclude_unset=True))
    if not merged:
        return None
    return AgentOverrideConfig.model_validate(merged)


def _explicit_model(config: PluginConfig | None, role: AgentRole) -> str | None:
    override = get_agent_override(config, role)
    return override.model if override and override.model else None


def _model_chain(role: AgentRole) -> list[AgentRole]:
    chain = [role]
    base = GRANULAR_ROLES.get(role)
    if base is not None:
        chain.append(base)
    fallback = FALLBACK_ROLES.get(chain[-1])
    if fallback is not None:
        chain.append(fallback)
    return chain


def resolve_model(role: AgentRole, config: PluginConfig | None = None) -> str:
    """Return the model identifier for ``role``; always non-empty."""
    for candidate in _model_chain(role):
        model = _explicit_model(config, candidate)
        if model:
            return model
    return DEFAULT_MODELS[role]
