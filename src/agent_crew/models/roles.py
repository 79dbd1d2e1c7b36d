"""Agent role catalog.

The role set is closed: one primary coordinator plus a fixed list of
subagents. Granular variants are experimental refinements of a base role and
only exist at runtime when their feature flag is enabled.
"""

from __future__ import annotations

from enum import StrEnum


class AgentRole(StrEnum):
    """Closed set of agent specialisations."""

    ORCHESTRATOR = "orchestrator"
    EXPLORER = "explorer"
    LIBRARIAN = "librarian"
    ORACLE = "oracle"
    DESIGNER = "designer"
    FIXER = "fixer"
    LONG_FIXER = "long-fixer"
    QUICK_FIXER = "quick-fixer"


PRIMARY_ROLE = AgentRole.ORCHESTRATOR

# Stable output order for built definitions and allowed-agent listings.
SUBAGENT_ROLES: tuple[AgentRole, ...] = (
    AgentRole.EXPLORER,
    AgentRole.LIBRARIAN,
    AgentRole.ORACLE,
    AgentRole.DESIGNER,
    AgentRole.FIXER,
    AgentRole.LONG_FIXER,
    AgentRole.QUICK_FIXER,
)

# Granular variant -> base role.
GRANULAR_ROLES: dict[AgentRole, AgentRole] = {
    AgentRole.LONG_FIXER: AgentRole.FIXER,
    AgentRole.QUICK_FIXER: AgentRole.FIXER,
}

# One level of role-to-role model inheritance.
FALLBACK_ROLES: dict[AgentRole, AgentRole] = {
    AgentRole.FIXER: AgentRole.LIBRARIAN,
}

# Legacy configuration keys still accepted for renamed roles.
ROLE_ALIASES: dict[str, AgentRole] = {
    "explore": AgentRole.EXPLORER,
    "frontend-ui-ux-engineer": AgentRole.DESIGNER,
}

_SUBAGENT_VALUES = frozenset(role.value for role in SUBAGENT_ROLES)


def parse_role(name: str | None) -> AgentRole | None:
    """Return the role named ``name`` or None when it is not a known role."""
    if not name:
        return None
    try:
        return AgentRole(name)
    except ValueError:
        return None


def is_subagent(name: str | None) -> bool:
    """Return True when ``name`` is a member of the subagent set."""
    return bool(name) and name in _SUBAGENT_VALUES


def is_granular(role: AgentRole) -> bool:
    """Return True for experimental granular variants."""
    return role in GRANULAR_ROLES


def aliases_for(role: AgentRole) -> list[str]:
    """Return legacy configuration keys that map onto ``role``."""
    return [alias for alias, target in ROLE_ALIASES.items() if target == role]
