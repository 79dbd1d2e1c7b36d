"""Static delegation hierarchy.

The orchestrator may delegate to every subagent. Implementation roles may
only call the explorer for lookups, and pure research roles are leaves.
Unknown names never appear in any allowed set, so they are rejected the same
way as an explicitly disallowed role.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agent_crew.models.roles import SUBAGENT_ROLES, AgentRole, parse_role

if TYPE_CHECKING:
    from collections.abc import Collection

SUBAGENT_DELEGATION_RULES: dict[AgentRole, frozenset[AgentRole]] = {
    AgentRole.ORCHESTRATOR: frozenset(SUBAGENT_ROLES),
    AgentRole.FIXER: frozenset({AgentRole.EXPLORER}),
    AgentRole.LONG_FIXER: frozenset({AgentRole.EXPLORER}),
    AgentRole.QUICK_FIXER: frozenset({AgentRole.EXPLORER}),
    AgentRole.DESIGNER: frozenset({AgentRole.EXPLORER}),
    AgentRole.EXPLORER: frozenset(),
    AgentRole.LIBRARIAN: frozenset(),
    AgentRole.ORACLE: frozenset(),
}

if set(SUBAGENT_DELEGATION_RULES) != set(AgentRole):
    msg = "SUBAGENT_DELEGATION_RULES must cover every AgentRole"
    raise RuntimeError(msg)


def allowed_targets(role: AgentRole) -> frozenset[AgentRole]:
    """Return the roles ``role`` may delegate to."""
    return SUBAGENT_DELEGATION_RULES[role]


def allowed_targets_for(
    role: AgentRole, enabled: Collection[AgentRole] | None = None
) -> list[AgentRole]:
    """Return allowed targets restricted to ``enabled`` roles, in stable order."""
    targets = allowed_targets(role)
    return [
        candidate
        for candidate in SUBAGENT_ROLES
        if candidate in targets and (enabled is None or candidate in enabled)
    ]


def is_delegation_allowed(
    caller: AgentRole, target: str, enabled: Collection[AgentRole] | None = None
) -> bool:
    """Return True when ``caller`` may launch a task for ``target``."""
    target_role = parse_role(target)
    if target_role is None:
        return False
    return target_role in allowed_targets_for(caller, enabled)


def format_rejection(target: str, allowed: Collection[AgentRole]) -> str:
    """Render the rejection message returned to a delegating agent."""
    names = ", ".join(role.value for role in allowed)
    return f"Agent '{target}' is not allowed. Allowed agents: {names}"
