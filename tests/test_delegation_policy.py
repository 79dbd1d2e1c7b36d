from __future__ import annotations

from agent_crew.delegation.policy import (
    allowed_targets,
    allowed_targets_for,
    format_rejection,
    is_delegation_allowed,
)
from agent_crew.models.roles import (
    GRANULAR_ROLES,
    SUBAGENT_ROLES,
    AgentRole,
    is_subagent,
    parse_role,
)

BASE_ROLES = frozenset(role for role in AgentRole if role not in GRANULAR_ROLES)


def test_orchestrator_may_delegate_to_every_subagent() -> None:
    assert allowed_targets(AgentRole.ORCHESTRATOR) == frozenset(SUBAGENT_ROLES)


def test_primary_role_has_broadest_set() -> None:
    broadest = allowed_targets(AgentRole.ORCHESTRATOR)
    for role in AgentRole:
        assert allowed_targets(role) <= broadest


def test_leaf_roles_have_empty_sets() -> None:
    for role in (AgentRole.EXPLORER, AgentRole.LIBRARIAN, AgentRole.ORACLE):
        assert allowed_targets(role) == frozenset()


def test_implementation_roles_may_only_call_explorer() -> None:
    for role in (AgentRole.FIXER, AgentRole.DESIGNER, AgentRole.LONG_FIXER):
        assert allowed_targets(role) == frozenset({AgentRole.EXPLORER})


def test_allowed_targets_for_filters_disabled_roles_in_order() -> None:
    allowed = allowed_targets_for(AgentRole.ORCHESTRATOR, BASE_ROLES)
    assert [role.value for role in allowed] == [
        "explorer",
        "librarian",
        "oracle",
        "designer",
        "fixer",
    ]


def test_unknown_target_is_not_allowed() -> None:
    assert not is_delegation_allowed(AgentRole.ORCHESTRATOR, "unknown-agent")
    assert not is_delegation_allowed(AgentRole.ORCHESTRATOR, "explore")
    assert is_delegation_allowed(AgentRole.ORCHESTRATOR, "explorer")


def test_granular_targets_need_enabled_roles() -> None:
    assert not is_delegation_allowed(AgentRole.ORCHESTRATOR, "quick-fixer", BASE_ROLES)
    assert is_delegation_allowed(AgentRole.ORCHESTRATOR, "quick-fixer", set(AgentRole))


def test_format_rejection() -> None:
    assert (
        format_rejection("oracle", [AgentRole.EXPLORER])
        == "Agent 'oracle' is not allowed. Allowed agents: explorer"
    )
    assert format_rejection("fixer", []) == "Agent 'fixer' is not allowed. Allowed agents: "


def test_is_subagent() -> None:
    for role in SUBAGENT_ROLES:
        assert is_subagent(role.value)
    assert not is_subagent("orchestrator")
    assert not is_subagent("invalid-agent")
    assert not is_subagent("")
    assert not is_subagent("explore")


def test_parse_role() -> None:
    assert parse_role("long-fixer") is AgentRole.LONG_FIXER
    assert parse_role("nope") is None
    assert parse_role(None) is None
