"""Delegation authorization policy."""

from agent_crew.delegation.policy import (
    SUBAGENT_DELEGATION_RULES,
    allowed_targets,
    allowed_targets_for,
    format_rejection,
    is_delegation_allowed,
)

__all__ = [
    "SUBAGENT_DELEGATION_RULES",
    "allowed_targets",
    "allowed_targets_for",
    "format_rejection",
    "is_delegation_allowed",
]
