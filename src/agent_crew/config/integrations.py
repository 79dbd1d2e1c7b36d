"""Default skill and MCP allowlists per role.

Lists use a small syntax shared by skills and MCP servers:
``"*"`` allows everything, ``"!name"`` excludes a name, anything else is an
explicit allow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agent_crew.config.models import get_agent_override
from agent_crew.models.roles import AgentRole
from agent_crew.utils import dedupe

if TYPE_CHECKING:
    from agent_crew.models.config import PluginConfig

WILDCARD = "*"

DEFAULT_AGENT_SKILLS: dict[AgentRole, list[str]] = {
    AgentRole.ORCHESTRATOR: [WILDCARD],
    AgentRole.DESIGNER: ["playwright"],
}

DEFAULT_AGENT_MCPS: dict[AgentRole, list[str]] = {
    AgentRole.ORCHESTRATOR: ["websearch"],
    AgentRole.LIBRARIAN: ["websearch", "context7", "grep_app"],
}

KNOWN_MCPS: tuple[str, ...] = ("websearch", "context7", "grep_app")


def _split_entries(entries: list[str]) -> tuple[bool, list[str], list[str]]:
    wildcard = False
    allowed: list[str] = []
    denied: list[str] = []
    for raw in entries:
        entry = raw.strip()
        if not entry:
            continue
        if entry == WILDCARD:
            wildcard = True
        elif entry.startswith("!"):
            denied.append(entry[1:].strip())
        else:
            allowed.append(entry)
    return wildcard, dedupe(allowed), dedupe(denied)


def get_skill_permissions_for_agent(
    role: AgentRole, skills: list[str] | None = None
) -> dict[str, str]:
    """Return the ``skill`` permission sub-map for ``role``.

    An explicit ``skills`` list replaces the role default entirely.
    """
    entries = skills if skills is not None else DEFAULT_AGENT_SKILLS.get(role, [])
    wildcard, allowed, denied = _split_entries(entries)

    permissions: dict[str, str] = {WILDCARD: "allow" if wildcard else "deny"}
    for name in allowed:
        permissions[name] = "allow"
    for name in denied:
        permissions[name] = "deny"
    return permissions


def get_agent_mcp_list(role: AgentRole, config: PluginConfig | None = None) -> list[str]:
    """Return the MCP servers ``role`` may use, honouring per-role overrides."""
    override = get_agent_override(config, role)
    entries = (
        override.mcps
        if override is not None and override.mcps is not None
        else DEFAULT_AGENT_MCPS.get(role, [])
    )
    wildcard, allowed, denied = _split_entries(entries)
    candidates = [*KNOWN_MCPS, *allowed] if wildcard else allowed
    return [name for name in dedupe(candidates) if name not in denied]
