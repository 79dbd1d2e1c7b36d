"""Agent-facing tools for delegating work as background tasks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from agent_crew.background.models import LaunchRequest, TaskStatus
from agent_crew.delegation.policy import allowed_targets_for, format_rejection
from agent_crew.models.roles import PRIMARY_ROLE, SUBAGENT_ROLES, AgentRole
from agent_crew.tools.registry import ToolDefinition, ToolRegistry

if TYPE_CHECKING:
    from collections.abc import Collection

    from agent_crew.background.manager import BackgroundTaskManager

logger = logging.getLogger(__name__)

MISSING_SESSION_ERROR = "Invalid toolContext: missing sessionID"


def _require_session_id(tool_context: Any) -> str:
    if not isinstance(tool_context, Mapping):
        raise ValueError(MISSING_SESSION_ERROR)
    session_id = tool_context.get("sessionID")
    if not isinstance(session_id, str) or not session_id:
        raise ValueError(MISSING_SESSION_ERROR)
    return session_id


def _require_str(args: Mapping[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str):
        msg = f"Invalid arguments: '{key}' must be a string"
        raise ValueError(msg)
    return value


class BackgroundTools:
    """Delegation entry point bound to a task manager and the enabled roles."""

    def __init__(
        self, manager: BackgroundTaskManager, enabled_roles: Collection[AgentRole]
    ) -> None:
        self._manager = manager
        self._enabled = frozenset(enabled_roles)

    @property
    def enabled_agents(self) -> list[str]:
        """Subagent names an agent may name in ``background_task``."""
        return [role.value for role in SUBAGENT_ROLES if role in self._enabled]

    def caller_role(self, session_id: str) -> AgentRole:
        """Return the role of the session issuing a delegation.

        Sessions the manager never launched (the user's root session) are
        treated as the orchestrator.
        """
        role = self._manager.get_session_agent(session_id)
        if role is None:
            logger.debug("Untracked session %s treated as %s", session_id, PRIMARY_ROLE.value)
            return PRIMARY_ROLE
        return role

    async def background_task(self, args: Mapping[str, Any], tool_context: Any) -> str:
        """Launch ``args['agent']`` on ``args['prompt']`` as a background task."""
        session_id = _require_session_id(tool_context)
        if not isinstance(args, Mapping):
            msg = "Invalid arguments: expected a mapping"
            raise TypeError(msg)
        target = _require_str(args, "agent")
        prompt = _require_str(args, "prompt")
        description = _require_str(args, "description")

        caller = self.caller_role(session_id)
        allowed = allowed_targets_for(caller, self._enabled)
        target_role = next((role for role in allowed if role.value == target), None)
        if target_role is None:
            logger.info("Rejected delegation from %s to %s", caller.value, target)
            return format_rejection(target, allowed)

        handle = self._manager.launch(
            LaunchRequest(
                agent=target_role,
                prompt=prompt,
                description=description,
                parent_session_id=session_id,
            )
        )
        return (
            "Background task launched.\n\n"
            f"Task ID: {handle.task_id}\n"
            f"Agent: {target_role.value}\n"
            f"Status: {handle.status.value}\n\n"
            f'Use `background_output` with task_id="{handle.task_id}" to get results.'
        )

    async def background_output(self, args: Mapping[str, Any]) -> str:
        """Report a background task's status and, once finished, its output."""
        task_id = _require_str(args, "task_id")
        task = self._manager.get_task(task_id)
        if task is None:
            return f"Task not found: {task_id}"

        lines = [
            f"Task ID: {task.task_id}",
            f"Agent: {task.agent.value}",
            f"Description: {task.description}",
            f"Status: {task.status.value}",
        ]
        if task.session_id:
            lines.append(f"Session ID: {task.session_id}")
        if task.status == TaskStatus.COMPLETED:
            lines.extend(["", task.result or "(No output)"])
        elif task.status == TaskStatus.FAILED:
            lines.extend(["", f"Error: {task.error}"])
        else:
            lines.extend(["", "Task is still running. Check again later."])
        return "\n".join(lines)


def register_background_tools(
    tools: BackgroundTools, registry: ToolRegistry | None = None
) -> ToolRegistry:
    """Register the background tools with schemas restricted to enabled agents."""
    target = registry or ToolRegistry()
    target.register(
        ToolDefinition(
            name="background_task",
            description=(
                "Run a specialist agent in a new background session. "
                "Returns a task id immediately; fetch results with background_output."
            ),
            tags=("delegation", "background"),
            input_schema={
                "type": "object",
                "properties": {
                    "agent": {
                        "type": "string",
                        "enum": tools.enabled_agents,
                        "description": "Agent to run.",
                    },
                    "prompt": {"type": "string", "description": "Task for the agent."},
                    "description": {
                        "type": "string",
                        "description": "Short (3-5 word) task summary.",
                    },
                },
                "required": ["agent", "prompt", "description"],
            },
        ),
        tools.background_task,
    )
    target.register(
        ToolDefinition(
            name="background_output",
            description="Get the status and output of a background task.",
            tags=("delegation", "background"),
            input_schema={
                "type": "object",
                "properties": {
                    "task_id": {"type": "string", "description": "Task id from background_task."}
                },
                "required": ["task_id"],
            },
        ),
        tools.background_output,
    )
    return target
