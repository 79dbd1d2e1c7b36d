"""Delegation enforcement through the background_task tool."""

from __future__ import annotations

import pytest
from agent_crew.background.manager import BackgroundTaskManager
from agent_crew.background.models import LaunchRequest, TaskStatus
from agent_crew.agents.builder import create_agents, get_enabled_roles
from agent_crew.models.config import ExperimentalConfig, PluginConfig
from agent_crew.models.roles import GRANULAR_ROLES, AgentRole
from agent_crew.tools.background import BackgroundTools, register_background_tools

def _enabled_roles(*, granular: bool = False) -> frozenset[AgentRole]:
    config = PluginConfig(experimental=ExperimentalConfig(granular_fixers=granular))
    return get_enabled_roles(create_agents(config))


def _tools(platform, enabled=None) -> tuple[BackgroundTaskManager, BackgroundTools]:
    manager = BackgroundTaskManager(platform, notify_parent=False)
    return manager, BackgroundTools(manager, enabled if enabled is not None else _enabled_roles())


async def _tracked_session(manager: BackgroundTaskManager, agent: AgentRole, settle) -> str:
    handle = manager.launch(
        LaunchRequest(
            agent=agent,
            prompt="work",
            description=f"{agent.value} task",
            parent_session_id="root-session",
        )
    )
    await settle()
    assert handle.session_id is not None
    return handle.session_id


@pytest.mark.asyncio
async def test_allowed_delegation_succeeds(platform, settle) -> None:
    manager, tools = _tools(platform)
    session_id = await _tracked_session(manager, AgentRole.ORCHESTRATOR, settle)

    result = await tools.background_task(
        {"agent": "explorer", "prompt": "search", "description": "search task"},
        {"sessionID": session_id},
    )

    assert "Background task launched" in result
    assert "Task ID: bg_" in result
    launched = manager.list_tasks(session_id)
    assert len(launched) == 1
    assert launched[0].agent is AgentRole.EXPLORER


@pytest.mark.asyncio
async def test_untracked_root_session_acts_as_orchestrator(platform, settle) -> None:
    _, tools = _tools(platform)
    result = await tools.background_task(
        {"agent": "oracle", "prompt": "review", "description": "review"},
        {"sessionID": "user-root"},
    )
    await settle()
    assert "Task ID:" in result


@pytest.mark.asyncio
async def test_blocked_delegation_returns_message(platform, settle) -> None:
    manager, tools = _tools(platform)
    session_id = await _tracked_session(manager, AgentRole.FIXER, settle)

    result = await tools.background_task(
        {"agent": "oracle", "prompt": "research", "description": "research task"},
        {"sessionID": session_id},
    )

    assert result == "Agent 'oracle' is not allowed. Allowed agents: explorer"
    assert manager.list_tasks(session_id) == []


@pytest.mark.asyncio
async def test_leaf_role_gets_empty_allowed_list(platform, settle) -> None:
    manager, tools = _tools(platform)
    explorer_session = await _tracked_session(manager, AgentRole.EXPLORER, settle)

    result = await tools.background_task(
        {"agent": "fixer", "prompt": "fix", "description": "fix task"},
        {"sessionID": explorer_session},
    )
    assert result == "Agent 'fixer' is not allowed. Allowed agents: "

    designer_session = await _tracked_session(manager, AgentRole.DESIGNER, settle)
    designer_result = await tools.background_task(
        {"agent": "oracle", "prompt": "research", "description": "research"},
        {"sessionID": designer_session},
    )
    assert designer_result == "Agent 'oracle' is not allowed. Allowed agents: explorer"


@pytest.mark.asyncio
async def test_unknown_agent_blocked(platform, settle) -> None:
    manager, tools = _tools(platform)
    session_id = await _tracked_session(manager, AgentRole.FIXER, settle)

    result = await tools.background_task(
        {"agent": "unknown-agent", "prompt": "test", "description": "test"},
        {"sessionID": session_id},
    )
    assert result == "Agent 'unknown-agent' is not allowed. Allowed agents: explorer"


@pytest.mark.asyncio
async def test_disabled_granular_role_is_rejected_for_orchestrator(platform) -> None:
    assert GRANULAR_ROLES.keys().isdisjoint(_enabled_roles())
    _, tools = _tools(platform)
    result = await tools.background_task(
        {"agent": "quick-fixer", "prompt": "p", "description": "d"},
        {"sessionID": "root"},
    )
    assert result == (
        "Agent 'quick-fixer' is not allowed. "
        "Allowed agents: explorer, librarian, oracle, designer, fixer"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("context", [{}, None, {"sessionID": ""}, "not-a-context"])
async def test_missing_tool_context_raises(platform, context) -> None:
    _, tools = _tools(platform)
    with pytest.raises(ValueError, match="Invalid toolContext: missing sessionID"):
        await tools.background_task(
            {"agent": "explorer", "prompt": "test", "description": "test"}, context
        )


@pytest.mark.asyncio
async def test_background_output_reports_progress(platform, settle) -> None:
    manager, tools = _tools(platform)
    await tools.background_task(
        {"agent": "explorer", "prompt": "search", "description": "find"},
        {"sessionID": "root"},
    )
    await settle()
    task = manager.list_tasks("root")[0]

    running = await tools.background_output({"task_id": task.task_id})
    assert "Status: running" in running

    platform.finish(task.session_id, "three matches")
    await manager.poll_running_tasks()
    assert manager.status(task.task_id) == TaskStatus.COMPLETED

    finished = await tools.background_output({"task_id": task.task_id})
    assert "Status: completed" in finished
    assert finished.endswith("three matches")
    assert await tools.background_output({"task_id": "bg_nope"}) == "Task not found: bg_nope"


def test_registry_schema_lists_enabled_agents(platform) -> None:
    _, tools = _tools(platform)
    registry = register_background_tools(tools)

    assert registry.names() == ["background_task", "background_output"]
    schema = registry.get("background_task").definition.input_schema
    assert schema["properties"]["agent"]["enum"] == [
        "explorer",
        "librarian",
        "oracle",
        "designer",
        "fixer",
    ]


def test_registry_schema_includes_granular_roles_when_enabled(platform) -> None:
    _, tools = _tools(platform, enabled=_enabled_roles(granular=True))
    schema = register_background_tools(tools).get("background_task").definition.input_schema
    assert "quick-fixer" in schema["properties"]["agent"]["enum"]
    assert "orchestrator" not in schema["properties"]["agent"]["enum"]
