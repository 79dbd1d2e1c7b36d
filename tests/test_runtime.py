from __future__ import annotations

from pathlib import Path

import pytest
from agent_crew.background.platform import StrandsSessionPlatform
from agent_crew.models.config import PluginConfig
from agent_crew.models.settings import load_settings
from agent_crew.runtime import CrewRuntime


def test_runtime_loads_config_from_files(config_dir: Path) -> None:
    (config_dir / "agent_crew.toml").write_text(
        '[experimental]\ngranular_fixers = true\n\n[agents.oracle]\nmodel = "cfg/oracle"\n',
        encoding="utf-8",
    )
    runtime = CrewRuntime()

    names = [definition.name.value for definition in runtime.definitions]
    assert names[0] == "orchestrator"
    assert "long-fixer" in names
    assert isinstance(runtime.platform, StrandsSessionPlatform)
    assert runtime.agent_configs()["oracle"]["model"] == "cfg/oracle"
    assert runtime.registry.names() == ["background_task", "background_output"]
    assert runtime.registry.list("name") == [
        {"name": "background_task"},
        {"name": "background_output"},
    ]


@pytest.mark.asyncio
async def test_runtime_delegation_end_to_end(platform, settle) -> None:
    runtime = CrewRuntime(
        settings=load_settings(), config=PluginConfig(), platform=platform
    )
    handler = runtime.registry.get("background_task").handler

    result = await handler(
        {"agent": "explorer", "prompt": "where is main", "description": "find main"},
        {"sessionID": "root"},
    )
    await settle()

    assert "Task ID:" in result
    task = runtime.manager.list_tasks("root")[0]
    assert task.session_id == "test-session-1"

    platform.finish(task.session_id, "src/main.py")
    await runtime.manager.poll_running_tasks()
    output = await runtime.registry.get("background_output").handler({"task_id": task.task_id})
    assert output.endswith("src/main.py")
    await runtime.shutdown()


@pytest.mark.parametrize(("setup_logging", "expected"), [(False, []), (True, ["DEBUG"])])
def test_logging_setup_is_opt_in(monkeypatch, platform, setup_logging, expected) -> None:
    calls: list[str] = []
    monkeypatch.setattr("agent_crew.runtime.configure_logging", calls.append)
    monkeypatch.setenv("AGENT_CREW_LOG_LEVEL", "debug")

    CrewRuntime(config=PluginConfig(), platform=platform, setup_logging=setup_logging)
    assert calls == expected
