from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from agent_crew.config.config_paths import set_config_dir


class FakePlatform:
    """In-memory session platform with controllable outcomes."""

    def __init__(self) -> None:
        self.created: list[tuple[str, str]] = []
        self.prompts: list[tuple[str, str, str]] = []
        self.notices: list[tuple[str, str]] = []
        self.states: dict[str, str] = {}
        self.messages: dict[str, list[dict]] = {}
        self.fail_create = False
        self.fail_prompt = False
        self._count = 0

    async def create_session(self, parent_id: str, title: str) -> str:
        if self.fail_create:
            msg = "platform unavailable"
            raise RuntimeError(msg)
        self._count += 1
        session_id = f"test-session-{self._count}"
        self.created.append((parent_id, title))
        self.states[session_id] = "busy"
        self.messages[session_id] = []
        return session_id

    async def prompt(self, session_id: str, agent, text: str) -> None:
        if self.fail_prompt:
            msg = "prompt rejected"
            raise RuntimeError(msg)
        self.prompts.append((session_id, str(agent), text))

    async def get_session_status(self, session_id: str) -> str:
        return self.states[session_id]

    async def get_messages(self, session_id: str) -> list[dict]:
        return list(self.messages[session_id])

    async def send_notice(self, session_id: str, text: str) -> None:
        self.notices.append((session_id, text))

    def finish(self, session_id: str, text: str) -> None:
        self.messages[session_id].append({"role": "assistant", "text": text})
        self.states[session_id] = "idle"


async def settle(rounds: int = 5) -> None:
    """Let scheduled continuations run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("AGENT_CREW_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("AGENT_CREW_POLL_INTERVAL", raising=False)
    monkeypatch.delenv("AGENT_CREW_NOTIFY_PARENT", raising=False)
    monkeypatch.delenv("AGENT_CREW_LOG_LEVEL", raising=False)
    set_config_dir(None)
    return config_dir


@pytest.fixture
def config_dir(_isolate_config: Path) -> Path:
    return _isolate_config


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture(name="settle")
def _settle_fixture():
    return settle
