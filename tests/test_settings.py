from __future__ import annotations

from pathlib import Path

import pytest
from agent_crew.config.config_paths import get_config_dir
from agent_crew.models.settings import load_settings


def test_load_settings_defaults(config_dir: Path) -> None:
    settings = load_settings()
    assert settings.config_dir == str(config_dir)
    assert settings.poll_interval == 2.0
    assert settings.notify_parent is True
    assert settings.log_level == "INFO"


def test_config_dir_defaults_to_xdg(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("AGENT_CREW_CONFIG_DIR")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    settings = load_settings()
    assert settings.config_dir == str(tmp_path / "xdg" / "agent-crew")
    assert get_config_dir(settings) == tmp_path / "xdg" / "agent-crew"


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("AGENT_CREW_POLL_INTERVAL", "0.5")
    monkeypatch.setenv("AGENT_CREW_NOTIFY_PARENT", "false")
    monkeypatch.setenv("AGENT_CREW_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.poll_interval == 0.5
    assert settings.notify_parent is False
    assert settings.log_level == "DEBUG"


def test_non_positive_poll_interval_rejected(monkeypatch) -> None:
    monkeypatch.setenv("AGENT_CREW_POLL_INTERVAL", "0")
    with pytest.raises(ValueError, match="AGENT_CREW_POLL_INTERVAL"):
        load_settings()
