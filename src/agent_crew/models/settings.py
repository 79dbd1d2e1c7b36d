"""Pydantic models for application settings."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_APP_DIR = "agent-crew"


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    config_dir: str
    poll_interval: float = 2.0
    notify_parent: bool = True
    log_level: str = "INFO"


def default_config_dir() -> Path:
    """Return the XDG-style config directory for the crew."""
    xdg_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
    return base / DEFAULT_APP_DIR


def load_settings() -> Settings:
    """Load settings from environment variables with defaults."""
    load_dotenv()

    poll_interval = float(os.getenv("AGENT_CREW_POLL_INTERVAL", "2"))
    if poll_interval <= 0:
        msg = "AGENT_CREW_POLL_INTERVAL must be a positive number of seconds."
        raise ValueError(msg)

    return Settings(
        config_dir=os.getenv("AGENT_CREW_CONFIG_DIR") or str(default_config_dir()),
        poll_interval=poll_interval,
        notify_parent=os.getenv("AGENT_CREW_NOTIFY_PARENT", "true").lower() == "true",
        log_level=os.getenv("AGENT_CREW_LOG_LEVEL", "INFO").upper(),
    )
