"""Unified configuration path resolution.

Crew configuration is layered:
1. User directory (AGENT_CREW_CONFIG_DIR, else $XDG_CONFIG_HOME/agent-crew)
2. Project directory (<cwd>/.agent_crew)

Project files override user files key by key. Prompt files only live in the
user directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from agent_crew.models.settings import default_config_dir

if TYPE_CHECKING:
    from agent_crew.models.settings import Settings

CONFIG_FILENAME = "agent_crew.toml"
PROJECT_CONFIG_DIRNAME = ".agent_crew"
PROMPT_SUFFIX = ".md"
APPEND_PROMPT_SUFFIX = "_append.md"

# Module-level override (can be set via set_config_dir)
_config_dir_override: str | None = None


def set_config_dir(path: str | None) -> None:
    """Set a module-level config directory override.

    Args:
        path: The config directory path, or None to clear override.
    """
    global _config_dir_override  # noqa: PLW0603
    _config_dir_override = path


def get_config_dir(settings: Settings | None = None) -> Path:
    """Get the user config directory.

    Priority:
    1. Module-level override (set via set_config_dir)
    2. Settings object (if provided)
    3. AGENT_CREW_CONFIG_DIR environment variable
    4. $XDG_CONFIG_HOME/agent-crew, else ~/.config/agent-crew
    """
    if _config_dir_override:
        return Path(_config_dir_override).expanduser()

    if settings is not None:
        return Path(settings.config_dir).expanduser()

    config_dir = os.getenv("AGENT_CREW_CONFIG_DIR")
    if config_dir:
        return Path(config_dir).expanduser()
    return default_config_dir()


def get_user_config_path(settings: Settings | None = None) -> Path:
    """Return the user-level config file path (may not exist)."""
    return get_config_dir(settings) / CONFIG_FILENAME


def get_project_config_path(cwd: str | Path) -> Path:
    """Return the project-level config file path (may not exist)."""
    return Path(cwd) / PROJECT_CONFIG_DIRNAME / CONFIG_FILENAME


def get_config_paths(cwd: str | Path | None = None, settings: Settings | None = None) -> list[Path]:
    """Return existing config files in loading order (user first, project last)."""
    candidates = [get_user_config_path(settings)]
    if cwd is not None:
        candidates.append(get_project_config_path(cwd))
    return [path for path in candidates if path.exists()]


def get_prompt_paths(agent_name: str, settings: Settings | None = None) -> tuple[Path, Path]:
    """Return (replacement, append) prompt file paths for an agent."""
    base = get_config_dir(settings)
    return base / f"{agent_name}{PROMPT_SUFFIX}", base / f"{agent_name}{APPEND_PROMPT_SUFFIX}"
