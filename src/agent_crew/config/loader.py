"""Load crew configuration from layered TOML files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path  # noqa: TC003 - needed at runtime for file operations
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from agent_crew.config.config_paths import get_config_paths
from agent_crew.models.config import PluginConfig

if TYPE_CHECKING:
    from agent_crew.models.settings import Settings

logger = logging.getLogger(__name__)


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file, return empty dict if not found."""
    if not path.exists():
        return {}
    with path.open("rb") as file:
        try:
            return tomllib.load(file)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ValueError(msg) from exc


def merge_config_data(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge two raw config mappings; ``override`` wins.

    Per-agent tables and the experimental table are merged key by key so a
    project file can change one field without restating the rest.
    """
    merged = dict(base)
    for key, value in override.items():
        if key == "agents" and isinstance(value, dict):
            agents = {name: dict(entry) for name, entry in base.get("agents", {}).items()}
            for name, entry in value.items():
                agents[name] = {**agents.get(name, {}), **entry}
            merged["agents"] = agents
        elif key == "experimental" and isinstance(value, dict):
            merged["experimental"] = {**base.get("experimental", {}), **value}
        else:
            merged[key] = value
    return merged


def parse_plugin_config(data: dict[str, Any]) -> PluginConfig:
    """Validate raw config data into a PluginConfig."""
    try:
        return PluginConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Configuration validation failed: {exc}"
        raise ValueError(msg) from exc


def load_plugin_config(
    cwd: str | Path | None = None, settings: Settings | None = None
) -> PluginConfig:
    """Load user and project configuration files into a single PluginConfig."""
    data: dict[str, Any] = {}
    for path in get_config_paths(cwd, settings):
        logger.debug("Loading crew config from %s", path)
        data = merge_config_data(data, _load_toml_file(path))
    return parse_plugin_config(data)
