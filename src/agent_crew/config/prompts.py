"""Load per-agent prompt overrides from the config directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from agent_crew.config.config_paths import get_prompt_paths

if TYPE_CHECKING:
    from pathlib import Path

    from agent_crew.models.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentPrompt:
    """Custom prompt text found on disk for one agent."""

    prompt: str | None = None
    append: str | None = None


def _read_prompt(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        logger.warning("Could not read prompt file %s", path, exc_info=True)
        return None
    return text.strip() or None


def load_agent_prompt(agent_name: str, settings: Settings | None = None) -> AgentPrompt:
    """Return the replacement and append prompts for ``agent_name``, if present."""
    prompt_path, append_path = get_prompt_paths(agent_name, settings)
    prompt = _read_prompt(prompt_path)
    append = _read_prompt(append_path)
    if prompt or append:
        logger.debug(
            "Loaded custom prompt for %s (replace=%s, append=%s)",
            agent_name,
            prompt is not None,
            append is not None,
        )
    return AgentPrompt(prompt=prompt, append=append)
