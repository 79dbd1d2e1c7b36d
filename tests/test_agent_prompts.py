from __future__ import annotations

from pathlib import Path

from agent_crew.agents.builder import create_agents
from agent_crew.config.prompts import load_agent_prompt
from agent_crew.models.config import PluginConfig

GRANULAR = PluginConfig.model_validate({"experimental": {"granularFixers": True}})


def _find(agents, name: str):
    return next(agent for agent in agents if agent.name == name)


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_long_fixer_uses_custom_prompt_file(config_dir: Path) -> None:
    _write(config_dir / "long-fixer.md", "Custom long-fixer prompt")
    agents = create_agents(GRANULAR)
    assert _find(agents, "long-fixer").config.prompt == "Custom long-fixer prompt"


def test_quick_fixer_uses_custom_prompt_file(config_dir: Path) -> None:
    _write(config_dir / "quick-fixer.md", "Custom quick-fixer prompt")
    agents = create_agents(GRANULAR)
    assert _find(agents, "quick-fixer").config.prompt == "Custom quick-fixer prompt"


def test_append_file_keeps_default_prompt(config_dir: Path) -> None:
    _write(config_dir / "long-fixer_append.md", "Additional instructions for long-fixer")
    prompt = _find(create_agents(GRANULAR), "long-fixer").config.prompt
    assert "Additional instructions for long-fixer" in prompt
    assert "Long-Fixer" in prompt


def test_append_file_follows_replacement_prompt(config_dir: Path) -> None:
    _write(config_dir / "explorer.md", "Replacement")
    _write(config_dir / "explorer_append.md", "Extra")
    prompt = _find(create_agents(), "explorer").config.prompt
    assert prompt == "Replacement\n\nExtra"


def test_default_prompts_without_custom_files() -> None:
    agents = create_agents(GRANULAR)
    long_fixer = _find(agents, "long-fixer").config.prompt
    quick_fixer = _find(agents, "quick-fixer").config.prompt
    assert "Long-Fixer" in long_fixer
    assert "thorough implementation specialist" in long_fixer
    assert "Quick-Fixer" in quick_fixer
    assert "ultra-fast implementation specialist" in quick_fixer


def test_prompt_dir_follows_xdg_config_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("AGENT_CREW_CONFIG_DIR")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "home"))
    _write(tmp_path / "home" / "agent-crew" / "oracle.md", "From XDG")
    assert load_agent_prompt("oracle").prompt == "From XDG"


def test_blank_prompt_files_are_ignored(config_dir: Path) -> None:
    _write(config_dir / "oracle.md", "   \n")
    loaded = load_agent_prompt("oracle")
    assert loaded.prompt is None
    assert loaded.append is None
