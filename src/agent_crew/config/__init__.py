from agent_crew.config.config_paths import (
    get_config_dir,
    get_config_paths,
    get_project_config_path,
    get_prompt_paths,
    get_user_config_path,
    set_config_dir,
)
from agent_crew.config.integrations import get_agent_mcp_list, get_skill_permissions_for_agent
from agent_crew.config.loader import load_plugin_config, merge_config_data, parse_plugin_config
from agent_crew.config.models import DEFAULT_MODELS, get_agent_override, resolve_model
from agent_crew.config.prompts import AgentPrompt, load_agent_prompt
from agent_crew.models.settings import Settings, load_settings

__all__ = [
    "DEFAULT_MODELS",
    "AgentPrompt",
    "Settings",
    "get_agent_mcp_list",
    "get_agent_override",
    "get_config_dir",
    "get_config_paths",
    "get_project_config_path",
    "get_prompt_paths",
    "get_skill_permissions_for_agent",
    "get_user_config_path",
    "load_agent_prompt",
    "load_plugin_config",
    "load_settings",
    "merge_config_data",
    "parse_plugin_config",
    "resolve_model",
    "set_config_dir",
]
