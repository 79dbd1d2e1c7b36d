"""Tools package for agent crew.

This package provides:
- ToolRegistry: registry for tool definitions and handlers
- BackgroundTools: the delegation entry point (background_task, background_output)
"""

from agent_crew.tools.background import (
    MISSING_SESSION_ERROR,
    BackgroundTools,
    register_background_tools,
)
from agent_crew.tools.registry import (
    RegisteredTool,
    ToolDefinition,
    ToolDetailLevel,
    ToolRegistry,
)

__all__ = [
    "MISSING_SESSION_ERROR",
    "BackgroundTools",
    "RegisteredTool",
    "ToolDefinition",
    "ToolDetailLevel",
    "ToolRegistry",
    "register_background_tools",
]
