"""Background task management for delegated agent work."""

from agent_crew.background.manager import BackgroundTaskManager
from agent_crew.background.models import (
    BackgroundTask,
    LaunchRequest,
    TaskHandle,
    TaskSnapshot,
    TaskStatus,
)
from agent_crew.background.platform import (
    SessionPlatform,
    StrandsSessionPlatform,
    extract_result_text,
)

__all__ = [
    "BackgroundTask",
    "BackgroundTaskManager",
    "LaunchRequest",
    "SessionPlatform",
    "StrandsSessionPlatform",
    "TaskHandle",
    "TaskSnapshot",
    "TaskStatus",
    "extract_result_text",
]
