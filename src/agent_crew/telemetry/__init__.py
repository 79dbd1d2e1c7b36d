"""Telemetry helpers for agent_crew."""

from agent_crew.telemetry.logging_utils import (
    TaskContextFilter,
    configure_logging,
    current_task_id,
    install_task_log_filter,
    install_task_log_filter_on_handler,
)

__all__ = [
    "TaskContextFilter",
    "configure_logging",
    "current_task_id",
    "install_task_log_filter",
    "install_task_log_filter_on_handler",
]
