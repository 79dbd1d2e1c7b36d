"""Logging helpers for background task correlation."""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

current_task_id: ContextVar[str | None] = ContextVar("current_task_id", default=None)


class TaskContextFilter(logging.Filter):
    """Attach the active background task id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject task_id into the log record."""
        record.task_id = current_task_id.get() or "-"
        return True


def install_task_log_filter(loggers: Iterable[logging.Logger] | None = None) -> None:
    """Install task context filters for structured logging.

    Args:
        loggers: Optional iterable of loggers to attach the filter to. Defaults to root logger.
    """
    targets = list(loggers) if loggers is not None else [logging.getLogger()]
    for logger in targets:
        if any(isinstance(flt, TaskContextFilter) for flt in logger.filters):
            continue
        logger.addFilter(TaskContextFilter())


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with task ids in the format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(task_id)s] %(name)s: %(message)s",
    )
    root = logging.getLogger()
    for handler in root.handlers:
        install_task_log_filter_on_handler(handler)
    install_task_log_filter([root])


def install_task_log_filter_on_handler(handler: logging.Handler) -> None:
    """Attach the filter to a handler so records from child loggers carry task_id."""
    if any(isinstance(flt, TaskContextFilter) for flt in handler.filters):
        return
    handler.addFilter(TaskContextFilter())
