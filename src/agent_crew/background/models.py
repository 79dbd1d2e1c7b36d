"""Background task models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from agent_crew.models.roles import AgentRole  # noqa: TC001 - dataclass field type
from agent_crew.utils import utc_timestamp


class TaskStatus(StrEnum):
    """Lifecycle states of a background task."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Return True for completed and failed."""
        return self in (TaskStatus.COMPLETED, TaskStatus.FAILED)


@dataclass(frozen=True)
class LaunchRequest:
    """Request to run a prompt under a role in a new session."""

    agent: AgentRole
    prompt: str
    description: str
    parent_session_id: str


@dataclass
class BackgroundTask:
    """Mutable task record owned by the task manager."""

    task_id: str
    agent: AgentRole
    prompt: str
    description: str
    parent_session_id: str
    session_id: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    result: str | None = None
    error: str | None = None
    started_at: str = field(default_factory=utc_timestamp)
    completed_at: str | None = None

    def snapshot(self) -> TaskSnapshot:
        """Return an immutable copy of the current state."""
        return TaskSnapshot(
            task_id=self.task_id,
            agent=self.agent,
            prompt=self.prompt,
            description=self.description,
            parent_session_id=self.parent_session_id,
            session_id=self.session_id,
            status=self.status,
            result=self.result,
            error=self.error,
            started_at=self.started_at,
            completed_at=self.completed_at,
        )


@dataclass(frozen=True)
class TaskSnapshot:
    """Read-only copy of a background task."""

    task_id: str
    agent: AgentRole
    prompt: str
    description: str
    parent_session_id: str
    session_id: str | None
    status: TaskStatus
    result: str | None
    error: str | None
    started_at: str
    completed_at: str | None


class TaskHandle:
    """Live, read-only view of a launched task.

    ``session_id`` is None until the platform has created the session; poll
    the handle to observe the change.
    """

    __slots__ = ("_task",)

    def __init__(self, task: BackgroundTask) -> None:
        self._task = task

    @property
    def task_id(self) -> str:
        return self._task.task_id

    @property
    def agent(self) -> AgentRole:
        return self._task.agent

    @property
    def session_id(self) -> str | None:
        return self._task.session_id

    @property
    def status(self) -> TaskStatus:
        return self._task.status

    @property
    def result(self) -> str | None:
        return self._task.result

    @property
    def error(self) -> str | None:
        return self._task.error

    def snapshot(self) -> TaskSnapshot:
        """Return an immutable copy of the task's current state."""
        return self._task.snapshot()

    def __repr__(self) -> str:
        return f"TaskHandle(task_id={self.task_id!r}, status={self.status.value!r})"
