"""Background task manager.

``launch`` returns a handle immediately and creates the platform session in a
continuation scheduled on the running event loop. The continuation fills in
``session_id``, moves the task to ``running`` and records which role the new
session runs as, so later delegations from that session can be authorized.

Task completion is observed either by polling the platform
(``poll_running_tasks`` / ``start_polling``) or by feeding platform events to
``handle_event``.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

from agent_crew.background.models import BackgroundTask, TaskHandle, TaskSnapshot, TaskStatus
from agent_crew.background.platform import extract_result_text
from agent_crew.telemetry.logging_utils import current_task_id
from agent_crew.utils import new_task_id, utc_timestamp

if TYPE_CHECKING:
    from collections.abc import Mapping

    from agent_crew.background.models import LaunchRequest
    from agent_crew.background.platform import SessionPlatform
    from agent_crew.models.roles import AgentRole

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 2.0


class BackgroundTaskManager:
    """Launch and track delegated tasks on an execution platform."""

    def __init__(
        self,
        platform: SessionPlatform,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        notify_parent: bool = True,
        auto_poll: bool = False,
    ) -> None:
        self._platform = platform
        self._poll_interval = poll_interval
        self._notify_parent = notify_parent
        self._auto_poll = auto_poll
        self._tasks: dict[str, BackgroundTask] = {}
        self._session_agents: dict[str, AgentRole] = {}
        self._pending: set[asyncio.Task[None]] = set()
        self._poller: asyncio.Task[None] | None = None

    # ------------------------------------------------------------------
    # Launch
    # ------------------------------------------------------------------

    def launch(self, request: LaunchRequest) -> TaskHandle:
        """Register a task and start creating its session without blocking.

        Must be called while an asyncio event loop is running.
        """
        loop = asyncio.get_running_loop()
        task = BackgroundTask(
            task_id=new_task_id(),
            agent=request.agent,
            prompt=request.prompt,
            description=request.description,
            parent_session_id=request.parent_session_id,
        )
        self._tasks[task.task_id] = task
        logger.info(
            "Launching task %s for %s (parent=%s)",
            task.task_id,
            task.agent.value,
            task.parent_session_id,
        )

        continuation = loop.create_task(self._start(task), name=f"launch-{task.task_id}")
        self._pending.add(continuation)
        continuation.add_done_callback(self._pending.discard)

        if self._auto_poll:
            self.start_polling()
        return TaskHandle(task)

    async def _start(self, task: BackgroundTask) -> None:
        token = current_task_id.set(task.task_id)
        try:
            try:
                session_id = await self._platform.create_session(
                    task.parent_session_id, f"{task.description} (@{task.agent.value})"
                )
            except Exception as exc:
                logger.exception("Session creation failed for task %s", task.task_id)
                self._fail(task, f"Session creation failed: {exc}")
                await self._notify(task)
                return

            task.session_id = session_id
            task.status = TaskStatus.RUNNING
            self._session_agents.setdefault(session_id, task.agent)
            logger.debug("Task %s running in session %s", task.task_id, session_id)

            try:
                await self._platform.prompt(session_id, task.agent, task.prompt)
            except Exception as exc:
                logger.exception("Prompt failed for task %s", task.task_id)
                if not task.status.is_terminal:
                    self._fail(task, f"Prompt failed: {exc}")
                    await self._notify(task)
        finally:
            current_task_id.reset(token)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def status(self, task_id: str) -> TaskStatus | None:
        """Return the task's status, or None for unknown ids."""
        task = self._tasks.get(task_id)
        return task.status if task else None

    def get_task(self, task_id: str) -> TaskSnapshot | None:
        """Return a snapshot of the task, or None for unknown ids."""
        task = self._tasks.get(task_id)
        return task.snapshot() if task else None

    def get_result(self, task_id: str) -> str | None:
        """Return the task's result text once it has completed."""
        task = self._tasks.get(task_id)
        if task is None or task.status != TaskStatus.COMPLETED:
            return None
        return task.result

    def list_tasks(self, parent_session_id: str | None = None) -> list[TaskSnapshot]:
        """Return snapshots of all tasks, optionally filtered by parent session."""
        return [
            task.snapshot()
            for task in self._tasks.values()
            if parent_session_id is None or task.parent_session_id == parent_session_id
        ]

    def get_session_agent(self, session_id: str) -> AgentRole | None:
        """Return the role a tracked session was launched under."""
        return self._session_agents.get(session_id)

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    async def poll_running_tasks(self) -> None:
        """Check every running task once and record completions."""
        for task in list(self._tasks.values()):
            if task.status != TaskStatus.RUNNING or task.session_id is None:
                continue
            try:
                state = await self._platform.get_session_status(task.session_id)
            except Exception:
                logger.warning("Status check failed for task %s", task.task_id, exc_info=True)
                continue
            if task.status != TaskStatus.RUNNING:
                continue
            if state == "idle":
                await self._complete(task)
            elif state == "error":
                self._fail(task, "Session reported an error")
                await self._notify(task)

    async def handle_event(self, event: Mapping[str, Any]) -> None:
        """Apply a terminal platform event (``session.idle`` / ``session.error``)."""
        event_type = event.get("type")
        properties = event.get("properties") or {}
        session_id = properties.get("sessionID")
        if not session_id:
            return
        task = self._find_by_session(session_id)
        if task is None or task.status != TaskStatus.RUNNING:
            return
        if event_type == "session.idle":
            await self._complete(task)
        elif event_type == "session.error":
            self._fail(task, str(properties.get("error") or "Session reported an error"))
            await self._notify(task)

    def start_polling(self) -> None:
        """Start the background poll loop if it is not already running."""
        if self._poller is not None and not self._poller.done():
            return
        loop = asyncio.get_running_loop()
        self._poller = loop.create_task(self._poll_loop(), name="background-task-poller")

    async def stop_polling(self) -> None:
        """Stop the poll loop and wait for it to exit."""
        poller, self._poller = self._poller, None
        if poller is None or poller.done():
            return
        poller.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await poller

    async def _poll_loop(self) -> None:
        while self._has_live_tasks():
            await asyncio.sleep(self._poll_interval)
            await self.poll_running_tasks()
        logger.debug("No live background tasks; poll loop exiting")

    def _has_live_tasks(self) -> bool:
        return any(not task.status.is_terminal for task in self._tasks.values())

    def _find_by_session(self, session_id: str) -> BackgroundTask | None:
        for task in self._tasks.values():
            if task.session_id == session_id:
                return task
        return None

    async def _complete(self, task: BackgroundTask) -> None:
        if task.session_id is None:
            return
        try:
            messages = await self._platform.get_messages(task.session_id)
        except Exception:
            logger.warning("Could not fetch messages for task %s", task.task_id, exc_info=True)
            return
        if task.status.is_terminal:
            return
        task.result = extract_result_text(messages) or "(No output)"
        task.status = TaskStatus.COMPLETED
        task.completed_at = utc_timestamp()
        logger.info("Task %s completed", task.task_id)
        await self._notify(task)

    def _fail(self, task: BackgroundTask, error: str) -> None:
        task.error = error
        task.status = TaskStatus.FAILED
        task.completed_at = utc_timestamp()
        logger.warning("Task %s failed: %s", task.task_id, error)

    async def _notify(self, task: BackgroundTask) -> None:
        if not self._notify_parent:
            return
        label = "COMPLETED" if task.status == TaskStatus.COMPLETED else "FAILED"
        text = (
            f"[BACKGROUND TASK {label}] Task {task.task_id} ({task.description}) "
            f'finished. Use background_output with task_id="{task.task_id}" to get results.'
        )
        try:
            await self._platform.send_notice(task.parent_session_id, text)
        except Exception:
            logger.warning(
                "Could not notify parent session %s", task.parent_session_id, exc_info=True
            )
