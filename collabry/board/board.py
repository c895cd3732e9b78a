"""Client-side task board for one project.

The board keeps two things apart: the last task collection confirmed by the
server (``tasks``) and the partition currently shown (``view``). Drops are
applied to ``view`` right away through :func:`apply_drop` and the status change
is sent to the store in the background. A confirmed change triggers a refetch
that rebuilds ``view`` from the server; a rejected change rebuilds ``view`` from
``tasks`` as they were before the drop.
"""

import asyncio
import logging
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from collabry.schemas import ProjectSchema, TaskSchema
from database.enums import TaskStatus

from .drag import DropResult, apply_drop
from .notifier import Notifier
from .partition import Partition, counts, empty_partition, partition
from .status import COLUMNS, BoardColumn
from .store import TaskStore, TaskStoreError

logger = logging.getLogger(__name__)

STATUS_UPDATED_MESSAGE = "Task status updated"
STATUS_FAILED_MESSAGE = "Failed to update task status"
REFRESH_FAILED_MESSAGE = "Failed to refresh tasks"


class TaskBoard:
    def __init__(self, project_id: UUID, store: TaskStore, notifier: Notifier):
        self.project_id = project_id
        self.store = store
        self.notifier = notifier
        self.project: ProjectSchema | None = None
        self.tasks: list[TaskSchema] = []
        self.view: Partition = empty_partition()
        # task id -> destination status of its outstanding update
        self.in_flight: dict[str, TaskStatus] = {}
        self._jobs: set[asyncio.Task] = set()

    @property
    def columns(self) -> list[tuple[BoardColumn, list[TaskSchema]]]:
        return [(column, self.view[column.status]) for column in COLUMNS]

    @property
    def counts(self) -> dict[TaskStatus, int]:
        return counts(self.view)

    async def load(self) -> Partition:
        self._set_authoritative(await self.store.get_project_with_tasks(self.project_id))
        return self.view

    def _set_authoritative(self, project: ProjectSchema) -> None:
        self.project = project
        self.tasks = list(project.tasks)
        self.view = partition(self.tasks)

    def is_in_flight(self, task_id: UUID | str) -> bool:
        return str(task_id) in self.in_flight

    def is_drop_disabled(self, status: TaskStatus) -> bool:
        return status in self.in_flight.values()

    def on_drag_end(self, result: DropResult | dict[str, Any]) -> asyncio.Task | None:
        """Apply a drop to the view and start the durable update.

        Must be called from a running event loop. Returns the background task
        performing the update, or None when the drop changed nothing.
        """
        if not isinstance(result, DropResult):
            try:
                result = DropResult.model_validate(result)
            except ValidationError as exc:
                logger.error("Malformed drop result: %s", exc)
                return None
        outcome = apply_drop(self.view, result)
        if outcome.error is not None:
            logger.error(outcome.error)
            return None
        if outcome.task is None:
            return None
        if self.is_in_flight(outcome.task.id) or self.is_drop_disabled(outcome.task.status):
            logger.info("drop of task %s into %s ignored while an update is pending",
                        outcome.task.id, outcome.task.status)
            return None

        self.view = outcome.partition
        self.in_flight[str(outcome.task.id)] = outcome.task.status
        job = asyncio.create_task(self._commit(outcome.task))
        self._jobs.add(job)
        job.add_done_callback(self._jobs.discard)
        return job

    async def _commit(self, task: TaskSchema) -> None:
        # the lock is held until the refetch has replaced the view
        try:
            try:
                await self.store.update_status(task.id, task.status)
            except TaskStoreError as exc:
                logger.error("Task update error: %s", exc)
                self._rollback()
                return
            except Exception:
                logger.exception("Unexpected task update error for %s", task.id)
                self._rollback()
                return
            self.notifier.notify_success(STATUS_UPDATED_MESSAGE)
            await self.refresh()
        finally:
            self.in_flight.pop(str(task.id), None)

    def _rollback(self) -> None:
        self.view = partition(self.tasks)
        self.notifier.notify_failure(STATUS_FAILED_MESSAGE)

    async def refresh(self) -> bool:
        try:
            project = await self.store.get_project_with_tasks(self.project_id)
        except TaskStoreError as exc:
            logger.error("Task refresh error: %s", exc)
            self.notifier.notify_failure(REFRESH_FAILED_MESSAGE)
            return False
        except Exception:
            logger.exception("Unexpected task refresh error")
            self.notifier.notify_failure(REFRESH_FAILED_MESSAGE)
            return False
        self._set_authoritative(project)
        return True

    async def wait_idle(self) -> None:
        if self._jobs:
            await asyncio.gather(*self._jobs)
