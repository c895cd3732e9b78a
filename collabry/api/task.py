

import logging
from datetime import UTC, datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from redis.asyncio import Redis

from collabry.depends import (get_project, get_project_viewer, get_task,
                              get_task_creator, get_task_editor,
                              get_task_repo, get_task_viewer, get_user_db)
from collabry.exceptions import *
from collabry.schemas import (TaskCreateSchema, TaskSchema,
                              TaskStatusUpdateSchema, TaskUpdateSchema)
from collabry.websocket.publish import mark_task_update
from database.enums import TaskStatus
from database.models import Project, Task, User
from database.redis import get_redis_client
from database.repositories import TaskRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/task", tags=["task"])


def check_assignee(project: Project, assignee_id: UUID | None) -> None:
    if assignee_id is None:
        return
    if assignee_id != project.creator_id and \
            assignee_id not in [m.user_id for m in project.members]:
        raise InvalidAssigneeException()


@router.get("")
async def list_tasks(project_id: UUID | None = None,
                     user: User = Depends(get_user_db),
                     tr: TaskRepository = Depends(get_task_repo)
                     ) -> list[TaskSchema]:
    return [TaskSchema.from_db(t) for t in await tr.get_visible(user, project_id)]


@router.post("/{project_id}")
async def create_task(new_task: TaskCreateSchema,
                      project: Project = Depends(get_project),
                      user: User = Depends(get_project_viewer),
                      redis: Redis = Depends(get_redis_client),
                      tr: TaskRepository = Depends(get_task_repo)
                      ) -> TaskSchema:
    check_assignee(project, new_task.assignee_id)
    if new_task.due_date is not None and \
            new_task.due_date <= datetime.now(UTC).replace(tzinfo=None):
        raise DueDateInPastException()
    task = await tr.create(project=project,
                           creator=user,
                           title=new_task.title,
                           description=new_task.description,
                           priority=new_task.priority,
                           assignee_id=new_task.assignee_id,
                           due_date=new_task.due_date)
    if task is None:
        raise SendFeedbackToAdminException()
    await mark_task_update(redis, project.id)
    logger.info("user %s created task %s in project %s", user.id, task.id, project.id)
    return TaskSchema.from_db(task)


@router.get("/{task_id}")
async def get_by_id(task: Task = Depends(get_task),
                    user: User = Depends(get_task_viewer)
                    ) -> TaskSchema:
    return TaskSchema.from_db(task)


@router.patch("/{task_id}")
async def update_task(update_data: TaskUpdateSchema,
                      task: Task = Depends(get_task),
                      user: User = Depends(get_task_editor),
                      redis: Redis = Depends(get_redis_client),
                      tr: TaskRepository = Depends(get_task_repo)
                      ) -> TaskSchema:
    if not update_data.model_dump(exclude_none=True):
        raise NoFieldsToUpdateException()
    check_assignee(task.project, update_data.assignee_id)
    await tr.update(task,
                    title=update_data.title,
                    description=update_data.description,
                    priority=update_data.priority,
                    assignee_id=update_data.assignee_id,
                    due_date=update_data.due_date)
    await mark_task_update(redis, task.project_id)
    return TaskSchema.from_db(task)


@router.patch("/{task_id}/status")
async def update_task_status(status_data: TaskStatusUpdateSchema,
                             task: Task = Depends(get_task),
                             user: User = Depends(get_task_editor),
                             redis: Redis = Depends(get_redis_client),
                             tr: TaskRepository = Depends(get_task_repo)
                             ) -> TaskSchema:
    if not TaskStatus.is_valid(status_data.status):
        raise InvalidTaskStatusException(status_data.status)
    await tr.update_status(task, TaskStatus(status_data.status))
    await mark_task_update(redis, task.project_id)
    logger.info("user %s moved task %s to %s", user.id, task.id, status_data.status)
    return TaskSchema.from_db(task)


@router.delete("/{task_id}")
async def delete_task(task: Task = Depends(get_task),
                      user: User = Depends(get_task_creator),
                      redis: Redis = Depends(get_redis_client),
                      tr: TaskRepository = Depends(get_task_repo)
                      ):
    await tr.delete(task)
    await mark_task_update(redis, task.project_id)
    return {"message": "OK"}
