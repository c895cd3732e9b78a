
from uuid import UUID

from fastapi import Depends

from collabry.exceptions import PermissionDeniedException, TaskNotFoundException
from database.models import Task, User
from database.repositories import ProjectMemberRepository, TaskRepository

from .database import get_member_repo, get_task_repo
from .get_project import is_project_viewer
from .get_user import get_user_db


async def get_task(task_id: UUID,
                   tr: TaskRepository = Depends(get_task_repo)
                   ) -> Task:
    task = await tr.get_by_id(task_id)
    if task is None:
        raise TaskNotFoundException(task_id)
    return task


async def get_task_viewer(task: Task = Depends(get_task),
                          user: User = Depends(get_user_db),
                          pmr: ProjectMemberRepository = Depends(get_member_repo)
                          ) -> User:
    # invisible tasks are reported as missing
    if user.id in (task.creator_id, task.assignee_id):
        return user
    if not await is_project_viewer(task.project, user, pmr):
        raise TaskNotFoundException(task.id)
    return user


async def get_task_editor(task: Task = Depends(get_task),
                          user: User = Depends(get_task_viewer)
                          ) -> User:
    if user.id not in (task.creator_id, task.assignee_id, task.project.creator_id):
        raise PermissionDeniedException()
    return user


async def get_task_creator(task: Task = Depends(get_task),
                           user: User = Depends(get_task_viewer)
                           ) -> User:
    if user.id != task.creator_id:
        raise PermissionDeniedException()
    return user
