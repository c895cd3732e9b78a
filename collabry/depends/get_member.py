
from uuid import UUID

from fastapi import Depends

from collabry.exceptions import (CannotRemoveProjectCreatorException,
                                 MemberHasTasksException,
                                 MemberNotFoundException,
                                 UserAlreadyMemberException,
                                 UserNotFoundException)
from collabry.schemas import AddMemberSchema
from database.models import Project, ProjectMember, User
from database.repositories import (ProjectMemberRepository, TaskRepository,
                                   UserRepository)

from .database import get_member_repo, get_task_repo, get_user_repo
from .get_project import get_project


async def get_new_member(member_data: AddMemberSchema,
                         project: Project = Depends(get_project),
                         ur: UserRepository = Depends(get_user_repo),
                         pmr: ProjectMemberRepository = Depends(get_member_repo)
                         ) -> User:
    user = await ur.get_by_email(member_data.email)
    if user is None:
        raise UserNotFoundException(member_data.email)
    if await pmr.get_by_id(user, project) is not None:
        raise UserAlreadyMemberException()
    return user


async def get_removable_member(user_id: UUID,
                               project: Project = Depends(get_project),
                               ur: UserRepository = Depends(get_user_repo),
                               pmr: ProjectMemberRepository = Depends(get_member_repo),
                               tr: TaskRepository = Depends(get_task_repo)
                               ) -> ProjectMember:
    if user_id == project.creator_id:
        raise CannotRemoveProjectCreatorException()
    user = await ur.get_by_id(user_id)
    if user is None:
        raise UserNotFoundException(user_id)
    member = await pmr.get_by_id(user, project)
    if member is None:
        raise MemberNotFoundException(user_id)
    if await tr.has_tasks_for_user(project, user_id):
        raise MemberHasTasksException()
    return member
