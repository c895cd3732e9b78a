

from uuid import UUID

from fastapi import Depends

from collabry.exceptions import (NotProjectMemberException,
                                 PermissionDeniedException,
                                 ProjectNotFoundException)
from database.models import Project, User
from database.repositories import ProjectMemberRepository, ProjectRepository

from .database import get_member_repo, get_project_repo
from .get_user import get_user_db


async def get_project(project_id: UUID,
                      pr: ProjectRepository = Depends(get_project_repo)
                      ) -> Project:
    project = await pr.get_by_id(project_id)
    if project is None:
        raise ProjectNotFoundException(project_id)
    return project


async def is_project_viewer(project: Project,
                            user: User,
                            pmr: ProjectMemberRepository
                            ) -> bool:
    if user.id == project.creator_id:
        return True
    return await pmr.get_by_id(user, project) is not None


async def get_project_viewer(project: Project = Depends(get_project),
                             user: User = Depends(get_user_db),
                             pmr: ProjectMemberRepository = Depends(get_member_repo)
                             ) -> User:
    if not await is_project_viewer(project, user, pmr):
        raise NotProjectMemberException()
    return user


async def get_project_editor(project: Project = Depends(get_project),
                             user: User = Depends(get_user_db)
                             ) -> User:
    if user.id != project.creator_id:
        raise PermissionDeniedException()
    return user
