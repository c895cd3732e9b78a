
from fastapi import APIRouter, Depends

from collabry.depends import get_project_repo, get_task_repo, get_user_db, get_user_repo
from collabry.exceptions import EmailAlreadyInUseException, NoFieldsToUpdateException
from collabry.schemas import (MembershipSchema, ProfileSchema,
                              ProfileUpdateSchema, ProjectBriefSchema,
                              TaskBriefSchema)
from database.models import User
from database.repositories import ProjectRepository, TaskRepository, UserRepository

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(user: User = Depends(get_user_db),
                      pr: ProjectRepository = Depends(get_project_repo),
                      tr: TaskRepository = Depends(get_task_repo)
                      ) -> ProfileSchema:
    projects = await pr.get_by_user(user)
    memberships = [MembershipSchema.from_db(member, project)
                   for project in projects
                   for member in project.members if member.user_id == user.id]
    return ProfileSchema(id=user.id,
                         name=user.name,
                         email=user.email,
                         bio=user.bio,
                         image=user.image,
                         created_date=user.created_date,
                         last_modified_date=user.last_modified_date,
                         created_tasks=[TaskBriefSchema.from_db(t) for t in await tr.get_created_by(user)],
                         assigned_tasks=[TaskBriefSchema.from_db(t) for t in await tr.get_assigned_to(user)],
                         projects=memberships,
                         created_projects=[ProjectBriefSchema.from_db(p) for p in projects
                                           if p.creator_id == user.id])


@router.patch("")
async def update_profile(update_data: ProfileUpdateSchema,
                         user: User = Depends(get_user_db),
                         ur: UserRepository = Depends(get_user_repo)
                         ):
    fields = update_data.model_dump(exclude_none=True)
    if not fields:
        raise NoFieldsToUpdateException()
    if update_data.email is not None:
        existing = await ur.get_by_email(update_data.email)
        if existing is not None and existing.id != user.id:
            raise EmailAlreadyInUseException()
    await ur.update_profile(user,
                            name=update_data.name,
                            bio=update_data.bio,
                            image=str(update_data.image) if update_data.image else None,
                            email=update_data.email)
    return {"message": "Profile updated successfully"}
