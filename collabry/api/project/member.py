

from fastapi import APIRouter, Depends
from redis.asyncio import Redis

from collabry.depends import (get_member_repo, get_new_member, get_project,
                              get_project_editor, get_project_viewer,
                              get_removable_member)
from collabry.exceptions import SendFeedbackToAdminException
from collabry.schemas import MemberSchema
from collabry.websocket.publish import mark_project_update
from database.enums import MemberRole
from database.models import Project, ProjectMember, User
from database.redis import get_redis_client
from database.repositories import ProjectMemberRepository

router = APIRouter(prefix="/member", tags=["member"])


@router.get("/{project_id}")
async def get_members(project: Project = Depends(get_project),
                      user: User = Depends(get_project_viewer),
                      pmr: ProjectMemberRepository = Depends(get_member_repo)
                      ) -> list[MemberSchema]:
    return [MemberSchema.from_db(m) for m in await pmr.get_by_project(project)]


@router.post("/{project_id}")
async def add_member(project: Project = Depends(get_project),
                     user: User = Depends(get_project_editor),
                     new_member: User = Depends(get_new_member),
                     redis: Redis = Depends(get_redis_client),
                     pmr: ProjectMemberRepository = Depends(get_member_repo)
                     ) -> MemberSchema:
    member = await pmr.create(new_member, project, MemberRole.member)
    if member is None:
        raise SendFeedbackToAdminException()
    await mark_project_update(redis, project.id, user.id)
    return MemberSchema.from_db(member)


@router.delete("/{project_id}/{user_id}")
async def remove_member(project: Project = Depends(get_project),
                        user: User = Depends(get_project_editor),
                        member: ProjectMember = Depends(get_removable_member),
                        redis: Redis = Depends(get_redis_client),
                        pmr: ProjectMemberRepository = Depends(get_member_repo)
                        ):
    await pmr.delete(member)
    await mark_project_update(redis, project.id, user.id)
    return {"message": "OK"}
