
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.enums import MemberRole
from database.models import Project, ProjectMember, User


class ProjectMemberRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user: User, project: Project) -> ProjectMember | None:
        stmt = select(ProjectMember) \
            .where(ProjectMember.user_id == user.id,
                   ProjectMember.project_id == project.id) \
            .execution_options(populate_existing=True)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_by_project(self, project: Project) -> list[ProjectMember]:
        stmt = select(ProjectMember) \
            .where(ProjectMember.project_id == project.id) \
            .order_by(ProjectMember.created_date)
        return list((await self.session.execute(stmt)).scalars().all())

    async def create(self,
                     user: User,
                     project: Project,
                     role: MemberRole = MemberRole.member
                     ) -> ProjectMember | None:
        member = ProjectMember(user_id=user.id, project_id=project.id, role=role)
        self.session.add(member)
        await self.session.commit()
        return await self.get_by_id(user, project)

    async def delete(self, member: ProjectMember) -> None:
        await self.session.delete(member)
        await self.session.commit()
