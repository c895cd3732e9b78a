
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.enums import MemberRole
from database.models import Project, ProjectMember, User
from database.models.base import utc_now


class ProjectRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Project | None:
        stmt = select(Project) \
            .where(Project.id == project_id) \
            .execution_options(populate_existing=True)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_by_user(self, user: User) -> list[Project]:
        stmt = select(Project) \
            .join(ProjectMember, ProjectMember.project_id == Project.id) \
            .where(ProjectMember.user_id == user.id) \
            .order_by(Project.created_date.desc())
        return list((await self.session.execute(stmt)).scalars().all())

    async def get_by_user_and_name(self, user: User, name: str) -> Project | None:
        stmt = select(Project).where(Project.creator_id == user.id, Project.name == name)
        return (await self.session.execute(stmt)).scalars().first()

    async def create(self,
                     creator: User,
                     name: str,
                     description: str = "",
                     color: str | None = None
                     ) -> Project | None:
        project = Project(creator_id=creator.id,
                          name=name,
                          description=description,
                          color=color)
        self.session.add(project)
        await self.session.flush()
        self.session.add(ProjectMember(project_id=project.id,
                                       user_id=creator.id,
                                       role=MemberRole.owner))
        await self.session.commit()
        return await self.get_by_id(project.id)

    async def update(self,
                     project: Project,
                     name: str | None = None,
                     description: str | None = None,
                     color: str | None = None
                     ) -> None:
        if name is not None:
            project.name = name
        if description is not None:
            project.description = description
        if color is not None:
            project.color = color
        project.last_modified_date = utc_now()
        await self.session.commit()

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.commit()
