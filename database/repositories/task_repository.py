
from datetime import datetime
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.enums import Priority, TaskStatus
from database.models import Project, ProjectMember, Task, User
from database.models.base import utc_now


class TaskRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Task | None:
        stmt = select(Task) \
            .where(Task.id == task_id) \
            .execution_options(populate_existing=True)
        return (await self.session.execute(stmt)).scalar_one_or_none()

    async def get_by_project(self, project: Project) -> list[Task]:
        stmt = select(Task) \
            .where(Task.project_id == project.id) \
            .order_by(Task.created_date)
        return list((await self.session.execute(stmt)).scalars().all())

    async def get_visible(self, user: User, project_id: UUID | None = None) -> list[Task]:
        member_projects = select(ProjectMember.project_id) \
            .where(ProjectMember.user_id == user.id)
        stmt = select(Task).where(or_(Task.creator_id == user.id,
                                      Task.assignee_id == user.id,
                                      Task.project_id.in_(member_projects)))
        if project_id is not None:
            stmt = stmt.where(Task.project_id == project_id)
        stmt = stmt.order_by(Task.created_date.desc())
        return list((await self.session.execute(stmt)).scalars().all())

    async def get_created_by(self, user: User) -> list[Task]:
        stmt = select(Task).where(Task.creator_id == user.id).order_by(Task.created_date.desc())
        return list((await self.session.execute(stmt)).scalars().all())

    async def get_assigned_to(self, user: User) -> list[Task]:
        stmt = select(Task).where(Task.assignee_id == user.id).order_by(Task.created_date.desc())
        return list((await self.session.execute(stmt)).scalars().all())

    async def has_tasks_for_user(self, project: Project, user_id: UUID) -> bool:
        stmt = select(Task.id) \
            .where(Task.project_id == project.id,
                   or_(Task.creator_id == user_id, Task.assignee_id == user_id)) \
            .limit(1)
        return (await self.session.execute(stmt)).first() is not None

    async def create(self,
                     project: Project,
                     creator: User,
                     title: str,
                     description: str | None = None,
                     priority: Priority = Priority.medium,
                     assignee_id: UUID | None = None,
                     due_date: datetime | None = None
                     ) -> Task | None:
        task = Task(project_id=project.id,
                    creator_id=creator.id,
                    title=title,
                    description=description,
                    status=TaskStatus.todo,
                    priority=priority,
                    assignee_id=assignee_id,
                    due_date=due_date)
        self.session.add(task)
        await self.session.commit()
        return await self.get_by_id(task.id)

    async def update(self,
                     task: Task,
                     title: str | None = None,
                     description: str | None = None,
                     status: TaskStatus | None = None,
                     priority: Priority | None = None,
                     assignee_id: UUID | None = None,
                     due_date: datetime | None = None
                     ) -> None:
        if title is not None:
            task.title = title
        if description is not None:
            task.description = description
        if status is not None:
            task.status = status
        if priority is not None:
            task.priority = priority
        if assignee_id is not None:
            task.assignee_id = assignee_id
        if due_date is not None:
            task.due_date = due_date
        task.last_modified_date = utc_now()
        await self.session.commit()

    async def update_status(self, task: Task, status: TaskStatus) -> None:
        await self.update(task, status=status)

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.commit()
