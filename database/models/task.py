
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database.enums import Priority, TaskStatus
from database.models.base import Base, enum_column, utc_now

if TYPE_CHECKING:
    from database.models.project import Project


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    project_id: Mapped[UUID] = mapped_column(ForeignKey("projects.id", ondelete="CASCADE"), index=True)
    creator_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    assignee_id: Mapped[UUID | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"),
                                                     default=None)
    title: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(String(500), default=None)
    status: Mapped[TaskStatus] = mapped_column(enum_column(TaskStatus, "task_status"),
                                               default=TaskStatus.todo)
    priority: Mapped[Priority] = mapped_column(enum_column(Priority, "task_priority"),
                                               default=Priority.medium)
    due_date: Mapped[datetime | None] = mapped_column(default=None)
    created_date: Mapped[datetime] = mapped_column(default=utc_now)
    last_modified_date: Mapped[datetime] = mapped_column(default=utc_now)

    project: Mapped[Project] = relationship(back_populates="tasks",
                                            lazy="selectin",
                                            foreign_keys=[project_id])
