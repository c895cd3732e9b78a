
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database.models.base import Base, utc_now
from database.models.user import User

if TYPE_CHECKING:
    from database.models.project_member import ProjectMember
    from database.models.task import Task


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(50))
    description: Mapped[str] = mapped_column(String(200), default="")
    color: Mapped[str | None] = mapped_column(String(32), default=None)
    creator_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    created_date: Mapped[datetime] = mapped_column(default=utc_now)
    last_modified_date: Mapped[datetime] = mapped_column(default=utc_now)

    creator: Mapped[User] = relationship(lazy="selectin", foreign_keys=[creator_id])
    members: Mapped[list[ProjectMember]] = relationship(back_populates="project",
                                                        lazy="selectin",
                                                        cascade="all, delete-orphan",
                                                        order_by="ProjectMember.created_date")
    tasks: Mapped[list[Task]] = relationship(back_populates="project",
                                             lazy="selectin",
                                             cascade="all, delete-orphan",
                                             order_by="Task.created_date")
