
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from database.enums import MemberRole
from database.models.base import Base, enum_column, utc_now
from database.models.user import User

if TYPE_CHECKING:
    from database.models.project import Project


class ProjectMember(Base):
    __tablename__ = "project_members"
    __table_args__ = (UniqueConstraint("project_id", "user_id", name="uq_project_user"),)

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    project_id: Mapped[UUID] = mapped_column(ForeignKey("projects.id", ondelete="CASCADE"))
    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    role: Mapped[MemberRole] = mapped_column(enum_column(MemberRole, "member_role"),
                                             default=MemberRole.member)
    created_date: Mapped[datetime] = mapped_column(default=utc_now)

    project: Mapped[Project] = relationship(back_populates="members", foreign_keys=[project_id])
    user: Mapped[User] = relationship(lazy="selectin", foreign_keys=[user_id])
