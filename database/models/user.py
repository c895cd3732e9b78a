
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from database.models.base import Base, utc_now


class User(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password_hash: Mapped[str]
    secret: Mapped[UUID] = mapped_column(default=uuid4)
    bio: Mapped[str | None] = mapped_column(String(500), default=None)
    image: Mapped[str | None] = mapped_column(default=None)
    created_date: Mapped[datetime] = mapped_column(default=utc_now)
    last_modified_date: Mapped[datetime] = mapped_column(default=utc_now)
