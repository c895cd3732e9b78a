
from datetime import UTC, datetime
from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase


def utc_now() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def enum_column(enum: Type[Enum], name: str) -> SAEnum:
    return SAEnum(enum,
                  name=name,
                  native_enum=False,
                  values_callable=lambda e: [member.value for member in e])


class Base(DeclarativeBase):
    pass
