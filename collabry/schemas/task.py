
from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from database.enums import Priority, TaskStatus
from database.models import Task


def to_naive_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class TaskSchema(BaseModel):
    id: UUID
    project_id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    priority: Priority
    assignee_id: UUID | None = None
    creator_id: UUID
    due_date: datetime | None = None
    created_date: datetime
    last_modified_date: datetime

    @classmethod
    def from_db(cls, task: Task) -> "TaskSchema":
        return cls(**task.__dict__)


class TaskBriefSchema(BaseModel):
    id: UUID
    title: str
    status: TaskStatus
    created_date: datetime

    @classmethod
    def from_db(cls, task: Task) -> "TaskBriefSchema":
        return cls(**task.__dict__)


class TaskCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    priority: Priority = Priority.medium
    assignee_id: UUID | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class TaskUpdateSchema(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    priority: Priority | None = None
    assignee_id: UUID | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class TaskStatusUpdateSchema(BaseModel):
    status: str
