"""Task status domain: board columns and the derived due-date states."""

from datetime import datetime, timedelta

from pydantic import BaseModel

from database.enums import TaskStatus

DUE_SOON_WINDOW = timedelta(hours=48)


class BoardColumn(BaseModel):
    status: TaskStatus
    title: str
    color: str


COLUMNS = [
    BoardColumn(status=TaskStatus.todo, title="To Do", color="gray"),
    BoardColumn(status=TaskStatus.in_progress, title="In Progress", color="blue"),
    BoardColumn(status=TaskStatus.review, title="Review", color="yellow"),
    BoardColumn(status=TaskStatus.done, title="Done", color="green"),
]


def is_overdue(due_date: datetime | None, status: TaskStatus, now: datetime) -> bool:
    if due_date is None or status == TaskStatus.done:
        return False
    return due_date < now


def is_due_soon(due_date: datetime | None, status: TaskStatus, now: datetime) -> bool:
    """True when the due date is no further than 48 hours away.

    Overdue tasks count as due soon as well; DONE tasks never do.
    """
    if due_date is None or status == TaskStatus.done:
        return False
    return due_date <= now + DUE_SOON_WINDOW


def time_left(due_date: datetime, now: datetime) -> str:
    if due_date < now:
        return "Expired"
    total_minutes = int((due_date - now).total_seconds()) // 60
    days = total_minutes // (60 * 24)
    hours = total_minutes // 60 % 24
    minutes = total_minutes % 60
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes or (not days and not hours):
        parts.append(f"{minutes}m")
    return " ".join(parts) + " left"
