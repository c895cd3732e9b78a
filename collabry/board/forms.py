
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from collabry.schemas import TaskCreateSchema

FIELD_MESSAGES = {
    "title": "Title must be between 1 and 100 characters",
    "description": "Description must be less than 500 characters",
    "priority": "Please choose a priority",
    "assignee_id": "Please assign the task.",
    "due_date": "Please Enter valid date.",
}


class TaskFormError(ValueError):
    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


def validate_task_form(data: dict[str, Any], now: datetime) -> TaskCreateSchema:
    """Check a create-task form before it is sent.

    The form requires an assignee and a due date in the future; ``now`` is a
    naive UTC timestamp.
    """
    errors: dict[str, str] = {}
    try:
        form = TaskCreateSchema.model_validate(data)
    except ValidationError as exc:
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "form"
            errors.setdefault(field, FIELD_MESSAGES.get(field, error["msg"]))
        form = None
    if form is not None:
        if form.assignee_id is None:
            errors["assignee_id"] = FIELD_MESSAGES["assignee_id"]
        if form.due_date is None or form.due_date <= now:
            errors["due_date"] = FIELD_MESSAGES["due_date"]
    if errors:
        raise TaskFormError(errors)
    return form
