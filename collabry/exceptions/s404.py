
from uuid import UUID

from .base import BaseCustomHTTPException


class UserNotFoundException(BaseCustomHTTPException):
    def __init__(self, user: UUID | str):
        super().__init__(404, f"User not found: {user}")


class ProjectNotFoundException(BaseCustomHTTPException):
    def __init__(self, project_id: UUID):
        super().__init__(404, f"Project not found, project_id: {project_id}")


class MemberNotFoundException(BaseCustomHTTPException):
    def __init__(self, user_id: UUID):
        super().__init__(404, f"Member not found, user_id: {user_id}")


class TaskNotFoundException(BaseCustomHTTPException):
    def __init__(self, task_id: UUID):
        super().__init__(404, f"Task not found, task_id: {task_id}")
