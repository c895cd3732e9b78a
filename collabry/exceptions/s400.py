
from .base import BaseCustomHTTPException


class PasswordsDoNotMatchException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Passwords do not match")


class PasswordTooShortException(BaseCustomHTTPException):
    def __init__(self, length: int):
        super().__init__(400, f"Password must be at least {length} characters")


class SamePasswordException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "New password must be different from current password")


class NoFieldsToUpdateException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "No valid fields provided for update")


class ProjectAlreadyExistsException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "A project with this name already exists")


class InvalidAssigneeException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Assignee must be a member or the creator of the project")


class DueDateInPastException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Due date must be in the future")


class InvalidTaskStatusException(BaseCustomHTTPException):
    def __init__(self, status: str):
        super().__init__(400, f"Task status is invalid: {status}")


class CannotRemoveProjectCreatorException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "The project creator cannot be removed from the project")
