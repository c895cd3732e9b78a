
from .base import BaseCustomHTTPException


class UserAlreadyExistsException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(409, "A user with this email already exists")


class EmailAlreadyInUseException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(409, "Email is already in use by another account")


class UserAlreadyMemberException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(409, "User is already a member of this project")


class MemberHasTasksException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(409, "Cannot remove a member with assigned or created tasks")
