
from .base import BaseCustomHTTPException


class PermissionDeniedException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(403, "You do not have permission to perform this action")


class NotProjectMemberException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(403, "You are not a member of this project")
