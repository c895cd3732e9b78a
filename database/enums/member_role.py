
from enum import Enum


class MemberRole(str, Enum):
    owner = "OWNER"
    member = "MEMBER"

    def __str__(self) -> str:
        return self.value
