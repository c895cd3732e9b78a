
from enum import Enum


class TaskStatus(str, Enum):
    todo = "TODO"
    in_progress = "IN_PROGRESS"
    review = "REVIEW"
    done = "DONE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_
