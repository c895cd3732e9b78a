
from enum import Enum


class Priority(str, Enum):
    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"
    urgent = "URGENT"

    def __str__(self) -> str:
        return self.value
