
from typing import Iterable

from collabry.schemas import TaskSchema
from database.enums import TaskStatus

Partition = dict[TaskStatus, list[TaskSchema]]


def empty_partition() -> Partition:
    return {status: [] for status in TaskStatus}


def partition(tasks: Iterable[TaskSchema]) -> Partition:
    """Group tasks into one ordered bucket per status, keeping input order."""
    buckets = empty_partition()
    for task in tasks:
        buckets[task.status].append(task)
    return buckets


def flatten(buckets: Partition) -> list[TaskSchema]:
    return [task for status in TaskStatus for task in buckets.get(status, [])]


def counts(buckets: Partition) -> dict[TaskStatus, int]:
    return {status: len(buckets.get(status, [])) for status in TaskStatus}
