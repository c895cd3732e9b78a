"""
Tests for the board partition: grouping, ordering and idempotence.
"""
from collabry.board import COLUMNS, counts, flatten, partition
from database.enums import TaskStatus

from .conftest import make_task


def test_every_status_has_a_bucket():
    buckets = partition([])
    assert set(buckets) == set(TaskStatus)
    assert all(tasks == [] for tasks in buckets.values())


def test_each_task_lands_in_its_status_bucket_only():
    tasks = [make_task("A", TaskStatus.todo),
             make_task("B", TaskStatus.done),
             make_task("C", TaskStatus.review),
             make_task("D", TaskStatus.in_progress),
             make_task("E", TaskStatus.todo)]
    buckets = partition(tasks)
    for task in tasks:
        holders = [status for status, bucket in buckets.items() if task in bucket]
        assert holders == [task.status]


def test_relative_order_is_preserved():
    a, b, c = make_task("A"), make_task("B", TaskStatus.done), make_task("C")
    buckets = partition([a, b, c])
    assert buckets[TaskStatus.todo] == [a, c]
    assert buckets[TaskStatus.done] == [b]


def test_partition_is_idempotent():
    tasks = [make_task("A"), make_task("B", TaskStatus.review),
             make_task("C"), make_task("D", TaskStatus.done)]
    buckets = partition(tasks)
    assert partition(flatten(buckets)) == buckets


def test_counts_and_columns():
    buckets = partition([make_task("A"), make_task("B"), make_task("C", TaskStatus.done)])
    assert counts(buckets) == {TaskStatus.todo: 2,
                               TaskStatus.in_progress: 0,
                               TaskStatus.review: 0,
                               TaskStatus.done: 1}
    assert [column.status for column in COLUMNS] == list(TaskStatus)
    assert [column.title for column in COLUMNS] == ["To Do", "In Progress", "Review", "Done"]
