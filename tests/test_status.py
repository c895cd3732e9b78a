"""
Tests for due-date derived states and the time-left label.
"""
from datetime import datetime, timedelta

from collabry.board import is_due_soon, is_overdue, time_left
from database.enums import TaskStatus

NOW = datetime(2025, 3, 1, 12, 0, 0)


def test_overdue_requires_past_due_date_and_open_status():
    past = NOW - timedelta(minutes=1)
    assert is_overdue(past, TaskStatus.todo, NOW)
    assert is_overdue(past, TaskStatus.review, NOW)
    assert not is_overdue(past, TaskStatus.done, NOW)
    assert not is_overdue(NOW + timedelta(days=1), TaskStatus.todo, NOW)
    assert not is_overdue(None, TaskStatus.todo, NOW)


def test_due_soon_window_is_48_hours():
    assert is_due_soon(NOW + timedelta(hours=47), TaskStatus.in_progress, NOW)
    assert is_due_soon(NOW + timedelta(hours=48), TaskStatus.todo, NOW)
    assert not is_due_soon(NOW + timedelta(hours=49), TaskStatus.todo, NOW)
    assert not is_due_soon(NOW + timedelta(hours=1), TaskStatus.done, NOW)
    assert not is_due_soon(None, TaskStatus.todo, NOW)


def test_time_left_label():
    assert time_left(NOW - timedelta(seconds=1), NOW) == "Expired"
    assert time_left(NOW + timedelta(days=2, hours=3, minutes=4), NOW) == "2d 3h 4m left"
    assert time_left(NOW + timedelta(days=1), NOW) == "1d left"
    assert time_left(NOW + timedelta(hours=5, minutes=30), NOW) == "5h 30m left"
    assert time_left(NOW + timedelta(seconds=30), NOW) == "0m left"
    assert time_left(NOW + timedelta(days=3, minutes=15), NOW) == "3d 15m left"
