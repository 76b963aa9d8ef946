from datetime import date

import pytest

from taskdesk.task import Task
from taskdesk.task_manager import TaskManager


def _task(name, due=None, completed=False):
    task = Task(name)
    if due:
        task.set_due_date(due)
    if completed:
        task.mark_completed()
    return task


@pytest.fixture
def manager():
    m = TaskManager()
    m.add_task(_task("late", "2024-05-10"))
    m.add_task(_task("early", "2024-01-01"))
    m.add_task(_task("middle", "2024-03-03"))
    m.add_task(_task("undated"))
    m.add_task(_task("done dated", "2023-01-01", completed=True))
    m.add_task(_task("done undated", completed=True))
    return m


def test_add_and_get(manager):
    task = manager.get_task("early")
    assert task.name == "early"
    assert task.due_date == date(2024, 1, 1)
    assert manager.get_task("missing") is None


def test_add_same_name_replaces():
    m = TaskManager()
    m.add_task(Task("x", description="old"))
    m.add_task(Task("x", description="new"))
    assert len(m) == 1
    assert m.get_task("x").description == "new"


def test_remove_task(manager):
    removed = manager.remove_task("undated")
    assert removed.name == "undated"
    assert "undated" not in manager
    assert manager.remove_task("undated") is None


def test_all_tasks(manager):
    assert {t.name for t in manager.all_tasks()} == {
        "late", "early", "middle", "undated", "done dated", "done undated",
    }


def test_pending_with_due_date_sorted(manager):
    names = [t.name for t in manager.pending_with_due_date()]
    assert names == ["early", "middle", "late"]


def test_pending_without_due_date(manager):
    assert [t.name for t in manager.pending_without_due_date()] == ["undated"]


def test_counts_and_partitions(manager):
    pending = manager.pending_tasks()
    completed = manager.completed_tasks()
    assert manager.pending_count() == len(pending) == 4
    assert {t.name for t in completed} == {"done dated", "done undated"}
    assert len(pending) + len(completed) == len(manager.all_tasks())
    assert all(not t.completed for t in pending)


def test_mark_task_completed(manager):
    before = manager.pending_count()
    task = manager.mark_task_completed("middle")
    assert task.completed is True
    assert manager.get_task("middle").completed is True
    assert manager.pending_count() == before - 1
    assert "middle" not in [t.name for t in manager.pending_with_due_date()]


def test_mark_missing_task_completed(manager):
    assert manager.mark_task_completed("nothing") is None


def test_clear(manager):
    manager.clear()
    assert manager.all_tasks() == []
    assert manager.pending_count() == 0


def test_iteration_matches_all_tasks(manager):
    assert list(manager) == manager.all_tasks()