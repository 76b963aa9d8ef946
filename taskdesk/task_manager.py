"""An in-memory collection of tasks keyed by name."""

from __future__ import annotations

from collections.abc import Iterator

from taskdesk.task import Task


class TaskManager:
    """Holds tasks by name; adding a task with an existing name replaces it."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks.values())

    def add_task(self, task: Task) -> None:
        self._tasks[task.name] = task

    def remove_task(self, name: str) -> Task | None:
        """Remove and return the named task, or None if there is none."""
        return self._tasks.pop(name, None)

    def get_task(self, name: str) -> Task | None:
        return self._tasks.get(name)

    def all_tasks(self) -> list[Task]:
        return list(self._tasks.values())

    def pending_with_due_date(self) -> list[Task]:
        """Pending tasks that have a due date, earliest first."""
        tasks = [t for t in self._tasks.values() if t.due_date is not None and not t.completed]
        tasks.sort(key=lambda t: t.due_date)
        return tasks

    def pending_without_due_date(self) -> list[Task]:
        return [t for t in self._tasks.values() if t.due_date is None and not t.completed]

    def clear(self) -> None:
        self._tasks.clear()

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks.values() if not t.completed)

    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks.values() if t.completed]

    def pending_tasks(self) -> list[Task]:
        return [t for t in self._tasks.values() if not t.completed]

    def mark_task_completed(self, name: str) -> Task | None:
        """Mark the named task completed and return it, or None if absent."""
        task = self._tasks.get(name)
        if task is not None:
            task.mark_completed()
        return task