"""Loading and saving tasks as a CSV file."""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from taskdesk.task import Task

log = logging.getLogger(__name__)

HEADER = ["name", "description", "due_date", "tags", "priority", "completed"]

_UNSIGNED_BYTE = re.compile(r"\+?\d+")


def _parse_priority(text: str) -> int | None:
    if not _UNSIGNED_BYTE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


class CsvStore:
    """Reads and writes the task list at one CSV file path."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)

    def load_tasks(self) -> list[Task]:
        """Read the tasks from the file; a missing file gives no tasks.

        Raises ValueError when a row does not have all six columns.
        """
        if not self.path.exists():
            return []
        tasks: list[Task] = []
        with self.path.open(newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            header = next(reader, None)
            if header is None:
                return []
            for row in reader:
                if not row:
                    continue
                if len(row) != len(header) or len(row) < len(HEADER):
                    raise ValueError(
                        f"line {reader.line_num}: expected {len(header)} fields, found {len(row)}"
                    )
                tasks.append(self._task_from_row(row))
        return tasks

    @staticmethod
    def _task_from_row(row: list[str]) -> Task:
        name, description, due_date, tags, priority, completed = row[:6]
        task = Task(name)
        if description:
            task.description = description
        if due_date:
            try:
                task.set_due_date(due_date)
            except ValueError as exc:
                log.warning("Error setting due date for task '%s': %s", task.name, exc)
        for tag in tags.split(","):
            tag = tag.strip()
            if tag:
                task.add_tag(tag)
        value = _parse_priority(priority)
        if value is not None:
            try:
                task.set_priority(value)
            except ValueError as exc:
                log.warning("Error setting priority for task '%s': %s", task.name, exc)
        if completed == "true":
            task.mark_completed()
        return task

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Write the tasks to the file, replacing what was there."""
        with self.path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(HEADER)
            for task in tasks:
                writer.writerow([
                    task.name,
                    task.description or "",
                    task.due_date_str() or "",
                    task.tags_csv(),
                    str(task.priority),
                    "true" if task.completed else "false",
                ])