"""A single task with its description, due date, tags, priority and status."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
DEFAULT_PRIORITY = 5
MAX_PRIORITY = 10


@dataclass
class Task:
    """A to-do item identified by its name."""

    name: str
    description: str | None = None
    due_date: date | None = None
    tags: set[str] = field(default_factory=set)
    priority: int = DEFAULT_PRIORITY
    completed: bool = False

    def __post_init__(self) -> None:
        self.set_priority(self.priority)

    def set_due_date(self, due_date: str) -> None:
        """Set the due date from a ``YYYY-MM-DD`` string.

        Raises ValueError if the text is not a valid date.
        """
        try:
            self.due_date = datetime.strptime(due_date, DATE_FORMAT).date()
        except (ValueError, TypeError):
            raise ValueError("Invalid date format. Use YYYY-MM-DD.") from None

    def set_priority(self, priority: int) -> None:
        """Set the priority, which must lie between 0 and 10."""
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise ValueError("Priority must be between 0 and 10.")
        if not 0 <= priority <= MAX_PRIORITY:
            raise ValueError("Priority must be between 0 and 10.")
        self.priority = priority

    def add_tag(self, tag: str) -> None:
        self.tags.add(tag)

    def remove_tag(self, tag: str) -> None:
        self.tags.discard(tag)

    def mark_completed(self) -> None:
        self.completed = True

    def due_date_str(self) -> str | None:
        """The due date as ``YYYY-MM-DD``, or None when there is none."""
        if self.due_date is None:
            return None
        return self.due_date.strftime(DATE_FORMAT)

    def tags_csv(self) -> str:
        """The tags, sorted and joined with commas."""
        return ",".join(sorted(self.tags))

    def priority_bar(self) -> str:
        """A ten-slot bar with one star per priority point."""
        return "[" + "*" * self.priority + "_" * (MAX_PRIORITY - self.priority) + "]"