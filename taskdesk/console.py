"""Interactive terminal screens for viewing, adding and editing tasks."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from datetime import date

from taskdesk.task import DATE_FORMAT, MAX_PRIORITY, Task
from taskdesk.task_manager import TaskManager

_UNSIGNED = re.compile(r"\+?\d+")
_BYTE_MAX = 255

_RED = "31"
_BOLD = "1"
_STAR = "1;93"

_ACTIONS_PROMPT = "\nActions: [E]dit, [C]omplete, [D]elete"


def _parse_unsigned(text: str, limit: int | None = None) -> int | None:
    """Parse a non-negative integer, or return None if the text is not one."""
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    if limit is not None and value > limit:
        return None
    return value


def _colour_enabled() -> bool:
    return os.environ.get("NO_COLOR", "0") in ("", "0")


def _paint(text: str, code: str) -> str:
    if not _colour_enabled():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def _priority_bar(task: Task) -> str:
    stars = _paint("*", _STAR) * task.priority
    return "[" + stars + "_" * (MAX_PRIORITY - task.priority) + "]"


def _split_tags(text: str) -> list[str]:
    return [tag for tag in (part.strip() for part in text.split(",")) if tag]


def _print_listing_line(number: int, task: Task, today: date) -> None:
    line = f"{number}. {_priority_bar(task)}"
    if task.due_date is not None:
        stamp = task.due_date.strftime(DATE_FORMAT)
        if task.due_date < today:
            stamp = _paint(stamp, _RED)
        line += f" {stamp}"
    print(f"{line} {task.name} ")


def _editing_banner(name: str, hint: str = "(Skip fields to keep current values)") -> None:
    clear_console()
    print(f"Editing task: {name}\n{hint}")


def clear_console() -> None:
    """Clear the terminal with the platform's own command."""
    sys.stdout.flush()
    if sys.platform == "win32":
        subprocess.run(["cmd", "/C", "cls"], check=False)
    else:
        subprocess.run(["clear"], check=False)


def read_input(prompt: str) -> str:
    """Print the prompt on its own line and return the next input line, trimmed.

    Raises EOFError when the input is exhausted.
    """
    print(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if line == "":
        raise EOFError("no more input")
    return line.strip()


def wait() -> None:
    """Pause until the user presses Enter."""
    read_input("")


def read_task_details() -> Task:
    """Ask for the fields of a new task.

    Raises ValueError when the name is left empty.
    """
    name = read_input("Enter task name:")
    if not name:
        raise ValueError("Task name is empty")
    task = Task(name)

    description = read_input("Enter description (optional):")
    if description:
        task.description = description

    while True:
        due_date = read_input("Enter due date (YYYY-MM-DD) (optional):")
        if not due_date:
            break
        try:
            task.set_due_date(due_date)
        except ValueError as exc:
            print(f"Error setting due date: {exc}")
        else:
            break

    tags = read_input("Enter tags (comma-separated):")
    if tags:
        for tag in tags.split(","):
            task.add_tag(tag.strip())

    while True:
        text = read_input("Enter priority (0-10) (default: 5):")
        if not text:
            break
        priority = _parse_unsigned(text, _BYTE_MAX)
        if priority is None:
            continue
        try:
            task.set_priority(priority)
        except ValueError as exc:
            print(f"Error setting priority: {exc}")
        else:
            break

    return task


def display_task(task: Task) -> None:
    """Print every field of one task."""
    print(f"Name: {_paint(task.name, _BOLD)}")
    if task.description is not None:
        print(f"Description: {task.description}")
    if task.due_date is not None:
        print(f"Due Date: {task.due_date.strftime(DATE_FORMAT)}")
    if task.tags:
        print(f"Tags: {', '.join(sorted(task.tags))}")
    print(_priority_bar(task), end="")
    print(f"\nCompleted: {'true' if task.completed else 'false'}")


def display_completed_tasks(manager: TaskManager) -> None:
    """List the completed tasks and wait for Enter."""
    completed = manager.completed_tasks()
    if not completed:
        print("No completed tasks.")
        wait()
        return
    print("Completed Tasks:")
    for number, task in enumerate(completed, start=1):
        print(f"{number}. {task.name}")
    print(f"\nTotal completed tasks: {len(completed)}")
    wait()


def edit_task(manager: TaskManager, name: str) -> None:
    """Ask for new values for the named task and replace it with the result."""
    task = manager.get_task(name)
    if task is None:
        print("Task not found.")
        return

    _editing_banner(task.name)
    new_name = read_input(f"Enter new name [{task.name}]: ") or task.name

    _editing_banner(task.name)
    current_description = task.description or ""
    description = read_input(f"Enter new description [{current_description}]: ") or current_description

    _editing_banner(task.name)
    current_due = task.due_date_str() or ""
    due_date = read_input(f"Enter new due date [{current_due}]: ") or current_due

    _editing_banner(task.name, "(Skip fields to keep current values, ',' to clear tags)")
    tags_input = read_input(f"Enter new tags [{task.tags_csv()}]: ")
    tags = set(task.tags) if not tags_input else set(_split_tags(tags_input))

    _editing_banner(task.name)
    priority_input = read_input(f"Enter new priority [{task.priority}]: ")
    if priority_input:
        priority = _parse_unsigned(priority_input, _BYTE_MAX)
        if priority is None:
            print("Invalid priority value.")
            return
    else:
        priority = task.priority

    new_task = Task(new_name, description=description)
    if due_date:
        try:
            new_task.set_due_date(due_date)
        except ValueError as exc:
            print(f"Invalid due date: {exc}")
            return
    for tag in tags:
        new_task.add_tag(tag)
    try:
        new_task.set_priority(priority)
    except ValueError as exc:
        print(f"Invalid priority: {exc}")
        return

    manager.remove_task(name)
    manager.add_task(new_task)
    print("Task updated successfully.")


def _pick(choice: str, with_due: list[Task], without_due: list[Task]) -> str | None:
    index = _parse_unsigned(choice)
    ordered = with_due + without_due
    if index is None or not 1 <= index <= len(ordered):
        return None
    return ordered[index - 1].name


def _act_on(manager: TaskManager, name: str) -> None:
    task = manager.get_task(name)
    if task is None:
        return
    clear_console()
    display_task(task)
    action = read_input(_ACTIONS_PROMPT).upper()
    if action == "E":
        edit_task(manager, task.name)
    elif action == "C":
        manager.mark_task_completed(task.name)
        print("Task marked as completed.")
    elif action == "D":
        manager.remove_task(task.name)
        print("Task deleted successfully.")
    else:
        print("Invalid action.")


def _matches(task: Task, tags: list[str]) -> bool:
    return any(tag in tags for tag in task.tags)


def _filter_screen(manager: TaskManager, today: date) -> None:
    clear_console()
    print("Choose tags to filter by (comma-separated):")
    everything = manager.all_tasks()
    known = sorted({tag for task in everything for tag in task.tags})
    for tag in known:
        count = sum(1 for task in everything if tag in task.tags)
        print(f"{count} - {tag}")

    tags = _split_tags(read_input("Enter tags:"))
    with_due = manager.pending_with_due_date()
    without_due = manager.pending_without_due_date()
    if tags:
        with_due = [task for task in with_due if _matches(task, tags)]
        without_due = [task for task in without_due if _matches(task, tags)]

    clear_console()
    print("Filtered Tasks with date:")
    for number, task in enumerate(with_due, start=1):
        _print_listing_line(number, task, today)
    if without_due:
        print("\nFiltered Tasks without date:")
        for number, task in enumerate(without_due, start=len(with_due) + 1):
            _print_listing_line(number, task, today)

    if not with_due and not without_due:
        print("No tasks found with the specified tags.")
        wait()
        return

    name = _pick(read_input("\nEnter task number to view details"), with_due, without_due)
    if name is not None:
        _act_on(manager, name)


def display_all_tasks(manager: TaskManager) -> None:
    """List pending tasks and let the user filter them or act on one."""
    today = date.today()
    with_due = manager.pending_with_due_date()
    without_due = manager.pending_without_due_date()

    if with_due:
        print("Tasks with due date:")
        for number, task in enumerate(with_due, start=1):
            _print_listing_line(number, task, today)

    if without_due:
        print("\nTasks without due date:")
        for number, task in enumerate(without_due, start=len(with_due) + 1):
            _print_listing_line(number, task, today)

    pending = manager.pending_count()
    if pending == 0:
        print("No tasks available.")
        wait()
        return
    print(f"\nTotal tasks: {pending}")

    choice = read_input("\nEnter task number to view details or 'F' to filter tasks")
    if not choice:
        return
    if choice.upper() == "F":
        _filter_screen(manager, today)
        return

    index = _parse_unsigned(choice)
    if index is None:
        return
    if index == 0 or index > pending:
        print("Invalid task number.")
        wait()
        return
    name = _pick(choice, with_due, without_due)
    if name is not None:
        _act_on(manager, name)


def print_tasks_for_today(manager: TaskManager) -> None:
    """Print pending tasks that are overdue or due today."""
    today = date.today()
    pending = manager.pending_with_due_date()
    overdue = [task for task in pending if task.due_date < today]
    due_today = [task for task in pending if task.due_date == today]

    print("Tasks for today:")
    for task in overdue:
        print(f"- {task.name} (Due: {_paint(task.due_date.strftime(DATE_FORMAT), _RED)})")
    for task in due_today:
        print(f"- {task.name} (Due: {task.due_date.strftime(DATE_FORMAT)})")