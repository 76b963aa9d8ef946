"""The interactive main menu."""

from __future__ import annotations

import argparse
import csv
import sys

from taskdesk.console import (
    clear_console,
    display_all_tasks,
    display_completed_tasks,
    print_tasks_for_today,
    read_input,
    read_task_details,
    wait,
)
from taskdesk.csv_store import CsvStore
from taskdesk.task_manager import TaskManager

DEFAULT_FILE = "tasks.csv"


def _add_task(manager: TaskManager) -> None:
    clear_console()
    try:
        task = read_task_details()
    except ValueError as exc:
        print(f"Error: {exc}")
    else:
        if manager.get_task(task.name) is not None:
            confirm = read_input(
                "Task with this name already exists. Do you want to overwrite it? (y/n)"
            )
            if confirm.lower() != "y":
                print("Task not added.")
                wait()
                return
        manager.add_task(task)
        print("Task added successfully.")
    wait()


def _run(manager: TaskManager, store: CsvStore) -> int:
    try:
        for task in store.load_tasks():
            manager.add_task(task)
    except (OSError, ValueError, csv.Error):
        print("Error loading tasks from file. Starting with an empty task list.")
        wait()

    while True:
        clear_console()
        print("Task Manager")
        print_tasks_for_today(manager)
        print("(1) List and manage tasks")
        print("(2) Add a new task")
        print("(3) View completed tasks")
        print("(4) Exit and save tasks")

        choice = read_input("Choose an option:")
        if choice == "1":
            clear_console()
            display_all_tasks(manager)
        elif choice == "2":
            _add_task(manager)
        elif choice == "3":
            clear_console()
            display_completed_tasks(manager)
        elif choice == "4":
            clear_console()
            try:
                store.save_tasks(manager.all_tasks())
            except OSError as exc:
                print(f"Error saving tasks: {exc}")
            else:
                print("Tasks saved successfully.")
            return 0


def main(argv: list[str] | None = None) -> int:
    """Run the task manager menu; returns 1 if input ends before saving."""
    parser = argparse.ArgumentParser(prog="taskdesk", description="Interactive task manager.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="CSV file holding the tasks")
    args = parser.parse_args(argv)
    try:
        return _run(TaskManager(), CsvStore(args.file))
    except EOFError:
        return 1


if __name__ == "__main__":
    sys.exit(main())