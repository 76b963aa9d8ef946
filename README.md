# taskdesk

taskdesk is a small interactive task manager for the terminal. Each task has
a name, an optional description and due date, a set of tags, a priority from 0
to 10 (default 5) and a completed flag. Tasks are kept in a CSV file,
`tasks.csv` in the current directory by default.

## Install

```
pip install .
```

## Run

```
taskdesk
taskdesk --file path/to/tasks.csv
```

`--file` chooses the CSV file to load from and save to.

The main screen lists pending tasks that are due today, and those that are
overdue highlighted in red. It then offers these choices:

1. List and manage tasks. Pending tasks with a due date come first, earliest
   first, then tasks without a due date. Each line shows a ten-slot priority
   bar (one star per point), the due date and the name. Enter a task's number
   to view it, then `E` to edit, `C` to complete or `D` to delete it. Enter
   `F` to filter the list: the known tags are shown with how many tasks carry
   each, and the list is narrowed to tasks that have any of the tags you
   enter.
2. Add a new task. You are asked for a name, a description, a due date
   (`YYYY-MM-DD`), comma-separated tags and a priority. An invalid date or an
   out-of-range priority is asked for again. If a task with the same name
   exists you are asked whether to overwrite it.
3. View completed tasks.
4. Save all tasks to the CSV file and exit.

The screen is cleared with `clear` (or `cls` on Windows) between views.
Colours are written as ANSI escape codes; set the `NO_COLOR` environment
variable to any value other than `0` to turn them off.

Tasks are saved only by option 4. If standard input ends before that, the
program exits with status 1 and nothing is written.

## File format

The CSV file has a header row followed by one row per task:

```
name,description,due_date,tags,priority,completed
Write report,Quarterly numbers,2024-05-01,"office,urgent",8,false
```

Tags within the `tags` column are separated by commas and written in sorted
order. `completed` is `true` or `false`.

When loading, a missing file gives an empty list. A row with an invalid due
date or priority is kept without that value and a warning is logged. A row
with the wrong number of columns makes the whole load fail; the program then
says so and starts with an empty task list.

## Using it as a library

```python
from taskdesk.task import Task
from taskdesk.task_manager import TaskManager
from taskdesk.csv_store import CsvStore

task = Task("Write report")
task.set_due_date("2024-05-01")
task.add_tag("office")
task.set_priority(8)

manager = TaskManager()
manager.add_task(task)
CsvStore("tasks.csv").save_tasks(manager.all_tasks())

loaded = CsvStore("tasks.csv").load_tasks()
```

- `Task` is a dataclass with `name`, `description`, `due_date`, `tags`,
  `priority` and `completed`. `set_due_date` and `set_priority` raise
  `ValueError` for an invalid date or a priority outside 0–10.
  `due_date_str()`, `tags_csv()` and `priority_bar()` give text forms.
- `TaskManager` keys tasks by name; adding a task with an existing name
  replaces it. It offers `get_task`, `remove_task`, `all_tasks`,
  `pending_tasks`, `completed_tasks`, `pending_with_due_date`,
  `pending_without_due_date`, `pending_count`, `mark_task_completed` and
  `clear`.
- `CsvStore(path)` reads and writes the file with `load_tasks()` and
  `save_tasks(tasks)`.

## Tests

```
pip install .[test]
pytest
```