# wimm

`wimm` is a small command-line task tracker. It keeps a list of tasks in a
SQLite database file and records how much time you spend on each one. Time
is counted while a task is in progress.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Most commands take a task ID. `wimm add` prints the ID of the task it
creates; IDs are random UUIDs.

```
wimm add "Write the quarterly report"   # prints: Added task: <id>
wimm list                               # show every task
wimm start <id>                         # begin working on a task
wimm pause <id>                         # put it on hold and count the time spent
wimm complete <id>                      # mark it done and count any running time
wimm remove <id>                        # delete it
```

`wimm list` prints one line per task, ordered by ID, for example:

```
Task(id: <id>, name: Write the quarterly report, status: In Progress since 1700000000, created_at: 1699990000, time_spent: 0)
```

If there are no tasks it prints `No tasks found.`. All times are whole
seconds since the Unix epoch.

Every command has a short alias:

| Command    | Alias |
|------------|-------|
| `add`      | `a`   |
| `start`    | `s`   |
| `remove`   | `rm`  |
| `list`     | `ls`  |
| `complete` | `c`   |
| `pause`    | `p`   |

The command line can also be started with `python -m wimm.cli`.

### Options

These go before the command, e.g. `wimm --db tasks.db list`.

- `--db DB_PATH` uses the database file at `DB_PATH`. Without it, wimm uses
  `wimm.db` in your user data directory (as given by `platformdirs`). Missing
  parent directories are created.
- `--force` deletes the existing database file before opening a new, empty
  one. It fails if the file does not exist.

### Task states

A new task is **Pending**. `start` puts it **In Progress** and notes the
time. `pause` puts it **On Hold** and adds the time since the start to its
total. `complete` marks it **Completed** and adds any time still running.
Starting a task that is already in progress does nothing. Completing a task
that is already completed does nothing. Pausing a task that is not in
progress does nothing.

The data model also has **Deferred** and **Dropped** states, but no command
sets them.

### Errors

If a command fails, for example because no task has the given ID, wimm
prints the error to standard error and exits with status 1. Invalid command
lines are reported by the argument parser with exit status 2.

### Logging

Set the `WIMM_LOG` environment variable to a logging level name such as
`DEBUG` or `INFO` to see log output; the default is `WARNING`.

## Library use

```python
from wimm.app import App

with App("tasks.db", False) as app:
    task_id = app.add_task("Review pull requests")
    app.start_task(task_id)
    app.pause_task(task_id)
    for task in app.get_tasks():
        print(task)
```

`App` offers `add_task`, `start_task`, `pause_task`, `complete_task`,
`delete_task`, `get_tasks` and `close`. Tasks are `wimm.model.Task` records
with `id`, `name`, `status`, `created_at` and `time_spent`; a status is a
`wimm.model.Status` with a `kind` (`wimm.model.StatusKind`) and, for
in-progress and deferred tasks, a `timestamp`. Both convert to and from plain
dictionaries with `to_dict` and `from_dict`.

The storage layer, `wimm.db.Db`, can be used on its own; its `update_task`
applies a function to a stored task and saves the result unless the function
returns `None`.

Failures raise `wimm.errors.DbError`, which is a subclass of
`wimm.errors.WimmError`.

## Limitations

wimm has no command to defer or drop a task, to rename a task, or to edit
the time recorded for it.