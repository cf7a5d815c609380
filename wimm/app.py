"""Task operations: adding, starting, pausing, completing and removing."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace

from wimm.db import Db
from wimm.model import Status, StatusKind, Task

log = logging.getLogger(__name__)


def now():
    """Current time in whole seconds since the Unix epoch."""
    return int(time.time())


def _since(start: int) -> int:
    return max(0, now() - start)


def new_task(name):
    """Create a pending task with a fresh random ID."""
    return Task(
        id=str(uuid.uuid4()),
        name=name,
        status=Status.pending(),
        created_at=now(),
        time_spent=0,
    )


class App:
    """Task tracker backed by a database file."""

    def __init__(self, db_path, truncate_db=False):
        self._db = Db(db_path, truncate_db)

    def add_task(self, name):
        log.debug("add_task(name: %s)", name)
        task = new_task(name)
        self._db.insert_task(task)
        return task.id

    def pause_task(self, task_id):
        log.debug("pause_task(id: %s)", task_id)

        def pause(task: Task) -> Task | None:
            if task.status.kind is not StatusKind.IN_PROGRESS:
                log.debug("Task is not in progress, skipping pause.")
                return None
            start = task.status.timestamp
            log.debug("Pausing task that was in progress since: %s", start)
            return replace(
                task,
                status=Status.on_hold(),
                time_spent=task.time_spent + _since(start),
            )

        self._db.update_task(task_id, pause)

    def delete_task(self, task_id):
        log.debug("delete_task(id: %s)", task_id)
        self._db.delete_task(task_id)

    def complete_task(self, task_id):
        log.debug("complete_task(id: %s)", task_id)

        def complete(task: Task) -> Task | None:
            match task.status.kind:
                case StatusKind.COMPLETED:
                    log.debug("Task is already completed, skipping update.")
                    return None
                case StatusKind.IN_PROGRESS:
                    start = task.status.timestamp
                    log.debug("Completing task that was in progress since: %s", start)
                    return replace(
                        task,
                        status=Status.completed(),
                        time_spent=task.time_spent + _since(start),
                    )
                case _:
                    return replace(task, status=Status.completed())

        self._db.update_task(task_id, complete)

    def start_task(self, task_id):
        log.debug("start_task(id: %s)", task_id)

        def start(task: Task) -> Task | None:
            if task.status.kind is StatusKind.IN_PROGRESS:
                log.debug(
                    "Task is already in progress since: %s, skipping update.",
                    task.status.timestamp,
                )
                return None
            return replace(task, status=Status.in_progress(now()))

        self._db.update_task(task_id, start)

    def get_tasks(self):
        log.debug("get_tasks()")
        return self._db.get_tasks()

    def close(self):
        self._db.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False