"""SQLite-backed storage for tasks."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from wimm.errors import DbError
from wimm.model import Task

log = logging.getLogger(__name__)


@contextmanager
def _db_errors():
    try:
        yield
    except sqlite3.Error as exc:
        raise DbError(f"Database error: {exc!r}") from exc


def _load_task(raw: str) -> Task:
    try:
        return Task.from_dict(json.loads(raw))
    except ValueError as exc:
        raise DbError(f"Database error: {exc!r}") from exc


class Db:
    """A task store kept in a single database file."""

    def __init__(self, path, truncate_db=False):
        path = Path(path)
        if not path.name:
            raise DbError(f"Invalid DB path: {path}")
        data_dir = path.parent
        log.debug("data_dir: %s", data_dir)

        if not data_dir.exists():
            log.debug("Creating data_dir: %s", data_dir)
            try:
                data_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DbError(f"Failed to create DB path: {exc}") from exc

        if truncate_db:
            log.debug("Truncating database at: %s", path)
            try:
                path.unlink()
            except OSError as exc:
                raise DbError(f"Failed to truncate DB path: {exc}") from exc

        with _db_errors():
            self._conn = sqlite3.connect(path, isolation_level=None)
            try:
                self._conn.execute(
                    "CREATE TABLE IF NOT EXISTS tasks (id TEXT PRIMARY KEY, data TEXT NOT NULL)"
                )
            except sqlite3.Error:
                self._conn.close()
                raise

    @contextmanager
    def _transaction(self):
        with _db_errors():
            self._conn.execute("BEGIN IMMEDIATE")
            try:
                yield self._conn
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise
            self._conn.execute("COMMIT")

    def _get_task(self, conn, task_id) -> Task:
        row = conn.execute("SELECT data FROM tasks WHERE id = ?", (task_id,)).fetchone()
        if row is None:
            raise DbError(f"Task not found for ID: {task_id}")
        return _load_task(row[0])

    def insert_task(self, task):
        log.debug("insert_task(task: %r)", task)
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO tasks (id, data) VALUES (?, ?)",
                (task.id, json.dumps(task.to_dict())),
            )

    def delete_task(self, task_id):
        with self._transaction() as conn:
            self._get_task(conn, task_id)
            conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def get_tasks(self):
        """Return all tasks ordered by ID."""
        with _db_errors():
            rows = self._conn.execute("SELECT data FROM tasks ORDER BY id").fetchall()
        return [_load_task(raw) for (raw,) in rows]

    def update_task(self, task_id, updater):
        """Apply ``updater`` to the stored task; a ``None`` result leaves it unchanged."""
        with self._transaction() as conn:
            task = self._get_task(conn, task_id)
            log.debug("Found task: %r", task)
            updated = updater(task)
            if updated is not None:
                log.debug("Updating task to: %r", updated)
                conn.execute(
                    "UPDATE tasks SET id = ?, data = ? WHERE id = ?",
                    (updated.id, json.dumps(updated.to_dict()), task_id),
                )

    def close(self):
        with _db_errors():
            self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False