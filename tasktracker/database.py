"""SQLite storage for TaskTracker.

The store keeps a deliberately small API: the controller only ever needs the
whole table, single-record writes and a full clear. Every call opens its own
connection so a store built on the GUI thread can be used from the worker
thread.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager

from tasktracker.domain.errors import NotFoundError, StorageError
from tasktracker.domain.models import Task
from tasktracker.utils import get_data_dir

DB_DIR = get_data_dir()
DB_NAME = "task_db"
DB_PATH = os.path.join(DB_DIR, DB_NAME)

logger = logging.getLogger(__name__)


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(
        id=row["id"],
        description=row["description"],
        is_completed=bool(row["isCompleted"]),
    )


class TaskStore:
    """Durable CRUD over the ``tasks`` table."""

    def __init__(self, db_path: str | os.PathLike[str] = DB_PATH):
        self.db_path = os.fspath(db_path)

    def _get_connection(self) -> sqlite3.Connection:
        db_dir = os.path.dirname(self.db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._get_connection()
        except (sqlite3.Error, OSError) as exc:
            raise StorageError(f"Cannot open task database {self.db_path}: {exc}") from exc

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Task database operation failed: {exc}") from exc
        finally:
            conn.close()

    def init_db(self) -> None:
        with self._connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id          INTEGER PRIMARY KEY AUTOINCREMENT,
                    description TEXT    NOT NULL,
                    isCompleted BOOLEAN NOT NULL DEFAULT 0
                )
                """
            )
        logger.info("Task database ready at %s", self.db_path)

    def get_all_tasks(self) -> list[Task]:
        with self._connection() as conn:
            rows = conn.execute("SELECT id, description, isCompleted FROM tasks ORDER BY id ASC").fetchall()
        return [_row_to_task(row) for row in rows]

    def insert_task(self, description: str) -> Task:
        with self._connection() as conn:
            cur = conn.execute(
                "INSERT INTO tasks (description, isCompleted) VALUES (?, ?)",
                (description, False),
            )
            task_id = cur.lastrowid
        return Task(id=task_id, description=description, is_completed=False)

    def update_task(self, task: Task) -> None:
        with self._connection() as conn:
            cur = conn.execute(
                "UPDATE tasks SET description = ?, isCompleted = ? WHERE id = ?",
                (task.description, task.is_completed, task.id),
            )
            if cur.rowcount == 0:
                raise NotFoundError(task.id)

    def delete_task(self, task: Task) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))

    def delete_all_tasks(self) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM tasks")
