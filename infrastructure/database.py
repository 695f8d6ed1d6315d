import logging
import sqlite3
from contextlib import closing, contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, List, Optional

from domain.entities import Task
from domain.errors import PersistenceError

logger = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, due_date, tags"


class Database:
    """sqlite3 store client owning the ``tasks`` table.

    Every operation opens its own connection and closes it (and its cursor)
    before returning, whether the statement succeeded or not.
    """

    def __init__(self, db_name: str = "tasks.db"):
        # each operation opens a fresh connection, so an in-memory database
        # would lose the table as soon as _init_db returned
        if db_name == ":memory:" or "mode=memory" in db_name:
            raise ValueError(f"in-memory sqlite databases are not supported, got '{db_name}'; use a file path")
        self.db_name = db_name
        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_name)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self):
        Path(self.db_name).expanduser().parent.mkdir(parents=True, exist_ok=True)
        try:
            with self._connect() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS tasks (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT NOT NULL,
                        description TEXT NOT NULL DEFAULT '',
                        due_date DATE NOT NULL,
                        tags TEXT NOT NULL DEFAULT ''
                    )
                """)
        except sqlite3.Error as e:
            logger.error(f"Failed to initialise tasks table in {self.db_name}: {e}")
            raise PersistenceError("initialise task store") from e

    @staticmethod
    def _row_to_task(row) -> Task:
        return Task(
            id=int(row[0]),
            title=row[1],
            description=row[2] or "",
            due_date=date.fromisoformat(str(row[3])),
            tags=row[4] or "",
        )

    def create_task(self, task: Task) -> Task:
        try:
            with self._connect() as conn, closing(conn.cursor()) as cursor:
                cursor.execute(
                    "INSERT INTO tasks (title, description, due_date, tags) VALUES (?, ?, ?, ?)",
                    (task.title, task.description, task.due_date.isoformat(), task.tags)
                )
                task.id = cursor.lastrowid
        except sqlite3.Error as e:
            logger.error(f"create task failed: {e}", exc_info=True)
            raise PersistenceError("create task") from e
        return task

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        try:
            with self._connect() as conn, closing(conn.cursor()) as cursor:
                cursor.execute(
                    f"SELECT {TASK_COLUMNS} FROM tasks WHERE id = ?",
                    (task_id,)
                )
                row = cursor.fetchone()
                if row:
                    return self._row_to_task(row)
                return None
        except (sqlite3.Error, ValueError) as e:
            logger.error(f"get task {task_id} failed: {e}", exc_info=True)
            raise PersistenceError("get task") from e

    def delete_task(self, task_id: int) -> int:
        """Delete at most one row and return how many rows went away."""
        try:
            with self._connect() as conn, closing(conn.cursor()) as cursor:
                cursor.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
                return cursor.rowcount
        except sqlite3.Error as e:
            logger.error(f"delete task {task_id} failed: {e}", exc_info=True)
            raise PersistenceError("delete task") from e

    def get_tasks_by_due_date(self, due_date: date) -> List[Task]:
        try:
            with self._connect() as conn, closing(conn.cursor()) as cursor:
                cursor.execute(
                    f"SELECT {TASK_COLUMNS} FROM tasks WHERE due_date = ?",
                    (due_date.isoformat(),)
                )
                return [self._row_to_task(row) for row in cursor]
        except (sqlite3.Error, ValueError) as e:
            logger.error(f"list tasks due {due_date} failed: {e}", exc_info=True)
            raise PersistenceError("list tasks by due date") from e
