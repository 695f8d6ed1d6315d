from datetime import date
from typing import List, Union

from domain.entities import Task
from domain.errors import NotFoundError, ValidationError
from infrastructure.database import Database

RawId = Union[str, int]

# sqlite INTEGER PRIMARY KEY is a signed 64-bit value
MIN_TASK_ID = -2**63
MAX_TASK_ID = 2**63 - 1


def _strict_int(raw: RawId) -> int:
    """Plain ASCII digits with an optional leading minus; no spaces or underscores."""
    if isinstance(raw, bool):
        raise ValueError(raw)
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        raise TypeError(raw)
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(raw)
    return int(raw)


def parse_task_id(raw: RawId) -> int:
    try:
        task_id = _strict_int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid task id '{raw}'")
    if not MIN_TASK_ID <= task_id <= MAX_TASK_ID:
        raise ValidationError(f"task id '{raw}' is out of range")
    return task_id


def parse_due_date(year: RawId, month: RawId, day: RawId) -> date:
    """Combine path parts into a calendar date.

    Each part must be an integer, and together they must name a real day
    (no month 13, no February 30th).
    """
    parts = {}
    for name, raw in (("year", year), ("month", month), ("day", day)):
        try:
            parts[name] = _strict_int(raw)
        except (TypeError, ValueError):
            raise ValidationError(f"invalid {name} '{raw}'")
    try:
        return date(parts["year"], parts["month"], parts["day"])
    except (ValueError, OverflowError):
        raise ValidationError(
            f"invalid date {parts['year']}-{parts['month']:02d}-{parts['day']:02d}"
        )


class TaskUseCases:
    def __init__(self, db: Database):
        self.db = db

    def create_task(self, task: Task) -> Task:
        task.id = None
        return self.db.create_task(task)

    def get_task(self, task_id: RawId) -> Task:
        task_id = parse_task_id(task_id)
        task = self.db.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError(f"task {task_id} not found")
        return task

    def delete_task(self, task_id: RawId) -> int:
        return self.db.delete_task(parse_task_id(task_id))

    def list_tasks_by_due_date(self, year: RawId, month: RawId, day: RawId) -> List[Task]:
        due_date = parse_due_date(year, month, day)
        return self.db.get_tasks_by_due_date(due_date)
