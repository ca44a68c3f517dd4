# taskboard/services/repository.py

import logging

from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError

from taskboard.errors import NotFoundError, ValidationError
from taskboard.models import Task

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "id": Task.id,
    "title": Task.title,
    "completed": Task.completed,
}


def validate_task_fields(data, partial=False):
    """
    Check the writable fields of a task payload.

    Returns a dict of cleaned values. Raises ValidationError with a
    per-field modelState when anything is wrong.
    """
    errors = {}
    cleaned = {}

    if "title" in data or not partial:
        title = data.get("title")
        if not isinstance(title, str) or not title.strip():
            errors["title"] = "Should not be empty"
        else:
            cleaned["title"] = title.strip()

    if "completed" in data:
        completed = data["completed"]
        if not isinstance(completed, bool):
            errors["completed"] = "Must be true or false"
        else:
            cleaned["completed"] = completed

    if errors:
        message = ", ".join(f"{field.capitalize()}: {error}" for field, error in errors.items())
        raise ValidationError(message, model_state=errors)
    return cleaned


class TaskRepository:
    """Data access for tasks over an explicitly injected SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def _where(self, stmt, where):
        if not where:
            return stmt
        unknown = set(where) - {"completed"}
        if unknown:
            raise ValidationError(f"Cannot filter tasks by {', '.join(sorted(unknown))}")
        completed = where.get("completed")
        if completed is not None:
            stmt = stmt.where(Task.completed == bool(completed))
        return stmt

    def find(self, where=None, order_by=None, limit=None, page=None):
        stmt = self._where(select(Task), where)

        for field, direction in (order_by or {}).items():
            column = SORTABLE_FIELDS.get(field)
            if column is None:
                raise ValidationError(f"Cannot sort tasks by {field}")
            if direction not in ("asc", "desc"):
                raise ValidationError(f"Unknown sort direction {direction!r}")
            stmt = stmt.order_by(asc(column) if direction == "asc" else desc(column))
        # Ties (and unordered queries) fall back to creation order
        stmt = stmt.order_by(Task.id.asc())

        if page is not None and limit is None:
            raise ValidationError("page requires limit")
        if limit is not None:
            if limit < 1:
                raise ValidationError("limit must be a positive number")
            stmt = stmt.limit(limit)
            if page is not None:
                if page < 1:
                    raise ValidationError("page must be a positive number")
                stmt = stmt.offset((page - 1) * limit)

        return list(self.session.scalars(stmt))

    def find_id(self, task_id):
        return self.session.get(Task, task_id)

    def count(self, where=None):
        stmt = self._where(select(func.count()).select_from(Task), where)
        return self.session.scalar(stmt)

    def save(self, task):
        """Insert when there is no id, otherwise update the task with that id."""
        data = task.to_dict() if isinstance(task, Task) else dict(task)
        task_id = data.get("id")

        if task_id is None:
            fields = validate_task_fields(data)
            record = Task(title=fields["title"], completed=fields.get("completed", False))
            self.session.add(record)
        else:
            fields = validate_task_fields(data, partial=True)
            record = self.find_id(task_id)
            if record is None:
                raise NotFoundError(f"Task {task_id} not found")
            for key, value in fields.items():
                setattr(record, key, value)

        self._commit()
        logger.debug("Saved task %s", record.id)
        return record

    def delete(self, task):
        task_id = task.id if isinstance(task, Task) else task
        record = self.find_id(task_id)
        if record is None:
            raise NotFoundError(f"Task {task_id} not found")
        self.session.delete(record)
        self._commit()
        logger.debug("Deleted task %s", task_id)

    def insert(self, items):
        # Validate everything first so a bad item leaves the store untouched
        rows = [validate_task_fields(item) for item in items]
        records = [Task(title=row["title"], completed=row.get("completed", False)) for row in rows]
        self.session.add_all(records)
        self._commit()
        return records

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
