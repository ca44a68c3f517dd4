from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask_login import current_user

from taskboard.extensions import db
from taskboard.models import UserInfo
from taskboard.services.repository import TaskRepository


@dataclass
class RequestContext:
    user: Optional[UserInfo]
    tasks: TaskRepository


def build_context():
    user = current_user._get_current_object() if current_user.is_authenticated else None
    return RequestContext(user=user, tasks=TaskRepository(db.session))


def with_context(view):
    """Pass a fresh RequestContext as the first argument of the view."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        return view(build_context(), *args, **kwargs)

    return wrapper
