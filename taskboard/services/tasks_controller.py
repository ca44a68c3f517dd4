# taskboard/services/tasks_controller.py

import logging
from collections import namedtuple

from taskboard.errors import ForbiddenError
from taskboard.models import Roles

logger = logging.getLogger(__name__)

Authorization = namedtuple("Authorization", ["allowed", "reason"])


def check_role(user, role):
    if user is None:
        return Authorization(False, "Not signed in")
    if not user.has_role(role):
        return Authorization(False, f"User {user.name} is not allowed to do this")
    return Authorization(True, None)


def set_all(ctx, completed):
    """
    Overwrite `completed` on every stored task, one record at a time.

    Admin only. Not atomic: if a save fails halfway the earlier tasks stay
    updated and the error propagates.
    """
    auth = check_role(ctx.user, Roles.admin)
    if not auth.allowed:
        logger.warning("Rejected setAll(completed=%s): %s", completed, auth.reason)
        raise ForbiddenError("forbidden")

    updated = 0
    for task in ctx.tasks.find():
        ctx.tasks.save({"id": task.id, "title": task.title, "completed": completed})
        updated += 1
    logger.info("%s set completed=%s on %d tasks", ctx.user.name, completed, updated)
    return updated
