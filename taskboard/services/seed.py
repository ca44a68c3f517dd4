import logging

logger = logging.getLogger(__name__)

EXAMPLE_TASKS = [
    {"title": "Task a"},
    {"title": "Task b", "completed": True},
    {"title": "Task c"},
    {"title": "Task d"},
    {"title": "Task e", "completed": True},
]


def seed_tasks(tasks):
    """Insert the example tasks when the store is empty. Returns how many were added."""
    if tasks.count() > 0:
        return 0
    inserted = tasks.insert(EXAMPLE_TASKS)
    logger.info("Seeded %d example tasks", len(inserted))
    return len(inserted)
