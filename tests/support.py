from taskboard import create_app
from taskboard.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "WTF_CSRF_ENABLED": False,
    "SEED_TASKS": False,
    "ADMIN_USERS": ["Jane"],
    "KNOWN_USERS": ["Steve"],
}


def make_app(**overrides):
    config = dict(TEST_CONFIG)
    config.update(overrides)
    return create_app(config)


def drop_app(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
