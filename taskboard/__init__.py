"""
Task board: a small task list served by Flask, with a cookie-session login
and an admin-only bulk update.
"""

import logging

from flask import Flask, jsonify, request, session
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import ApiError
from .extensions import db, login_manager, csrf
from .models import UserInfo

logger = logging.getLogger(__name__)


def create_app(config=None):
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    login_manager.init_app(app)
    csrf.init_app(app)

    from .security import init_security
    from .routes.auth import auth_bp
    from .routes.tasks import tasks_bp
    from .routes.controllers import controllers_bp
    from .routes.spa import spa_bp

    init_security(app)

    # Sign-in/out sit in front of the CSRF layer
    csrf.exempt(auth_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(controllers_bp)
    app.register_blueprint(spa_bp)

    register_error_handlers(app)

    with app.app_context():
        db.create_all()
        if app.config["SEED_TASKS"]:
            from .services.repository import TaskRepository
            from .services.seed import seed_tasks
            seed_tasks(TaskRepository(db.session))

    logger.info("Task board ready (database=%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app


@login_manager.user_loader
def load_user(user_id):
    data = session.get("user")
    if data and str(data.get("id")) == user_id:
        return UserInfo.from_dict(data)
    return None


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        logger.warning("CSRF check failed for %s %s: %s", request.method, request.path, error.description)
        return jsonify({"message": "invalid csrf token"}), 403

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        logger.error("Database error on %s %s: %s", request.method, request.path, error, exc_info=True)
        return jsonify({"message": str(error)}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if request.path.startswith("/api"):
            return jsonify({"message": error.description}), error.code
        return error
