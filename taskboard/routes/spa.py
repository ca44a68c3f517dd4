import os

from flask import Blueprint, current_app, send_from_directory, abort

spa_bp = Blueprint("spa", __name__)

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@spa_bp.route("/api", defaults={"path": ""}, methods=API_METHODS)
@spa_bp.route("/api/<path:path>", methods=API_METHODS)
def unknown_api(path):
    abort(404)


@spa_bp.route("/", defaults={"path": ""})
@spa_bp.route("/<path:path>")
def index(path):
    static_dir = current_app.config["STATIC_DIR"]
    if path and os.path.isfile(os.path.join(static_dir, path)):
        return send_from_directory(static_dir, path)
    return send_from_directory(static_dir, "index.html")
