import logging

from flask import Blueprint, current_app, request, jsonify, session
from flask_login import login_user, logout_user

from ..context import with_context
from ..services.users import UserDirectory

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/api")

SESSION_USER_KEY = "user"


@auth_bp.route("/signIn", methods=["POST"])
def sign_in():
    data = request.get_json(silent=True) or {}
    user = UserDirectory.from_config(current_app.config).sign_in(data.get("username"))
    session[SESSION_USER_KEY] = user.to_dict()
    login_user(user)
    logger.info("Signed in %s (roles=%s)", user.name, user.roles)
    return jsonify(user.to_dict())


@auth_bp.route("/signOut", methods=["POST"])
def sign_out():
    session.pop(SESSION_USER_KEY, None)
    logout_user()
    return jsonify("signed out")


@auth_bp.route("/currentUser", methods=["GET"])
@with_context
def current_user_info(ctx):
    return jsonify(ctx.user.to_dict() if ctx.user else None)
