from flask import Blueprint, request, jsonify

from ..context import with_context
from ..errors import ValidationError
from ..services import tasks_controller

controllers_bp = Blueprint("controllers", __name__, url_prefix="/api/TasksController")


@controllers_bp.route("/setAll", methods=["POST"])
@with_context
def set_all(ctx):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    # Accepts {"completed": bool} as well as the positional {"args": [bool]} form
    if "args" in data and isinstance(data["args"], list) and data["args"]:
        completed = data["args"][0]
    else:
        completed = data.get("completed")
    if not isinstance(completed, bool):
        raise ValidationError("completed must be true or false",
                              model_state={"completed": "Must be true or false"})

    updated = tasks_controller.set_all(ctx, completed)
    return jsonify({"data": {"updated": updated}})
