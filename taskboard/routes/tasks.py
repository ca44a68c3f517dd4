from flask import Blueprint, request, jsonify

from ..context import with_context
from ..errors import ValidationError, NotFoundError

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/tasks")


def _parse_bool(name, value):
    if value.lower() in ("true", "1"):
        return True
    if value.lower() in ("false", "0"):
        return False
    raise ValidationError(f"{name} must be true or false")


def _parse_int(name, value):
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be a number")


def parse_find_args(args):
    """Turn REST query parameters into repository find() arguments."""
    where = {}
    if "completed" in args:
        where["completed"] = _parse_bool("completed", args["completed"])

    order_by = {}
    if args.get("_sort"):
        fields = args["_sort"].split(",")
        orders = args.get("_order", "").split(",")
        for i, field in enumerate(fields):
            order_by[field.strip()] = orders[i].strip().lower() if i < len(orders) and orders[i].strip() else "asc"

    limit = _parse_int("_limit", args["_limit"]) if "_limit" in args else None
    page = _parse_int("_page", args["_page"]) if "_page" in args else None
    return where, order_by, limit, page


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Request body must be JSON")
    return data


@tasks_bp.route("", methods=["GET"])
@with_context
def list_tasks(ctx):
    where, order_by, limit, page = parse_find_args(request.args)
    if request.args.get("__action") == "count":
        return jsonify({"count": ctx.tasks.count(where)})
    tasks = ctx.tasks.find(where=where, order_by=order_by, limit=limit, page=page)
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("/<int:task_id>", methods=["GET"])
@with_context
def get_task(ctx, task_id):
    task = ctx.tasks.find_id(task_id)
    if task is None:
        raise NotFoundError(f"Task {task_id} not found")
    return jsonify(task.to_dict())


@tasks_bp.route("", methods=["POST"])
@with_context
def create_tasks(ctx):
    data = _json_body()
    if isinstance(data, list):
        for item in data:
            if not isinstance(item, dict):
                raise ValidationError("Each task must be an object")
        tasks = ctx.tasks.insert(data)
        return jsonify([task.to_dict() for task in tasks]), 201

    if not isinstance(data, dict):
        raise ValidationError("Task must be an object")
    # Creation always gets a server-assigned id
    data.pop("id", None)
    task = ctx.tasks.save(data)
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
@with_context
def update_task(ctx, task_id):
    data = _json_body()
    if not isinstance(data, dict):
        raise ValidationError("Task must be an object")
    data["id"] = task_id
    task = ctx.tasks.save(data)
    return jsonify(task.to_dict())


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
@with_context
def delete_task(ctx, task_id):
    ctx.tasks.delete(task_id)
    return "", 204
