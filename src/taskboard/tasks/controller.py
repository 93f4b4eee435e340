from __future__ import annotations

import logging

from flask import Blueprint, Flask, jsonify, request

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("tasks", __name__, url_prefix="/task")

    @bp.route("/showAllById/<task_id>", methods=["GET"], endpoint="show_task")
    def show_task(task_id: str):
        try:
            task = container.task_service.get_task(task_id)
            return jsonify(task.to_dict()), 200
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Failed to load task %s", task_id)
            return error_response("Internal Server Error", 500)

    @bp.route("/showTasksByTaskId/<emp_id>", methods=["GET"], endpoint="list_employee_tasks")
    def list_employee_tasks(emp_id: str):
        try:
            tasks = container.task_service.list_for_employee(emp_id)
            return jsonify([t.to_dict() for t in tasks]), 200
        except Exception:
            logger.exception("Failed to list tasks of employee %s", emp_id)
            return error_response("Internal Server Error", 500)

    @bp.route("/submitForm", methods=["POST"], endpoint="submit_task")
    def submit_task():
        payload = request.get_json(silent=True)
        try:
            result = container.task_service.create_task(payload if payload is not None else {})
        except ValidationError as e:
            logger.info("Rejected task: %s", e)
            return error_response("Failed to create task", 400, details=str(e))
        except Exception as e:
            logger.exception("Failed to create task")
            return error_response("Failed to create task", 400, details=str(e))

        return (
            jsonify(
                {
                    "message": "Task created successfully",
                    "task": result.task.to_dict(),
                    "linked": result.linked,
                }
            ),
            201,
        )

    @bp.route("/updateTask/<task_id>", methods=["PUT"], endpoint="update_task")
    def update_task(task_id: str):
        payload = request.get_json(silent=True)
        try:
            container.task_service.update_task(task_id, payload if payload is not None else {})
            return jsonify({"message": "Task updated successfully"}), 200
        except NotFoundError as e:
            return error_response(str(e), 404)
        except ValidationError as e:
            return error_response("Invalid task update", 400, details=str(e))
        except Exception:
            logger.exception("Failed to update task %s", task_id)
            return error_response("Internal Server Error", 500)

    @bp.route("/deleteTask/<task_id>", methods=["DELETE"], endpoint="delete_task")
    def delete_task(task_id: str):
        try:
            container.task_service.delete_task(task_id)
            return jsonify({"message": "Task deleted successfully"}), 200
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Failed to delete task %s", task_id)
            return error_response("Internal Server Error", 500)

    app.register_blueprint(bp)
