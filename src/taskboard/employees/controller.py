from __future__ import annotations

import logging

from flask import Blueprint, Flask, jsonify

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("employees", __name__, url_prefix="/user")

    @bp.route("/showAllEmp", methods=["GET"], endpoint="show_all_employees")
    def show_all_employees():
        try:
            rows = container.employee_service.list_task_rows()
            return jsonify([r.to_dict() for r in rows]), 200
        except Exception:
            logger.exception("Failed to build the employee/task listing")
            return error_response("Internal Server Error", 500)

    @bp.route("/getUserByUserId/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        try:
            employee = container.employee_service.get_employee(employee_id)
            return jsonify(employee.to_dict()), 200
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Failed to load employee %s", employee_id)
            return error_response("Internal Server Error", 500)

    @bp.route("/showPieChart", methods=["GET"], endpoint="department_chart")
    def department_chart():
        try:
            return jsonify(container.employee_service.department_distribution()), 200
        except Exception:
            logger.exception("Failed to build the department distribution")
            return error_response("Internal Server Error", 500)

    @bp.route("/showbarChart", methods=["GET"], endpoint="joining_chart")
    def joining_chart():
        try:
            return jsonify(container.employee_service.monthly_joining_distribution()), 200
        except Exception:
            logger.exception("Failed to build the monthly joining distribution")
            return error_response("Internal Server Error", 500)

    @bp.route("/getAllEmp", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
            return jsonify([e.to_summary_dict() for e in employees]), 200
        except Exception:
            logger.exception("Failed to list employees")
            return error_response("Internal Server Error", 500)

    app.register_blueprint(bp)
