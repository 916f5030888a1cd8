from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_dict() for e in container.employee_service.get_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        employee_id = container.employee_service.add_employee(data.get("name", ""), data.get("role", ""))
        return jsonify({"id": employee_id}), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    def remove_employee(employee_id: str):
        container.employee_service.remove_employee(employee_id)
        return "", 204
