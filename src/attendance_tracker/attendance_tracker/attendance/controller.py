from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/attendance", methods=["GET"], endpoint="get_attendance")
    def get_attendance(employee_id: str):
        cells = container.attendance_service.get_attendance(employee_id)
        return jsonify({day: cell.to_dict() for day, cell in sorted(cells.items())})

    @app.route(
        "/api/employees/<employee_id>/attendance/<day>/toggle",
        methods=["POST"],
        endpoint="toggle_attendance_status",
    )
    def toggle_attendance_status(employee_id: str, day: str):
        data = request.get_json(silent=True) or {}
        cell = container.attendance_service.toggle_attendance_status(employee_id, day, data.get("status_id", ""))
        return jsonify(cell.to_dict())

    @app.route("/api/employees/<employee_id>/attendance/<day>", methods=["PUT"], endpoint="mark_attendance")
    def mark_attendance(employee_id: str, day: str):
        data = request.get_json(silent=True) or {}
        container.attendance_service.mark_attendance(employee_id, day, data.get("status_id"))
        return "", 204

    @app.route("/api/employees/<employee_id>/attendance/<day>", methods=["DELETE"], endpoint="clear_attendance")
    def clear_attendance(employee_id: str, day: str):
        container.attendance_service.clear_attendance(employee_id, day)
        return "", 204
