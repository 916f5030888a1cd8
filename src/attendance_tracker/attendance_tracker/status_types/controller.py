from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/status-types", methods=["GET"], endpoint="list_status_types")
    def list_status_types():
        return jsonify([s.to_dict() for s in container.status_type_service.get_status_types()])

    @app.route("/api/status-types", methods=["POST"], endpoint="add_status_type")
    def add_status_type():
        data = request.get_json(silent=True) or {}
        status_id = container.status_type_service.add_status_type(data.get("label", ""), data.get("color", ""))
        return jsonify({"id": status_id}), 201

    @app.route("/api/status-types/<status_id>", methods=["DELETE"], endpoint="delete_status_type")
    def delete_status_type(status_id: str):
        container.status_type_service.delete_status_type(status_id)
        return "", 204
