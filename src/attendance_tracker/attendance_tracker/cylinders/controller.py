from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/cylinders", methods=["GET"], endpoint="list_cylinders")
    def list_cylinders():
        return jsonify([c.to_dict() for c in container.cylinder_service.get_cylinders()])

    @app.route("/api/cylinders", methods=["POST"], endpoint="add_cylinder")
    def add_cylinder():
        data = request.get_json(silent=True) or {}
        container.cylinder_service.add_cylinder(
            data.get("brand", ""),
            data.get("tNo", ""),
            data.get("gears"),
            data.get("count"),
            data.get("sizeMM"),
            data.get("distortion"),
        )
        return "", 201

    @app.route("/api/cylinders/<cylinder_id>", methods=["DELETE"], endpoint="remove_cylinder")
    def remove_cylinder(cylinder_id: str):
        container.cylinder_service.remove_cylinder(cylinder_id)
        return "", 204

    @app.route("/api/cylinders/sheet/<brand>", methods=["GET"], endpoint="cylinder_sheet")
    def cylinder_sheet(brand: str):
        return jsonify([row.to_dict() for row in container.cylinder_service.cylinder_sheet(brand)])
