from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .service import encode_image


def register(app: Flask, container: Container) -> None:
    @app.route("/api/rules", methods=["GET"], endpoint="list_rules")
    def list_rules():
        return jsonify([r.to_dict() for r in container.rule_service.get_rules()])

    @app.route("/api/rules", methods=["POST"], endpoint="add_rule")
    def add_rule():
        """Accept JSON (``image`` as a data URL) or a multipart form with an ``image`` file."""
        if request.files or request.form:
            upload = request.files.get("image")
            image = encode_image(upload.read()) if upload and upload.filename else None
            container.rule_service.add_rule(request.form.get("title", ""), request.form.get("description", ""), image)
        else:
            data = request.get_json(silent=True) or {}
            container.rule_service.add_rule(data.get("title", ""), data.get("description", ""), data.get("image"))
        return "", 201

    @app.route("/api/rules/<rule_id>", methods=["DELETE"], endpoint="remove_rule")
    def remove_rule(rule_id: str):
        container.rule_service.remove_rule(rule_id)
        return "", 204
