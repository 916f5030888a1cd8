from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats/<month>", methods=["GET"], endpoint="collective_stats")
    def collective_stats(month: str):
        return jsonify(container.statistics_service.collective_month_stats(month).to_dict())

    @app.route("/api/employees/<employee_id>/stats/<month>", methods=["GET"], endpoint="employee_stats")
    def employee_stats(employee_id: str, month: str):
        stats = container.statistics_service
        breakdown = [
            {"id": row.status_id, "label": row.label, "color": row.color, "count": row.count}
            for row in stats.employee_month_breakdown(employee_id, month)
        ]
        return jsonify({"counts": stats.employee_month_stats(employee_id, month), "breakdown": breakdown})
