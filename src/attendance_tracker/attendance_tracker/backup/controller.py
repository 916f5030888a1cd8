from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="backup")
    def backup():
        svc = container.backup_service
        return send_file(
            io.BytesIO(svc.export_bytes()),
            mimetype="application/json",
            as_attachment=True,
            download_name=svc.backup_filename(),
        )

    @app.route("/api/restore", methods=["POST"], endpoint="restore")
    def restore():
        upload = request.files.get("file")
        payload = upload.read() if upload else request.get_data()
        if not container.backup_service.restore(payload):
            return jsonify({"ok": False, "error": "Backup file is not a valid document"}), 400
        return jsonify({"ok": True})
