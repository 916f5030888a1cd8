from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging_config import setup_logger
from .container import build_container
from .core.exceptions import StorageError, ValidationError
from .attendance.controller import register as register_attendance
from .backup.controller import register as register_backup
from .cylinders.controller import register as register_cylinders
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .rules.controller import register as register_rules
from .status_types.controller import register as register_status_types

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_BYTES", 5 * 1024 * 1024))
    storage_config = getattr(settings, "STORAGE_CONFIG")

    setup_logger(__package__, getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s storage=%s key=%s",
        settings_module,
        storage_config.get("backend"),
        storage_config.get("key"),
    )

    container = build_container(storage_config=storage_config)
    app.extensions["attendance_tracker"] = container

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        logger.error("Storage failure: %s", e)
        return jsonify({"error": "Data could not be saved or loaded"}), 500

    register_employees(app, container)
    register_attendance(app, container)
    register_status_types(app, container)
    register_cylinders(app, container)
    register_rules(app, container)
    register_reports(app, container)
    register_backup(app, container)

    return app
