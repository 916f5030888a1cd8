import os
from pathlib import Path

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORAGE_CONFIG = {
    "backend": os.getenv("STORAGE_BACKEND", "file"),
    "data_dir": os.getenv("DATA_DIR", str(Path(__file__).resolve().parents[1] / "data")),
    "key": os.getenv("STORAGE_KEY", "attendance_tracker_v1"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
