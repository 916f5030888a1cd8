import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_CONFIG = {
    "backend": "file",
    "data_dir": os.getenv("DATA_DIR", "/var/lib/attendance-tracker"),
    "key": os.getenv("STORAGE_KEY", "attendance_tracker_v1"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
