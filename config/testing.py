SECRET_KEY = "test-secret"

STORAGE_CONFIG = {
    "backend": "memory",
    "key": "attendance_tracker_v1",
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
MAX_UPLOAD_BYTES = 1024 * 1024
