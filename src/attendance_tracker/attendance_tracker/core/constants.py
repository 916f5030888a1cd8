"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STORAGE_KEY = "attendance_tracker_v1"

DEFAULT_DEPARTMENT = "General"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

BACKUP_FILENAME_PREFIX = "attendance_backup_"

MM_PER_INCH = 25.4
CYLINDER_DIVISIONS = range(2, 11)
