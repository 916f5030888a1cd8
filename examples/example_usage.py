"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; all behavior lives in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config=settings.STORAGE_CONFIG)

    employee_id = container.employee_service.add_employee("Ayesha Khan", "Operator")
    container.attendance_service.toggle_attendance_status(employee_id, "2024-03-05", "late")
    container.attendance_service.toggle_attendance_status(employee_id, "2024-03-05", "absent")

    print(container.statistics_service.employee_month_stats(employee_id, "2024-03"))
    print(container.statistics_service.collective_month_stats("2024-03"))


if __name__ == "__main__":
    main()
