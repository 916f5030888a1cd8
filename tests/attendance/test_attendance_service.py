from __future__ import annotations

import json
from datetime import date

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceCell
from src.attendance_tracker.attendance_tracker.attendance.service import AttendanceService
from src.attendance_tracker.attendance_tracker.core.constants import STORAGE_KEY
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.document.store import DocumentStore
from src.attendance_tracker.attendance_tracker.employees.service import EmployeeService
from src.attendance_tracker.attendance_tracker.storage.memory_blob_store import MemoryBlobStore


class CountingBlobStore(MemoryBlobStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


def make_services(doc=None):
    blobs = CountingBlobStore({STORAGE_KEY: json.dumps(doc)} if doc is not None else None)
    store = DocumentStore(blobs)
    employees = EmployeeService(store)
    return blobs, store, employees, AttendanceService(store, employees)


def legacy_document():
    return {
        "employees": [{"id": "e1", "name": "Ana", "role": "Operator", "department": "General"}],
        "attendance": {
            "e1": {
                "2024-03-05": {"status": "absent"},
                "2024-03-06": {"statuses": ["late"]},
                "2024-03-07": {},
            }
        },
    }


def test_toggle_twice_returns_cell_to_absent():
    blobs, store, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")

    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    attendance.toggle_attendance_status(emp, "2024-03-05", "late")

    assert attendance.get_attendance(emp) == {}
    assert "2024-03-05" not in store.document["attendance"][emp]
    assert "2024-03-05" not in json.loads(blobs.get(STORAGE_KEY))["attendance"][emp]


def test_toggle_keeps_insertion_order_and_no_duplicates():
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")

    attendance.toggle_attendance_status(emp, "2024-03-05", "night_shift")
    cell = attendance.toggle_attendance_status(emp, "2024-03-05", "late")

    assert cell == AttendanceCell(statuses=("night_shift", "late"))
    assert attendance.get_cell(emp, date(2024, 3, 5)).statuses == ("night_shift", "late")


def test_toggle_removing_last_status_prunes_date():
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    attendance.toggle_attendance_status(emp, "2024-03-05", "absent")

    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    cell = attendance.toggle_attendance_status(emp, "2024-03-05", "absent")

    assert cell.is_empty
    assert "2024-03-05" not in attendance.get_attendance(emp)


def test_toggle_upgrades_legacy_cell_before_changing_it():
    _, store, _, attendance = make_services(legacy_document())

    attendance.toggle_attendance_status("e1", "2024-03-05", "late")

    assert store.document["attendance"]["e1"]["2024-03-05"] == {"statuses": ["absent", "late"]}


def test_get_attendance_migrates_legacy_status_and_persists_once():
    blobs, store, _, attendance = make_services(legacy_document())

    cells = attendance.get_attendance("e1")

    assert cells["2024-03-05"] == AttendanceCell(statuses=("absent",))
    assert store.document["attendance"]["e1"]["2024-03-05"] == {"statuses": ["absent"]}
    assert "2024-03-07" not in cells
    persisted = json.loads(blobs.get(STORAGE_KEY))["attendance"]["e1"]
    assert persisted["2024-03-05"] == {"statuses": ["absent"]}
    assert "2024-03-07" not in persisted
    assert blobs.writes == 1

    attendance.get_attendance("e1")
    assert blobs.writes == 1


def test_reading_canonical_data_does_not_write():
    blobs, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    writes = blobs.writes

    attendance.get_attendance(emp)
    attendance.get_attendance("unknown")

    assert blobs.writes == writes


def test_mark_attendance_replaces_whole_set():
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    attendance.toggle_attendance_status(emp, "2024-03-05", "absent")

    attendance.mark_attendance(emp, "2024-03-05", "short_leave")

    assert attendance.get_attendance(emp)["2024-03-05"].statuses == ("short_leave",)


def test_mark_attendance_with_none_clears():
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    attendance.mark_attendance(emp, "2024-03-05", "late")

    attendance.mark_attendance(emp, "2024-03-05", None)

    assert attendance.get_attendance(emp) == {}


def test_clear_absent_cell_does_not_write():
    blobs, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    writes = blobs.writes

    attendance.clear_attendance(emp, "2024-03-05")
    attendance.clear_attendance("unknown", "2024-03-05")

    assert blobs.writes == writes


def test_clear_present_cell_writes():
    blobs, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")
    attendance.toggle_attendance_status(emp, "2024-03-05", "late")
    writes = blobs.writes

    attendance.clear_attendance(emp, "2024-03-05")

    assert attendance.get_attendance(emp) == {}
    assert blobs.writes == writes + 1


@pytest.mark.parametrize("bad", ["2024-3-5", "2024-02-30", "2024-031", "yesterday", ""])
def test_invalid_date_keys_are_rejected_on_write(bad):
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")

    with pytest.raises(ValidationError):
        attendance.toggle_attendance_status(emp, bad, "late")


def test_writes_for_unknown_employee_are_rejected():
    _, store, _, attendance = make_services()

    with pytest.raises(ValidationError):
        attendance.toggle_attendance_status("ghost", "2024-03-05", "late")
    with pytest.raises(ValidationError):
        attendance.mark_attendance("ghost", "2024-03-05", "late")

    assert store.document["attendance"] == {}


def test_orphan_status_ids_are_accepted():
    _, _, employees, attendance = make_services()
    emp = employees.add_employee("Ana", "Operator")

    cell = attendance.toggle_attendance_status(emp, "2024-03-05", "overtime")

    assert cell.has("overtime")
