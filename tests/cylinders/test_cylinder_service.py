from __future__ import annotations

import json

import pytest

from src.attendance_tracker.attendance_tracker.core.constants import STORAGE_KEY
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.cylinders.service import CylinderService, t_no_sort_key
from src.attendance_tracker.attendance_tracker.document.store import DocumentStore
from src.attendance_tracker.attendance_tracker.storage.memory_blob_store import MemoryBlobStore


class CountingBlobStore(MemoryBlobStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


def make_service(doc=None):
    blobs = CountingBlobStore({STORAGE_KEY: json.dumps(doc)} if doc is not None else None)
    store = DocumentStore(blobs)
    return blobs, store, CylinderService(store)


def test_first_add_creates_section_and_returns_nothing():
    _, store, svc = make_service({"employees": [], "attendance": {}})
    assert svc.get_cylinders() == []
    assert "cylinders" not in store.document

    result = svc.add_cylinder("Xin Hu", "T42", "90", "42", "266.7", "94.837")

    assert result is None
    [cyl] = svc.get_cylinders()
    assert (cyl.brand, cyl.t_no, cyl.gears, cyl.count, cyl.size_mm, cyl.distortion) == (
        "Xin Hu",
        "T42",
        90,
        42,
        266.7,
        94.837,
    )
    assert store.document["cylinders"][0]["tNo"] == "T42"


def test_distortion_is_optional():
    _, _, svc = make_service()

    svc.add_cylinder("Jingda", "T10", 80, 10, 254, "")

    assert svc.get_cylinders()[0].distortion is None


@pytest.mark.parametrize("bad", ["abc", "nan", "inf", "-inf", float("nan")])
@pytest.mark.parametrize("field", ["gears", "count", "size_mm", "distortion"])
def test_non_numeric_values_are_rejected(field, bad):
    blobs, store, svc = make_service()
    values = {"gears": 90, "count": 42, "size_mm": 266.7, "distortion": 94.837}
    values[field] = bad

    with pytest.raises(ValidationError):
        svc.add_cylinder("Xin Hu", "T42", values["gears"], values["count"], values["size_mm"], values["distortion"])

    assert "cylinders" not in store.document
    assert blobs.writes == 0


def test_remove_cylinder():
    _, _, svc = make_service()
    svc.add_cylinder("Xin Hu", "T42", 90, 42, 266.7)
    svc.add_cylinder("Xin Hu", "T50", 90, 50, 317.5)
    first = svc.get_cylinders()[0]

    svc.remove_cylinder(first.cylinder_id)

    assert [c.t_no for c in svc.get_cylinders()] == ["T50"]


def test_remove_without_section_or_unknown_id_does_not_write():
    blobs, _, svc = make_service({"employees": [], "attendance": {}})

    svc.remove_cylinder("nope")
    assert blobs.writes == 0

    svc.add_cylinder("Xin Hu", "T42", 90, 42, 266.7)
    writes = blobs.writes
    svc.remove_cylinder("nope")
    assert blobs.writes == writes


def test_legacy_text_fields_are_read():
    doc = {
        "employees": [],
        "attendance": {},
        "cylinders": [
            {"id": "c1", "brand": "Jingda", "tNo": "T42", "gears": "90", "count": "42", "sizeMM": "266.7", "distortion": ""}
        ],
    }
    _, _, svc = make_service(doc)

    [cyl] = svc.get_cylinders()

    assert cyl.gears == 90
    assert cyl.size_mm == 266.7
    assert cyl.distortion is None


def test_t_no_sort_key():
    assert t_no_sort_key("T120") == 120
    assert t_no_sort_key("T42") == 42
    assert t_no_sort_key("X") == 0


def test_cylinder_sheet_groups_sorts_and_derives_sizes():
    _, _, svc = make_service()
    svc.add_cylinder("Xin Hu", "T120", 90, 120, 100)
    svc.add_cylinder("Jingda", "T1", 90, 1, 100)
    svc.add_cylinder("Xin Hu", "T42", 90, 42, 254)
    svc.add_cylinder("Xin Hu", "Spare", 90, 1, 100)

    sheet = svc.cylinder_sheet("Xin Hu")

    assert [row.cylinder.t_no for row in sheet] == ["Spare", "T42", "T120"]
    assert sheet[1].size_inches == 10.0
    assert sheet[2].available_sizes == (50.0, 33.33333, 25.0, 20.0, 16.66667, 14.28571, 12.5, 11.11111, 10.0)
    assert svc.brands() == ["Xin Hu", "Jingda"]
