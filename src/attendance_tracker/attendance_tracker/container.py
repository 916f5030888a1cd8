from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .backup.service import BackupService
from .core.constants import STORAGE_KEY
from .cylinders.service import CylinderService
from .document.store import DocumentStore
from .employees.service import EmployeeService
from .reports.service import StatisticsService
from .rules.service import RuleService
from .status_types.service import StatusTypeService
from .storage.blob_store import BlobStore
from .storage.file_blob_store import FileBlobStore
from .storage.memory_blob_store import MemoryBlobStore


@dataclass(frozen=True)
class Container:
    blob_store: BlobStore
    store: DocumentStore

    employee_service: EmployeeService
    attendance_service: AttendanceService
    status_type_service: StatusTypeService
    cylinder_service: CylinderService
    rule_service: RuleService
    statistics_service: StatisticsService
    backup_service: BackupService


def build_blob_store(storage_config: dict) -> BlobStore:
    backend = str(storage_config.get("backend", "file")).lower()
    if backend == "memory":
        return MemoryBlobStore()
    if backend == "file":
        return FileBlobStore(storage_config["data_dir"])
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(*, storage_config: dict) -> Container:
    blob_store = build_blob_store(storage_config)
    store = DocumentStore(blob_store, key=str(storage_config.get("key", STORAGE_KEY)))

    employee_service = EmployeeService(store)
    attendance_service = AttendanceService(store, employee_service)
    status_type_service = StatusTypeService(store)
    cylinder_service = CylinderService(store)
    rule_service = RuleService(store)
    statistics_service = StatisticsService(attendance_service, employee_service, status_type_service)
    backup_service = BackupService(store)

    return Container(
        blob_store=blob_store,
        store=store,
        employee_service=employee_service,
        attendance_service=attendance_service,
        status_type_service=status_type_service,
        cylinder_service=cylinder_service,
        rule_service=rule_service,
        statistics_service=statistics_service,
        backup_service=backup_service,
    )
