from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService


def build_container(*, db_config: dict, storage_backend: str = "mysql", clock: Clock | None = None) -> Container:
    backend = storage_backend.lower()
    conn: Optional[DatabaseConnection] = None

    if backend == "memory":
        attendance_repo: AttendanceRepository = InMemoryAttendanceRepository()
    elif backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        attendance_repo = MySQLAttendanceRepository(conn)
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend!r}")

    attendance_service = AttendanceService(attendance_repo, clock=clock)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
    )
