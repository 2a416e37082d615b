from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def exists_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        """All records of an employee, most recent work date first."""

        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert a new record (``attendance_id is None``) or update an existing one.

        Raises RecordConflictError when an insert collides with an existing
        (employee_id, work_date) row, or when an update targets a record whose
        clock-out time is already set.
        """

        raise NotImplementedError
