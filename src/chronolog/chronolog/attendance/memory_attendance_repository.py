from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date
from typing import Dict, Optional, Sequence, Tuple

from ..core.exceptions import RecordConflictError, RecordNotFoundError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Process-local record store.

    Enforces the one-record-per-employee-per-day constraint and the set-once
    clock-out time under a lock, the same way the MySQL store does.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._by_employee_date: Dict[Tuple[str, date], AttendanceRecord] = {}
        self._next_id = 1

    def find_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with self._lock:
            return self._by_employee_date.get((employee_id, work_date))

    def exists_for_employee_and_date(self, employee_id: str, work_date: date) -> bool:
        with self._lock:
            return (employee_id, work_date) in self._by_employee_date

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with self._lock:
            items = [r for r in self._by_employee_date.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        key = (record.employee_id, record.work_date)
        with self._lock:
            if record.attendance_id is None:
                if key in self._by_employee_date:
                    raise RecordConflictError(
                        f"attendance record already exists for {record.employee_id} on {record.work_date.isoformat()}"
                    )
                saved = replace(record, attendance_id=self._next_id)
                self._next_id += 1
            else:
                current = self._by_employee_date.get(key)
                if current is None or current.attendance_id != record.attendance_id:
                    raise RecordNotFoundError(f"attendance record {record.attendance_id} not found")
                if current.clock_out_time is not None:
                    raise RecordConflictError(f"attendance record {record.attendance_id} is already clocked out")
                saved = record
            self._by_employee_date[key] = saved
            return saved
