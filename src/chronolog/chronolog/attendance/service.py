from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import Clock, now_local
from ..common.validators import validate_employee_id
from ..core.enums import AttendanceState
from ..core.exceptions import (
    DuplicateClockInError,
    DuplicateClockOutError,
    NoClockInRecordError,
    RecordConflictError,
    ValidationError,
)
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Clock-in/clock-out rules on top of an attendance record store.

    Per employee and work date a record moves NONE -> CLOCKED_IN -> CLOCKED_OUT
    and never back. "Today" and "now" come from ``clock`` unless a call passes
    ``now=`` explicitly.
    """

    def __init__(self, attendance: AttendanceRepository, *, clock: Clock | None = None):
        self._attendance = attendance
        self._clock = clock or now_local

    def _now(self, now: datetime | None) -> datetime:
        return now or self._clock()

    def clock_in(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        employee_id = validate_employee_id(employee_id)
        now = self._now(now)
        today = now.date()

        if self._attendance.exists_for_employee_and_date(employee_id, today):
            logger.warning("Rejected duplicate clock-in for %s on %s", employee_id, today)
            raise DuplicateClockInError(employee_id, today)

        record = AttendanceRecord(employee_id=employee_id, work_date=today, clock_in_time=now)
        try:
            saved = self._attendance.save(record)
        except RecordConflictError as e:
            # Another clock-in for the same day won the insert.
            logger.warning("Clock-in for %s on %s lost to a concurrent insert", employee_id, today)
            raise DuplicateClockInError(employee_id, today) from e

        logger.info("Clock-in accepted for %s at %s", employee_id, now.isoformat())
        return saved

    def clock_out(self, employee_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        employee_id = validate_employee_id(employee_id)
        now = self._now(now)
        today = now.date()

        record = self._attendance.find_for_employee_and_date(employee_id, today)
        if record is None:
            logger.warning("Rejected clock-out without clock-in for %s on %s", employee_id, today)
            raise NoClockInRecordError(employee_id, today)
        if record.clock_out_time is not None:
            logger.warning("Rejected duplicate clock-out for %s on %s", employee_id, today)
            raise DuplicateClockOutError(employee_id, today)

        try:
            saved = self._attendance.save(replace(record, clock_out_time=now))
        except RecordConflictError as e:
            # Another clock-out for the same day was stored first.
            logger.warning("Clock-out for %s on %s lost to a concurrent update", employee_id, today)
            raise DuplicateClockOutError(employee_id, today) from e
        logger.info("Clock-out accepted for %s at %s", employee_id, now.isoformat())
        return saved

    def get_attendance_history(self, employee_id: str) -> List[AttendanceRecord]:
        employee_id = validate_employee_id(employee_id)
        return list(self._attendance.list_for_employee(employee_id))

    def calculate_working_hours(self, record: AttendanceRecord) -> timedelta:
        if record.clock_in_time is None or record.clock_out_time is None:
            raise ValidationError("Both clock-in and clock-out times are required")

        worked = record.clock_out_time - record.clock_in_time
        if worked < timedelta(0):
            raise ValidationError(
                f"Clock-out time {record.clock_out_time.isoformat()} precedes "
                f"clock-in time {record.clock_in_time.isoformat()}"
            )
        return worked

    def get_today_record(self, employee_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for an employee"""
        employee_id = validate_employee_id(employee_id)
        return self._attendance.find_for_employee_and_date(employee_id, self._now(now).date())

    def get_status(self, employee_id: str, *, now: datetime | None = None) -> AttendanceState:
        record = self.get_today_record(employee_id, now=now)
        if record is None:
            return AttendanceState.NONE
        return record.state

    def get_history_summary(
        self,
        employee_id: str,
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> List[Dict[str, Any]]:
        """History rows for display/export, optionally limited to [start, end]."""
        if start and end and start > end:
            raise ValidationError(f"Start date {start.isoformat()} is after end date {end.isoformat()}")

        rows = []
        for r in self.get_attendance_history(employee_id):
            if start and r.work_date < start:
                continue
            if end and r.work_date > end:
                continue
            rows.append(self._to_row(r))
        return rows

    def working_seconds(self, record: AttendanceRecord) -> Optional[int]:
        """Stored span in whole seconds, None while still clocked in.

        Unlike calculate_working_hours this reports a negative span as is, so
        display layers can show a skewed row instead of failing.
        """
        if record.clock_out_time is None:
            return None
        return int((record.clock_out_time - record.clock_in_time).total_seconds())

    def _to_row(self, r: AttendanceRecord) -> Dict[str, Any]:
        row = r.to_dict()
        row["working_seconds"] = self.working_seconds(r)
        return row
