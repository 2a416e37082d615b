from __future__ import annotations

from datetime import date


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AttendanceStateError(DomainError):
    """Raised when a clock-in/clock-out is not allowed in the current state."""

    def __init__(self, message: str, *, employee_id: str, work_date: date):
        super().__init__(message)
        self.employee_id = employee_id
        self.work_date = work_date


class DuplicateClockInError(AttendanceStateError):
    def __init__(self, employee_id: str, work_date: date):
        super().__init__(
            f"Employee {employee_id} already clocked in on {work_date.isoformat()}",
            employee_id=employee_id,
            work_date=work_date,
        )


class NoClockInRecordError(AttendanceStateError):
    def __init__(self, employee_id: str, work_date: date):
        super().__init__(
            f"Employee {employee_id} has no clock-in record for {work_date.isoformat()}",
            employee_id=employee_id,
            work_date=work_date,
        )


class DuplicateClockOutError(AttendanceStateError):
    def __init__(self, employee_id: str, work_date: date):
        super().__init__(
            f"Employee {employee_id} already clocked out on {work_date.isoformat()}",
            employee_id=employee_id,
            work_date=work_date,
        )


class StorageError(Exception):
    """Base exception for record store failures (not a business rule)."""


class RecordConflictError(StorageError):
    """Raised by a store when an insert collides with an existing (employee, date) row."""


class RecordNotFoundError(StorageError):
    """Raised by a store when updating a record it does not hold."""
