from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from ..core.enums import AttendanceState


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one work date."""

    employee_id: str
    work_date: date
    clock_in_time: datetime
    clock_out_time: Optional[datetime] = None
    attendance_id: Optional[int] = None

    @property
    def state(self) -> AttendanceState:
        if self.clock_out_time is None:
            return AttendanceState.CLOCKED_IN
        return AttendanceState.CLOCKED_OUT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.isoformat(),
            "clock_in_time": self.clock_in_time.isoformat(),
            "clock_out_time": self.clock_out_time.isoformat() if self.clock_out_time else None,
            "state": self.state.value,
        }
