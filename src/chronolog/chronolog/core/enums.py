from __future__ import annotations

from enum import Enum


class AttendanceState(str, Enum):
    """Daily attendance state of one employee."""

    NONE = "NONE"
    CLOCKED_IN = "CLOCKED_IN"
    CLOCKED_OUT = "CLOCKED_OUT"
