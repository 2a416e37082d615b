from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_EMPLOYEE_ID_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value


def validate_employee_id(employee_id: Optional[str]) -> str:
    """Check an employee id is non-blank and short enough to store.

    The value is returned as given (not stripped): ids are matched verbatim.
    """
    employee_id = require_non_empty(employee_id, "employee_id")
    return require_max_length(employee_id, "employee_id", MAX_EMPLOYEE_ID_LENGTH)
