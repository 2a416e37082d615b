import pytest

from chronolog.common.validators import require_max_length, require_non_empty, validate_employee_id
from chronolog.core.exceptions import ValidationError


def test_require_non_empty_rejects_blank():
    for value in ("", "  ", None):
        with pytest.raises(ValidationError):
            require_non_empty(value, "name")


def test_require_max_length_boundary():
    assert require_max_length("abc", "name", 3) == "abc"
    with pytest.raises(ValidationError):
        require_max_length("abcd", "name", 3)


def test_employee_id_is_returned_verbatim():
    assert validate_employee_id(" E001 ") == " E001 "
    assert validate_employee_id("x" * 50) == "x" * 50


def test_employee_id_over_fifty_characters_is_rejected():
    with pytest.raises(ValidationError, match="at most 50"):
        validate_employee_id("x" * 51)
