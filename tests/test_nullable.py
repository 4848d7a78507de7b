from datetime import datetime, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from nullable_validation.domain.nullable import (
    NULLABLE_TYPES,
    NullBool,
    NullByte,
    NullFloat64,
    NullInt16,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
)
from nullable_validation.ports.valuer import IValuer

# --- Tests ---


def test_invalid_wrapper_has_no_value() -> None:
    """Stale data in the primitive is ignored while valid is False."""
    name = NullString(string="Hello", valid=False)

    assert name.value() is None
    assert name.is_null
    assert name.string == "Hello"


def test_valid_wrapper_returns_primitive() -> None:
    assert NullString(string="Hello", valid=True).value() == "Hello"
    assert NullInt64(int64=0, valid=True).value() == 0
    assert NullBool(boolean=False, valid=True).value() is False
    assert NullFloat64(float64=1.5, valid=True).value() == 1.5


def test_defaults_are_null() -> None:
    for wrapper_type in NULLABLE_TYPES:
        assert wrapper_type().value() is None


def test_of_and_null() -> None:
    at = datetime(2024, 1, 1, tzinfo=timezone.utc)

    assert NullTime.of(at).value() == at
    assert NullString.of("x") == NullString(string="x", valid=True)
    assert NullString.of(None) == NullString.null()
    assert NullInt32.null().is_null


@pytest.mark.parametrize(
    ("wrapper_type", "field_name", "too_big"),
    [
        (NullInt64, "int64", 2**63),
        (NullInt32, "int32", 2**31),
        (NullInt16, "int16", 2**15),
        (NullByte, "byte", 256),
    ],
)
def test_integer_widths_enforced(wrapper_type, field_name, too_big) -> None:
    with pytest.raises(PydanticValidationError):
        wrapper_type(**{field_name: too_big, "valid": True})

    assert wrapper_type(**{field_name: too_big - 1, "valid": True}).valid


def test_wrappers_are_immutable() -> None:
    name = NullString.of("x")

    with pytest.raises(PydanticValidationError):
        name.valid = False  # type: ignore[misc]


def test_unknown_fields_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        NullString(value="x", valid=True)  # type: ignore[call-arg]


def test_structural_equality_and_hash() -> None:
    a = NullString(string="x", valid=False)
    b = NullString(string="x", valid=False)

    assert a == b
    assert hash(a) == hash(b)
    assert a != NullString(string="y", valid=False)
    assert NullInt64.of(1) != NullInt32.of(1)
    assert len({a, b}) == 1


def test_wrappers_are_valuers() -> None:
    for wrapper_type in NULLABLE_TYPES:
        assert isinstance(wrapper_type.null(), IValuer)
