import logging
from typing import Any

from nullable_validation.domain.nullable import NULLABLE_TYPES, NullInt64, NullString
from nullable_validation.validation.factory import create_validator
from nullable_validation.validation.hooks import validate_valuer


class Unwrappable:
    def value(self) -> Any:
        raise ValueError("cannot convert")


def test_unwraps_valid_wrappers() -> None:
    assert validate_valuer(NullString.of("Hello")) == "Hello"
    assert validate_valuer(NullInt64.of(42)) == 42


def test_invalid_wrapper_is_absent() -> None:
    assert validate_valuer(NullString(string="Hello", valid=False)) is None


def test_non_valuer_is_absent() -> None:
    assert validate_valuer("plain string") is None
    assert validate_valuer(None) is None


def test_failing_valuer_is_absent(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="nullable_validation.hooks")

    assert validate_valuer(Unwrappable()) is None
    assert "Unwrappable" in caplog.text


def test_create_validator_hooks_every_wrapper() -> None:
    validator = create_validator()

    assert validator.required_struct_enabled
    for wrapper_type in NULLABLE_TYPES:
        assert validator.hook_for(wrapper_type) is validate_valuer
