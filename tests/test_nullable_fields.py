"""Validating structs whose fields are nullable wrappers."""

from dataclasses import dataclass
from typing import Annotated

import pytest

from nullable_validation.domain.nullable import NullInt64, NullString
from nullable_validation.validation.tags import Rules
from nullable_validation.validation.validator import Validator

# --- Test Models ---


@dataclass
class RequiredName:
    name: Annotated[NullString, Rules("required")]


@dataclass
class LongName:
    name: Annotated[NullString, Rules("required,gt=10")]


@dataclass
class RequestBody:
    name: Annotated[str, Rules("required,gt=10")]


@dataclass
class RequiredCount:
    count: Annotated[NullInt64, Rules("required")]


# --- Tests ---


def test_null_field(validator: Validator) -> None:
    # The string is not empty on purpose: valid=False still means null.
    test = RequiredName(name=NullString(string="Hello", valid=False))

    result = validator.validate(test)

    assert not result.is_valid, "should fail because valid=False"
    assert result.field_errors[0].tag == "required"
    assert result.field_errors[0].value is None


def test_field_length(validator: Validator) -> None:
    test = LongName(name=NullString(string="hello", valid=True))

    result = validator.validate(test)

    assert not result.is_valid, "should fail because length is not greater than 10"
    error = result.field_errors[0]
    assert error.tag == "gt"
    assert error.param == "10"
    assert error.value == "hello"


def test_simple_struct(validator: Validator) -> None:
    body = RequestBody(name="short")

    result = validator.validate(body)

    assert not result.is_valid, "should fail because name is not greater than 10"


def test_simple_struct_long_enough(validator: Validator) -> None:
    assert validator.validate(RequestBody(name="long enough")).is_valid


def test_simple_struct_empty(validator: Validator) -> None:
    result = validator.validate(RequestBody(name=""))

    assert result.field_errors[0].tag == "required"


@pytest.mark.parametrize("leftover", ["", "Hello", "x" * 50])
def test_invalid_wrapper_fails_required_whatever_it_holds(
    validator: Validator, leftover: str
) -> None:
    test = RequiredName(name=NullString(string=leftover, valid=False))

    assert not validator.validate(test).is_valid


def test_valid_wrapper_passes_required(validator: Validator) -> None:
    test = RequiredName(name=NullString(string="Hello", valid=True))

    assert validator.validate(test).is_valid


def test_valid_but_empty_wrapper_fails_required(validator: Validator) -> None:
    test = RequiredName(name=NullString(string="", valid=True))

    assert not validator.validate(test).is_valid


def test_wrapper_length_threshold(validator: Validator) -> None:
    assert not validator.validate(LongName(name=NullString.of("x" * 10))).is_valid
    assert validator.validate(LongName(name=NullString.of("x" * 11))).is_valid


def test_null_wrapper_with_length_rule_reports_required(validator: Validator) -> None:
    result = validator.validate(LongName(name=NullString.null()))

    assert [e.tag for e in result.field_errors] == ["required"]


def test_nullable_int(validator: Validator) -> None:
    assert validator.validate(RequiredCount(count=NullInt64.of(7))).is_valid
    assert not validator.validate(RequiredCount(count=NullInt64.null())).is_valid


def test_valid_zero_int_counts_as_empty(validator: Validator) -> None:
    result = validator.validate(RequiredCount(count=NullInt64(int64=0, valid=True)))

    assert not result.is_valid
    assert result.field_errors[0].value == 0


def test_without_hook_wrapper_is_an_opaque_struct() -> None:
    bare = Validator(required_struct_enabled=True)
    test = RequiredName(name=NullString(string="Hello", valid=False))

    # The wrapper object itself is present, so required cannot see the null.
    assert bare.validate(test).is_valid
