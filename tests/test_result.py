import pytest

from nullable_validation.primitives.exceptions import ValidationError
from nullable_validation.validation.result import FieldError, ValidationResult


def _error(namespace: str, tag: str = "required") -> FieldError:
    return FieldError(namespace=namespace, field=namespace.rsplit(".", 1)[-1], tag=tag)


def test_field_error_message() -> None:
    error = _error("TestCase.Name")

    assert str(error) == (
        "Key: 'TestCase.Name' Error:Field validation for 'Name' "
        "failed on the 'required' tag"
    )
    assert error.struct_namespace == "TestCase"


def test_success_and_failure() -> None:
    ok = ValidationResult.success()
    bad = ValidationResult.failure([_error("A.b")])

    assert ok
    assert ok.is_valid
    assert ok.errors == {}
    assert not bad
    assert not bad.is_valid


def test_errors_grouped_by_namespace() -> None:
    result = ValidationResult.success()
    result.add_error(_error("A.b"))
    result.add_error(_error("A.c", tag="gt"))
    result.add_error(_error("A.b", tag="email"))

    assert list(result.errors) == ["A.b", "A.c"]
    assert len(result.errors["A.b"]) == 2
    assert "'gt' tag" in result.errors["A.c"][0]


def test_merge_keeps_order() -> None:
    first = ValidationResult.failure([_error("A.b")])
    second = ValidationResult.failure([_error("A.c")])

    merged = first.merge(second)

    assert [e.namespace for e in merged.field_errors] == ["A.b", "A.c"]
    assert len(first.field_errors) == 1


def test_raise_for_errors() -> None:
    ValidationResult.success().raise_for_errors()

    result = ValidationResult.failure([_error("A.b")])
    with pytest.raises(ValidationError) as exc_info:
        result.raise_for_errors()

    assert exc_info.value.result is result
    assert "A.b" in exc_info.value.errors


def test_str_lists_every_error() -> None:
    result = ValidationResult.failure([_error("A.b"), _error("A.c")])

    assert str(result).count("Key:") == 2
