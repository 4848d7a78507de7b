"""Shared fixtures for nullable-validation tests."""

from __future__ import annotations

import pytest

from nullable_validation.validation.factory import create_validator
from nullable_validation.validation.rules import build_default_registry
from nullable_validation.validation.validator import Validator


@pytest.fixture
def validator() -> Validator:
    """Validator with every built-in nullable wrapper hooked."""
    return create_validator()


@pytest.fixture
def registry():
    """Default rule registry."""
    return build_default_registry()
