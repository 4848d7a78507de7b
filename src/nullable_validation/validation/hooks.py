"""Extraction hooks: unwrap nullable wrappers before rules run."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..ports.valuer import IValuer

logger = logging.getLogger("nullable_validation.hooks")

ExtractionHook = Callable[[Any], Any]


def validate_valuer(field_value: Any) -> Any:
    """Return the real value of a nullable wrapper, or ``None`` when null.

    For a ``NullString`` the result is a ``str``; ``None`` means the field
    is null and a ``required`` rule on it fails. A wrapper whose ``value()``
    raises is treated as null.
    """
    if not isinstance(field_value, IValuer):
        return None
    try:
        return field_value.value()
    except Exception:
        logger.warning(
            "value() of %s raised; treating field as null",
            type(field_value).__name__,
            exc_info=True,
        )
        return None
