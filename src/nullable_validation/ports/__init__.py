from .validation import IValidator
from .valuer import IValuer

__all__ = [
    "IValidator",
    "IValuer",
]
