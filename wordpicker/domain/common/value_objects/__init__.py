"""Common value objects shared across all domain modules."""

from .ids import PickerSessionId

__all__ = [
    "PickerSessionId",
]
