"""
Helper Utilities.

Provides argument checks shared by the configuration overrides and the
worker identity generator.
"""

import uuid
from typing import Any

from .errors import InvalidArgumentError


def new_worker_id() -> str:
    """Returns a fresh, globally unique worker identity (random UUID4)."""
    return str(uuid.uuid4())


def _check_is_value_not_empty(field: str, value: Any):
    if not isinstance(value, str):
        raise InvalidArgumentError(field, value, "expected a string")
    if not value:
        raise InvalidArgumentError(field, value, "must not be empty")


def _check_is_value_positive(field: str, value: Any):
    # bool is an int subclass, but True is not a meaningful count or duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(field, value, "expected an integer")
    if value <= 0:
        raise InvalidArgumentError(field, value, "must be positive")


def _check_is_bool(field: str, value: Any):
    if not isinstance(value, bool):
        raise InvalidArgumentError(field, value, "expected a boolean")
