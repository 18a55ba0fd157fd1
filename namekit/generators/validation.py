#!/usr/bin/env python3
"""Argument checks shared by generators and strategies."""

from typing import Any

from namekit.errors import ConfigurationError


def is_positive_int(value: Any) -> bool:
    # bool is an int subclass, but True is not a length
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def require_positive_int(value: Any, name: str) -> int:
    """Return value unchanged, or raise ConfigurationError naming the argument."""
    if not is_positive_int(value):
        raise ConfigurationError(
            f"`{name}` must be an integer, greater or equal to 1 (got {value!r})"
        )
    return value
