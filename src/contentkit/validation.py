"""Shared argument validation helpers."""

import io
import os
from pathlib import Path

from contentkit.errors import InvalidArgumentValue


def require_non_empty_string(value: object, *, field_name: str, what: str | None = None) -> str:
    """Validate a required, non-empty string field."""
    if not isinstance(value, str) or not value:
        raise InvalidArgumentValue(field_name, value, what)
    return value


def require_string(value: object, *, field_name: str, what: str | None = None) -> str:
    """Validate a required string field (empty strings allowed)."""
    if not isinstance(value, str):
        raise InvalidArgumentValue(field_name, value, what)
    return value


def optional_string(value: object, *, field_name: str, what: str | None = None) -> str | None:
    """Validate an optional string field."""
    if value is None:
        return None
    return require_string(value, field_name=field_name, what=what)


def require_int(value: object, *, field_name: str, what: str | None = None) -> int:
    """Validate a required integer field (rejects booleans)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentValue(field_name, value, what)
    return value


def require_non_negative_int(value: object, *, field_name: str, what: str | None = None) -> int:
    """Validate a required integer field that must be >= 0."""
    number = require_int(value, field_name=field_name, what=what)
    if number < 0:
        raise InvalidArgumentValue(field_name, value, what)
    return number


def optional_path(value: object, *, field_name: str, what: str | None = None) -> Path | None:
    """Validate an optional filesystem path field."""
    if value is None:
        return None
    if isinstance(value, str) and value:
        return Path(value)
    if isinstance(value, os.PathLike):
        return Path(value)
    raise InvalidArgumentValue(field_name, value, what)


def is_readable_stream(value: object) -> bool:
    """Return whether a value is an open binary stream that supports reading."""
    if not isinstance(value, io.IOBase) or value.closed:
        return False
    return value.readable() and not isinstance(value, io.TextIOBase)
