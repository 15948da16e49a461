"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

import os

from .errors import InvalidNameError

DEFAULT_EXTENSION = ".conf"

_SEPARATORS = frozenset(sep for sep in ("/", "\\", os.sep, os.altsep) if sep)


def validate_name(name: str) -> str:
    r"""Return *name* unchanged when it is a safe, flat file name.

    A config name becomes a file directly inside the store directory, so it
    must be non-empty, free of path separators and NUL bytes, and must not
    be one of the directory aliases ``.`` or ``..``.

    Args:
        name: Candidate entry name.

    Returns:
        The validated name.

    Raises:
        InvalidNameError: If the name is empty or could escape the directory.

    Example:
        >>> validate_name("work.conf")
        'work.conf'
        >>> validate_name("a/b")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidNameError: Invalid config name 'a/b': must not contain path separators
    """
    if not name or not name.strip():
        raise InvalidNameError("Config name cannot be empty")
    if any(sep in name for sep in _SEPARATORS):
        raise InvalidNameError(f"Invalid config name {name!r}: must not contain path separators")
    if "\x00" in name:
        raise InvalidNameError(f"Invalid config name {name!r}: must not contain NUL bytes")
    if name in (".", ".."):
        raise InvalidNameError(f"Invalid config name {name!r}")
    return name


def ensure_extension(name: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Append *extension* unless *name* already ends with it.

    An empty extension disables normalization.

    Example:
        >>> ensure_extension("work")
        'work.conf'
        >>> ensure_extension("work.conf")
        'work.conf'
        >>> ensure_extension("work", "")
        'work'
    """
    if not extension or name.endswith(extension):
        return name
    return f"{name}{extension}"


__all__ = [
    "DEFAULT_EXTENSION",
    "ensure_extension",
    "validate_name",
]
