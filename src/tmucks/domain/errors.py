"""Domain-specific exceptions for typed error handling at boundaries.

Every failure the store, the live target, or the controller can report is a
subclass of :class:`TmucksError`, so CLI and TUI boundaries can catch one base
type and map it to an exit code or a status line.
"""

from __future__ import annotations


class TmucksError(Exception):
    """Base class for all tmucks failures."""


class NotFoundError(TmucksError):
    """A named config entry (or the live config file) does not exist.

    Example:
        >>> from tmucks.domain.errors import NotFoundError
        >>> str(NotFoundError("Config file not found: work.conf"))
        'Config file not found: work.conf'
    """


class InvalidNameError(TmucksError, ValueError):
    """A config name is empty or would escape the store directory.

    Inherits from ValueError so generic argument validation handlers
    also catch it.

    Example:
        >>> from tmucks.domain.errors import InvalidNameError
        >>> isinstance(InvalidNameError("a/b"), ValueError)
        True
    """


class NoSelectionError(TmucksError):
    """An intent needs a selected entry but the selection is empty."""


class StoreUnavailableError(TmucksError):
    """The store directory or live file could not be read or written.

    Wraps the underlying :class:`OSError` as ``__cause__``.

    Example:
        >>> from tmucks.domain.errors import StoreUnavailableError
        >>> str(StoreUnavailableError("Cannot read config directory /nope"))
        'Cannot read config directory /nope'
    """


class InputStateError(TmucksError):
    """A name-entry transition was requested from the wrong input mode."""


__all__ = [
    "InputStateError",
    "InvalidNameError",
    "NoSelectionError",
    "NotFoundError",
    "StoreUnavailableError",
    "TmucksError",
]
