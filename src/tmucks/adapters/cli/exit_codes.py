"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful, grep-friendly integer instead of a bare ``1``.

Signal codes (130, 143) are informational constants only; ``lib_cli_exit_tools``
handles signal-to-exit-code translation.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` - Map a domain error to its exit code.
"""

from __future__ import annotations

from enum import IntEnum

from tmucks.domain.errors import (
    InvalidNameError,
    NoSelectionError,
    NotFoundError,
    StoreUnavailableError,
    TmucksError,
)


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 2-13: errno-derived codes (ENOENT, EACCES)
    * 22: EINVAL
    * 69: EX_UNAVAILABLE (sysexits.h)
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.STORE_UNAVAILABLE)
        69
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    STORE_UNAVAILABLE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


def exit_code_for(exc: TmucksError) -> ExitCode:
    """Return the exit code a command reports for *exc*.

    Storage failures caused by a permission error report
    ``PERMISSION_DENIED`` instead of ``STORE_UNAVAILABLE``.

    Examples:
        >>> exit_code_for(NotFoundError("gone"))
        <ExitCode.FILE_NOT_FOUND: 2>
        >>> exit_code_for(InvalidNameError("bad"))
        <ExitCode.INVALID_ARGUMENT: 22>
        >>> exit_code_for(TmucksError("other"))
        <ExitCode.GENERAL_ERROR: 1>
    """
    if isinstance(exc, NotFoundError):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, (InvalidNameError, NoSelectionError)):
        return ExitCode.INVALID_ARGUMENT
    if isinstance(exc, StoreUnavailableError):
        if isinstance(exc.__cause__, PermissionError):
            return ExitCode.PERMISSION_DENIED
        return ExitCode.STORE_UNAVAILABLE
    return ExitCode.GENERAL_ERROR


__all__ = ["ExitCode", "exit_code_for"]
