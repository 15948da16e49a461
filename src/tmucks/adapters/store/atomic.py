"""Atomic file replacement shared by the store and the live target.

Content is written to a temp file in the destination directory, flushed to
disk, and moved into place with :func:`os.replace`, so readers observe the
old bytes or the new bytes and never a partial file.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Final

#: Prefix for in-flight temp files; store listings skip these.
TEMP_PREFIX: Final[str] = ".tmucks-"

#: Mode for files that did not exist before (mkstemp would leave 0600).
NEW_FILE_MODE: Final[int] = 0o644


def _target_mode(path: Path) -> int:
    try:
        return path.stat().st_mode & 0o7777
    except FileNotFoundError:
        return NEW_FILE_MODE


def atomic_write(path: Path, data: bytes) -> None:
    """Replace *path* with *data* atomically.

    Keeps the permission bits of an existing destination file (new files
    get :data:`NEW_FILE_MODE`). A symlinked *path* is written through: the
    file it points at is replaced and the link stays. The temp file is
    removed if any step fails.

    Raises:
        OSError: Propagated from the filesystem; nothing is left behind.

    Example:
        >>> import tempfile
        >>> target = Path(tempfile.mkdtemp()) / "demo.conf"
        >>> atomic_write(target, b"set -g mouse on")
        >>> target.read_bytes()
        b'set -g mouse on'
    """
    destination = path.resolve()
    fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=".tmp", dir=destination.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, _target_mode(destination))
        os.replace(tmp_path, destination)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            tmp_path.unlink()
        raise


__all__ = ["TEMP_PREFIX", "atomic_write"]
