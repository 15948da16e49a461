"""Config store adapter - flat directory of named config files.

Contents:
    * :mod:`.filesystem` - Directory-backed store and first-run setup
    * :mod:`.atomic` - Temp-file-then-rename writes
"""

from __future__ import annotations

from .atomic import atomic_write
from .filesystem import FilesystemConfigStore, create_filesystem_store, ensure_store_directory

__all__ = [
    "FilesystemConfigStore",
    "atomic_write",
    "create_filesystem_store",
    "ensure_store_directory",
]
