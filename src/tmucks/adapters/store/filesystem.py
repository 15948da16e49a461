"""Filesystem-backed config store: one flat directory, one file per entry."""

from __future__ import annotations

import contextlib
import logging
from pathlib import Path

from tmucks.domain.behaviors import validate_name
from tmucks.domain.errors import NotFoundError, StoreUnavailableError
from tmucks.domain.models import ConfigEntry

from .atomic import TEMP_PREFIX, atomic_write

logger = logging.getLogger(__name__)


class FilesystemConfigStore:
    """Named config files stored directly under *directory*.

    Every regular file in the directory is an entry named by its file
    name. Subdirectories and in-flight temp files are ignored. The store
    never creates its directory; first-run setup does that once.

    Example:
        >>> import tempfile
        >>> store = FilesystemConfigStore(Path(tempfile.mkdtemp()))
        >>> store.write("work.conf", b"set -g mouse on").name
        'work.conf'
        >>> [entry.name for entry in store.list_entries()]
        ['work.conf']
        >>> store.read("work.conf")
        b'set -g mouse on'
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    def list_entries(self) -> list[ConfigEntry]:
        """Scan the directory and return its entries sorted by name.

        A file that vanishes between the scan and the type check is
        treated as absent.

        Raises:
            StoreUnavailableError: The directory is missing or unreadable.
        """
        try:
            children = list(self._directory.iterdir())
        except OSError as exc:
            detail = exc.strerror or exc
            raise StoreUnavailableError(f"Cannot read config directory {self._directory}: {detail}") from exc

        entries: list[ConfigEntry] = []
        for child in children:
            if child.name.startswith(TEMP_PREFIX):
                continue
            with contextlib.suppress(FileNotFoundError):
                if child.is_file():
                    entries.append(ConfigEntry(name=child.name, path=child))
        entries.sort(key=lambda entry: entry.name)
        logger.debug("Listed config directory", extra={"directory": str(self._directory), "count": len(entries)})
        return entries

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def read(self, name: str) -> bytes:
        path = self._path_for(name)
        try:
            return path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise NotFoundError(f"Config file not found: {name}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read config {name}: {exc.strerror or exc}") from exc

    def write(self, name: str, data: bytes) -> ConfigEntry:
        path = self._path_for(name)
        try:
            atomic_write(path, data)
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write config {name}: {exc.strerror or exc}") from exc
        logger.debug("Wrote config", extra={"config": name, "bytes": len(data)})
        return ConfigEntry(name=name, path=path)

    def delete(self, name: str) -> None:
        path = self._path_for(name)
        if not path.is_file():
            raise NotFoundError(f"Config file not found: {name}")
        try:
            path.unlink()
        except FileNotFoundError as exc:
            raise NotFoundError(f"Config file not found: {name}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot delete config {name}: {exc.strerror or exc}") from exc
        logger.debug("Deleted config file", extra={"config": name})

    def _path_for(self, name: str) -> Path:
        return self._directory / validate_name(name)


def create_filesystem_store(directory: Path) -> FilesystemConfigStore:
    """Build a :class:`FilesystemConfigStore` for *directory*."""
    return FilesystemConfigStore(directory)


def ensure_store_directory(directory: Path) -> bool:
    """Create the store directory on first run.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        StoreUnavailableError: The directory could not be created.
    """
    if directory.is_dir():
        return False
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreUnavailableError(f"Cannot create config directory {directory}: {exc.strerror or exc}") from exc
    logger.info("Created config directory", extra={"directory": str(directory)})
    return True


__all__ = ["FilesystemConfigStore", "create_filesystem_store", "ensure_store_directory"]
