"""In-memory config store for testing.

Satisfies the same ConfigStore protocol as the filesystem store but keeps
entries in a dict. Set ``unavailable`` to simulate an unreadable directory.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping
from pathlib import Path

from ...domain.behaviors import validate_name
from ...domain.errors import NotFoundError, StoreUnavailableError
from ...domain.models import ConfigEntry


class InMemoryConfigStore:
    """Dict-backed store.

    Example:
        >>> store = InMemoryConfigStore({"b.conf": b"b", "a.conf": b"a"})
        >>> [entry.name for entry in store.list_entries()]
        ['a.conf', 'b.conf']
        >>> store.delete("a.conf")
        >>> store.delete("a.conf")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        NotFoundError: Config file not found: a.conf
    """

    def __init__(self, entries: Mapping[str, bytes] | None = None, *, directory: Path | None = None) -> None:
        self._directory = directory or Path(tempfile.gettempdir()) / "tmucks" / "configs"
        self.files: dict[str, bytes] = {validate_name(name): data for name, data in (entries or {}).items()}
        self.unavailable = False

    @property
    def directory(self) -> Path:
        return self._directory

    def list_entries(self) -> list[ConfigEntry]:
        self._check_available()
        return [ConfigEntry(name=name, path=self._directory / name) for name in sorted(self.files)]

    def exists(self, name: str) -> bool:
        return validate_name(name) in self.files

    def read(self, name: str) -> bytes:
        self._check_available()
        try:
            return self.files[validate_name(name)]
        except KeyError as exc:
            raise NotFoundError(f"Config file not found: {name}") from exc

    def write(self, name: str, data: bytes) -> ConfigEntry:
        validate_name(name)
        self._check_available()
        self.files[name] = bytes(data)
        return ConfigEntry(name=name, path=self._directory / name)

    def delete(self, name: str) -> None:
        self._check_available()
        if self.files.pop(validate_name(name), None) is None:
            raise NotFoundError(f"Config file not found: {name}")

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError(f"Cannot read config directory {self._directory}")


__all__ = ["InMemoryConfigStore"]
