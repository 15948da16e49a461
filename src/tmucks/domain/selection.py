"""Ordered list of config entries with a clamped cursor.

Pure navigation logic with no I/O. The cursor is ``None`` exactly when the
list is empty; otherwise it always points at a valid index.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import ConfigEntry


class SelectionModel:
    """Sorted entries plus the index of the highlighted one.

    Movement clamps at both ends; there is no wraparound.

    Example:
        >>> from pathlib import Path
        >>> model = SelectionModel()
        >>> model.cursor is None
        True
        >>> model.set_entries([ConfigEntry("b", Path("b")), ConfigEntry("a", Path("a"))])
        >>> model.names
        ('a', 'b')
        >>> model.move_up()
        >>> model.cursor
        0
        >>> model.move_down(); model.move_down()
        >>> model.current().name
        'b'
    """

    __slots__ = ("_cursor", "_entries")

    def __init__(self, entries: Iterable[ConfigEntry] = ()) -> None:
        self._entries: tuple[ConfigEntry, ...] = ()
        self._cursor: int | None = None
        self.set_entries(entries)

    @property
    def entries(self) -> tuple[ConfigEntry, ...]:
        return self._entries

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    @property
    def cursor(self) -> int | None:
        return self._cursor

    def __len__(self) -> int:
        return len(self._entries)

    def set_entries(self, entries: Iterable[ConfigEntry]) -> None:
        """Replace the list and clamp the cursor into the new bounds."""
        self._entries = tuple(sorted(entries, key=lambda entry: entry.name))
        if not self._entries:
            self._cursor = None
        elif self._cursor is None:
            self._cursor = 0
        else:
            self._cursor = min(self._cursor, len(self._entries) - 1)

    def move_up(self) -> None:
        if self._cursor is not None and self._cursor > 0:
            self._cursor -= 1

    def move_down(self) -> None:
        if self._cursor is not None and self._cursor < len(self._entries) - 1:
            self._cursor += 1

    def current(self) -> ConfigEntry | None:
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def select_name(self, name: str) -> bool:
        """Move the cursor onto *name*; return False if it is not listed."""
        for index, entry in enumerate(self._entries):
            if entry.name == name:
                self._cursor = index
                return True
        return False


__all__ = ["SelectionModel"]
