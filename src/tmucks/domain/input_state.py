"""Name-entry state machine used by save and update prompts.

Three modes: idle, editing a name, and confirming an overwrite. Every
prompt starts from idle and returns to idle, so at most one prompt is in
flight at a time.
"""

from __future__ import annotations

from .enums import InputMode, InputPurpose
from .errors import InputStateError


class InputState:
    """Mode, typed buffer, and pending confirmation target.

    Example:
        >>> state = InputState()
        >>> state.begin_save()
        >>> for char in "work":
        ...     state.push_char(char)
        >>> state.backspace()
        >>> state.buffer
        'wor'
        >>> state.confirm()
        'wor'
        >>> state.mode
        <InputMode.IDLE: 'idle'>
    """

    __slots__ = ("_buffer", "_mode", "_pending", "_purpose")

    def __init__(self) -> None:
        self._mode = InputMode.IDLE
        self._purpose: InputPurpose | None = None
        self._buffer = ""
        self._pending: str | None = None

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def purpose(self) -> InputPurpose | None:
        return self._purpose

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def pending(self) -> str | None:
        return self._pending

    @property
    def is_idle(self) -> bool:
        return self._mode is InputMode.IDLE

    def begin_save(self) -> None:
        """Start typing a name for a new entry; the buffer starts empty."""
        self._require(InputMode.IDLE, "begin name entry")
        self._mode = InputMode.EDITING
        self._purpose = InputPurpose.SAVE_NAME
        self._buffer = ""

    def push_char(self, char: str) -> None:
        self._require(InputMode.EDITING, "type")
        if char.isprintable():
            self._buffer += char

    def backspace(self) -> None:
        self._require(InputMode.EDITING, "erase")
        self._buffer = self._buffer[:-1]

    def confirm(self) -> str:
        """Return the typed name and go back to idle."""
        self._require(InputMode.EDITING, "confirm a name")
        text = self._buffer
        self._reset()
        return text

    def begin_confirm(self, name: str) -> None:
        """Ask for a yes/no decision about *name*."""
        self._require(InputMode.IDLE, "ask for confirmation")
        self._mode = InputMode.CONFIRMING
        self._pending = name

    def accept(self) -> str:
        """Return the name awaiting confirmation and go back to idle."""
        self._require(InputMode.CONFIRMING, "accept")
        name = self._pending or ""
        self._reset()
        return name

    def cancel(self) -> None:
        """Discard any prompt state. A no-op while idle."""
        self._reset()

    def _reset(self) -> None:
        self._mode = InputMode.IDLE
        self._purpose = None
        self._buffer = ""
        self._pending = None

    def _require(self, mode: InputMode, action: str) -> None:
        if self._mode is not mode:
            raise InputStateError(f"Cannot {action} while input is {self._mode.value}")


__all__ = ["InputState"]
