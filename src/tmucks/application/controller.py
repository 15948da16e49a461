"""Controller orchestrating intents against the store and the live target.

The controller is the only component that mutates the selection model and
the input state. It processes one intent to completion before returning,
and exposes an immutable :class:`ControllerSnapshot` for rendering.

Contents:
    * :class:`Controller` - Intent dispatch and the direct operations used by the CLI.
    * :class:`ControllerSnapshot` - Frozen view for the TUI.
    * :class:`StepResult` - Outcome of one :meth:`Controller.handle` call.
    * :class:`StatusLine` - Status message with timeout back to the help text.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from ..domain.behaviors import DEFAULT_EXTENSION, ensure_extension, validate_name
from ..domain.enums import Direction, InputMode, ReloadStatus
from ..domain.errors import InputStateError, InvalidNameError, NoSelectionError, NotFoundError, TmucksError
from ..domain.input_state import InputState
from ..domain.intents import (
    Apply,
    Backspace,
    BeginSave,
    BeginUpdate,
    CancelInput,
    ConfirmSave,
    ConfirmUpdate,
    Delete,
    Intent,
    Navigate,
    Quit,
    TypeChar,
)
from ..domain.models import ConfigEntry, ReloadOutcome
from ..domain.selection import SelectionModel
from .ports import ActiveConfigTarget, ConfigStore

logger = logging.getLogger(__name__)

#: Help text shown whenever no other message is active.
DEFAULT_STATUS: Final[str] = "j/k navigate, enter apply, s save current, u update, d delete, q quit"

#: Default number of seconds before a status message reverts to the help text.
DEFAULT_STATUS_TIMEOUT: Final[float] = 5.0


@dataclass(frozen=True, slots=True)
class StepResult:
    """Outcome of a single intent.

    Attributes:
        quit: The outer loop should stop.
        reload: Reload outcome when the intent applied a config.
        error: The failure that aborted the intent, already shown on the status line.
    """

    quit: bool = False
    reload: ReloadOutcome | None = None
    error: TmucksError | None = None


@dataclass(frozen=True, slots=True)
class ControllerSnapshot:
    """Immutable state handed to the renderer."""

    entries: tuple[str, ...]
    cursor: int | None
    input_mode: InputMode
    input_buffer: str
    pending_name: str | None
    status: str
    status_is_error: bool

    @property
    def selected(self) -> str | None:
        return None if self.cursor is None else self.entries[self.cursor]


class StatusLine:
    """A message that falls back to :data:`DEFAULT_STATUS` after *timeout* seconds.

    Example:
        >>> now = [0.0]
        >>> line = StatusLine(timeout=5.0, clock=lambda: now[0])
        >>> line.set("Applied config: work.conf")
        >>> line.text
        'Applied config: work.conf'
        >>> now[0] = 6.0
        >>> line.tick()
        True
        >>> line.text == DEFAULT_STATUS
        True
    """

    __slots__ = ("_clock", "_is_error", "_set_at", "_text", "timeout")

    def __init__(self, *, timeout: float = DEFAULT_STATUS_TIMEOUT, clock: Callable[[], float] = time.monotonic) -> None:
        self.timeout = timeout
        self._clock = clock
        self._text: str | None = None
        self._is_error = False
        self._set_at = 0.0

    @property
    def text(self) -> str:
        return self._text if self._text is not None else DEFAULT_STATUS

    @property
    def is_error(self) -> bool:
        return self._text is not None and self._is_error

    def set(self, text: str, *, error: bool = False) -> None:
        self._text = text
        self._is_error = error
        self._set_at = self._clock()

    def clear(self) -> None:
        self._text = None
        self._is_error = False

    def tick(self) -> bool:
        """Drop an expired message; return True if the visible text changed."""
        if self._text is None or self._clock() - self._set_at < self.timeout:
            return False
        self.clear()
        return True


class Controller:
    """Drive apply, save, update, and delete against a store and a live target.

    Args:
        store: Directory of named configs.
        target: Live config file and reload hook.
        extension: Suffix appended to entered names that lack it ("" disables).
        status_timeout: Seconds before a status message reverts to help text.
        clock: Monotonic clock, injectable for tests.

    Example:
        >>> from tmucks.adapters.memory import InMemoryConfigStore, InMemoryConfigTarget
        >>> store = InMemoryConfigStore({"work.conf": b"set -g mouse on"})
        >>> target = InMemoryConfigTarget(b"")
        >>> controller = Controller(store, target)
        >>> controller.refresh()
        >>> controller.handle(Apply()).reload.succeeded
        True
        >>> target.content
        b'set -g mouse on'
    """

    def __init__(
        self,
        store: ConfigStore,
        target: ActiveConfigTarget,
        *,
        extension: str = DEFAULT_EXTENSION,
        status_timeout: float = DEFAULT_STATUS_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store = store
        self._target = target
        self._extension = extension
        self.selection = SelectionModel()
        self.input = InputState()
        self.status = StatusLine(timeout=status_timeout, clock=clock)
        self._handlers: dict[type[Any], Callable[[Any], StepResult]] = {
            Navigate: self._on_navigate,
            Apply: self._on_apply,
            BeginSave: self._on_begin_save,
            ConfirmSave: self._on_confirm_save,
            BeginUpdate: self._on_begin_update,
            ConfirmUpdate: self._on_confirm_update,
            CancelInput: self._on_cancel,
            Delete: self._on_delete,
            TypeChar: self._on_type_char,
            Backspace: self._on_backspace,
            Quit: self._on_quit,
        }

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def target(self) -> ActiveConfigTarget:
        return self._target

    # ------------------------------------------------------------------
    # Intent dispatch
    # ------------------------------------------------------------------

    def handle(self, intent: Intent) -> StepResult:
        """Run one intent to completion and report its outcome.

        Failures abort the intent, land on the status line, and come back
        in :attr:`StepResult.error`; they are never raised from here.
        """
        handler = self._handlers[type(intent)]
        try:
            return handler(intent)
        except TmucksError as exc:
            logger.warning(
                "Intent failed",
                extra={"intent": type(intent).__name__, "error": str(exc), "error_type": type(exc).__name__},
            )
            self.status.set(f"error: {exc}", error=True)
            return StepResult(error=exc)

    def _on_navigate(self, intent: Navigate) -> StepResult:
        if self.input.is_idle:
            if intent.direction is Direction.UP:
                self.selection.move_up()
            else:
                self.selection.move_down()
        return StepResult()

    def _on_apply(self, _intent: Apply) -> StepResult:
        self._require_idle()
        return StepResult(reload=self.apply())

    def _on_begin_save(self, _intent: BeginSave) -> StepResult:
        self.input.begin_save()
        return StepResult()

    def _on_confirm_save(self, _intent: ConfirmSave) -> StepResult:
        if self.input.mode is not InputMode.EDITING:
            raise InvalidNameError("No config name is being entered")
        typed = self.input.confirm().strip()
        if not typed:
            raise InvalidNameError("Config name cannot be empty")
        self.save(typed)
        return StepResult()

    def _on_begin_update(self, _intent: BeginUpdate) -> StepResult:
        self._require_idle()
        self.input.begin_confirm(self._selected().name)
        return StepResult()

    def _on_confirm_update(self, _intent: ConfirmUpdate) -> StepResult:
        self.update(self.input.accept())
        return StepResult()

    def _on_cancel(self, _intent: CancelInput) -> StepResult:
        if not self.input.is_idle:
            self.input.cancel()
            self.status.clear()
        return StepResult()

    def _on_delete(self, _intent: Delete) -> StepResult:
        self._require_idle()
        self.delete()
        return StepResult()

    def _on_type_char(self, intent: TypeChar) -> StepResult:
        if self.input.mode is InputMode.EDITING:
            self.input.push_char(intent.char)
        return StepResult()

    def _on_backspace(self, _intent: Backspace) -> StepResult:
        if self.input.mode is InputMode.EDITING:
            self.input.backspace()
        return StepResult()

    def _on_quit(self, _intent: Quit) -> StepResult:
        return StepResult(quit=True)

    # ------------------------------------------------------------------
    # Direct operations (raise on failure)
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Re-list the store into the selection model."""
        self.selection.set_entries(self._store.list_entries())

    def normalize(self, name: str) -> str:
        """Apply extension normalization and validate the result."""
        return ensure_extension(validate_name(name), self._extension)

    def apply(self, name: str | None = None) -> ReloadOutcome:
        """Copy an entry to the live file, then ask tmux to reload.

        The copy is never rolled back; the reload outcome is informational.

        Raises:
            NoSelectionError: No *name* given and nothing is selected.
            NotFoundError: The entry does not exist.
            StoreUnavailableError: Reading or writing failed.
        """
        entry_name = self.normalize(name) if name is not None else self._selected().name
        data = self._store.read(entry_name)
        self._target.apply(data)
        outcome = self._target.reload()
        self.selection.select_name(entry_name)
        logger.info("Applied config", extra={"config": entry_name, "reload": outcome.status.value})
        failed = outcome.status is ReloadStatus.RELOAD_FAILED
        self.status.set(f"Applied config: {entry_name} ({outcome.describe()})", error=failed)
        return outcome

    def save(self, name: str) -> ConfigEntry:
        """Snapshot the live file into the store under *name*.

        The live content is read now, not when the prompt started.
        """
        entry_name = self.normalize(name)
        entry = self._store_live_config(entry_name)
        self.status.set(f"Saved current config as: {entry.name}")
        return entry

    def update(self, name: str) -> ConfigEntry:
        """Overwrite an existing entry with the live file.

        Raises:
            NotFoundError: *name* is not in the store.
        """
        entry_name = self.normalize(name)
        if not self._store.exists(entry_name):
            raise NotFoundError(f"Config file not found: {entry_name}")
        entry = self._store_live_config(entry_name)
        self.status.set(f"Updated config: {entry.name}")
        return entry

    def delete(self, name: str | None = None) -> str:
        """Remove an entry; the live file is left untouched."""
        entry_name = self.normalize(name) if name is not None else self._selected().name
        self._store.delete(entry_name)
        logger.info("Deleted config", extra={"config": entry_name})
        self.refresh()
        self.status.set(f"Deleted config: {entry_name}")
        return entry_name

    def tick(self) -> bool:
        """Expire the status message; return True if a redraw is needed."""
        return self.status.tick()

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            entries=self.selection.names,
            cursor=self.selection.cursor,
            input_mode=self.input.mode,
            input_buffer=self.input.buffer,
            pending_name=self.input.pending,
            status=self._status_text(),
            status_is_error=self.input.is_idle and self.status.is_error,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _store_live_config(self, entry_name: str) -> ConfigEntry:
        data = self._target.read()
        entry = self._store.write(entry_name, data)
        logger.info("Stored live config", extra={"config": entry.name, "bytes": len(data)})
        self.refresh()
        self.selection.select_name(entry.name)
        return entry

    def _selected(self) -> ConfigEntry:
        entry = self.selection.current()
        if entry is None:
            raise NoSelectionError("No config selected")
        return entry

    def _require_idle(self) -> None:
        if not self.input.is_idle:
            raise InputStateError("Finish or cancel the current prompt first")

    def _status_text(self) -> str:
        if self.input.mode is InputMode.EDITING:
            hint = f" (without {self._extension})" if self._extension else ""
            return f"enter config name{hint}: {self.input.buffer}"
        if self.input.mode is InputMode.CONFIRMING:
            return f"update '{self.input.pending}' with current {self._target.path.name}? (y/n)"
        return self.status.text


__all__ = [
    "DEFAULT_STATUS",
    "DEFAULT_STATUS_TIMEOUT",
    "Controller",
    "ControllerSnapshot",
    "StatusLine",
    "StepResult",
]
