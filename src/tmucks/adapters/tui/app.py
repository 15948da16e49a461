"""Textual front end: key events in, controller snapshots out.

Every key press is mapped to an intent and handled one at a time, so no two
controller steps overlap. Apply waits on ``tmux source-file``; it runs in a
thread worker and keys are dropped until it finishes. A timer expires stale
status messages.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import ClassVar

import lib_log_rich.runtime
from textual import events
from textual.app import App, ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from tmucks import __init__conf__
from tmucks.application.controller import Controller, StepResult
from tmucks.domain.intents import Apply, Intent

from .keys import key_to_intent
from .render import render_entries, render_pending, render_status

logger = logging.getLogger(__name__)

#: Seconds between status-timeout checks.
TICK_INTERVAL = 0.5


class EntryList(VerticalScroll):
    """Scrollable list that never takes focus, so every key reaches the app."""

    can_focus = False


class TmucksApp(App[None]):
    """Full-screen config picker."""

    TITLE = __init__conf__.name
    ENABLE_COMMAND_PALETTE = False
    CSS: ClassVar[str] = """
    #title {
        padding: 0 1;
        text-style: bold;
    }
    #entries {
        border: round $accent;
        padding: 0 1;
        height: 1fr;
    }
    #status {
        padding: 0 1;
        height: 1;
    }
    """

    def __init__(self, controller: Controller) -> None:
        super().__init__()
        self.controller = controller
        self.busy = False

    def compose(self) -> ComposeResult:
        yield Static(f"{__init__conf__.name}  {self.controller.target.path}", id="title")
        with EntryList(id="entries-scroll"):
            yield Static(id="entries")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.set_interval(TICK_INTERVAL, self._expire_status)
        self.redraw()

    def on_key(self, event: events.Key) -> None:
        if self.busy:
            event.stop()
            event.prevent_default()
            return
        intent = key_to_intent(event.key, event.character, self.controller.input.mode)
        if intent is None:
            return
        event.stop()
        event.prevent_default()
        if isinstance(intent, Apply):
            self.busy = True
            self.query_one("#status", Static).update(render_pending(self.controller.snapshot()))
            self.run_worker(partial(self._handle_in_thread, intent), thread=True, exclusive=False)
            return
        self._finish_step(self.controller.handle(intent))

    def _handle_in_thread(self, intent: Intent) -> None:
        result = self.controller.handle(intent)
        self.call_from_thread(self._finish_step, result)

    def _finish_step(self, result: StepResult) -> None:
        self.busy = False
        if result.quit:
            self.exit()
            return
        self.redraw()

    def redraw(self) -> None:
        snapshot = self.controller.snapshot()
        self.query_one("#entries", Static).update(render_entries(snapshot))
        self.query_one("#status", Static).update(render_status(snapshot))

    def _expire_status(self) -> None:
        if not self.busy and self.controller.tick():
            self.redraw()


def run_interactive(controller: Controller) -> None:
    """Load the listing and run the Textual app until the user quits.

    Raises:
        StoreUnavailableError: The config directory cannot be listed.
    """
    controller.refresh()
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    logger.debug("Starting interactive mode", extra={"entries": len(controller.selection)})
    TmucksApp(controller).run()


__all__ = ["TICK_INTERVAL", "EntryList", "TmucksApp", "run_interactive"]
