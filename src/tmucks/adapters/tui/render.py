"""Pure rendering of a controller snapshot into Rich text.

The view has no logic of its own: the same snapshot always produces the
same text.
"""

from __future__ import annotations

from rich.text import Text

from tmucks.application.controller import ControllerSnapshot
from tmucks.domain.enums import InputMode

EMPTY_HINT = "No configs yet. Press 's' to save the current tmux config."


def render_entries(snapshot: ControllerSnapshot) -> Text:
    """Render the config list with a marker on the selected row.

    Example:
        >>> from tmucks.domain.enums import InputMode
        >>> snap = ControllerSnapshot(("a.conf", "b.conf"), 1, InputMode.IDLE, "", None, "", False)
        >>> render_entries(snap).plain
        '  a.conf\\n> b.conf'
    """
    if not snapshot.entries:
        return Text(EMPTY_HINT, style="dim italic")
    lines = Text()
    for index, name in enumerate(snapshot.entries):
        if index:
            lines.append("\n")
        if index == snapshot.cursor:
            lines.append(f"> {name}", style="bold reverse")
        else:
            lines.append(f"  {name}")
    return lines


def render_status(snapshot: ControllerSnapshot) -> Text:
    """Render the status line; prompts and errors get their own styles."""
    if snapshot.input_mode is InputMode.EDITING:
        return Text(snapshot.status, style="bold yellow")
    if snapshot.input_mode is InputMode.CONFIRMING:
        return Text(snapshot.status, style="bold magenta")
    if snapshot.status_is_error:
        return Text(snapshot.status, style="bold red")
    return Text(snapshot.status, style="green")


def render_pending(snapshot: ControllerSnapshot) -> Text:
    """Render the status line shown while the selected entry is being applied.

    Example:
        >>> snap = ControllerSnapshot(("a.conf", "b.conf"), 1, InputMode.IDLE, "", None, "", False)
        >>> render_pending(snap).plain
        'Applying b.conf...'
    """
    if snapshot.selected is None:
        return Text("Applying...", style="bold yellow")
    return Text(f"Applying {snapshot.selected}...", style="bold yellow")


__all__ = ["EMPTY_HINT", "render_entries", "render_pending", "render_status"]
