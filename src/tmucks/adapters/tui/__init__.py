"""Interactive terminal front end built on Textual.

Contents:
    * :mod:`.app` - Textual application and :func:`run_interactive`
    * :mod:`.keys` - Key-to-intent mapping per input mode
    * :mod:`.render` - Pure snapshot rendering
"""

from __future__ import annotations

from .app import TmucksApp, run_interactive
from .keys import key_to_intent
from .render import render_entries, render_pending, render_status

__all__ = [
    "TmucksApp",
    "key_to_intent",
    "render_entries",
    "render_pending",
    "render_status",
    "run_interactive",
]
