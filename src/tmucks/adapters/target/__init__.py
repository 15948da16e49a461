"""Live config target adapter - the file tmux reads and its reload hook.

Contents:
    * :mod:`.tmux` - ``~/.tmux.conf`` target reloaded via ``tmux source-file``
"""

from __future__ import annotations

from .tmux import TmuxConfigTarget, create_tmux_target

__all__ = ["TmuxConfigTarget", "create_tmux_target"]
