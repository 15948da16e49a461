"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.store` - Filesystem config store with atomic writes
    * :mod:`.target` - Live ``~/.tmux.conf`` and tmux reload
    * :mod:`.tui` - Textual interactive picker
    * :mod:`.config` - Settings loading, deployment, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
