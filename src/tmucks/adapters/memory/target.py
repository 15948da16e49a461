"""In-memory live config target for testing.

Records applied content and reload requests instead of touching
``~/.tmux.conf`` or running tmux.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import NotFoundError, StoreUnavailableError
from ...domain.models import ReloadOutcome


def _default_path() -> Path:
    return Path(tempfile.gettempdir()) / "tmucks" / ".tmux.conf"


@dataclass
class InMemoryConfigTarget:
    """Live file held as bytes.

    Attributes:
        content: Current live content, or None when the file "does not exist".
        reload_outcome: What :meth:`reload` reports.
        fail_apply: When True, :meth:`apply` raises StoreUnavailableError.
        reload_calls: Number of reload requests received.
        applied: Every payload passed to :meth:`apply`, in order.
    """

    content: bytes | None = None
    reload_outcome: ReloadOutcome = field(default_factory=ReloadOutcome.reloaded)
    fail_apply: bool = False
    path: Path = field(default_factory=_default_path)
    reload_calls: int = 0
    applied: list[bytes] = field(default_factory=list)

    def read(self) -> bytes:
        if self.content is None:
            raise NotFoundError(f"No tmux config file found at {self.path}")
        return self.content

    def apply(self, data: bytes) -> None:
        if self.fail_apply:
            raise StoreUnavailableError(f"Cannot write {self.path}")
        self.content = bytes(data)
        self.applied.append(self.content)

    def reload(self) -> ReloadOutcome:
        self.reload_calls += 1
        return self.reload_outcome


__all__ = ["InMemoryConfigTarget"]
