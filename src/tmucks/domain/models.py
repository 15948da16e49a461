"""Immutable value objects shared by every layer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .enums import ReloadStatus


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    """A stored configuration file, identified by its file name.

    Only a config store builds entries; ``name`` has already been
    validated by the time an entry exists.

    Example:
        >>> entry = ConfigEntry(name="work.conf", path=Path("/tmp/work.conf"))
        >>> entry.name
        'work.conf'
    """

    name: str
    path: Path


@dataclass(frozen=True, slots=True)
class ReloadOutcome:
    """Result of asking the running tmux server to reload the live file.

    ``detail`` carries the rejection reason for :attr:`ReloadStatus.RELOAD_FAILED`
    and is informational otherwise.

    Example:
        >>> ReloadOutcome.reloaded().succeeded
        True
        >>> ReloadOutcome.failed("bad option").describe()
        'reload failed: bad option'
    """

    status: ReloadStatus
    detail: str = ""

    @classmethod
    def reloaded(cls) -> ReloadOutcome:
        return cls(ReloadStatus.RELOADED)

    @classmethod
    def no_process(cls, detail: str = "") -> ReloadOutcome:
        return cls(ReloadStatus.NO_PROCESS_RUNNING, detail)

    @classmethod
    def failed(cls, detail: str) -> ReloadOutcome:
        return cls(ReloadStatus.RELOAD_FAILED, detail)

    @property
    def succeeded(self) -> bool:
        return self.status is ReloadStatus.RELOADED

    def describe(self) -> str:
        """Return a short human-readable summary for status lines."""
        if self.status is ReloadStatus.RELOADED:
            return "tmux reloaded"
        if self.status is ReloadStatus.NO_PROCESS_RUNNING:
            return "tmux not running, nothing to reload"
        return f"reload failed: {self.detail}" if self.detail else "reload failed"


__all__ = ["ConfigEntry", "ReloadOutcome"]
