"""Application ports - Protocol definitions for adapter implementations.

Object ports (:class:`ConfigStore`, :class:`ActiveConfigTarget`) describe the
two stateful collaborators the controller drives. Callable ports define a
``__call__`` whose signature matches the corresponding adapter function;
module-level functions satisfy them via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that layer contracts remain
    satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import DeployTarget, OutputFormat
from ..domain.models import ConfigEntry, ReloadOutcome

if TYPE_CHECKING:
    from lib_layered_config import Config

    from .controller import Controller


class ConfigStore(Protocol):
    """Directory of named config files.

    The store owns the name-to-path mapping. Writes are atomic: a reader
    sees either the old content or the complete new content.
    """

    @property
    def directory(self) -> Path: ...

    def list_entries(self) -> list[ConfigEntry]:
        """Return regular files sorted by name; raise StoreUnavailableError if unreadable."""
        ...

    def exists(self, name: str) -> bool: ...

    def read(self, name: str) -> bytes:
        """Return the entry's bytes; raise NotFoundError if absent."""
        ...

    def write(self, name: str, data: bytes) -> ConfigEntry:
        """Create or replace an entry; raise InvalidNameError or StoreUnavailableError."""
        ...

    def delete(self, name: str) -> None:
        """Remove an entry; raise NotFoundError if absent."""
        ...


class ActiveConfigTarget(Protocol):
    """The live config file plus the reload side effect."""

    @property
    def path(self) -> Path: ...

    def read(self) -> bytes:
        """Return the live file's bytes; raise NotFoundError if it does not exist."""
        ...

    def apply(self, data: bytes) -> None:
        """Atomically overwrite the live file; raise StoreUnavailableError on I/O failure."""
        ...

    def reload(self) -> ReloadOutcome:
        """Ask the running process to reload. Never raises."""
        ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Deploy default configuration to specified target layers."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class CreateConfigStore(Protocol):
    """Build a ConfigStore rooted at *directory*."""

    def __call__(self, directory: Path) -> ConfigStore: ...


class CreateActiveTarget(Protocol):
    """Build an ActiveConfigTarget for the live file at *path*."""

    def __call__(self, path: Path, *, reload_command: Sequence[str], reload_timeout: float) -> ActiveConfigTarget: ...


class EnsureStoreDirectory(Protocol):
    """First-run setup: create the store directory; return True if it was created."""

    def __call__(self, directory: Path) -> bool: ...


class RunInteractive(Protocol):
    """Run the interactive front end until the user quits."""

    def __call__(self, controller: Controller) -> None: ...


__all__ = [
    "ActiveConfigTarget",
    "ConfigStore",
    "CreateActiveTarget",
    "CreateConfigStore",
    "DeployConfiguration",
    "DisplayConfig",
    "EnsureStoreDirectory",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "RunInteractive",
]
