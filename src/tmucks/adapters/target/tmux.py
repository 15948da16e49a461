"""Live tmux config file and the ``tmux source-file`` reload hook.

The file is the durable source of truth; the reload is a best-effort
notification whose outcome is reported but never rolls back the copy.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Final

from tmucks.adapters.store.atomic import atomic_write
from tmucks.domain.errors import NotFoundError, StoreUnavailableError
from tmucks.domain.models import ReloadOutcome

logger = logging.getLogger(__name__)

#: Reload command; the live file path is appended.
DEFAULT_RELOAD_COMMAND: Final[tuple[str, ...]] = ("tmux", "source-file")

#: Seconds to wait for the reload command.
DEFAULT_RELOAD_TIMEOUT: Final[float] = 5.0

#: Fragments of tmux's stderr that mean no server is running.
NO_SERVER_MARKERS: Final[tuple[str, ...]] = (
    "no server running",
    "error connecting",
    "no current client",
)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class TmuxConfigTarget:
    """The live config file read by tmux (``~/.tmux.conf`` by default).

    Args:
        path: Live config file location.
        reload_command: Command run to reload; *path* is appended.
        reload_timeout: Seconds before the reload counts as failed.
        runner: ``subprocess.run`` compatible callable, injectable for tests.
    """

    def __init__(
        self,
        path: Path,
        *,
        reload_command: Sequence[str] = DEFAULT_RELOAD_COMMAND,
        reload_timeout: float = DEFAULT_RELOAD_TIMEOUT,
        runner: Runner = subprocess.run,
    ) -> None:
        self._path = path
        self._reload_command = tuple(reload_command)
        self._reload_timeout = reload_timeout
        self._runner = runner

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> bytes:
        try:
            return self._path.read_bytes()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise NotFoundError(f"No tmux config file found at {self._path}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read {self._path}: {exc.strerror or exc}") from exc

    def apply(self, data: bytes) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(self._path, data)
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write {self._path}: {exc.strerror or exc}") from exc
        logger.debug("Wrote live config", extra={"path": str(self._path), "bytes": len(data)})

    def reload(self) -> ReloadOutcome:
        """Run the reload command and classify the result.

        Returns:
            ``RELOADED`` on exit status 0; ``NO_PROCESS_RUNNING`` when tmux is
            not installed or no server is up; ``RELOAD_FAILED`` otherwise.
        """
        command = [*self._reload_command, str(self._path)]
        try:
            result = self._runner(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._reload_timeout,
            )
        except FileNotFoundError:
            logger.debug("Reload command not installed", extra={"command": command[0]})
            return ReloadOutcome.no_process(f"{command[0]} not found")
        except subprocess.TimeoutExpired:
            logger.warning("Reload timed out", extra={"command": command, "timeout": self._reload_timeout})
            return ReloadOutcome.failed(f"timed out after {self._reload_timeout:g}s")
        except OSError as exc:
            logger.warning("Reload could not start", extra={"command": command, "error": str(exc)})
            return ReloadOutcome.failed(str(exc))
        return _classify(result)


def _classify(result: subprocess.CompletedProcess[Any]) -> ReloadOutcome:
    if result.returncode == 0:
        return ReloadOutcome.reloaded()
    stderr = (result.stderr or "").strip()
    lowered = stderr.lower()
    if any(marker in lowered for marker in NO_SERVER_MARKERS):
        return ReloadOutcome.no_process(stderr)
    logger.warning("tmux rejected reload", extra={"returncode": result.returncode, "stderr": stderr})
    return ReloadOutcome.failed(stderr or f"exit status {result.returncode}")


def create_tmux_target(
    path: Path,
    *,
    reload_command: Sequence[str] = DEFAULT_RELOAD_COMMAND,
    reload_timeout: float = DEFAULT_RELOAD_TIMEOUT,
) -> TmuxConfigTarget:
    """Build a :class:`TmuxConfigTarget` for the live file at *path*."""
    return TmuxConfigTarget(path, reload_command=reload_command, reload_timeout=reload_timeout)


__all__ = [
    "DEFAULT_RELOAD_COMMAND",
    "DEFAULT_RELOAD_TIMEOUT",
    "NO_SERVER_MARKERS",
    "TmuxConfigTarget",
    "create_tmux_target",
]
