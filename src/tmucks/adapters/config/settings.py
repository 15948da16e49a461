"""Typed ``[tmucks]`` settings and startup path resolution.

Paths are resolved once at startup and handed to the store and target
constructors; nothing below the composition root reads the environment.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tmucks.adapters.target.tmux import DEFAULT_RELOAD_COMMAND, DEFAULT_RELOAD_TIMEOUT
from tmucks.application.controller import DEFAULT_STATUS_TIMEOUT
from tmucks.domain.behaviors import DEFAULT_EXTENSION

#: Store directory relative to the home directory when ``config_dir`` is empty.
DEFAULT_STORE_SUBDIR = (".config", "tmucks")

#: Live file name in the home directory when ``active_path`` is empty.
DEFAULT_ACTIVE_NAME = ".tmux.conf"


class TmucksSettings(BaseModel):
    """Validated, immutable ``[tmucks]`` section.

    Example:
        >>> settings = TmucksSettings.model_validate({"reload_command": "tmux -L work source-file"})
        >>> settings.reload_command
        ['tmux', '-L', 'work', 'source-file']
        >>> settings.extension
        '.conf'
    """

    model_config = ConfigDict(frozen=True)

    config_dir: str = ""
    active_path: str = ""
    extension: str = DEFAULT_EXTENSION
    reload_command: list[str] = Field(default_factory=lambda: list(DEFAULT_RELOAD_COMMAND))
    reload_timeout: float = DEFAULT_RELOAD_TIMEOUT
    status_timeout: float = DEFAULT_STATUS_TIMEOUT
    create_config_dir: bool = True

    @field_validator("reload_command", mode="before")
    @classmethod
    def _split_command_string(cls, v: Any) -> list[str]:
        """Split single strings from env vars or .env files with shell rules.

        Examples:
            >>> TmucksSettings._split_command_string("tmux source-file")
            ['tmux', 'source-file']
            >>> TmucksSettings._split_command_string(["tmux", "source-file"])
            ['tmux', 'source-file']
        """
        if isinstance(v, str):
            return shlex.split(v)
        return cast(list[str], v)

    @field_validator("config_dir", "active_path", "extension", mode="before")
    @classmethod
    def _strip_strings(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _validate_settings(self) -> TmucksSettings:
        if not self.reload_command:
            raise ValueError("reload_command must not be empty")
        if self.reload_timeout <= 0:
            raise ValueError(f"reload_timeout must be positive, got {self.reload_timeout}")
        if self.status_timeout <= 0:
            raise ValueError(f"status_timeout must be positive, got {self.status_timeout}")
        if "/" in self.extension or "\\" in self.extension:
            raise ValueError(f"extension must not contain path separators, got {self.extension!r}")
        return self


@dataclass(frozen=True, slots=True)
class ResolvedPaths:
    """Absolute store directory and live file location."""

    config_dir: Path
    active_path: Path


def load_settings(config: Config) -> TmucksSettings:
    """Parse the ``[tmucks]`` section of a layered Config.

    Raises:
        pydantic.ValidationError: If a value has the wrong type or range.

    Example:
        >>> load_settings(Config({"tmucks": {"extension": ""}}, {})).extension
        ''
        >>> load_settings(Config({}, {})).create_config_dir
        True
    """
    raw: object = config.get("tmucks", default={})
    return TmucksSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


def resolve_paths(settings: TmucksSettings, *, home: Path | None = None) -> ResolvedPaths:
    """Expand ``~`` and fill in the home-directory defaults.

    Example:
        >>> paths = resolve_paths(TmucksSettings(), home=Path("/home/ada"))
        >>> paths.config_dir.as_posix(), paths.active_path.as_posix()
        ('/home/ada/.config/tmucks', '/home/ada/.tmux.conf')
    """
    base = home if home is not None else Path.home()
    config_dir = _expand(settings.config_dir, base) if settings.config_dir else base.joinpath(*DEFAULT_STORE_SUBDIR)
    active_path = _expand(settings.active_path, base) if settings.active_path else base / DEFAULT_ACTIVE_NAME
    return ResolvedPaths(config_dir=config_dir, active_path=active_path)


def _expand(raw: str, home: Path) -> Path:
    if raw == "~" or raw.startswith("~/"):
        return home / raw[2:]
    return Path(raw).expanduser()


__all__ = [
    "DEFAULT_ACTIVE_NAME",
    "DEFAULT_STORE_SUBDIR",
    "ResolvedPaths",
    "TmucksSettings",
    "load_settings",
    "resolve_paths",
]
