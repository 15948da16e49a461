"""Type-safe domain enums for output formats, deploy targets, and input state."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for settings display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Settings deployment target layers.

    Attributes:
        APP: System-wide application settings (requires privileges).
        HOST: System-wide host-specific settings (requires privileges).
        USER: User-specific settings (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


class Direction(str, Enum):
    """Cursor movement direction for navigation intents."""

    UP = "up"
    DOWN = "down"


class InputMode(str, Enum):
    """Top-level mode of the name-entry state machine.

    Attributes:
        IDLE: No prompt is active; navigation keys move the cursor.
        EDITING: A name is being typed into the buffer.
        CONFIRMING: A yes/no confirmation is pending for one entry.

    Example:
        >>> InputMode.EDITING == "editing"
        True
    """

    IDLE = "idle"
    EDITING = "editing"
    CONFIRMING = "confirming"


class InputPurpose(str, Enum):
    """Why a name is being entered while in :attr:`InputMode.EDITING`."""

    SAVE_NAME = "save_name"


class ReloadStatus(str, Enum):
    """Observed result of asking the running tmux server to reload.

    Attributes:
        RELOADED: The server accepted the reload.
        NO_PROCESS_RUNNING: No server is running; nothing to reload.
        RELOAD_FAILED: A server is running but rejected the reload.
    """

    RELOADED = "reloaded"
    NO_PROCESS_RUNNING = "no_process_running"
    RELOAD_FAILED = "reload_failed"


__all__ = [
    "DeployTarget",
    "Direction",
    "InputMode",
    "InputPurpose",
    "OutputFormat",
    "ReloadStatus",
]
