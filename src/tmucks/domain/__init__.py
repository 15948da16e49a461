"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the value objects, navigation and input state machines, intents,
and error types that form the core of the config switcher.

Contents:
    * :mod:`.behaviors` - Name validation and extension normalization
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
    * :mod:`.input_state` - Name-entry state machine
    * :mod:`.intents` - User intents shared by CLI and TUI
    * :mod:`.models` - ConfigEntry and ReloadOutcome
    * :mod:`.selection` - Cursor over sorted entries
"""

from __future__ import annotations

from .behaviors import DEFAULT_EXTENSION, ensure_extension, validate_name
from .enums import DeployTarget, Direction, InputMode, InputPurpose, OutputFormat, ReloadStatus
from .errors import (
    InputStateError,
    InvalidNameError,
    NoSelectionError,
    NotFoundError,
    StoreUnavailableError,
    TmucksError,
)
from .input_state import InputState
from .models import ConfigEntry, ReloadOutcome
from .selection import SelectionModel

__all__ = [
    # Behaviors
    "DEFAULT_EXTENSION",
    "ensure_extension",
    "validate_name",
    # Enums
    "DeployTarget",
    "Direction",
    "InputMode",
    "InputPurpose",
    "OutputFormat",
    "ReloadStatus",
    # Errors
    "InputStateError",
    "InvalidNameError",
    "NoSelectionError",
    "NotFoundError",
    "StoreUnavailableError",
    "TmucksError",
    # Models
    "ConfigEntry",
    "InputState",
    "ReloadOutcome",
    "SelectionModel",
]
