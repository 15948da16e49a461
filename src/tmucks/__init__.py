"""Public package surface: config store, live target, and controller.

Routes imports through the architectural layers:
- Domain exports: config names, reload outcomes, errors
- Application exports: the controller driving every user action
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.controller import Controller

# Composition exports (wired adapters)
from .composition import build_production, get_config

# Domain exports
from .domain.behaviors import ensure_extension, validate_name
from .domain.errors import (
    InvalidNameError,
    NoSelectionError,
    NotFoundError,
    StoreUnavailableError,
    TmucksError,
)
from .domain.models import ConfigEntry, ReloadOutcome

__all__ = [
    "ConfigEntry",
    "Controller",
    "InvalidNameError",
    "NoSelectionError",
    "NotFoundError",
    "ReloadOutcome",
    "StoreUnavailableError",
    "TmucksError",
    "build_production",
    "ensure_extension",
    "get_config",
    "print_info",
    "validate_name",
]
