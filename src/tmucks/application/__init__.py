"""Application layer - use cases and port definitions.

Contains the controller that orchestrates domain logic and the port
protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.controller` - Intent handling and direct operations
    * :mod:`.ports` - Protocol definitions for adapters
"""

from __future__ import annotations

from .controller import Controller, ControllerSnapshot, StatusLine, StepResult
from .ports import (
    ActiveConfigTarget,
    ConfigStore,
    CreateActiveTarget,
    CreateConfigStore,
    DeployConfiguration,
    DisplayConfig,
    EnsureStoreDirectory,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    RunInteractive,
)

__all__ = [
    "ActiveConfigTarget",
    "ConfigStore",
    "Controller",
    "ControllerSnapshot",
    "CreateActiveTarget",
    "CreateConfigStore",
    "DeployConfiguration",
    "DisplayConfig",
    "EnsureStoreDirectory",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "RunInteractive",
    "StatusLine",
    "StepResult",
]
