"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no tmux, no terminal, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.store` - Dict-backed config store
    * :mod:`.target` - Byte-buffer live config target
    * :mod:`.interactive` - Scripted interactive front end
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    ensure_store_directory_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .interactive import ScriptedInteractive
from .logging import init_logging_in_memory
from .store import InMemoryConfigStore
from .target import InMemoryConfigTarget

# Static conformance assertions
if TYPE_CHECKING:
    from tmucks.application.ports import (
        ActiveConfigTarget,
        ConfigStore,
        EnsureStoreDirectory,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        RunInteractive,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_ensure_store_directory: EnsureStoreDirectory = ensure_store_directory_in_memory
    _assert_store: ConfigStore = InMemoryConfigStore()
    _assert_target: ActiveConfigTarget = InMemoryConfigTarget()
    _assert_interactive: RunInteractive = ScriptedInteractive()

__all__ = [
    "InMemoryConfigStore",
    "InMemoryConfigTarget",
    "ScriptedInteractive",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "ensure_store_directory_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
