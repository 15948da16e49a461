"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Store, live target, and interactive front end
from ..adapters.store.filesystem import create_filesystem_store, ensure_store_directory
from ..adapters.target.tmux import create_tmux_target
from ..adapters.tui.app import run_interactive

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import InMemoryConfigStore, InMemoryConfigTarget, ScriptedInteractive
    from ..application.ports import (
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

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_create_store: CreateConfigStore = create_filesystem_store
    _assert_create_target: CreateActiveTarget = create_tmux_target
    _assert_ensure_store_directory: EnsureStoreDirectory = ensure_store_directory
    _assert_run_interactive: RunInteractive = run_interactive


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    init_logging: InitLogging
    create_store: CreateConfigStore
    create_target: CreateActiveTarget
    ensure_store_directory: EnsureStoreDirectory
    run_interactive: RunInteractive


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        init_logging=init_logging,
        create_store=create_filesystem_store,
        create_target=create_tmux_target,
        ensure_store_directory=ensure_store_directory,
        run_interactive=run_interactive,
    )


def build_testing(
    *,
    store: InMemoryConfigStore | None = None,
    target: InMemoryConfigTarget | None = None,
    interactive: ScriptedInteractive | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        store: Store returned for every directory. A fresh empty store when None.
        target: Live target returned for every path. A fresh target without a
            live file when None.
        interactive: Scripted front end for no-subcommand runs. When None, a
            script that quits immediately is used.

    Returns:
        AppServices container with in-memory adapters. Pass your own
        instances to assert on their state after the CLI ran.
    """
    from ..adapters.memory import (
        InMemoryConfigStore,
        InMemoryConfigTarget,
        ScriptedInteractive,
        deploy_configuration_in_memory,
        display_config_in_memory,
        ensure_store_directory_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    memory_store = store if store is not None else InMemoryConfigStore()
    memory_target = target if target is not None else InMemoryConfigTarget()
    scripted = interactive if interactive is not None else ScriptedInteractive()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        create_store=lambda directory: memory_store,
        create_target=lambda path, **_kwargs: memory_target,
        ensure_store_directory=ensure_store_directory_in_memory,
        run_interactive=scripted,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "deploy_configuration",
    "display_config",
    # Logging
    "init_logging",
    # Store and target
    "create_filesystem_store",
    "create_tmux_target",
    "ensure_store_directory",
    # Interactive
    "run_interactive",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
