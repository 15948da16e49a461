"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Store commands from :mod:`.store_cmds`
    * Settings commands from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy
from .info import cli_info
from .store_cmds import cli_apply, cli_delete, cli_list, cli_save, cli_update

__all__ = [
    "cli_apply",
    "cli_config",
    "cli_config_deploy",
    "cli_delete",
    "cli_info",
    "cli_list",
    "cli_save",
    "cli_update",
]
