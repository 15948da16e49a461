"""Root CLI command group and global option handling.

Defines the top-level Click group. Handles global flags like --traceback,
--profile, and --set, and starts the interactive picker when no
subcommand is given.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from tmucks import __init__conf__
from tmucks.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences, get_cli_context, store_cli_context

if TYPE_CHECKING:
    from tmucks.composition import AppServices

logger = logging.getLogger(__name__)


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides to a Config, raising UsageError on failure."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load settings from a named profile (e.g., 'work')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a setting (repeatable), e.g. tmucks.extension=''",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Root command storing global flags and syncing shared traceback state.

    Loads settings once with the profile, applies ``--set`` overrides, and
    initializes logging. Without a subcommand, opens the interactive picker.

    Example:
        >>> from click.testing import CliRunner
        >>> from tmucks.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["list"], obj=build_testing)
        >>> result.exit_code
        0
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        _run_interactive(get_cli_context(ctx))


def _run_interactive(cli_ctx: CLIContext) -> None:
    from .commands._shared import build_controller, report_errors

    controller = build_controller(cli_ctx)
    with lib_log_rich.runtime.bind(job_id="cli-interactive", extra={"command": "interactive"}), report_errors():
        logger.info("Opening interactive picker", extra={"store": str(controller.store.directory)})
        cli_ctx.services.run_interactive(controller)


# Deferred import breaks the cycle between this module, which defines the
# ``cli`` group, and the command modules that import package ancestors.
def _register_commands() -> None:
    from .commands import (
        cli_apply,
        cli_config,
        cli_config_deploy,
        cli_delete,
        cli_info,
        cli_list,
        cli_save,
        cli_update,
    )

    for cmd in (
        cli_list,
        cli_apply,
        cli_save,
        cli_update,
        cli_delete,
        cli_info,
        cli_config,
        cli_config_deploy,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
