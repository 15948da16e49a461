"""Package metadata command.

Contents:
    * :func:`cli_info` - Display package metadata and resolved paths.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from tmucks import __init__conf__
from tmucks.adapters.config.settings import load_settings, resolve_paths

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print package metadata and where configs are stored.

    Example:
        >>> from click.testing import CliRunner
        >>> from tmucks.adapters.cli.root import cli
        >>> from tmucks.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["info"], obj=build_testing)
        >>> result.exit_code == 0
        True
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        try:
            paths = resolve_paths(load_settings(cli_ctx.config))
        except ValidationError as exc:
            logger.warning("Cannot resolve paths from settings", extra={"error": str(exc)})
            return
        click.echo(f"    {'config_dir'.ljust(13)} = {paths.config_dir}")
        click.echo(f"    {'active_path'.ljust(13)} = {paths.active_path}")


__all__ = ["cli_info"]
