"""Config store commands: list, apply, save, update, delete.

Each command resolves the store and live file from the ``[tmucks]``
settings, runs one controller operation, and maps failures to an exit code.

Contents:
    * :func:`cli_list` - Print stored config names.
    * :func:`cli_apply` - Copy a stored config to the live file and reload tmux.
    * :func:`cli_save` - Snapshot the live file into the store.
    * :func:`cli_update` - Overwrite an existing stored config with the live file.
    * :func:`cli_delete` - Remove a stored config.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from tmucks.domain.enums import ReloadStatus

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import build_controller, report_errors

logger = logging.getLogger(__name__)


@click.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_list(ctx: click.Context) -> None:
    """List stored configs, one name per line."""
    controller = build_controller(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-list", extra={"command": "list"}), report_errors():
        controller.refresh()
        logger.info("Listing configs", extra={"count": len(controller.selection)})
        for name in controller.selection.names:
            click.echo(name)


@click.command("apply", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_apply(ctx: click.Context, name: str) -> None:
    """Make NAME the live tmux config and ask tmux to reload it.

    A failed reload is reported but does not fail the command; the live
    file has already been replaced.
    """
    controller = build_controller(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-apply", extra={"command": "apply", "config": name}), report_errors():
        outcome = controller.apply(name)
        click.echo(f"Applied config: {controller.normalize(name)}")
        if outcome.status is ReloadStatus.RELOAD_FAILED:
            logger.warning("tmux reload failed", extra={"detail": outcome.detail})
            click.echo(f"Warning: {outcome.describe()}", err=True)
        else:
            click.echo(outcome.describe())


@click.command("save", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_save(ctx: click.Context, name: str) -> None:
    """Save the current live tmux config as NAME."""
    controller = build_controller(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-save", extra={"command": "save", "config": name}), report_errors():
        entry = controller.save(name)
        click.echo(f"Saved current config as: {entry.name}")


@click.command("update", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_update(ctx: click.Context, name: str) -> None:
    """Overwrite the stored config NAME with the current live tmux config."""
    controller = build_controller(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-update", extra={"command": "update", "config": name}), report_errors():
        entry = controller.update(name)
        click.echo(f"Updated config: {entry.name}")


@click.command("delete", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_delete(ctx: click.Context, name: str) -> None:
    """Delete the stored config NAME. The live tmux config is not touched."""
    controller = build_controller(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-delete", extra={"command": "delete", "config": name}), report_errors():
        deleted = controller.delete(name)
        click.echo(f"Deleted config: {deleted}")


__all__ = ["cli_apply", "cli_delete", "cli_list", "cli_save", "cli_update"]
