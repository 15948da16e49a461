"""Shared helpers for commands that work on the config store.

Internal module (underscore prefix).

Contents:
    * :func:`build_controller` - Resolve settings and wire a Controller.
    * :func:`report_errors` - Turn domain errors into ``Error:`` lines and exit codes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import rich_click as click
from pydantic import ValidationError

from tmucks.adapters.config.settings import load_settings, resolve_paths
from tmucks.application.controller import Controller
from tmucks.domain.errors import TmucksError

from ..context import CLIContext
from ..exit_codes import ExitCode, exit_code_for

logger = logging.getLogger(__name__)


def build_controller(cli_ctx: CLIContext) -> Controller:
    """Build a Controller from the ``[tmucks]`` settings in *cli_ctx*.

    Creates the store directory on first run when ``create_config_dir``
    is enabled.

    Raises:
        SystemExit: ``CONFIG_ERROR`` for invalid settings, or the mapped
            code when the store directory cannot be created.
    """
    try:
        settings = load_settings(cli_ctx.config)
    except ValidationError as exc:
        logger.error("Invalid [tmucks] settings", extra={"error": str(exc)})
        click.echo(f"Error: Invalid [tmucks] settings: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    paths = resolve_paths(settings)
    services = cli_ctx.services
    if settings.create_config_dir:
        with report_errors():
            services.ensure_store_directory(paths.config_dir)

    store = services.create_store(paths.config_dir)
    target = services.create_target(
        paths.active_path,
        reload_command=tuple(settings.reload_command),
        reload_timeout=settings.reload_timeout,
    )
    logger.debug(
        "Resolved paths",
        extra={"config_dir": str(paths.config_dir), "active_path": str(paths.active_path)},
    )
    return Controller(store, target, extension=settings.extension, status_timeout=settings.status_timeout)


@contextmanager
def report_errors() -> Iterator[None]:
    """Print a :class:`TmucksError` as ``Error: <message>`` and exit.

    Example:
        >>> from tmucks.domain.errors import NotFoundError
        >>> with report_errors():  # doctest: +SKIP
        ...     raise NotFoundError("Config file not found: x.conf")
        Traceback (most recent call last):
        SystemExit: 2
    """
    try:
        yield
    except TmucksError as exc:
        code = exit_code_for(exc)
        logger.error("Command failed", extra={"error": str(exc), "error_type": type(exc).__name__})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(code) from exc


__all__ = ["build_controller", "report_errors"]
