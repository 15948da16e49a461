"""Deploy the bundled default settings file to app/host/user layers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from tmucks import __init__conf__
from tmucks.adapters.config.loader import get_default_config_path, validate_profile
from tmucks.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_DEPLOYED_ACTIONS = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Copy ``defaultconfig.toml`` into the requested settings layers.

    Args:
        targets: Layers to deploy to (app, host, user).
        force: Overwrite files that already exist.
        profile: Optional profile subdirectory.

    Returns:
        Paths that were created or overwritten; empty when everything
        already existed and *force* was False.

    Raises:
        PermissionError: Deploying to app/host without privileges.
        ValueError: Invalid profile name.

    Note:
        On Linux the user layer lands in ``~/.config/tmucks-cli/config.toml``.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[t.value for t in targets],
        force=force,
    )

    paths: list[Path] = [result.destination for result in results if result.action in _DEPLOYED_ACTIONS]
    logger.debug("Deployed settings", extra={"paths": [str(p) for p in paths]})
    return paths


__all__ = ["deploy_configuration"]
