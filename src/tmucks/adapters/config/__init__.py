"""Configuration adapter - settings loading, deployment, display, and overrides.

Provides adapters for settings management using lib_layered_config.

Contents:
    * :mod:`.loader` - Layered settings loading with caching
    * :mod:`.settings` - Typed ``[tmucks]`` section and path resolution
    * :mod:`.deploy` - Default settings deployment
    * :mod:`.display` - Settings display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import ResolvedPaths, TmucksSettings, load_settings, resolve_paths

__all__ = [
    "ResolvedPaths",
    "TmucksSettings",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_settings",
    "resolve_paths",
]
