"""Layered settings loader: bundled defaults, caching, and profile validation."""

from __future__ import annotations

import pytest

from tmucks.adapters.config import loader as config_mod
from tmucks.adapters.config.settings import load_settings


@pytest.mark.os_agnostic
def test_bundled_defaults_file_ships_with_the_package() -> None:
    path = config_mod.get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_bundled_defaults_parse_into_valid_settings(clear_config_cache: None) -> None:
    """Whatever user layers exist, the defaults alone must validate."""
    config = config_mod.get_config()

    settings = load_settings(config)

    assert settings.reload_timeout > 0
    assert settings.reload_command


@pytest.mark.os_agnostic
def test_get_config_is_cached_per_profile(clear_config_cache: None) -> None:
    first = config_mod.get_config()

    assert config_mod.get_config() is first


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_reload(clear_config_cache: None) -> None:
    first = config_mod.get_config()

    config_mod.get_config.cache_clear()

    assert config_mod.get_config() is not first


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "", "a/b"])
def test_invalid_profile_names_are_rejected(clear_config_cache: None, profile: str) -> None:
    with pytest.raises(ValueError):
        config_mod.get_config(profile=profile)


@pytest.mark.os_agnostic
def test_validate_profile_accepts_plain_names() -> None:
    config_mod.validate_profile("work-laptop_2")
