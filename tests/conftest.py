"""Shared pytest fixtures for CLI, controller, and adapter tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import dataclasses
import re
import sys
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from tmucks.adapters.memory import InMemoryConfigStore, InMemoryConfigTarget, ScriptedInteractive
    from tmucks.composition import AppServices
    from tmucks.domain.intents import Intent
    from tmucks.domain.models import ReloadOutcome


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Reload command that always succeeds without needing a tmux binary.
SUCCEEDING_RELOAD: tuple[str, ...] = (sys.executable, "-c", "pass")


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _with_production_logging(services: AppServices) -> AppServices:
    """Swap the no-op logging initializer for the real lib_log_rich one."""
    from tmucks.adapters.logging.setup import init_logging

    return dataclasses.replace(services, init_logging=init_logging)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output checks; log lines from the
    lib_log_rich console go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Only for commands that never touch the store (``info``, ``--help``).
    """
    from tmucks.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, because a test may monkeypatch
    ``get_config`` and lose ``cache_clear``.
    """
    from tmucks.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"tmucks": {"extension": ""}})
            assert config.get("tmucks.extension") == ""
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides in-memory services with an injected Config.

    Replaces only the settings loader; store, target, and front end stay
    in memory so no test ever touches ``~/.tmux.conf``.
    """
    from tmucks.composition import build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(_with_production_logging(build_testing()), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests.

    Example:
        def test_provenance(source_info_factory: Callable[..., SourceInfo]) -> None:
            info = source_info_factory("tmucks.extension", "user", "/home/ada/.config/tmucks-cli/config.toml")
            assert info["layer"] == "user"
    """

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Production services with a config built from a dict.

    For ``config`` and ``info`` only; store commands would touch the real
    home directory.
    """
    from tmucks.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = dataclasses.replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create


@pytest.fixture
def inject_deploy_configuration() -> Callable[[Callable[..., list[Path]]], Callable[[], AppServices]]:
    """Return a factory with a custom deploy_configuration function (mocks, spies)."""
    from tmucks.composition import build_testing

    def _inject(deploy_fn: Callable[..., list[Path]]) -> Callable[[], AppServices]:
        test_services = dataclasses.replace(build_testing(), deploy_configuration=deploy_fn)
        return lambda: test_services

    return _inject


@dataclass
class MemoryCliContext:
    """In-memory store, live target, and scripted front end behind one factory.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        store: The store every command sees; inspect ``store.files`` afterwards.
        target: The live target; inspect ``content`` and ``reload_calls``.
        interactive: Front end used when no subcommand is given.
    """

    factory: Callable[[], AppServices]
    store: InMemoryConfigStore
    target: InMemoryConfigTarget
    interactive: ScriptedInteractive


@pytest.fixture
def memory_cli_context() -> Callable[..., MemoryCliContext]:
    """Build a CLI context backed by in-memory adapters.

    Example:
        def test_apply(cli_runner, memory_cli_context) -> None:
            ctx = memory_cli_context(entries={"work.conf": b"w"})
            cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)
            assert ctx.target.content == b"w"
    """
    from tmucks.adapters.memory import InMemoryConfigStore, InMemoryConfigTarget, ScriptedInteractive
    from tmucks.composition import build_testing

    def _build(
        *,
        entries: Mapping[str, bytes] | None = None,
        live: bytes | None = None,
        reload_outcome: ReloadOutcome | None = None,
        script: Iterable[Intent] = (),
    ) -> MemoryCliContext:
        store = InMemoryConfigStore(entries)
        target = InMemoryConfigTarget(content=live)
        if reload_outcome is not None:
            target.reload_outcome = reload_outcome
        interactive = ScriptedInteractive(script=list(script))
        services = _with_production_logging(build_testing(store=store, target=target, interactive=interactive))
        return MemoryCliContext(factory=lambda: services, store=store, target=target, interactive=interactive)

    return _build


@dataclass
class FilesystemCliContext:
    """Production store and target rooted in a temporary directory."""

    factory: Callable[[], AppServices]
    config_dir: Path
    active_path: Path


@pytest.fixture
def filesystem_cli_context(
    tmp_path: Path,
    clear_config_cache: None,
) -> Callable[..., FilesystemCliContext]:
    """Build a CLI context using the real filesystem store and tmux target.

    The reload command defaults to a Python no-op so no tmux binary is needed.
    """
    from tmucks.composition import build_production

    def _build(
        *,
        live: bytes | None = None,
        reload_command: Iterable[str] = SUCCEEDING_RELOAD,
        create_config_dir: bool = True,
    ) -> FilesystemCliContext:
        config_dir = tmp_path / "configs"
        active_path = tmp_path / ".tmux.conf"
        if live is not None:
            active_path.write_bytes(live)
        config = Config(
            {
                "tmucks": {
                    "config_dir": str(config_dir),
                    "active_path": str(active_path),
                    "reload_command": list(reload_command),
                    "create_config_dir": create_config_dir,
                }
            },
            {},
        )

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = dataclasses.replace(build_production(), get_config=_fake_get_config)
        return FilesystemCliContext(factory=lambda: services, config_dir=config_dir, active_path=active_path)

    return _build


@pytest.fixture
def memory_store() -> InMemoryConfigStore:
    """Provide a store preloaded with ``default.conf`` and ``work.conf``."""
    from tmucks.adapters.memory import InMemoryConfigStore

    return InMemoryConfigStore({"default.conf": b"set -g prefix C-b\n", "work.conf": b"set -g prefix C-a\n"})


@pytest.fixture
def memory_target() -> InMemoryConfigTarget:
    """Provide a live target whose file holds a known line."""
    from tmucks.adapters.memory import InMemoryConfigTarget

    return InMemoryConfigTarget(content=b"set -g mouse on\n")


class FakeClock:
    """Manually advanced monotonic clock for status-timeout tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a clock that only moves when the test advances it."""
    return FakeClock()
