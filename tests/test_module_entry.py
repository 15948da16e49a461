"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys

import pytest

from tmucks import __init__conf__, entry
from tmucks.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with --help shows usage and exits 0."""
    monkeypatch.setattr(sys, "argv", ["tmucks", "--help"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("tmucks.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_reports_invalid_settings_with_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Invalid settings stop before the store directory is touched."""
    monkeypatch.setattr(sys, "argv", ["tmucks", "--set", "tmucks.reload_timeout=0", "list"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("tmucks.__main__", run_name="__main__")

    assert exc.value.code == 78
    assert "Invalid [tmucks] settings" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_module_entry_rejects_malformed_overrides(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["tmucks", "--set", "no_equals_sign", "list"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("tmucks.__main__", run_name="__main__")

    assert exc.value.code == 2
    assert "must contain '='" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    expected_commands = {
        "cli_apply",
        "cli_config",
        "cli_config_deploy",
        "cli_delete",
        "cli_info",
        "cli_list",
        "cli_save",
        "cli_update",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """Verify `python -m tmucks --help` works via subprocess."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "tmucks", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """Verify `python -m tmucks --version` outputs version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "tmucks", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["tmucks", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_unknown_command(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["tmucks", "does-not-exist"])

    exit_code = entry.main()

    assert exit_code != 0
    assert "No such command" in capsys.readouterr().err
