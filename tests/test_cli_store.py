"""CLI store commands: list, apply, save, update, delete, and the bare invocation."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from tmucks.adapters.cli import cli
from tmucks.domain.enums import Direction
from tmucks.domain.intents import Apply, Navigate, Quit
from tmucks.domain.models import ReloadOutcome

if TYPE_CHECKING:
    from conftest import FilesystemCliContext, MemoryCliContext

DEFAULT = b"set -g prefix C-b\n"
WORK = b"set -g prefix C-a\n"
LIVE = b"set -g mouse on\n"


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_list_prints_one_name_per_line_sorted(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK, "default.conf": DEFAULT, "alpha.conf": b""})

    result = cli_runner.invoke(cli, ["list"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["alpha.conf", "default.conf", "work.conf"]


@pytest.mark.os_agnostic
def test_list_of_an_empty_store_prints_nothing(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context()

    result = cli_runner.invoke(cli, ["list"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout == ""


# ---------------------------------------------------------------------------
# apply
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_apply_copies_the_entry_and_reloads(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    """A bare name gets the extension appended before lookup."""
    ctx = memory_cli_context(entries={"work.conf": WORK}, live=LIVE)

    result = cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Applied config: work.conf", "tmux reloaded"]
    assert ctx.target.content == WORK
    assert ctx.target.reload_calls == 1


@pytest.mark.os_agnostic
def test_apply_with_full_file_name_is_not_extended_twice(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK})

    result = cli_runner.invoke(cli, ["apply", "work.conf"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Applied config: work.conf" in result.stdout
    assert ctx.target.content == WORK


@pytest.mark.os_agnostic
def test_apply_without_running_tmux_still_succeeds(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK}, reload_outcome=ReloadOutcome.no_process())

    result = cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "tmux not running, nothing to reload" in result.stdout


@pytest.mark.os_agnostic
def test_apply_with_rejected_reload_warns_but_keeps_the_copy(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    """The live file has been replaced, so the command still succeeds."""
    outcome = ReloadOutcome.failed("unknown option: sett")
    ctx = memory_cli_context(entries={"work.conf": WORK}, live=LIVE, reload_outcome=outcome)

    result = cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Applied config: work.conf"]
    assert "Warning: reload failed: unknown option: sett" in result.stderr
    assert ctx.target.content == WORK


# ---------------------------------------------------------------------------
# save / update
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_save_snapshots_the_live_file_under_a_normalized_name(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(live=LIVE)

    result = cli_runner.invoke(cli, ["save", "backup"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Saved current config as: backup.conf"]
    assert ctx.store.files == {"backup.conf": LIVE}
    assert ctx.target.content == LIVE


@pytest.mark.os_agnostic
def test_save_with_empty_extension_keeps_the_name_as_typed(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(live=LIVE)

    result = cli_runner.invoke(cli, ["--set", 'tmucks.extension=""', "save", "backup"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Saved current config as: backup" in result.stdout
    assert ctx.store.files == {"backup": LIVE}


@pytest.mark.os_agnostic
def test_save_over_an_existing_name_replaces_it(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK}, live=LIVE)

    result = cli_runner.invoke(cli, ["save", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.store.files == {"work.conf": LIVE}


@pytest.mark.os_agnostic
def test_update_overwrites_an_existing_entry(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK, "default.conf": DEFAULT}, live=LIVE)

    result = cli_runner.invoke(cli, ["update", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Updated config: work.conf"]
    assert ctx.store.files == {"work.conf": LIVE, "default.conf": DEFAULT}


@pytest.mark.os_agnostic
def test_update_refuses_to_create_a_new_entry(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK}, live=LIVE)

    result = cli_runner.invoke(cli, ["update", "home"], obj=ctx.factory)

    assert result.exit_code == 2
    assert "Error: Config file not found: home.conf" in result.stderr
    assert ctx.store.files == {"work.conf": WORK}


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_delete_removes_the_entry_and_leaves_the_live_file(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK, "default.conf": DEFAULT}, live=WORK)

    result = cli_runner.invoke(cli, ["delete", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Deleted config: work.conf"]
    assert ctx.store.files == {"default.conf": DEFAULT}
    assert ctx.target.content == WORK


@pytest.mark.os_agnostic
def test_delete_of_a_missing_entry_exits_with_code_2(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK})

    result = cli_runner.invoke(cli, ["delete", "home"], obj=ctx.factory)

    assert result.exit_code == 2
    assert ctx.store.files == {"work.conf": WORK}


# ---------------------------------------------------------------------------
# bare invocation
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_no_subcommand_opens_the_interactive_picker(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    """Down, enter, q applies the second entry."""
    ctx = memory_cli_context(
        entries={"default.conf": DEFAULT, "work.conf": WORK},
        live=LIVE,
        script=[Navigate(Direction.DOWN), Apply(), Quit()],
    )

    result = cli_runner.invoke(cli, [], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.interactive.runs == 1
    assert ctx.target.content == WORK
    assert ctx.interactive.results[-1].quit is True
    assert ctx.interactive.snapshots[-1].status.startswith("Applied config: work.conf")


@pytest.mark.os_agnostic
def test_subcommands_never_open_the_picker(
    cli_runner: CliRunner,
    memory_cli_context: Callable[..., MemoryCliContext],
) -> None:
    ctx = memory_cli_context(entries={"work.conf": WORK})

    cli_runner.invoke(cli, ["list"], obj=ctx.factory)

    assert ctx.interactive.runs == 0


# ---------------------------------------------------------------------------
# real filesystem
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_switching_saving_and_deleting_on_disk(
    cli_runner: CliRunner,
    filesystem_cli_context: Callable[..., FilesystemCliContext],
) -> None:
    """Apply work, save a backup, delete default: the store and live file follow."""
    ctx = filesystem_cli_context(live=LIVE)
    ctx.config_dir.mkdir()
    (ctx.config_dir / "default.conf").write_bytes(DEFAULT)
    (ctx.config_dir / "work.conf").write_bytes(WORK)

    applied = cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)
    assert applied.exit_code == 0
    assert applied.stdout.splitlines() == ["Applied config: work.conf", "tmux reloaded"]
    assert ctx.active_path.read_bytes() == WORK

    saved = cli_runner.invoke(cli, ["save", "backup"], obj=ctx.factory)
    assert saved.exit_code == 0
    assert (ctx.config_dir / "backup.conf").read_bytes() == WORK

    listed = cli_runner.invoke(cli, ["list"], obj=ctx.factory)
    assert listed.stdout.splitlines() == ["backup.conf", "default.conf", "work.conf"]

    deleted = cli_runner.invoke(cli, ["delete", "default"], obj=ctx.factory)
    assert deleted.exit_code == 0

    relisted = cli_runner.invoke(cli, ["list"], obj=ctx.factory)
    assert relisted.stdout.splitlines() == ["backup.conf", "work.conf"]
    assert ctx.active_path.read_bytes() == WORK


@pytest.mark.os_agnostic
def test_first_run_creates_the_store_directory(
    cli_runner: CliRunner,
    filesystem_cli_context: Callable[..., FilesystemCliContext],
) -> None:
    ctx = filesystem_cli_context()

    result = cli_runner.invoke(cli, ["list"], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout == ""
    assert ctx.config_dir.is_dir()


@pytest.mark.os_agnostic
def test_missing_store_directory_is_reported_when_creation_is_disabled(
    cli_runner: CliRunner,
    filesystem_cli_context: Callable[..., FilesystemCliContext],
) -> None:
    ctx = filesystem_cli_context(create_config_dir=False)

    result = cli_runner.invoke(cli, ["list"], obj=ctx.factory)

    assert result.exit_code == 69
    assert "Cannot read config directory" in result.stderr
    assert not ctx.config_dir.exists()


@pytest.mark.os_agnostic
def test_failed_reload_command_keeps_the_applied_file(
    cli_runner: CliRunner,
    filesystem_cli_context: Callable[..., FilesystemCliContext],
) -> None:
    """A reload command that exits non-zero is a warning, not an error."""
    failing = (sys.executable, "-c", "import sys; sys.stderr.write('bad option'); sys.exit(1)")
    ctx = filesystem_cli_context(live=LIVE, reload_command=failing)
    ctx.config_dir.mkdir()
    (ctx.config_dir / "work.conf").write_bytes(WORK)

    result = cli_runner.invoke(cli, ["apply", "work"], obj=ctx.factory)

    assert result.exit_code == 0
    assert "Warning: reload failed: bad option" in result.stderr
    assert ctx.active_path.read_bytes() == WORK
