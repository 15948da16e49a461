"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*``
identifiers decide where lib_layered_config looks for settings files.

Contents:
    * Metadata constants (name, title, version, homepage, author).
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "tmucks"
title = "Manage and switch between named tmux configurations"
version = "0.3.0"
homepage = "https://github.com/tmucks/tmucks"
author = "tmucks contributors"
author_email = "tmucks@users.noreply.github.com"
shell_command = "tmucks"

#: Vendor, application, and slug used for settings discovery. The slug differs
#: from the store directory name so the settings file never lists as an entry.
LAYEREDCONF_VENDOR = "tmucks"
LAYEREDCONF_APP = "tmucks"
LAYEREDCONF_SLUG = "tmucks-cli"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for tmucks:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
