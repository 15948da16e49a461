"""User intents shared by the CLI and the interactive front end.

Both front ends translate their input (arguments or key presses) into these
values, so the controller handles them identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .enums import Direction


@dataclass(frozen=True, slots=True)
class Navigate:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Apply:
    pass


@dataclass(frozen=True, slots=True)
class BeginSave:
    pass


@dataclass(frozen=True, slots=True)
class ConfirmSave:
    pass


@dataclass(frozen=True, slots=True)
class BeginUpdate:
    pass


@dataclass(frozen=True, slots=True)
class ConfirmUpdate:
    pass


@dataclass(frozen=True, slots=True)
class CancelInput:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class TypeChar:
    char: str


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Intent: TypeAlias = (
    Navigate
    | Apply
    | BeginSave
    | ConfirmSave
    | BeginUpdate
    | ConfirmUpdate
    | CancelInput
    | Delete
    | TypeChar
    | Backspace
    | Quit
)
"""Union of every intent the controller accepts."""


__all__ = [
    "Apply",
    "Backspace",
    "BeginSave",
    "BeginUpdate",
    "CancelInput",
    "ConfirmSave",
    "ConfirmUpdate",
    "Delete",
    "Intent",
    "Navigate",
    "Quit",
    "TypeChar",
]
