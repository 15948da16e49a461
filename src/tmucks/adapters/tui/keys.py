"""Translate key presses into intents according to the current input mode.

Kept free of Textual types so the mapping can be tested on plain strings.
"""

from __future__ import annotations

from tmucks.domain.enums import Direction, InputMode
from tmucks.domain.intents import (
    Apply,
    Backspace,
    BeginSave,
    BeginUpdate,
    CancelInput,
    ConfirmSave,
    ConfirmUpdate,
    Delete,
    Intent,
    Navigate,
    Quit,
    TypeChar,
)

_IDLE_KEYS: dict[str, Intent] = {
    "up": Navigate(Direction.UP),
    "down": Navigate(Direction.DOWN),
    "enter": Apply(),
}

_IDLE_CHARS: dict[str, Intent] = {
    "k": Navigate(Direction.UP),
    "j": Navigate(Direction.DOWN),
    "s": BeginSave(),
    "u": BeginUpdate(),
    "d": Delete(),
    "q": Quit(),
}


def key_to_intent(key: str, character: str | None, mode: InputMode) -> Intent | None:
    """Return the intent for a key press, or None when the key is unbound.

    Args:
        key: Textual key name (``"up"``, ``"enter"``, ``"j"``...).
        character: Printable character produced by the key, if any.
        mode: Current input mode.

    Examples:
        >>> key_to_intent("j", "j", InputMode.IDLE)
        Navigate(direction=<Direction.DOWN: 'down'>)
        >>> key_to_intent("j", "j", InputMode.EDITING)
        TypeChar(char='j')
        >>> key_to_intent("enter", None, InputMode.EDITING)
        ConfirmSave()
        >>> key_to_intent("x", "x", InputMode.IDLE) is None
        True
    """
    if mode is InputMode.EDITING:
        return _editing_intent(key, character)
    if mode is InputMode.CONFIRMING:
        return _confirming_intent(key, character)
    if key in _IDLE_KEYS:
        return _IDLE_KEYS[key]
    if character is not None:
        return _IDLE_CHARS.get(character)
    return None


def _editing_intent(key: str, character: str | None) -> Intent | None:
    if key == "enter":
        return ConfirmSave()
    if key == "escape":
        return CancelInput()
    if key == "backspace":
        return Backspace()
    if character and character.isprintable():
        return TypeChar(character)
    return None


def _confirming_intent(key: str, character: str | None) -> Intent | None:
    if character in ("y", "Y"):
        return ConfirmUpdate()
    if key == "escape" or character in ("n", "N"):
        return CancelInput()
    return None


__all__ = ["key_to_intent"]
