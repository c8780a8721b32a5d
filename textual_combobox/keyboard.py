"""Translate raw key names into combobox events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .events import (
    Event,
    PressedArrowKey,
    PressedBackspaceKey,
    PressedEnterKey,
    PressedEscapeKey,
    PressedHorizontalArrowKey,
    PressedKey,
)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """
    One entry of the key table.

    Attributes:
        event: Factory for the event the key produces.
        prevent_default: Whether the host should suppress the key's default
            behaviour (e.g. moving the text cursor on arrow up/down).
    """

    event: Callable[[], Event]
    prevent_default: bool = False


@dataclass(frozen=True, slots=True)
class KeyResult:
    event: Event
    prevent_default: bool = False


_ARROW_UP = KeyBinding(lambda: PressedArrowKey("up"), prevent_default=True)
_ARROW_DOWN = KeyBinding(lambda: PressedArrowKey("down"), prevent_default=True)
_ARROW_LEFT = KeyBinding(lambda: PressedHorizontalArrowKey("left"))
_ARROW_RIGHT = KeyBinding(lambda: PressedHorizontalArrowKey("right"))
_ESCAPE = KeyBinding(PressedEscapeKey)
_ENTER = KeyBinding(PressedEnterKey, prevent_default=True)
_BACKSPACE = KeyBinding(PressedBackspaceKey)

# Browser KeyboardEvent.key names and Textual key names, lower-cased.
KEY_BINDINGS: dict[str, KeyBinding] = {
    "arrowup": _ARROW_UP,
    "up": _ARROW_UP,
    "arrowdown": _ARROW_DOWN,
    "down": _ARROW_DOWN,
    "arrowleft": _ARROW_LEFT,
    "left": _ARROW_LEFT,
    "arrowright": _ARROW_RIGHT,
    "right": _ARROW_RIGHT,
    "escape": _ESCAPE,
    "enter": _ENTER,
    "backspace": _BACKSPACE,
}


def key_to_event(key: str) -> KeyResult | None:
    """
    Map a key name to an event.

    Named keys are matched case-insensitively. A single printable character
    becomes ``PressedKey``. Anything else maps to None.

    Example:
        ```python
        key_to_event("ArrowDown")
        # KeyResult(event=PressedArrowKey(direction='down'), prevent_default=True)
        ```
    """
    binding = KEY_BINDINGS.get(key.strip().lower())
    if binding is not None:
        return KeyResult(binding.event(), binding.prevent_default)

    if len(key) == 1 and key.isprintable():
        return KeyResult(PressedKey(key))

    return None
