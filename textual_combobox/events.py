"""Events accepted by the combobox reducer.

Every event is a frozen dataclass carrying a ``type`` tag, so hosts can log or
serialise events without inspecting their class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Union

VerticalDirection = Literal["up", "down"]
HorizontalDirection = Literal["left", "right"]


# --- Input focus ---


@dataclass(frozen=True)
class FocusedInput:
    type: ClassVar[str] = "focused-input"


@dataclass(frozen=True)
class BlurredInput:
    type: ClassVar[str] = "blurred-input"


@dataclass(frozen=True)
class ClickedInput:
    type: ClassVar[str] = "clicked-input"


@dataclass(frozen=True)
class InputtedQuery:
    """The user changed the input text."""

    query: str
    type: ClassVar[str] = "inputted-query"


# --- Keyboard ---


@dataclass(frozen=True)
class PressedArrowKey:
    """Up/down navigation in the suggestion list."""

    direction: VerticalDirection
    type: ClassVar[str] = "pressed-arrow-key"


@dataclass(frozen=True)
class PressedHorizontalArrowKey:
    """Left/right navigation between the input and selected item chips."""

    direction: HorizontalDirection
    type: ClassVar[str] = "pressed-horizontal-arrow-key"


@dataclass(frozen=True)
class PressedEnterKey:
    type: ClassVar[str] = "pressed-enter-key"


@dataclass(frozen=True)
class PressedEscapeKey:
    type: ClassVar[str] = "pressed-escape-key"


@dataclass(frozen=True)
class PressedBackspaceKey:
    type: ClassVar[str] = "pressed-backspace-key"


@dataclass(frozen=True)
class PressedKey:
    """Any other key, e.g. a printable character typed while a chip is focused."""

    key: str
    type: ClassVar[str] = "pressed-key"


# --- Pointer ---


@dataclass(frozen=True)
class ClickedItem:
    item: Any
    type: ClassVar[str] = "clicked-item"


@dataclass(frozen=True)
class HoveredOverItem:
    """Pointer moved over the visible item at ``index``."""

    index: int
    type: ClassVar[str] = "hovered-over-item"


@dataclass(frozen=True)
class ToggledOpened:
    """A dropdown toggle button was pressed."""

    type: ClassVar[str] = "toggled-opened"


# --- Selection ---


@dataclass(frozen=True)
class UnselectedItem:
    """Remove one item from the selection, e.g. a chip's remove button."""

    item: Any
    type: ClassVar[str] = "unselected-item"


@dataclass(frozen=True)
class UnselectedAll:
    type: ClassVar[str] = "unselected-all"


@dataclass(frozen=True)
class FocusedSelectedItem:
    item: Any
    type: ClassVar[str] = "focused-selected-item"


@dataclass(frozen=True)
class BlurredSelectedItem:
    item: Any
    type: ClassVar[str] = "blurred-selected-item"


# --- Host setters ---


@dataclass(frozen=True)
class ItemsLoaded:
    """New items (or a new result page) arrived from the host or an item store."""

    items: list[Any] = field(default_factory=list)
    type: ClassVar[str] = "items-loaded"


@dataclass(frozen=True)
class SearchFailed:
    """An item store search failed. The model is left unchanged."""

    reason: str = ""
    type: ClassVar[str] = "search-failed"


@dataclass(frozen=True)
class SelectedItemsSet:
    """Replace the selection from outside, e.g. restoring a saved form."""

    items: list[Any] = field(default_factory=list)
    type: ClassVar[str] = "selected-items-set"


Event = Union[
    FocusedInput,
    BlurredInput,
    ClickedInput,
    InputtedQuery,
    PressedArrowKey,
    PressedHorizontalArrowKey,
    PressedEnterKey,
    PressedEscapeKey,
    PressedBackspaceKey,
    PressedKey,
    ClickedItem,
    HoveredOverItem,
    ToggledOpened,
    UnselectedItem,
    UnselectedAll,
    FocusedSelectedItem,
    BlurredSelectedItem,
    ItemsLoaded,
    SearchFailed,
    SelectedItemsSet,
]

EVENT_TYPES: tuple[type, ...] = Event.__args__
