"""Combobox state model and selectors."""

from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import Config
from .filtering import to_visible_items

T = TypeVar("T")


# --- Status variants ---


class Blurred(BaseModel):
    """The input does not hold focus. The suggestion list is never open."""

    model_config = ConfigDict(frozen=True)

    type: Literal["blurred"] = "blurred"


class FocusedClosed(BaseModel):
    """The input holds focus and the suggestion list is closed."""

    model_config = ConfigDict(frozen=True)

    type: Literal["focused__closed"] = "focused__closed"


class FocusedOpened(BaseModel):
    """The input holds focus and the suggestion list is open, nothing highlighted."""

    model_config = ConfigDict(frozen=True)

    type: Literal["focused__opened"] = "focused__opened"


class FocusedOpenedHighlighted(BaseModel):
    """
    The suggestion list is open and one visible item is highlighted.

    ``highlight_index`` indexes the visible items computed from the current
    query, never the full collection.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["focused__opened__highlighted"] = "focused__opened__highlighted"
    highlight_index: int = 0
    is_keyboard_navigation: bool = False


class SelectedItemFocused(BaseModel):
    """A selected item chip holds focus instead of the input (multi-select)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["selected_item_focused"] = "selected_item_focused"
    focused_index: int = 0


Status = Annotated[
    Union[
        Blurred,
        FocusedClosed,
        FocusedOpened,
        FocusedOpenedHighlighted,
        SelectedItemFocused,
    ],
    Field(discriminator="type"),
]

STATUS_TYPES: tuple[type[BaseModel], ...] = (
    Blurred,
    FocusedClosed,
    FocusedOpened,
    FocusedOpenedHighlighted,
    SelectedItemFocused,
)


class Model(BaseModel, Generic[T]):
    """
    The complete interaction state of one combobox.

    This is the value the host stores and threads back into ``update``.

    Attributes:
        all_items: Every selectable item (or the current page of a remote store).
        selected_items: Selected items, in the order they were selected.
        query: Current input text. Kept while blurred.
        status: Focus/openness/highlight variant.
        skip_once: Event types to ignore once, e.g. the hover caused by a
            keyboard scroll moving the list under a still pointer.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    all_items: list[T] = Field(default_factory=list)
    selected_items: list[T] = Field(default_factory=list)
    query: str = ""
    status: Status = Field(default_factory=Blurred)
    skip_once: list[str] = Field(default_factory=list)


def init(
    config: Config[T],
    *,
    all_items: list[T],
    selected_items: list[T] | None = None,
) -> Model[T]:
    """
    Create the initial, blurred model.

    The query is seeded from the selection in single-select mode.

    Example:
        ```python
        model = init(config, all_items=["apple", "banana"])
        ```
    """
    selected = list(selected_items or [])
    if not config.is_multi_select:
        selected = selected[:1]
    model: Model[T] = Model(all_items=list(all_items), selected_items=selected)
    return model.model_copy(update={"query": selection_query(config, model)})


# --- Selectors ---


def is_selected(model: Model[Any]) -> bool:
    return len(model.selected_items) > 0


def is_blurred(model: Model[Any]) -> bool:
    return isinstance(model.status, Blurred)


def is_focused(model: Model[Any]) -> bool:
    return not is_blurred(model)


def is_highlighted(model: Model[Any]) -> bool:
    return isinstance(model.status, FocusedOpenedHighlighted)


def is_selected_item_focused(model: Model[Any]) -> bool:
    return isinstance(model.status, SelectedItemFocused)


def is_keyboard_navigation(model: Model[Any]) -> bool:
    """True while the highlight was last moved with the arrow keys."""
    status = model.status
    return isinstance(status, FocusedOpenedHighlighted) and status.is_keyboard_navigation


def to_state_name(model: Model[Any]) -> str:
    """
    Name the combined selection/focus/openness/highlight state.

    Example: ``"selected__focused__opened__highlighted"``.
    """
    selection = "selected" if is_selected(model) else "unselected"
    return f"{selection}__{model.status.type}"


def is_opened(model: Model[Any]) -> bool:
    return "opened" in to_state_name(model)


def is_closed(model: Model[Any]) -> bool:
    return not is_opened(model)


def to_selected_items(config: Config[T], model: Model[T]) -> list[T]:
    """Selected items in display order (click order for left-to-right)."""
    if config.is_multi_select and config.selected_item_list_direction == "right-to-left":
        return list(reversed(model.selected_items))
    return list(model.selected_items)


def to_selected_item(config: Config[T], model: Model[T]) -> T | None:
    selected = to_selected_items(config, model)
    return selected[0] if selected else None


def is_item_selected(config: Config[T], model: Model[T], item: T) -> bool:
    item_id = config.to_item_id(item)
    return any(config.to_item_id(selected) == item_id for selected in model.selected_items)


def selection_query(config: Config[T], model: Model[T]) -> str:
    """Query the input falls back to: the selection's text in single-select mode."""
    if config.is_multi_select:
        return ""
    selected = to_selected_item(config, model)
    if selected is None:
        return ""
    return config.to_item_input_value(selected)


def to_current_query(model: Model[Any]) -> str:
    return model.query


def to_visible(config: Config[T], model: Model[T]) -> list[T]:
    """Visible items for the model's current query."""
    return to_visible_items(config, model.all_items, model.query)


def to_highlighted_item(config: Config[T], model: Model[T]) -> T | None:
    """The highlighted visible item, or None when nothing resolves."""
    status = model.status
    if not isinstance(status, FocusedOpenedHighlighted):
        return None
    visible = to_visible(config, model)
    if 0 <= status.highlight_index < len(visible):
        return visible[status.highlight_index]
    return None


def to_focused_selected_item(config: Config[T], model: Model[T]) -> T | None:
    """The chip holding focus, if any."""
    status = model.status
    if not isinstance(status, SelectedItemFocused):
        return None
    selected = to_selected_items(config, model)
    if 0 <= status.focused_index < len(selected):
        return selected[status.focused_index]
    return None
