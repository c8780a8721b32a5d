"""Render-ready projection of the combobox model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from .aria import Attributes, AriaAttributes, aria_item, aria_selected_item, to_aria
from .config import Config, SelectedItemListDirection
from .model import (
    FocusedOpenedHighlighted,
    Model,
    is_blurred,
    is_focused,
    is_keyboard_navigation,
    is_opened,
    to_focused_selected_item,
    to_selected_item,
    to_selected_items,
    to_state_name,
    to_visible,
)

T = TypeVar("T")

ItemStatus = Literal["none", "highlighted", "selected", "selected-and-highlighted"]
SelectedItemStatus = Literal["focused", "blurred"]


@dataclass(frozen=True, slots=True)
class RenderItem(Generic[T]):
    item: T
    status: ItemStatus
    input_value: str
    aria: Attributes


@dataclass(frozen=True, slots=True)
class RenderSelectedItem(Generic[T]):
    item: T
    status: SelectedItemStatus
    input_value: str
    aria: Attributes


@dataclass(frozen=True, slots=True)
class ViewModel(Generic[T]):
    """
    Everything a rendering layer needs for one frame.

    Recomputed from the model on demand; never stored.
    """

    state_name: str
    query: str
    is_opened: bool
    is_focused: bool
    is_blurred: bool
    is_keyboard_navigation: bool
    visible_items: list[T]
    render_items: list[RenderItem[T]]
    highlighted_item: T | None
    selected_item: T | None
    selected_items: list[T]
    render_selected_items: list[RenderSelectedItem[T]]
    selected_item_direction: SelectedItemListDirection | None
    aria: AriaAttributes[T]


def to_item_status(
    config: Config[T],
    item: T,
    highlighted: T | None,
    selected_ids: set[Any],
) -> ItemStatus:
    """Classify an item by comparing ids against the highlight and the selection."""
    item_id = config.to_item_id(item)
    is_highlighted = highlighted is not None and config.to_item_id(highlighted) == item_id
    is_selected = item_id in selected_ids

    if is_selected and is_highlighted:
        return "selected-and-highlighted"
    if is_selected:
        return "selected"
    if is_highlighted:
        return "highlighted"
    return "none"


def to_view(config: Config[T], model: Model[T]) -> ViewModel[T]:
    """
    Project the model into a ViewModel.

    Example:
        ```python
        view = to_view(config, model)
        for render_item in view.render_items:
            print(render_item.input_value, render_item.status)
        ```
    """
    visible = to_visible(config, model)

    highlighted: T | None = None
    status = model.status
    if isinstance(status, FocusedOpenedHighlighted) and 0 <= status.highlight_index < len(visible):
        highlighted = visible[status.highlight_index]

    selected = to_selected_items(config, model)
    selected_ids = {config.to_item_id(item) for item in selected}

    render_items = [
        RenderItem(
            item=item,
            status=to_item_status(config, item, highlighted, selected_ids),
            input_value=config.to_item_input_value(item),
            aria=aria_item(config, model, item),
        )
        for item in visible
    ]

    focused_chip = to_focused_selected_item(config, model)
    focused_chip_id = config.to_item_id(focused_chip) if focused_chip is not None else None
    render_selected_items = [
        RenderSelectedItem(
            item=item,
            status=(
                "focused"
                if focused_chip is not None and config.to_item_id(item) == focused_chip_id
                else "blurred"
            ),
            input_value=config.to_item_input_value(item),
            aria=aria_selected_item(config, item),
        )
        for item in selected
    ]

    return ViewModel(
        state_name=to_state_name(model),
        query=model.query,
        is_opened=is_opened(model),
        is_focused=is_focused(model),
        is_blurred=is_blurred(model),
        is_keyboard_navigation=is_keyboard_navigation(model),
        visible_items=visible,
        render_items=render_items,
        highlighted_item=highlighted,
        selected_item=to_selected_item(config, model),
        selected_items=selected,
        render_selected_items=render_selected_items,
        selected_item_direction=(
            config.selected_item_list_direction if config.is_multi_select else None
        ),
        aria=to_aria(config, model),
    )
