"""WAI-ARIA attributes for the elements a combobox renders.

Every function returns a plain dict of attribute names to values. Element ids
are derived from the configured namespace, so the label, description and
ownership references stay stable for one widget instance.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .config import Config
from .model import (
    Model,
    is_item_selected,
    is_opened,
    is_selected,
    to_focused_selected_item,
    to_highlighted_item,
)

T = TypeVar("T")

Attributes = dict[str, Any]


# --- Element ids ---


def input_id(config: Config[Any]) -> str:
    return f"{config.namespace}-input"


def input_label_id(config: Config[Any]) -> str:
    return f"{config.namespace}-input-label"


def helper_text_id(config: Config[Any]) -> str:
    return f"{config.namespace}-helper-text"


def item_list_id(config: Config[Any]) -> str:
    return f"{config.namespace}-item-list"


def to_id_token(item_id: Any) -> str:
    """Render an item id for use inside an element id. Whitespace becomes ``-``."""
    return re.sub(r"\s+", "-", str(item_id))


def item_id(config: Config[T], item: T) -> str:
    return f"{config.namespace}-item-{to_id_token(config.to_item_id(item))}"


def selected_list_id(config: Config[Any]) -> str:
    return f"{config.namespace}-selected-list"


def selected_list_item_id(config: Config[T], item: T) -> str:
    return f"{config.namespace}-selected-list-item-{to_id_token(config.to_item_id(item))}"


# --- Attribute sets ---


def aria_helper_text(config: Config[Any]) -> Attributes:
    return {"id": helper_text_id(config)}


def aria_input_label(config: Config[Any]) -> Attributes:
    return {"id": input_label_id(config), "for": input_id(config)}


def aria_input(config: Config[T], model: Model[T]) -> Attributes:
    """
    Attributes for the text input.

    ``aria-activedescendant`` is present only while an item is highlighted.
    """
    attributes: Attributes = {
        "id": input_id(config),
        "role": "combobox",
        "tabindex": 0,
        "autocomplete": "off",
        "aria-autocomplete": "list",
        "aria-controls": item_list_id(config),
        "aria-haspopup": "listbox",
        "aria-expanded": "true" if is_opened(model) else "false",
        "aria-describedby": helper_text_id(config),
    }
    highlighted = to_highlighted_item(config, model)
    if highlighted is not None:
        attributes["aria-activedescendant"] = item_id(config, highlighted)
    return attributes


def aria_item_list(config: Config[Any]) -> Attributes:
    return {
        "id": item_list_id(config),
        "role": "listbox",
        "aria-labelledby": input_label_id(config),
        "aria-multiselectable": config.is_multi_select,
        "tabindex": -1,
    }


def aria_item(config: Config[T], model: Model[T], item: T) -> Attributes:
    """Attributes for one suggestion. ``aria-selected`` only once something is selected."""
    attributes: Attributes = {"id": item_id(config, item), "role": "option"}
    if is_selected(model):
        attributes["aria-selected"] = is_item_selected(config, model, item)
    return attributes


def aria_selected_list(config: Config[T], model: Model[T]) -> Attributes:
    attributes: Attributes = {"id": selected_list_id(config), "role": "list"}
    focused = to_focused_selected_item(config, model)
    if focused is not None:
        attributes["aria-activedescendant"] = selected_list_item_id(config, focused)
    return attributes


def aria_selected_item(config: Config[T], item: T) -> Attributes:
    return {"id": selected_list_item_id(config, item), "role": "listitem", "tabindex": 0}


def aria_unselect_button(config: Config[T], item: T) -> Attributes:
    return {
        "role": "button",
        "tabindex": -1,
        "aria-controls": selected_list_item_id(config, item),
    }


@dataclass(frozen=True, slots=True)
class AriaAttributes(Generic[T]):
    """All attribute sets for one render of the combobox."""

    helper_text: Attributes
    input_label: Attributes
    input: Attributes
    item_list: Attributes
    selected_list: Attributes
    item: Callable[[T], Attributes]
    selected_item: Callable[[T], Attributes]
    unselect_button: Callable[[T], Attributes]


def to_aria(config: Config[T], model: Model[T]) -> AriaAttributes[T]:
    """Derive every attribute set from the current model."""
    return AriaAttributes(
        helper_text=aria_helper_text(config),
        input_label=aria_input_label(config),
        input=aria_input(config, model),
        item_list=aria_item_list(config),
        selected_list=aria_selected_list(config, model),
        item=lambda item: aria_item(config, model, item),
        selected_item=lambda item: aria_selected_item(config, item),
        unselect_button=lambda item: aria_unselect_button(config, item),
    )
