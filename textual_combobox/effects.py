"""Effects emitted by the reducer and the decorator that routes them to widgets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, TypeVar, Union

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect handler metadata on methods
EFFECT_ATTR = "__textual_combobox_effects__"


# --- Effect values ---


@dataclass(frozen=True)
class FocusInput:
    """Move focus back to the input element."""

    type: ClassVar[str] = "focus-input"


@dataclass(frozen=True)
class FocusSelectedItem:
    """Move focus to the chip of a selected item."""

    item: Any
    type: ClassVar[str] = "focus-selected-item"


@dataclass(frozen=True)
class ScrollItemIntoView:
    """Scroll the suggestion list so that ``item`` is visible."""

    item: Any
    type: ClassVar[str] = "scroll-item-into-view"


Effect = Union[FocusInput, FocusSelectedItem, ScrollItemIntoView]

EFFECT_TYPES: tuple[type, ...] = Effect.__args__

# Handler method names for handler objects passed to handle_effects
HANDLER_METHODS: dict[type, str] = {
    FocusInput: "focus_input",
    FocusSelectedItem: "focus_selected_item",
    ScrollItemIntoView: "scroll_item_into_view",
}


def handle_effects(effects: Iterable[Effect], handlers: Any) -> None:
    """
    Execute effects against a handler object.

    The handler object may implement any of ``focus_input()``,
    ``focus_selected_item(item)`` and ``scroll_item_into_view(item)``.
    Effects without a matching method are skipped.

    Example:
        ```python
        class Handlers:
            def scroll_item_into_view(self, item):
                option_list.scroll_to_widget(...)

            def focus_input(self):
                input_widget.focus()

        output = update(config, model, PressedArrowKey("down"))
        handle_effects(output.effects, Handlers())
        ```
    """
    for eff in effects:
        method = getattr(handlers, HANDLER_METHODS[type(eff)], None)
        if method is None:
            logger.debug("No handler for effect %s", eff.type)
            continue

        match eff:
            case FocusInput():
                method()
            case FocusSelectedItem(item) | ScrollItemIntoView(item):
                method(item)


# --- Widget registration ---


class EffectRegistration:
    """Stores effect registration info on a method."""

    __slots__ = ("targets",)

    def __init__(self) -> None:
        self.targets: list[type] = []

    def add(self, target: type) -> None:
        self.targets.append(target)


def get_effect_registration(method: Callable[..., Any]) -> EffectRegistration | None:
    """Get effect registration from a method, if any."""
    return getattr(method, EFFECT_ATTR, None)


def on_effect(*targets: type) -> Callable[[F], F]:
    """
    Decorator to mark a widget method as the handler for effect types.

    The method receives the effect value.

    Args:
        *targets: Effect classes to handle.

    Example:
        ```python
        class FruitPicker(Widget):
            def on_mount(self):
                self.combobox = use_combobox(self, config, model)

            @on_effect(FocusInput)
            def focus_the_input(self, effect: FocusInput):
                self.query_one(Input).focus()

            @on_effect(ScrollItemIntoView, FocusSelectedItem)
            def reveal(self, effect):
                ...
        ```
    """
    if not targets:
        raise ValueError("@on_effect requires at least one effect type")

    for target in targets:
        if target not in EFFECT_TYPES:
            raise ValueError(f"{target!r} is not an effect type")

    def decorator(method: F) -> F:
        # Get or create registration
        registration = get_effect_registration(method)
        if registration is None:
            registration = EffectRegistration()
            setattr(method, EFFECT_ATTR, registration)

        for target in targets:
            registration.add(target)

        return method

    return decorator


def connect_effect_handlers(widget: Any) -> dict[type, list[Callable[[Effect], None]]]:
    """
    Collect the ``@on_effect`` methods of a widget, keyed by effect type.

    Called internally by use_combobox.

    Args:
        widget: The widget instance.

    Returns:
        Bound handler methods for every effect type the widget handles.
    """
    connected: dict[type, list[Callable[[Effect], None]]] = {}

    for attr_name in dir(type(widget)):
        if attr_name.startswith("_"):
            continue

        try:
            # Get from class first to check for the decorator
            class_attr = getattr(type(widget), attr_name, None)
            if class_attr is None:
                continue

            registration = get_effect_registration(class_attr)
            if registration is None:
                continue

            method = getattr(widget, attr_name)
            if not callable(method):
                continue

            for target in registration.targets:
                connected.setdefault(target, []).append(method)
        except (AttributeError, AssertionError, TypeError):
            continue

    return connected
