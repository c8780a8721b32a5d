"""Hook binding a combobox reducer to a Textual widget."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from textual.widget import Widget

from .aria import AriaAttributes, to_aria
from .changes import Change
from .config import Config
from .effects import Effect, connect_effect_handlers, handle_effects
from .events import Event
from .keyboard import key_to_event
from .model import Model
from .reducer import update
from .state import ComboboxState
from .types import Plugin, TraceHook
from .view import ViewModel, to_view

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ComboboxHandle(Generic[T]):
    """
    A handle to a combobox model and its dispatch function.

    Attributes:
        state: The underlying ComboboxState.
        config: The configuration every projection uses.
    """

    state: ComboboxState[T]
    config: Config[T]
    _dispatch: Callable[[Event], list[Effect]]
    _name: str | None = None

    @property
    def value(self) -> Model[T]:
        """Get the current model."""
        return self.state.value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def view(self) -> ViewModel[T]:
        """Render-ready view of the current model."""
        return to_view(self.config, self.state.value)

    @property
    def aria(self) -> AriaAttributes[T]:
        return to_aria(self.config, self.state.value)

    def dispatch(self, event: Event) -> list[Effect]:
        """Apply an event, store the next model and run its effects."""
        return self._dispatch(event)

    def dispatch_key(self, key: str) -> bool:
        """
        Dispatch the event a key maps to.

        Returns:
            True when the host should prevent the key's default behaviour.
        """
        result = key_to_event(key)
        if result is None:
            return False
        self._dispatch(result.event)
        return result.prevent_default

    def __call__(self) -> Model[T]:
        """Shorthand to get the current model."""
        return self.state.value


def use_combobox(
    widget: Widget,
    config: Config[T],
    initial_value: Model[T],
    *,
    name: str | None = None,
    plugins: Sequence[Plugin] = (),
    handlers: Any = None,
    on_change: Callable[[Change], None] | None = None,
    trace: TraceHook | None = None,
) -> ComboboxHandle[T]:
    """
    Create a combobox state bound to a widget.

    Effects are executed right after each transition: first through the
    widget's ``@on_effect`` methods, then through ``handlers`` (an object
    with ``focus_input``/``focus_selected_item``/``scroll_item_into_view``).

    Args:
        widget: The widget that owns the combobox.
        config: The combobox configuration.
        initial_value: The initial model, usually from ``init``.
        name: Optional name for debugging.
        plugins: Optional reducer plugins, e.g. ``toggle_on_select()``.
        handlers: Optional effect handler object.
        on_change: Optional callback for each change notice, e.g. to save
            the selection whenever it changes.
        trace: Optional trace hook, e.g. ``log_transition``.

    Returns:
        A ComboboxHandle with value, view, aria and dispatch.

    Example:
        ```python
        class FruitPicker(Widget):
            def on_mount(self):
                self.combobox = use_combobox(self, config, init(config, all_items=FRUITS))

            def on_input_changed(self, event: Input.Changed) -> None:
                self.combobox.dispatch(InputtedQuery(event.value))

            def on_combobox_changed(self, event: ComboboxChanged) -> None:
                self.refresh()
        ```
    """
    state = ComboboxState(initial_value, name=name)
    state.subscribe(widget)

    widget_handlers = connect_effect_handlers(widget)

    def dispatch(event: Event) -> list[Effect]:
        output = update(config, state.value, event, plugins=plugins, trace=trace)
        state.set(output.model)

        for change in output.events:
            logger.debug("%s in %r", change.type, state)
            if on_change is not None:
                on_change(change)

        for eff in output.effects:
            methods = widget_handlers.get(type(eff), [])
            if not methods and handlers is None:
                logger.debug("Unhandled effect %s in %r", eff.type, state)
            for method in methods:
                method(eff)

        if handlers is not None:
            handle_effects(output.effects, handlers)

        return output.effects

    return ComboboxHandle(state=state, config=config, _dispatch=dispatch, _name=name)
