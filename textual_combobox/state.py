"""Reactive container holding one combobox model for a Textual host."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar
from weakref import WeakSet

from textual.message import Message
from textual.widget import Widget

from .model import Model

T = TypeVar("T")


class ComboboxChanged(Message, Generic[T]):
    """Message posted when the combobox model changes."""

    def __init__(
        self, state: ComboboxState[T], old_value: Model[T], new_value: Model[T]
    ) -> None:
        super().__init__()
        self.state = state
        self.old_value = old_value
        self.new_value = new_value


class ComboboxState(Generic[T]):
    """
    Owns the current model of one combobox instance.

    Subscribed widgets receive ComboboxChanged messages; watchers are called
    synchronously with ``(old, new)``. Setting an equal model is a no-op.
    """

    __slots__ = ("_value", "_subscribers", "_watchers", "_name")

    def __init__(self, initial_value: Model[T], *, name: str | None = None) -> None:
        """
        Initialize a new combobox state container.

        Args:
            initial_value: The initial model.
            name: Optional name for debugging purposes.
        """
        self._value: Model[T] = initial_value
        self._subscribers: WeakSet[Widget] = WeakSet()
        self._watchers: list[Callable[[Model[T], Model[T]], None]] = []
        self._name = name

    @property
    def value(self) -> Model[T]:
        """Get the current model."""
        return self._value

    def set(self, new_value: Model[T]) -> None:
        """Replace the model and notify subscribers if it changed."""
        old_value = self._value
        if old_value is new_value or old_value == new_value:
            return

        self._value = new_value

        for watcher in list(self._watchers):
            watcher(old_value, new_value)

        message = ComboboxChanged(self, old_value, new_value)
        for widget in self._subscribers:
            widget.post_message(message)

    def subscribe(self, widget: Widget) -> None:
        """Subscribe a widget to ComboboxChanged messages."""
        self._subscribers.add(widget)

    def unsubscribe(self, widget: Widget) -> None:
        self._subscribers.discard(widget)

    def watch(self, callback: Callable[[Model[T], Model[T]], None]) -> Callable[[], None]:
        """
        Add a watcher callback for model changes.

        Args:
            callback: A function that receives (old_value, new_value).

        Returns:
            A function to remove the watcher.
        """
        self._watchers.append(callback)

        def unwatch() -> None:
            self._watchers.remove(callback)

        return unwatch

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"ComboboxState({self._value.status.type!r}{name})"
