"""Type definitions for textual-combobox."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Iterable, Protocol, TypeVar

if TYPE_CHECKING:
    from .config import Config
    from .effects import Effect
    from .events import Event
    from .model import Model
    from .reducer import Output

# Type variables
T_contra = TypeVar("T_contra", contravariant=True)

ItemId = Hashable


class Action(Protocol):
    """Protocol for reducer events."""

    @property
    def type(self) -> str:
        """Event type identifier."""
        ...


class ToItemId(Protocol[T_contra]):
    """Protocol for the item identity projection."""

    def __call__(self, item: T_contra) -> ItemId:
        """Return a stable, unique id for the item."""
        ...


class ToItemInputValue(Protocol[T_contra]):
    """Protocol for the item display projection."""

    def __call__(self, item: T_contra) -> str:
        """Return the text shown in the input and used for filtering."""
        ...


class ItemFilter(Protocol):
    """Protocol for pluggable search functions."""

    def __call__(self, config: Config[Any], items: list[Any], query: str) -> Iterable[Any]:
        """Yield the items matching the query, in a deterministic order."""
        ...


class TraceHook(Protocol):
    """Protocol for transition trace sinks."""

    def __call__(
        self,
        previous: Model[Any],
        event: Event,
        next: Model[Any],
        effects: list[Effect],
    ) -> None:
        """Called after every transition. Must not mutate anything it receives."""
        ...


class Plugin(Protocol):
    """Protocol for callables that adjust the core transition result."""

    def __call__(
        self,
        config: Config[Any],
        previous: Model[Any],
        event: Event,
        output: Output[Any],
    ) -> Output[Any]:
        """Return the output to use, usually ``output`` itself or a modified copy."""
        ...
