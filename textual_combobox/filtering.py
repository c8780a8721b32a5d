"""Item filtering and index arithmetic."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, TypeVar

from .config import Config, HighlightMode

T = TypeVar("T")


def simple_filter(config: Config[T], items: list[T], query: str) -> Iterable[T]:
    """
    Default search: keep items whose display value contains the query.

    Matching is a case-sensitive substring test and the order of ``items``
    is preserved. An empty query keeps everything.
    """
    if query == "":
        yield from items
        return

    for item in items:
        if query in config.to_item_input_value(item):
            yield item


def to_visible_items(config: Config[T], items: list[T], query: str) -> list[T]:
    """
    Compute the visible subset of ``items`` for ``query``.

    Uses the configured ``item_filter`` when there is one and caps the
    result at ``visible_item_limit``.
    """
    search = config.item_filter or simple_filter
    return list(islice(search(config, items, query), config.visible_item_limit))


def circular_index(index: int, length: int) -> int:
    """Wrap ``index`` into ``[0, length)``. Returns 0 for an empty list."""
    if length == 0:
        return 0
    return ((index % length) + length) % length


def clamp_index(index: int, length: int) -> int:
    """Clamp ``index`` into ``[0, length)``. Returns 0 for an empty list."""
    if length == 0:
        return 0
    return min(max(0, index), length - 1)


def next_highlight_index(mode: HighlightMode, index: int, length: int) -> int:
    """Resolve a candidate highlight index according to the highlight mode."""
    if mode == "clamp":
        return clamp_index(index, length)
    return circular_index(index, length)


def find_index(predicate: Callable[[T], bool], items: Iterable[T]) -> int | None:
    """Return the index of the first item matching ``predicate``, if any."""
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return None


def find_item_index(config: Config[Any], items: Iterable[T], item: T) -> int | None:
    """Return the index of ``item`` in ``items``, compared by item id."""
    item_id = config.to_item_id(item)
    return find_index(lambda candidate: config.to_item_id(candidate) == item_id, items)
