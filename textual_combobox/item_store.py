"""Item store collaborator: lookup and paged search behind an async interface.

Hosts with collections too large to filter in memory search through an item
store and feed each result page back into the reducer as ``ItemsLoaded``.
A failed search is reported as ``SearchFailed``.
"""

from __future__ import annotations

import logging
from math import ceil
from typing import Any, Generic, Iterable, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .config import Config
from .events import Event, ItemsLoaded, SearchFailed
from .filtering import simple_filter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ItemStoreError(Exception):
    """Raised by an item store when a lookup or search cannot complete."""


class SearchResult(BaseModel, Generic[T]):
    """One page of search results."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    total: int = 0
    page_index: int = 0
    page_size: int = 0

    @property
    def page_count(self) -> int:
        if self.page_size <= 0:
            return 0
        return ceil(self.total / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page_index + 1 < self.page_count


class ItemStore(Protocol[T]):
    """Protocol for search/storage backends."""

    async def get_by_id(self, item_id: Any) -> T | None:
        """Return the item with this id, if stored."""
        ...

    async def get_index(self, item_id: Any) -> int | None:
        """Return the position of the item in the store's order, if stored."""
        ...

    async def search(
        self, query: str, *, page_index: int = 0, page_size: int = 50
    ) -> SearchResult[T]:
        """Return one page of items matching the query."""
        ...


class InMemoryItemStore(Generic[T]):
    """
    Item store over an ordered in-memory collection.

    Inserting an item whose id is already stored replaces it in place.

    Example:
        ```python
        store = InMemoryItemStore(config)
        await store.insert(all_fruits)
        page = await store.search("an", page_size=20)
        model = update(config, model, ItemsLoaded(page.items)).model
        ```
    """

    def __init__(self, config: Config[T], items: Iterable[T] = ()) -> None:
        self._config = config
        self._items_by_id: dict[Any, T] = {}
        for item in items:
            self._items_by_id[config.to_item_id(item)] = item

    def __len__(self) -> int:
        return len(self._items_by_id)

    async def insert(self, items: Iterable[T]) -> None:
        for item in items:
            self._items_by_id[self._config.to_item_id(item)] = item

    async def get_by_id(self, item_id: Any) -> T | None:
        return self._items_by_id.get(item_id)

    async def get_index(self, item_id: Any) -> int | None:
        for index, stored_id in enumerate(self._items_by_id):
            if stored_id == item_id:
                return index
        return None

    async def search(
        self, query: str, *, page_index: int = 0, page_size: int = 50
    ) -> SearchResult[T]:
        if page_index < 0 or page_size <= 0:
            raise ItemStoreError(
                f"Invalid page: page_index={page_index}, page_size={page_size}"
            )

        search = self._config.item_filter or simple_filter
        matches = list(search(self._config, list(self._items_by_id.values()), query))
        start = page_index * page_size

        return SearchResult(
            items=matches[start : start + page_size],
            total=len(matches),
            page_index=page_index,
            page_size=page_size,
        )


async def search_to_event(
    store: ItemStore[T],
    query: str,
    *,
    page_index: int = 0,
    page_size: int = 50,
) -> Event:
    """
    Run a search and translate the outcome into a reducer event.

    Returns ``ItemsLoaded`` with the page's items, or ``SearchFailed`` when
    the store raises ``ItemStoreError``.
    """
    try:
        result = await store.search(query, page_index=page_index, page_size=page_size)
    except ItemStoreError as e:
        logger.warning("Search for %r failed: %s", query, e)
        return SearchFailed(reason=str(e))
    return ItemsLoaded(items=list(result.items))
