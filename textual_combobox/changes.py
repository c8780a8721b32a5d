"""Change notices reported alongside each transition.

Hosts read these from ``Output.events`` to learn that the query or the
selection changed without diffing models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from .config import Config
from .model import Model


@dataclass(frozen=True)
class QueryChanged:
    """The input text differs from the previous model's."""

    type: ClassVar[str] = "query-changed"


@dataclass(frozen=True)
class SelectedItemsChanged:
    """An item was added to or removed from the selection."""

    type: ClassVar[str] = "selected-items-changed"


Change = Union[QueryChanged, SelectedItemsChanged]


def did_selected_items_change(
    config: Config[Any], previous: Model[Any], next: Model[Any]
) -> bool:
    """Compare selections by item id. Reordering alone is not a change."""
    previous_ids = {config.to_item_id(item) for item in previous.selected_items}
    next_ids = {config.to_item_id(item) for item in next.selected_items}
    return previous_ids != next_ids


def to_changes(
    config: Config[Any], previous: Model[Any], next: Model[Any]
) -> list[Change]:
    changes: list[Change] = []
    if previous.query != next.query:
        changes.append(QueryChanged())
    if did_selected_items_change(config, previous, next):
        changes.append(SelectedItemsChanged())
    return changes
