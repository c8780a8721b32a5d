"""Combobox configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from .types import ItemFilter, ToItemId, ToItemInputValue

T = TypeVar("T")

SelectMode = Literal["single-select", "multi-select"]
SelectedItemListDirection = Literal["left-to-right", "right-to-left"]
HighlightMode = Literal["circular", "clamp"]


@dataclass(frozen=True, slots=True)
class Config(Generic[T]):
    """
    Immutable configuration shared by every pure function of the combobox.

    ``to_item_id`` and ``to_item_input_value`` must be deterministic. Ids must
    be unique over the active item collection; duplicates are not detected and
    lead to wrong highlight/selection matches.

    Attributes:
        to_item_id: Projection from item to a stable, unique id.
        to_item_input_value: Projection from item to its display text.
        namespace: Prefix for generated element ids.
        select_mode: ``"single-select"`` or ``"multi-select"``.
        selected_item_list_direction: Order in which chips are laid out.
        highlight_mode: ``"circular"`` wraps around, ``"clamp"`` stops at the ends.
        item_filter: Search function, ``simple_filter`` when not given.
        visible_item_limit: Maximum number of visible items.
        close_on_select: Close the suggestion list after a selection.
        enable_selected_item_navigation: Allow moving focus onto chips with
            the horizontal arrow keys.
    """

    to_item_id: ToItemId[T]
    to_item_input_value: ToItemInputValue[T]
    namespace: str = "combobox"
    select_mode: SelectMode = "single-select"
    selected_item_list_direction: SelectedItemListDirection = "left-to-right"
    highlight_mode: HighlightMode = "circular"
    item_filter: ItemFilter | None = None
    visible_item_limit: int = 500
    close_on_select: bool = True
    enable_selected_item_navigation: bool = True

    @property
    def is_multi_select(self) -> bool:
        return self.select_mode == "multi-select"


def init_config(
    *,
    to_item_id: ToItemId[T],
    to_item_input_value: ToItemInputValue[T],
    namespace: str = "combobox",
    select_mode: SelectMode = "single-select",
    selected_item_list_direction: SelectedItemListDirection = "left-to-right",
    highlight_mode: HighlightMode = "circular",
    item_filter: ItemFilter | None = None,
    visible_item_limit: int = 500,
    close_on_select: bool = True,
    enable_selected_item_navigation: bool = True,
) -> Config[T]:
    """
    Create a combobox configuration.

    Args:
        to_item_id: Projection from item to a stable, unique id.
        to_item_input_value: Projection from item to its display text.
        namespace: Prefix for generated element ids. Use one per widget instance.
        select_mode: ``"single-select"`` or ``"multi-select"``.
        selected_item_list_direction: Chip order for multi-select.
        highlight_mode: How keyboard navigation behaves at the list ends.
        item_filter: Optional search function ``(config, items, query)``.
        visible_item_limit: Maximum number of visible items.
        close_on_select: Close the suggestion list after a selection.
        enable_selected_item_navigation: Allow chip navigation with arrow keys.

    Returns:
        A frozen Config.

    Raises:
        ValueError: If the namespace is empty or a mode is unknown.

    Example:
        ```python
        config = init_config(
            to_item_id=lambda fruit: fruit,
            to_item_input_value=lambda fruit: fruit,
            namespace="fruit-picker",
        )
        ```
    """
    if not namespace or not namespace.strip():
        raise ValueError("namespace must be a non-empty string")
    if select_mode not in ("single-select", "multi-select"):
        raise ValueError(f"Unknown select mode: {select_mode!r}")
    if selected_item_list_direction not in ("left-to-right", "right-to-left"):
        raise ValueError(
            f"Unknown selected item list direction: {selected_item_list_direction!r}"
        )
    if highlight_mode not in ("circular", "clamp"):
        raise ValueError(f"Unknown highlight mode: {highlight_mode!r}")

    return Config(
        to_item_id=to_item_id,
        to_item_input_value=to_item_input_value,
        namespace=namespace,
        select_mode=select_mode,
        selected_item_list_direction=selected_item_list_direction,
        highlight_mode=highlight_mode,
        item_filter=item_filter,
        visible_item_limit=abs(visible_item_limit),
        close_on_select=close_on_select,
        enable_selected_item_navigation=enable_selected_item_navigation,
    )
