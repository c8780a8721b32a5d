"""Optional plugins that adjust the reducer's output.

Pass them to ``update`` (or ``use_combobox``) as ``plugins=[...]``. Each one
receives ``(config, previous, event, output)`` and returns the output to use.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .changes import to_changes
from .config import Config
from .events import ClickedItem, Event, PressedEnterKey
from .model import (
    Model,
    is_closed,
    is_focused,
    is_item_selected,
    is_opened,
    selection_query,
    to_highlighted_item,
)
from .reducer import Output, _remove_selected, _set_query
from .types import Plugin


def toggle_on_select() -> Plugin:
    """
    Selecting the item that is already selected unselects it.

    Multi-select toggles on its own; this gives single-select the same
    behaviour. The query is cleared along with the selection.
    """

    def plugin(
        config: Config[Any], previous: Model[Any], event: Event, output: Output[Any]
    ) -> Output[Any]:
        match event:
            case PressedEnterKey():
                item = to_highlighted_item(config, previous)
            case ClickedItem(item):
                pass
            case _:
                return output

        if item is None:
            return output
        if not (
            is_item_selected(config, previous, item)
            and is_item_selected(config, output.model, item)
        ):
            return output

        model = _set_query(_remove_selected(config, output.model, item), "")
        return replace(output, model=model, events=to_changes(config, previous, model))

    return plugin


def reset_search_on_close() -> Plugin:
    """
    Restore the selection's text when the open list closes while focused.

    The next open then starts from an unfiltered (or selection-filtered)
    list instead of the abandoned search.
    """

    def plugin(
        config: Config[Any], previous: Model[Any], event: Event, output: Output[Any]
    ) -> Output[Any]:
        if not (is_opened(previous) and is_closed(output.model) and is_focused(output.model)):
            return output

        model = _set_query(output.model, selection_query(config, output.model))
        if model is output.model:
            return output
        return replace(output, model=model, events=to_changes(config, previous, model))

    return plugin
