"""The combobox transition reducer.

``update`` is a pure function ``(config, model, event) -> Output``. It never
raises for any combination of model and event: events that mean nothing in
the current status return the model unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Sequence, TypeVar, cast

from .changes import Change, to_changes
from .config import Config
from .effects import Effect, FocusInput, FocusSelectedItem, ScrollItemIntoView
from .events import (
    BlurredInput,
    BlurredSelectedItem,
    ClickedInput,
    ClickedItem,
    Event,
    FocusedInput,
    FocusedSelectedItem,
    HoveredOverItem,
    InputtedQuery,
    ItemsLoaded,
    PressedArrowKey,
    PressedBackspaceKey,
    PressedEnterKey,
    PressedEscapeKey,
    PressedHorizontalArrowKey,
    PressedKey,
    SearchFailed,
    SelectedItemsSet,
    ToggledOpened,
    UnselectedAll,
    UnselectedItem,
)
from .filtering import clamp_index, find_index, find_item_index, next_highlight_index
from .model import (
    Blurred,
    FocusedClosed,
    FocusedOpened,
    FocusedOpenedHighlighted,
    Model,
    SelectedItemFocused,
    is_blurred,
    is_closed,
    is_focused,
    is_highlighted,
    is_item_selected,
    is_opened,
    is_selected_item_focused,
    selection_query,
    to_focused_selected_item,
    to_highlighted_item,
    to_selected_item,
    to_selected_items,
    to_state_name,
    to_visible,
)
from .types import Plugin, TraceHook

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Output(Generic[T]):
    """
    Result of one transition.

    Attributes:
        model: The next model. The host stores it and passes it to the next call.
        effects: Side effects the host should run now, in order.
        events: Change notices (query or selection changed) for the host.
    """

    model: Model[T]
    effects: list[Effect] = field(default_factory=list)
    events: list[Change] = field(default_factory=list)


def update(
    config: Config[T],
    model: Model[T],
    event: Event,
    *,
    plugins: Sequence[Plugin] = (),
    trace: TraceHook | None = None,
) -> Output[T]:
    """
    Compute the next model and the effects for an event.

    Args:
        config: The combobox configuration.
        model: The current model.
        event: The event to apply.
        plugins: Callables ``(config, previous, event, output) -> Output``
            applied in order to the core result.
        trace: Optional sink called with ``(model, event, next, effects)``.

    Returns:
        An Output with the next model, its effects and change notices.

    Example:
        ```python
        model = init(config, all_items=["apple", "banana"])
        output = update(config, model, FocusedInput())
        output = update(config, output.model, PressedArrowKey("down"))
        to_highlighted_item(config, output.model)  # "apple"
        ```
    """
    if event.type in model.skip_once:
        logger.debug("Skipped %s once", event.type)
        output: Output[T] = Output(model=_consume_skip(model, event.type))
    else:
        output = _update_main(config, model, event)

    for plugin in plugins:
        output = plugin(config, model, event, output)

    if output.model is model:
        logger.debug("Ignored %s in %s", event.type, to_state_name(model))

    if trace is not None:
        trace(model, event, output.model, output.effects)

    return output


def _update_main(config: Config[T], model: Model[T], event: Event) -> Output[T]:
    match event:
        case ItemsLoaded() | SearchFailed() | SelectedItemsSet():
            next_model = _update_setters(config, model, event)
        case _:
            handler = _STATUS_HANDLERS[type(model.status)]
            next_model = handler(config, model, event)

    effects = _to_effects(config, model, event, next_model)

    # scrolling moves the list under the pointer; ignore the hover it causes
    if isinstance(event, PressedArrowKey) and to_highlighted_item(config, next_model) is not None:
        next_model = next_model.model_copy(update={"skip_once": [HoveredOverItem.type]})

    return Output(
        model=next_model,
        effects=effects,
        events=to_changes(config, model, next_model),
    )


def _consume_skip(model: Model[T], event_type: str) -> Model[T]:
    remaining = list(model.skip_once)
    remaining.remove(event_type)
    return model.model_copy(update={"skip_once": remaining})


def log_transition(
    previous: Model[Any],
    event: Event,
    next: Model[Any],
    effects: list[Effect],
) -> None:
    """Trace hook that writes one debug line per transition."""
    logger.debug(
        "%s --%s--> %s [%s]",
        to_state_name(previous),
        event.type,
        to_state_name(next),
        ", ".join(eff.type for eff in effects),
    )


# --- Per-status transitions ---


def _update_blurred(config: Config[T], model: Model[T], event: Event) -> Model[T]:
    match event:
        case FocusedInput() | ToggledOpened():
            return model.model_copy(
                update={
                    "status": FocusedOpened(),
                    "query": selection_query(config, model),
                }
            )

        case UnselectedItem(item):
            return _reseed_query(config, _remove_selected(config, model, item))

        case UnselectedAll():
            return _reseed_query(config, _clear_selected(config, model))

        case FocusedSelectedItem(item):
            return _focus_selected_item(config, model, item)

    return model


def _update_focused_closed(config: Config[T], model: Model[T], event: Event) -> Model[T]:
    match event:
        case ClickedInput() | ToggledOpened() | PressedEnterKey():
            return _with_status(model, FocusedOpened())

        case BlurredInput():
            return _blur(config, model)

        case InputtedQuery(query):
            return _set_query(_with_status(model, FocusedOpened()), query)

        case PressedArrowKey(direction):
            if config.is_multi_select:
                return _open_with_arrow(config, model, direction)
            return _with_status(model, FocusedOpened())

        case ClickedItem(item):
            return _select(config, model, item)

        case PressedHorizontalArrowKey(direction):
            return _enter_selected_items(config, model, direction)

        case PressedBackspaceKey():
            return _remove_last_selected(config, model)

        case UnselectedItem(item):
            return _remove_selected(config, model, item)

        case UnselectedAll():
            return _clear_selected(config, model)

        case FocusedSelectedItem(item):
            return _focus_selected_item(config, model, item)

    return model


def _update_focused_opened(config: Config[T], model: Model[T], event: Event) -> Model[T]:
    match event:
        case HoveredOverItem(index):
            if 0 <= index < len(to_visible(config, model)):
                return _with_status(
                    model, FocusedOpenedHighlighted(highlight_index=index)
                )
            return model

        case InputtedQuery(query):
            return _set_query(model, query)

        case PressedArrowKey(direction):
            return _open_with_arrow(config, model, direction)

        case PressedEnterKey():
            return _with_status(
                _set_query(model, selection_query(config, model)), FocusedClosed()
            )

    return _update_opened(config, model, event)


def _update_focused_opened_highlighted(
    config: Config[T], model: Model[T], event: Event
) -> Model[T]:
    status = cast(FocusedOpenedHighlighted, model.status)

    match event:
        case HoveredOverItem(index):
            if 0 <= index < len(to_visible(config, model)):
                return _with_status(
                    model, FocusedOpenedHighlighted(highlight_index=index)
                )
            return model

        case InputtedQuery(query):
            # The highlight index belongs to the old visible list.
            return _set_query(_with_status(model, FocusedOpened()), query)

        case PressedArrowKey(direction):
            visible = to_visible(config, model)
            if not visible:
                return _with_status(model, FocusedOpened())
            delta = 1 if direction == "down" else -1
            return _with_status(
                model,
                FocusedOpenedHighlighted(
                    highlight_index=next_highlight_index(
                        config.highlight_mode,
                        status.highlight_index + delta,
                        len(visible),
                    ),
                    is_keyboard_navigation=True,
                ),
            )

        case PressedEnterKey():
            visible = to_visible(config, model)
            if 0 <= status.highlight_index < len(visible):
                return _select(config, model, visible[status.highlight_index])
            return _with_status(model, FocusedClosed())

    return _update_opened(config, model, event)


def _update_opened(config: Config[T], model: Model[T], event: Event) -> Model[T]:
    """Transitions shared by the opened and opened-highlighted statuses."""
    match event:
        case ToggledOpened() | PressedEscapeKey():
            return _with_status(model, FocusedClosed())

        case ClickedInput():
            if model.query == "":
                return _with_status(model, FocusedClosed())
            return model

        case BlurredInput():
            return _blur(config, model)

        case ClickedItem(item):
            return _select(config, model, item)

        case PressedHorizontalArrowKey(direction):
            return _enter_selected_items(config, model, direction)

        case PressedBackspaceKey():
            return _remove_last_selected(config, model)

        case UnselectedItem(item):
            return _keep_highlight_in_range(
                config, _remove_selected(config, model, item)
            )

        case UnselectedAll():
            return _keep_highlight_in_range(config, _clear_selected(config, model))

        case FocusedSelectedItem(item):
            return _focus_selected_item(config, model, item)

    return model


def _update_selected_item_focused(
    config: Config[T], model: Model[T], event: Event
) -> Model[T]:
    status = cast(SelectedItemFocused, model.status)

    match event:
        case PressedHorizontalArrowKey(direction):
            return _move_selected_item_focus(config, model, status, direction)

        case PressedArrowKey(direction):
            return _open_with_arrow(config, _set_query(model, ""), direction)

        case InputtedQuery(query):
            return _with_status(model.model_copy(update={"query": query}), FocusedOpened())

        case PressedKey() | PressedEnterKey() | PressedEscapeKey():
            return _with_status(_set_query(model, ""), FocusedClosed())

        case PressedBackspaceKey():
            focused = to_focused_selected_item(config, model)
            if focused is not None:
                model = _remove_selected(config, model, focused)
            return _with_status(_set_query(model, ""), FocusedClosed())

        case UnselectedItem(item):
            removed = _remove_selected(config, model, item)
            if not removed.selected_items:
                return _with_status(_set_query(removed, ""), FocusedClosed())
            return _with_status(
                removed,
                SelectedItemFocused(
                    focused_index=clamp_index(
                        status.focused_index, len(removed.selected_items)
                    )
                ),
            )

        case FocusedSelectedItem(item):
            return _focus_selected_item(config, model, item)

        case BlurredSelectedItem():
            return _with_status(model, Blurred())

        case FocusedInput() | ClickedInput():
            return _with_status(_set_query(model, ""), FocusedOpened())

        case ClickedItem(item):
            return _select(config, _set_query(model, ""), item)

        case UnselectedAll():
            return _with_status(
                _set_query(_clear_selected(config, model), ""), FocusedOpened()
            )

    return model


_STATUS_HANDLERS: dict[type, Callable[[Config[Any], Model[Any], Event], Model[Any]]] = {
    Blurred: _update_blurred,
    FocusedClosed: _update_focused_closed,
    FocusedOpened: _update_focused_opened,
    FocusedOpenedHighlighted: _update_focused_opened_highlighted,
    SelectedItemFocused: _update_selected_item_focused,
}


# --- Setters ---


def _update_setters(config: Config[T], model: Model[T], event: Event) -> Model[T]:
    match event:
        case ItemsLoaded(items):
            loaded = model.model_copy(update={"all_items": list(items)})
            return _keep_highlight_in_range(config, loaded)

        case SearchFailed(reason):
            logger.warning("Item search failed, keeping current items: %s", reason)
            return model

        case SelectedItemsSet(items):
            selected = list(items) if config.is_multi_select else list(items)[:1]
            updated = model.model_copy(update={"selected_items": selected})
            if is_blurred(updated):
                return _reseed_query(config, updated)
            if isinstance(updated.status, SelectedItemFocused):
                if not selected:
                    return _with_status(updated, FocusedClosed())
                return _with_status(
                    updated,
                    SelectedItemFocused(
                        focused_index=clamp_index(
                            updated.status.focused_index, len(selected)
                        )
                    ),
                )
            return updated

    return model


# --- Helpers ---


def _with_status(model: Model[T], status: Any) -> Model[T]:
    return model.model_copy(update={"status": status})


def _set_query(model: Model[T], query: str) -> Model[T]:
    """Change the query. A highlight never survives a query change."""
    if query == model.query:
        return model
    status = model.status
    if isinstance(status, FocusedOpenedHighlighted):
        status = FocusedOpened()
    return model.model_copy(update={"query": query, "status": status})


def _reseed_query(config: Config[T], model: Model[T]) -> Model[T]:
    return _set_query(model, selection_query(config, model))


def _blur(config: Config[T], model: Model[T]) -> Model[T]:
    return _reseed_query(config, _with_status(model, Blurred()))


def _keep_highlight_in_range(config: Config[T], model: Model[T]) -> Model[T]:
    status = model.status
    if not isinstance(status, FocusedOpenedHighlighted):
        return model
    visible = to_visible(config, model)
    if not visible:
        return _with_status(model, FocusedOpened())
    if status.highlight_index < len(visible):
        return model
    return _with_status(
        model,
        FocusedOpenedHighlighted(
            highlight_index=clamp_index(status.highlight_index, len(visible)),
            is_keyboard_navigation=status.is_keyboard_navigation,
        ),
    )


def _select(config: Config[T], model: Model[T], item: T) -> Model[T]:
    """
    Single-select replaces the selection; multi-select toggles membership.

    With ``close_on_select`` off the input keeps its status, highlight
    included, and only a query change drops the highlight.
    """
    status = _status_after_select(config, model)

    if not config.is_multi_select:
        selected = model.model_copy(update={"selected_items": [item], "status": status})
        return _set_query(selected, config.to_item_input_value(item))

    if is_item_selected(config, model, item):
        toggled = _remove_selected(config, model, item)
    else:
        toggled = model.model_copy(
            update={"selected_items": [*model.selected_items, item]}
        )
    return _set_query(_with_status(toggled, status), "")


def _status_after_select(config: Config[T], model: Model[T]) -> Any:
    if config.close_on_select:
        return FocusedClosed()
    if isinstance(model.status, (FocusedClosed, FocusedOpened, FocusedOpenedHighlighted)):
        return model.status
    return FocusedOpened()


def _remove_selected(config: Config[T], model: Model[T], item: T) -> Model[T]:
    item_id = config.to_item_id(item)
    remaining = [
        selected
        for selected in model.selected_items
        if config.to_item_id(selected) != item_id
    ]
    if len(remaining) == len(model.selected_items):
        return model

    removed = model.model_copy(update={"selected_items": remaining})
    if not config.is_multi_select and removed.query == config.to_item_input_value(item):
        return _set_query(removed, "")
    return removed


def _clear_selected(config: Config[T], model: Model[T]) -> Model[T]:
    cleared = model
    for item in list(model.selected_items):
        cleared = _remove_selected(config, cleared, item)
    return cleared


def _remove_last_selected(config: Config[T], model: Model[T]) -> Model[T]:
    if not config.is_multi_select or model.query != "" or not model.selected_items:
        return model
    return _keep_highlight_in_range(
        config, _remove_selected(config, model, model.selected_items[-1])
    )


def _open_with_arrow(config: Config[T], model: Model[T], direction: str) -> Model[T]:
    """
    Open the list with a highlight after an arrow key.

    Starts from the first visible selected item when there is one, otherwise
    from the first (down) or last (up) visible item.
    """
    visible = to_visible(config, model)
    if not visible:
        return _with_status(model, FocusedOpened())

    selected_index = find_index(
        lambda candidate: is_item_selected(config, model, candidate), visible
    )

    if selected_index is None:
        index = 0 if direction == "down" else len(visible) - 1
    elif config.is_multi_select:
        index = selected_index
    else:
        delta = 1 if direction == "down" else -1
        index = next_highlight_index(
            config.highlight_mode, selected_index + delta, len(visible)
        )

    return _with_status(
        model,
        FocusedOpenedHighlighted(highlight_index=index, is_keyboard_navigation=True),
    )


def _can_navigate_selected_items(config: Config[T], model: Model[T]) -> bool:
    return (
        config.is_multi_select
        and config.enable_selected_item_navigation
        and model.query == ""
        and len(model.selected_items) > 0
    )


def _enter_selected_items(config: Config[T], model: Model[T], direction: str) -> Model[T]:
    if not _can_navigate_selected_items(config, model):
        return model
    entering = "right" if config.selected_item_list_direction == "left-to-right" else "left"
    if direction != entering:
        return model
    return _with_status(model, SelectedItemFocused(focused_index=0))


def _move_selected_item_focus(
    config: Config[T],
    model: Model[T],
    status: SelectedItemFocused,
    direction: str,
) -> Model[T]:
    if not config.is_multi_select:
        return _with_status(_set_query(model, ""), FocusedClosed())

    forward = "right" if config.selected_item_list_direction == "left-to-right" else "left"
    delta = 1 if direction == forward else -1

    if status.focused_index == 0 and delta == -1:
        return _with_status(_set_query(model, ""), FocusedClosed())

    return _with_status(
        model,
        SelectedItemFocused(
            focused_index=clamp_index(
                status.focused_index + delta, len(model.selected_items)
            )
        ),
    )


def _focus_selected_item(config: Config[T], model: Model[T], item: T) -> Model[T]:
    if not config.is_multi_select:
        return model
    index = find_item_index(config, to_selected_items(config, model), item)
    if index is None:
        return model
    return _with_status(model, SelectedItemFocused(focused_index=index))


# --- Effects ---


def _to_effects(
    config: Config[T],
    previous: Model[T],
    event: Event,
    next: Model[T],
) -> list[Effect]:
    effects: list[Effect] = []
    just_opened = is_closed(previous) and is_opened(next)

    # reveal the current selection when the list opens
    if just_opened:
        selected = to_selected_item(config, next)
        if selected is not None and find_item_index(
            config, to_visible(config, next), selected
        ) is not None:
            effects.append(ScrollItemIntoView(item=selected))

    pressed_blurred_input = isinstance(event, ClickedInput) and is_blurred(previous)
    toggled_open = isinstance(event, ToggledOpened) and just_opened
    if pressed_blurred_input or toggled_open:
        effects.append(FocusInput())

    if isinstance(event, PressedArrowKey) and is_highlighted(next):
        highlighted = to_highlighted_item(config, next)
        if highlighted is not None:
            effects.append(ScrollItemIntoView(item=highlighted))

    if is_selected_item_focused(next):
        focused = to_focused_selected_item(config, next)
        previously_focused = to_focused_selected_item(config, previous)
        if focused is not None and (
            previously_focused is None
            or config.to_item_id(focused) != config.to_item_id(previously_focused)
        ):
            effects.append(FocusSelectedItem(item=focused))

    # chip focus handed back to the input
    left_selected_items = (
        is_selected_item_focused(previous)
        and not is_selected_item_focused(next)
        and is_focused(next)
        and not isinstance(event, FocusedInput)
    )
    cleared_while_focused = isinstance(event, UnselectedAll) and is_focused(next)
    if (left_selected_items or cleared_while_focused) and FocusInput() not in effects:
        effects.append(FocusInput())

    return effects
