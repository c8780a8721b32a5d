"""Exhaustive checks over every status, event and select mode."""

from itertools import product

import pytest

from textual_combobox import (
    Blurred,
    BlurredInput,
    BlurredSelectedItem,
    ClickedInput,
    ClickedItem,
    FocusedClosed,
    FocusedInput,
    FocusedOpened,
    FocusedOpenedHighlighted,
    FocusedSelectedItem,
    HoveredOverItem,
    InputtedQuery,
    ItemsLoaded,
    Model,
    PressedArrowKey,
    PressedBackspaceKey,
    PressedEnterKey,
    PressedEscapeKey,
    PressedHorizontalArrowKey,
    PressedKey,
    SearchFailed,
    SelectedItemFocused,
    SelectedItemsSet,
    ToggledOpened,
    UnselectedAll,
    UnselectedItem,
    init,
    init_config,
    is_highlighted,
    to_state_name,
    to_view,
    update,
)
from textual_combobox.events import EVENT_TYPES
from textual_combobox.model import STATUS_TYPES, to_visible
from textual_combobox.reducer import _STATUS_HANDLERS


FRUITS = ["apple", "banana", "cherry"]

single = init_config(to_item_id=lambda f: f, to_item_input_value=lambda f: f)
multi = init_config(
    to_item_id=lambda f: f,
    to_item_input_value=lambda f: f,
    select_mode="multi-select",
)
clamp = init_config(
    to_item_id=lambda f: f,
    to_item_input_value=lambda f: f,
    highlight_mode="clamp",
)

CONFIGS = [single, multi, clamp]

EVENTS = [
    FocusedInput(),
    BlurredInput(),
    ClickedInput(),
    InputtedQuery(""),
    InputtedQuery("an"),
    InputtedQuery("zzz"),
    PressedArrowKey("up"),
    PressedArrowKey("down"),
    PressedHorizontalArrowKey("left"),
    PressedHorizontalArrowKey("right"),
    PressedEnterKey(),
    PressedEscapeKey(),
    PressedBackspaceKey(),
    PressedKey("x"),
    ClickedItem("banana"),
    HoveredOverItem(0),
    HoveredOverItem(7),
    ToggledOpened(),
    UnselectedItem("apple"),
    UnselectedAll(),
    FocusedSelectedItem("apple"),
    BlurredSelectedItem("apple"),
    ItemsLoaded(["apple", "cherry"]),
    SearchFailed("timeout"),
    SelectedItemsSet(["cherry"]),
]

UNSELECTING = (UnselectedItem, UnselectedAll, SelectedItemsSet)

STATUSES = [
    Blurred(),
    FocusedClosed(),
    FocusedOpened(),
    FocusedOpenedHighlighted(highlight_index=0),
    FocusedOpenedHighlighted(highlight_index=9),
    SelectedItemFocused(focused_index=0),
    SelectedItemFocused(focused_index=4),
]

SELECTIONS = [[], ["apple"]]


def highlight_in_range(config, model):
    if not is_highlighted(model):
        return True
    return 0 <= model.status.highlight_index < len(to_visible(config, model))


class TestDispatcher:
    """Every status and event has a defined handler."""

    def test_every_status_has_a_handler(self):
        assert set(_STATUS_HANDLERS) == set(STATUS_TYPES)

    def test_event_table_covers_every_event_type(self):
        assert {type(event) for event in EVENTS} == set(EVENT_TYPES)

    @pytest.mark.parametrize("config", CONFIGS)
    def test_no_combination_raises(self, config):
        for status, selected, query, event in product(
            STATUSES, SELECTIONS, ["", "a", "zzz"], EVENTS
        ):
            model = Model(
                all_items=FRUITS, selected_items=selected, query=query, status=status
            )
            output = update(config, model, event)

            assert isinstance(output.model, Model)
            to_view(config, output.model)


@pytest.mark.parametrize("config", CONFIGS)
class TestInvariants:
    """Properties that hold after any sequence of events."""

    def sequences(self, config):
        start = init(config, all_items=FRUITS)
        for events in product(EVENTS, repeat=3):
            model = start
            for event in events:
                model = update(config, model, event).model
                yield events, model

    def test_highlight_stays_in_range(self, config):
        for events, model in self.sequences(config):
            assert highlight_in_range(config, model), events

    def test_single_select_keeps_at_most_one_item(self, config):
        if config.is_multi_select:
            pytest.skip("multi-select")
        for events, model in self.sequences(config):
            assert len(model.selected_items) <= 1, events


@pytest.mark.parametrize("config", [single, clamp])
def test_selection_survives_everything_but_unselect_events(config):
    start = init(config, all_items=FRUITS, selected_items=["banana"])
    events = [event for event in EVENTS if not isinstance(event, UNSELECTING)]

    for sequence in product(events, repeat=3):
        model = start
        for event in sequence:
            model = update(config, model, event).model
            assert model.selected_items, sequence


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize("status", STATUSES)
def test_blur_is_idempotent(config, status):
    model = Model(all_items=FRUITS, selected_items=["apple"], query="b", status=status)

    once = update(config, model, BlurredInput()).model
    twice = update(config, once, BlurredInput()).model

    assert twice == once


@pytest.mark.parametrize("config", CONFIGS)
def test_focus_then_blur_round_trip(config):
    model = init(config, all_items=FRUITS)

    model = update(config, model, FocusedInput()).model
    model = update(config, model, BlurredInput()).model

    assert to_state_name(model) == "unselected__blurred"
    assert model.query == ""
