"""Tests for the state model and selectors."""

from textual_combobox import (
    Blurred,
    FocusedClosed,
    FocusedOpened,
    FocusedOpenedHighlighted,
    Model,
    SelectedItemFocused,
    init,
    init_config,
    is_blurred,
    is_closed,
    is_focused,
    is_highlighted,
    is_keyboard_navigation,
    is_opened,
    is_selected,
    is_selected_item_focused,
    to_current_query,
    to_focused_selected_item,
    to_highlighted_item,
    to_selected_item,
    to_selected_items,
    to_state_name,
)


FRUITS = ["apple", "banana", "cherry"]

config = init_config(to_item_id=lambda f: f, to_item_input_value=lambda f: f)
multi_config = init_config(
    to_item_id=lambda f: f,
    to_item_input_value=lambda f: f,
    select_mode="multi-select",
)


class TestInit:
    """Tests for init."""

    def test_starts_blurred_and_unselected(self):
        model = init(config, all_items=FRUITS)

        assert model.status == Blurred()
        assert model.query == ""
        assert model.selected_items == []
        assert to_state_name(model) == "unselected__blurred"

    def test_seeds_query_from_selection(self):
        model = init(config, all_items=FRUITS, selected_items=["banana"])

        assert model.query == "banana"
        assert to_state_name(model) == "selected__blurred"

    def test_single_select_keeps_one_selection(self):
        model = init(config, all_items=FRUITS, selected_items=["apple", "banana"])
        assert model.selected_items == ["apple"]

    def test_multi_select_does_not_seed_query(self):
        model = init(multi_config, all_items=FRUITS, selected_items=["apple", "banana"])

        assert model.selected_items == ["apple", "banana"]
        assert model.query == ""

    def test_model_is_frozen(self):
        model = init(config, all_items=FRUITS)
        updated = model.model_copy(update={"query": "a"})

        assert model.query == ""
        assert updated.query == "a"


class TestStateNames:
    """Tests for the combined state names."""

    def test_every_status_has_a_name(self):
        names = {
            to_state_name(Model(all_items=FRUITS, status=status))
            for status in [
                Blurred(),
                FocusedClosed(),
                FocusedOpened(),
                FocusedOpenedHighlighted(highlight_index=0),
                SelectedItemFocused(focused_index=0),
            ]
        }
        assert names == {
            "unselected__blurred",
            "unselected__focused__closed",
            "unselected__focused__opened",
            "unselected__focused__opened__highlighted",
            "unselected__selected_item_focused",
        }

    def test_selected_prefix(self):
        model = Model(all_items=FRUITS, selected_items=["apple"], status=FocusedOpened())
        assert to_state_name(model) == "selected__focused__opened"


class TestSelectors:
    """Tests for predicate selectors."""

    def test_opened_iff_name_contains_opened(self):
        assert is_opened(Model(status=FocusedOpened()))
        assert is_opened(Model(status=FocusedOpenedHighlighted(highlight_index=0)))
        assert not is_opened(Model(status=FocusedClosed()))
        assert not is_opened(Model(status=Blurred()))
        assert is_closed(Model(status=SelectedItemFocused()))

    def test_focus_predicates(self):
        assert is_blurred(Model())
        assert is_focused(Model(status=FocusedClosed()))
        assert is_focused(Model(status=SelectedItemFocused()))

    def test_highlight_and_selection_predicates(self):
        model = Model(
            all_items=FRUITS,
            selected_items=["cherry"],
            status=FocusedOpenedHighlighted(highlight_index=1),
        )
        assert is_highlighted(model)
        assert is_selected(model)
        assert to_highlighted_item(config, model) == "banana"

    def test_highlighted_item_uses_visible_items(self):
        model = Model(
            all_items=FRUITS,
            query="err",
            status=FocusedOpenedHighlighted(highlight_index=0),
        )
        assert to_highlighted_item(config, model) == "cherry"

    def test_unresolvable_highlight_is_none(self):
        model = Model(
            all_items=FRUITS,
            query="zzz",
            status=FocusedOpenedHighlighted(highlight_index=0),
        )
        assert to_highlighted_item(config, model) is None


class TestSelectedItemOrder:
    """Tests for the direction-ordered selection."""

    def test_left_to_right_is_click_order(self):
        model = Model(all_items=FRUITS, selected_items=["cherry", "apple"])

        assert to_selected_items(multi_config, model) == ["cherry", "apple"]
        assert to_selected_item(multi_config, model) == "cherry"

    def test_right_to_left_is_newest_first(self):
        rtl = init_config(
            to_item_id=lambda f: f,
            to_item_input_value=lambda f: f,
            select_mode="multi-select",
            selected_item_list_direction="right-to-left",
        )
        model = Model(all_items=FRUITS, selected_items=["cherry", "apple"])

        assert to_selected_items(rtl, model) == ["apple", "cherry"]

    def test_no_selection(self):
        assert to_selected_item(config, Model(all_items=FRUITS)) is None


class TestFocusSelectors:
    """Tests for the query, chip focus and navigation selectors."""

    def test_current_query(self):
        assert to_current_query(Model(query="ban")) == "ban"

    def test_focused_selected_item(self):
        model = Model(
            all_items=FRUITS,
            selected_items=["cherry", "apple"],
            status=SelectedItemFocused(focused_index=1),
        )

        assert is_selected_item_focused(model)
        assert to_focused_selected_item(multi_config, model) == "apple"

    def test_focused_selected_item_out_of_range(self):
        model = Model(
            all_items=FRUITS,
            selected_items=["cherry"],
            status=SelectedItemFocused(focused_index=3),
        )
        assert to_focused_selected_item(multi_config, model) is None
        assert to_focused_selected_item(multi_config, Model(all_items=FRUITS)) is None

    def test_keyboard_navigation(self):
        keyboard = FocusedOpenedHighlighted(highlight_index=0, is_keyboard_navigation=True)

        assert is_keyboard_navigation(Model(status=keyboard))
        assert not is_keyboard_navigation(
            Model(status=FocusedOpenedHighlighted(highlight_index=0))
        )
        assert not is_keyboard_navigation(Model(status=FocusedOpened()))

    def test_skip_once_starts_empty(self):
        assert init(config, all_items=FRUITS).skip_once == []
