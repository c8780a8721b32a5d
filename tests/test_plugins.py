"""Tests for reducer plugins and the plugin pipeline."""

from unittest.mock import MagicMock

from textual_combobox import (
    ClickedInput,
    ClickedItem,
    FocusedClosed,
    FocusedInput,
    InputtedQuery,
    PressedArrowKey,
    PressedEnterKey,
    PressedEscapeKey,
    QueryChanged,
    SelectedItemsChanged,
    init,
    init_config,
    reset_search_on_close,
    toggle_on_select,
    update,
    use_combobox,
)


FRUITS = ["apple", "banana", "cherry"]

config = init_config(
    to_item_id=lambda f: f,
    to_item_input_value=lambda f: f,
    namespace="fruit",
)
multi = init_config(
    to_item_id=lambda f: f,
    to_item_input_value=lambda f: f,
    select_mode="multi-select",
)


def apply(model, *events, cfg=config, plugins=()):
    for event in events:
        model = update(cfg, model, event, plugins=plugins).model
    return model


def focused(cfg=config):
    return apply(init(cfg, all_items=FRUITS), FocusedInput(), cfg=cfg)


class TestToggleOnSelect:
    """Selecting the selected item again unselects it in single-select."""

    plugins = [toggle_on_select()]

    def test_reclick_clears_selection_and_query(self):
        model = apply(focused(), ClickedItem("apple"), ClickedInput(), plugins=self.plugins)
        assert model.selected_items == ["apple"]

        output = update(config, model, ClickedItem("apple"), plugins=self.plugins)

        assert output.model.selected_items == []
        assert output.model.query == ""
        assert output.events == [QueryChanged(), SelectedItemsChanged()]

    def test_enter_on_selected_item_unselects(self):
        model = apply(
            focused(),
            ClickedItem("banana"),
            ClickedInput(),
            PressedArrowKey("down"),
            plugins=self.plugins,
        )
        assert model.status.highlight_index == 0

        model = apply(model, PressedEnterKey(), plugins=self.plugins)

        assert model.selected_items == []
        assert model.status == FocusedClosed()

    def test_selecting_another_item_replaces(self):
        model = apply(
            focused(),
            ClickedItem("apple"),
            ClickedInput(),
            ClickedItem("cherry"),
            plugins=self.plugins,
        )

        assert model.selected_items == ["cherry"]
        assert model.query == "cherry"

    def test_multi_select_toggle_is_not_doubled(self):
        model = apply(
            focused(multi),
            ClickedItem("apple"),
            ClickedItem("apple"),
            cfg=multi,
            plugins=self.plugins,
        )

        assert model.selected_items == []

    def test_other_events_pass_through(self):
        model = focused()
        plain = update(config, model, InputtedQuery("b"))
        plugged = update(config, model, InputtedQuery("b"), plugins=self.plugins)

        assert plugged == plain


class TestResetSearchOnClose:
    """Closing the list restores the selection's text."""

    plugins = [reset_search_on_close()]

    def test_escape_resets_abandoned_search(self):
        model = apply(focused(), ClickedItem("apple"), InputtedQuery("b"))

        output = update(config, model, PressedEscapeKey(), plugins=self.plugins)

        assert output.model.status == FocusedClosed()
        assert output.model.query == "apple"
        assert output.events == [QueryChanged()]

    def test_escape_without_selection_clears_query(self):
        model = apply(focused(), InputtedQuery("b"), PressedEscapeKey(), plugins=self.plugins)
        assert model.query == ""

    def test_query_already_matching_reports_nothing(self):
        model = apply(focused(), ClickedItem("apple"), ClickedInput())

        output = update(config, model, PressedEscapeKey(), plugins=self.plugins)

        assert output.model.query == "apple"
        assert output.events == []

    def test_reopen_shows_selection_filtered_list(self):
        model = apply(
            focused(),
            ClickedItem("banana"),
            InputtedQuery("ch"),
            PressedEscapeKey(),
            PressedArrowKey("down"),
            plugins=self.plugins,
        )

        assert model.query == "banana"


class TestPluginPipeline:
    """Plugins run in order on the reducer's output."""

    def test_plugins_receive_previous_event_and_output(self):
        plugin = MagicMock(side_effect=lambda cfg, previous, event, output: output)
        model = focused()
        event = InputtedQuery("b")

        output = update(config, model, event, plugins=[plugin])

        plugin.assert_called_once()
        args = plugin.call_args.args
        assert args[0] is config
        assert args[1] is model
        assert args[2] == event
        assert args[3] is output

    def test_plugins_run_in_order(self):
        calls = []

        def first(cfg, previous, event, output):
            calls.append("first")
            return output

        def second(cfg, previous, event, output):
            calls.append("second")
            return output

        update(config, focused(), InputtedQuery("b"), plugins=[first, second])

        assert calls == ["first", "second"]

    def test_trace_sees_plugin_output(self):
        trace = MagicMock()
        model = apply(focused(), ClickedItem("apple"), InputtedQuery("b"))

        output = update(
            config,
            model,
            PressedEscapeKey(),
            plugins=[reset_search_on_close()],
            trace=trace,
        )

        trace.assert_called_once_with(model, PressedEscapeKey(), output.model, output.effects)
        assert output.model.query == "apple"

    def test_use_combobox_applies_plugins(self):
        changes = []
        handle = use_combobox(
            MagicMock(),
            config,
            init(config, all_items=FRUITS),
            plugins=[toggle_on_select()],
            on_change=changes.append,
        )

        handle.dispatch(FocusedInput())
        handle.dispatch(ClickedItem("cherry"))
        handle.dispatch(ClickedInput())
        handle.dispatch(ClickedItem("cherry"))

        assert handle.value.selected_items == []
        assert changes == [
            QueryChanged(),
            SelectedItemsChanged(),
            QueryChanged(),
            SelectedItemsChanged(),
        ]
