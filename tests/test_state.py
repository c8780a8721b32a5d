"""Tests for ComboboxState."""

from unittest.mock import MagicMock

from textual_combobox import (
    ComboboxChanged,
    ComboboxState,
    FocusedOpened,
    init,
    init_config,
)


config = init_config(to_item_id=lambda f: f, to_item_input_value=lambda f: f)


def blurred():
    return init(config, all_items=["apple", "banana"])


def opened():
    return blurred().model_copy(update={"status": FocusedOpened()})


class TestComboboxState:
    """Tests for ComboboxState class."""

    def test_initial_value(self):
        model = blurred()
        state = ComboboxState(model)

        assert state.value is model

    def test_set_value(self):
        state = ComboboxState(blurred())
        state.set(opened())

        assert state.value == opened()

    def test_no_update_if_equal_model(self):
        changes = []
        state = ComboboxState(blurred())
        state.watch(lambda old, new: changes.append((old, new)))

        state.set(blurred())  # Equal but not identical
        assert len(changes) == 0

        state.set(opened())
        assert changes == [(blurred(), opened())]

    def test_watch_callback(self):
        changes = []
        state = ComboboxState(blurred())

        unwatch = state.watch(lambda old, new: changes.append(new.status.type))

        state.set(opened())
        state.set(blurred())

        assert changes == ["focused__opened", "blurred"]

        unwatch()
        state.set(opened())

        assert len(changes) == 2

    def test_posts_message_to_subscribers(self):
        widget = MagicMock()
        state = ComboboxState(blurred())
        state.subscribe(widget)

        state.set(opened())

        widget.post_message.assert_called_once()
        message = widget.post_message.call_args.args[0]
        assert isinstance(message, ComboboxChanged)
        assert message.state is state
        assert message.old_value == blurred()
        assert message.new_value == opened()

    def test_unsubscribe(self):
        widget = MagicMock()
        state = ComboboxState(blurred())
        state.subscribe(widget)
        state.unsubscribe(widget)

        state.set(opened())

        widget.post_message.assert_not_called()

    def test_repr(self):
        state = ComboboxState(blurred(), name="fruit")

        assert "blurred" in repr(state)
        assert "fruit" in repr(state)
