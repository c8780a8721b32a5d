"""
Fruit Picker - single-select and multi-select comboboxes in Textual.

Demonstrates:
- use_combobox: Bind the combobox reducer to a widget
- @on_effect: Run focus and scroll effects from the reducer
- ComboboxHandle.view: Render item and chip rows from the view model
- ComboboxHandle.dispatch_key: Forward raw keys as combobox events
- plugins: Toggle the single selection and reset abandoned searches
"""

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Footer, Header, Input, Label, Static

from textual_combobox import (
    BlurredInput,
    BlurredSelectedItem,
    ClickedInput,
    ClickedItem,
    ComboboxChanged,
    Config,
    FocusedInput,
    FocusedSelectedItem,
    FocusInput,
    FocusSelectedItem,
    HoveredOverItem,
    InputtedQuery,
    PressedEnterKey,
    ScrollItemIntoView,
    UnselectedAll,
    init,
    init_config,
    log_transition,
    on_effect,
    reset_search_on_close,
    toggle_on_select,
    use_combobox,
)


FRUITS = [
    "apple",
    "apricot",
    "banana",
    "blackberry",
    "blueberry",
    "cherry",
    "date",
    "fig",
    "grape",
    "kiwi",
    "lemon",
    "lime",
    "mango",
    "orange",
    "peach",
    "pear",
    "plum",
    "raspberry",
    "strawberry",
]


# --- Components ---


class QueryInput(Input):
    """Input that reports its own focus changes."""

    class Focused(Message):
        pass

    class Blurred(Message):
        pass

    class Clicked(Message):
        pass

    def on_focus(self) -> None:
        self.post_message(self.Focused())

    def on_blur(self) -> None:
        self.post_message(self.Blurred())

    def on_click(self) -> None:
        self.post_message(self.Clicked())


class ItemRow(Static):
    """One suggestion in the item list."""

    DEFAULT_CSS = """
    ItemRow {
        height: 1;
        padding: 0 1;
    }
    ItemRow.highlighted {
        background: $accent;
    }
    ItemRow.selected {
        text-style: bold;
        color: $success;
    }
    ItemRow.selected-and-highlighted {
        background: $accent;
        text-style: bold;
    }
    """

    class Clicked(Message):
        def __init__(self, item: str) -> None:
            super().__init__()
            self.item = item

    class Hovered(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, item: str, index: int, status: str) -> None:
        super().__init__(item)
        self.item = item
        self.index = index
        self.add_class(status)

    def on_click(self) -> None:
        self.post_message(self.Clicked(self.item))

    def on_enter(self) -> None:
        self.post_message(self.Hovered(self.index))


class Chip(Static, can_focus=True):
    """A selected item in a multi-select combobox."""

    DEFAULT_CSS = """
    Chip {
        width: auto;
        height: 1;
        margin: 0 1 0 0;
        padding: 0 1;
        background: $primary-darken-2;
    }
    Chip:focus {
        background: $accent;
    }
    """

    class Focused(Message):
        def __init__(self, item: str) -> None:
            super().__init__()
            self.item = item

    class Blurred(Message):
        def __init__(self, item: str) -> None:
            super().__init__()
            self.item = item

    def __init__(self, item: str) -> None:
        super().__init__(item)
        self.item = item

    def on_focus(self) -> None:
        self.post_message(self.Focused(self.item))

    def on_blur(self) -> None:
        self.post_message(self.Blurred(self.item))


class FruitPicker(Static):
    """A combobox over FRUITS driven entirely by the reducer."""

    DEFAULT_CSS = """
    FruitPicker {
        height: auto;
        margin: 1;
        padding: 1;
        border: solid $primary;
    }
    FruitPicker #chips {
        height: auto;
    }
    FruitPicker #items {
        height: auto;
        max-height: 8;
    }
    """

    def __init__(self, config: Config[str], heading: str, plugins=()) -> None:
        super().__init__()
        self.config = config
        self.plugins = plugins
        self.heading = heading
        self._chip_items: list[str] | None = None

    def compose(self) -> ComposeResult:
        yield Label(self.heading)
        yield Horizontal(id="chips")
        with Horizontal():
            yield QueryInput(placeholder="Search fruit...")
            yield Button("Clear", id="clear")
        yield VerticalScroll(id="items")

    def on_mount(self) -> None:
        self.combobox = use_combobox(
            self,
            self.config,
            init(self.config, all_items=FRUITS),
            name=self.config.namespace,
            plugins=self.plugins,
            trace=log_transition,
        )
        self._render_view()

    # Host events -> combobox events

    def on_query_input_focused(self) -> None:
        self.combobox.dispatch(FocusedInput())

    def on_query_input_blurred(self) -> None:
        self.combobox.dispatch(BlurredInput())

    def on_query_input_clicked(self) -> None:
        self.combobox.dispatch(ClickedInput())

    def on_input_changed(self, event: Input.Changed) -> None:
        # Programmatic syncs from _render_view echo the current query back.
        if event.value != self.combobox.value.query:
            self.combobox.dispatch(InputtedQuery(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.combobox.dispatch(PressedEnterKey())

    def on_item_row_clicked(self, event: ItemRow.Clicked) -> None:
        self.combobox.dispatch(ClickedItem(event.item))

    def on_item_row_hovered(self, event: ItemRow.Hovered) -> None:
        self.combobox.dispatch(HoveredOverItem(event.index))

    def on_chip_focused(self, event: Chip.Focused) -> None:
        self.combobox.dispatch(FocusedSelectedItem(event.item))

    def on_chip_blurred(self, event: Chip.Blurred) -> None:
        self.combobox.dispatch(BlurredSelectedItem(event.item))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clear":
            self.combobox.dispatch(UnselectedAll())

    def on_key(self, event: events.Key) -> None:
        # Enter arrives as Input.Submitted
        if event.key == "enter" or event.is_printable:
            return
        if self.combobox.dispatch_key(event.key):
            event.prevent_default()

    # Effects

    @on_effect(FocusInput)
    def focus_the_input(self, effect: FocusInput) -> None:
        self.query_one(QueryInput).focus()

    @on_effect(FocusSelectedItem)
    def focus_chip(self, effect: FocusSelectedItem) -> None:
        self.call_after_refresh(self._focus_chip, effect.item)

    @on_effect(ScrollItemIntoView)
    def reveal_item(self, effect: ScrollItemIntoView) -> None:
        self.call_after_refresh(self._scroll_to, effect.item)

    def _focus_chip(self, item: str) -> None:
        for chip in self.query(Chip):
            if chip.item == item:
                chip.focus()

    def _scroll_to(self, item: str) -> None:
        items = self.query_one("#items", VerticalScroll)
        for row in self.query(ItemRow):
            if row.item == item:
                items.scroll_to_widget(row, animate=False)

    # Rendering

    def on_combobox_changed(self, event: ComboboxChanged) -> None:
        self._render_view()

    def _render_view(self) -> None:
        view = self.combobox.view

        query_input = self.query_one(QueryInput)
        if query_input.value != view.query:
            query_input.value = view.query

        # Rebuilding chips would drop the focused one
        chip_items = [chip.item for chip in view.render_selected_items]
        if self.config.is_multi_select and chip_items != self._chip_items:
            self._chip_items = chip_items
            chips = self.query_one("#chips", Horizontal)
            chips.remove_children()
            chips.mount_all([Chip(item) for item in chip_items])

        items = self.query_one("#items", VerticalScroll)
        items.display = view.is_opened
        items.remove_children()
        if view.is_opened:
            if view.render_items:
                items.mount_all(
                    [
                        ItemRow(render_item.input_value, index, render_item.status)
                        for index, render_item in enumerate(view.render_items)
                    ]
                )
            else:
                items.mount(Label("No matches"))


class FruitPickerApp(App):
    """Two comboboxes sharing one item list."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        yield FruitPicker(
            init_config(
                to_item_id=lambda fruit: fruit,
                to_item_input_value=lambda fruit: fruit,
                namespace="favourite-fruit",
            ),
            "Favourite fruit",
            plugins=[toggle_on_select(), reset_search_on_close()],
        )
        yield FruitPicker(
            init_config(
                to_item_id=lambda fruit: fruit,
                to_item_input_value=lambda fruit: fruit,
                namespace="fruit-basket",
                select_mode="multi-select",
            ),
            "Fruit basket",
        )
        yield Footer()


if __name__ == "__main__":
    logging.basicConfig(filename="fruit_picker.log", level=logging.DEBUG)
    FruitPickerApp().run()
