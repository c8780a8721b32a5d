"""
Textual Combobox - a headless combobox/autocomplete state machine.

This module models combobox interaction as a pure reducer: the host forwards
interaction events, stores the returned model, runs the returned effects and
renders from the view/ARIA projections. A small hook binds it to Textual.

Key Features:
- update: Pure transition function (config, model, event) -> (model, effects, events)
- init / init_config: Initial model and immutable configuration
- to_view / to_aria: Render-ready projections
- key_to_event: Key name to event mapping
- toggle_on_select / reset_search_on_close: Optional reducer plugins
- InMemoryItemStore: Paged search collaborator
- use_combobox / @on_effect: Textual binding

Example:
    ```python
    from textual.app import App, ComposeResult
    from textual.widgets import Input, OptionList
    from textual_combobox import (
        FocusInput, InputtedQuery, init, init_config, on_effect, use_combobox,
    )

    config = init_config(to_item_id=str, to_item_input_value=str, namespace="fruit")

    class FruitPicker(App):
        def compose(self) -> ComposeResult:
            yield Input()
            yield OptionList()

        def on_mount(self) -> None:
            self.combobox = use_combobox(
                self, config, init(config, all_items=["apple", "banana"])
            )

        def on_input_changed(self, event: Input.Changed) -> None:
            self.combobox.dispatch(InputtedQuery(event.value))

        @on_effect(FocusInput)
        def focus_input(self, effect: FocusInput) -> None:
            self.query_one(Input).focus()
    ```
"""

# Configuration
from .config import (
    Config,
    HighlightMode,
    SelectMode,
    SelectedItemListDirection,
    init_config,
)

# Filtering
from .filtering import (
    circular_index,
    clamp_index,
    simple_filter,
    to_visible_items,
)

# Model
from .model import (
    Blurred,
    FocusedClosed,
    FocusedOpened,
    FocusedOpenedHighlighted,
    Model,
    SelectedItemFocused,
    Status,
    init,
    is_blurred,
    is_closed,
    is_focused,
    is_highlighted,
    is_item_selected,
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

# Events
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

# Effects
from .effects import (
    Effect,
    FocusInput,
    FocusSelectedItem,
    ScrollItemIntoView,
    handle_effects,
    on_effect,
)

# Reducer
from .reducer import (
    Output,
    log_transition,
    update,
)

# Change notices
from .changes import (
    Change,
    QueryChanged,
    SelectedItemsChanged,
)

# Plugins
from .plugins import (
    reset_search_on_close,
    toggle_on_select,
)

# Keyboard
from .keyboard import (
    KeyResult,
    key_to_event,
)

# Projections
from .view import (
    ItemStatus,
    RenderItem,
    RenderSelectedItem,
    ViewModel,
    to_view,
)
from .aria import (
    AriaAttributes,
    to_aria,
)

# Item store
from .item_store import (
    InMemoryItemStore,
    ItemStore,
    ItemStoreError,
    SearchResult,
    search_to_event,
)

# Textual binding
from .state import (
    ComboboxChanged,
    ComboboxState,
)
from .hooks import (
    ComboboxHandle,
    use_combobox,
)

# Types
from .types import (
    Action,
    ItemFilter,
    Plugin,
    ToItemId,
    ToItemInputValue,
    TraceHook,
)

__version__ = "0.1.0a1"

__all__ = [
    # Config
    "Config",
    "HighlightMode",
    "SelectMode",
    "SelectedItemListDirection",
    "init_config",
    # Filtering
    "circular_index",
    "clamp_index",
    "simple_filter",
    "to_visible_items",
    # Model
    "Blurred",
    "FocusedClosed",
    "FocusedOpened",
    "FocusedOpenedHighlighted",
    "Model",
    "SelectedItemFocused",
    "Status",
    "init",
    "is_blurred",
    "is_closed",
    "is_focused",
    "is_highlighted",
    "is_item_selected",
    "is_keyboard_navigation",
    "is_opened",
    "is_selected",
    "is_selected_item_focused",
    "to_current_query",
    "to_focused_selected_item",
    "to_highlighted_item",
    "to_selected_item",
    "to_selected_items",
    "to_state_name",
    # Events
    "BlurredInput",
    "BlurredSelectedItem",
    "ClickedInput",
    "ClickedItem",
    "Event",
    "FocusedInput",
    "FocusedSelectedItem",
    "HoveredOverItem",
    "InputtedQuery",
    "ItemsLoaded",
    "PressedArrowKey",
    "PressedBackspaceKey",
    "PressedEnterKey",
    "PressedEscapeKey",
    "PressedHorizontalArrowKey",
    "PressedKey",
    "SearchFailed",
    "SelectedItemsSet",
    "ToggledOpened",
    "UnselectedAll",
    "UnselectedItem",
    # Effects
    "Effect",
    "FocusInput",
    "FocusSelectedItem",
    "ScrollItemIntoView",
    "handle_effects",
    "on_effect",
    # Reducer
    "Output",
    "log_transition",
    "update",
    # Change notices
    "Change",
    "QueryChanged",
    "SelectedItemsChanged",
    # Plugins
    "reset_search_on_close",
    "toggle_on_select",
    # Keyboard
    "KeyResult",
    "key_to_event",
    # Projections
    "ItemStatus",
    "RenderItem",
    "RenderSelectedItem",
    "ViewModel",
    "to_view",
    "AriaAttributes",
    "to_aria",
    # Item store
    "InMemoryItemStore",
    "ItemStore",
    "ItemStoreError",
    "SearchResult",
    "search_to_event",
    # Textual binding
    "ComboboxChanged",
    "ComboboxState",
    "ComboboxHandle",
    "use_combobox",
    # Types
    "Action",
    "ItemFilter",
    "Plugin",
    "ToItemId",
    "ToItemInputValue",
    "TraceHook",
]
