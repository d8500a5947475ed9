"""
Autocomplete - search-as-you-type widget.

Layout:
    Label
    SearchInput
    OptionList      (shown while the controller reports the list open)
    error Static    (shown after a failed lookup)

The widget holds no search logic of its own. It forwards focus, text and
selection events to a SearchController and redraws whenever the controller
publishes a SearchStateChanged event.
"""

from __future__ import annotations

from typing import Any

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Label, OptionList, Static
from textual.widgets.option_list import Option

from typeahead.application.config import AutocompleteConfig
from typeahead.application.search_controller import SearchController
from typeahead.application.view import RowKind, SearchView, build_view
from typeahead.domain.events import EventBus, OptionSelected, SearchStateChanged
from typeahead.logger import get_logger
from typeahead.presentation.formatters import segments_to_text
from typeahead.presentation.widgets.search_input import SearchInput

logger = get_logger("autocomplete")


class Autocomplete(Widget):
    """Input with an asynchronously filtered, highlighted option list."""

    DEFAULT_CSS = """
    Autocomplete {
        height: auto;
        width: 100%;
    }

    Autocomplete > .autocomplete--label {
        padding: 0 1;
        text-style: bold;
    }

    Autocomplete > .autocomplete--list {
        height: auto;
        max-height: 12;
        border: round $accent;
    }

    Autocomplete > .autocomplete--error {
        padding: 0 1;
        color: $error;
    }
    """

    class Selected(Message):
        """Posted after the user picks an option."""

        def __init__(self, autocomplete: "Autocomplete", option: Any, label: str) -> None:
            super().__init__()
            self.autocomplete = autocomplete
            self.option = option
            self.label = label

        @property
        def control(self) -> "Autocomplete":
            return self.autocomplete

    def __init__(
        self,
        label: str,
        config: AutocompleteConfig,
        placeholder: str = "",
        event_bus: EventBus | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """
        Initialize the widget.

        Args:
            label: Text shown above the input
            config: Lookup, label and selection capabilities
            placeholder: Placeholder shown in the empty input
            event_bus: Optional EventBus shared with the host application
        """
        super().__init__(name=name, id=id, classes=classes)
        self.label_text = label
        self.controller = SearchController(config, event_bus)

        self.input = SearchInput(placeholder=placeholder, classes="autocomplete--input")
        self.option_list = OptionList(classes="autocomplete--list")
        self.error_row = Static("", classes="autocomplete--error")

        self._rendered_options: list[Any] = []

        self.controller.event_bus.subscribe(SearchStateChanged, self._on_state_changed)
        self.controller.event_bus.subscribe(OptionSelected, self._on_option_selected)

    def compose(self) -> ComposeResult:
        yield Label(self.label_text, classes="autocomplete--label")
        yield self.input
        yield self.option_list
        yield self.error_row

    def on_mount(self) -> None:
        self._render_view(build_view(self.controller.state, self.controller.config.get_option_label))
        logger.debug(f"Autocomplete mounted (controller={self.controller.controller_id})")

    def on_unmount(self) -> None:
        self.controller.event_bus.unsubscribe(SearchStateChanged, self._on_state_changed)
        self.controller.event_bus.unsubscribe(OptionSelected, self._on_option_selected)
        self.controller.dispose()

    @property
    def is_open(self) -> bool:
        return self.controller.state.is_open

    @property
    def rendered_options(self) -> list[Any]:
        """Options currently drawn in the list, in display order."""
        return list(self._rendered_options)

    def contains(self, widget: Widget | None) -> bool:
        """Return True if ``widget`` is the input, the list, or inside either."""
        if widget is None:
            return False
        for node in widget.ancestors_with_self:
            if node is self.input or node is self.option_list:
                return True
        return False

    def handle_pointer_down(self, widget: Widget | None) -> None:
        """Route a mouse press anywhere on screen to the controller.

        A press on a non-focusable widget closes the list but leaves keyboard
        focus on the input, so no new Focus event follows. A press on the
        input while the list is closed therefore counts as focus gained.
        """
        inside = self.contains(widget)
        if inside and not self.is_open and self._in_input(widget):
            self.controller.focus()
        self.controller.click(inside=inside)

    def on_search_input_focused(self, event: SearchInput.Focused) -> None:
        if event.search_input is self.input:
            self.controller.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is not self.input:
            return
        event.stop()
        # Typing into the still focused input after an outside click reopens the list
        if not self.is_open and self.input.has_focus:
            self.controller.focus()
        self.controller.text_changed(event.value)

    def _in_input(self, widget: Widget | None) -> bool:
        if widget is None:
            return False
        return any(node is self.input for node in widget.ancestors_with_self)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list is not self.option_list:
            return
        event.stop()
        index = event.option_index
        if not 0 <= index < len(self._rendered_options):
            # Placeholder rows are disabled, but guard against stale indexes
            return
        self.controller.select(self._rendered_options[index])

    def _on_state_changed(self, event: SearchStateChanged) -> None:
        if event.controller_id != self.controller.controller_id or not self.is_mounted:
            return
        self._render_view(build_view(event.state, self.controller.config.get_option_label))

    def _on_option_selected(self, event: OptionSelected) -> None:
        if event.controller_id != self.controller.controller_id:
            return
        # Programmatic update must not start a new search
        with self.input.prevent(Input.Changed):
            self.input.value = event.label
        self.post_message(self.Selected(self, event.option, event.label))

    def _render_view(self, view: SearchView) -> None:
        self.option_list.display = view.list_visible
        self.option_list.clear_options()
        self._rendered_options = view.options

        prompts: list[Option] = []
        for row in view.rows:
            text = segments_to_text(row.segments)
            if row.kind is RowKind.OPTION:
                prompts.append(Option(text))
            else:
                prompts.append(Option(text, disabled=True))
        if prompts:
            self.option_list.add_options(prompts)

        self.error_row.update(view.error_message or "")
        self.error_row.display = view.error_message is not None
