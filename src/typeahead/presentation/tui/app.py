"""
TypeaheadApp - Textual application base that closes autocompletes on outside clicks.
"""

from textual import events
from textual.app import App
from textual.errors import NoWidget
from textual.widget import Widget

from typeahead.logger import get_logger
from typeahead.presentation.widgets.autocomplete import Autocomplete

logger = get_logger("typeahead_tui")


class TypeaheadApp(App):
    """
    App base for hosting Autocomplete widgets.

    Every mouse press that bubbles up to the app is routed to each mounted
    Autocomplete, which closes its list unless the press landed on its
    input or its option list.
    """

    # The list opens on user focus only, never on the initial auto focus
    AUTO_FOCUS = None

    def on_mouse_down(self, event: events.MouseDown) -> None:
        widget = self._widget_at(event.screen_x, event.screen_y)
        for autocomplete in self.screen.query(Autocomplete):
            autocomplete.handle_pointer_down(widget)

    def _widget_at(self, x: int, y: int) -> Widget | None:
        try:
            widget, _ = self.screen.get_widget_at(x, y)
        except NoWidget:
            return None
        return widget
