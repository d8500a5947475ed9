"""
SearchInput - the text box of the Autocomplete widget.
"""

from textual import events
from textual.message import Message
from textual.widgets import Input

from typeahead.logger import get_logger

logger = get_logger("search_input")


class SearchInput(Input):
    """Input that announces when it gains focus.

    ``Input`` only reports value changes; the autocomplete also needs to
    know when the box is focused so it can open the option list.
    """

    class Focused(Message):
        """Posted when the input receives focus."""

        def __init__(self, search_input: "SearchInput") -> None:
            super().__init__()
            self.search_input = search_input

        @property
        def control(self) -> "SearchInput":
            return self.search_input

    def on_focus(self, event: events.Focus) -> None:
        logger.debug("SearchInput focused")
        self.post_message(self.Focused(self))
