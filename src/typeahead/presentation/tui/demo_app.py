"""
DemoApp - "Search users" demo for the Autocomplete widget.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from typeahead.application.config import AutocompleteConfig
from typeahead.demo.directory import User, UserDirectory
from typeahead.logger import get_logger
from typeahead.presentation.tui.app import TypeaheadApp
from typeahead.presentation.widgets.autocomplete import Autocomplete

logger = get_logger("demo_app")


class DemoApp(TypeaheadApp):
    """
    Demo application.

    Layout:
    ┌──────────────────────────────┐
    │           Header             │
    ├──────────────────────────────┤
    │  Search users                │
    │  [ input                  ]  │
    │  ╭ options ───────────────╮  │
    │  ╰────────────────────────╯  │
    │  selection status            │
    ├──────────────────────────────┤
    │           Footer             │
    └──────────────────────────────┘
    """

    TITLE = "Typeahead"
    SUB_TITLE = "Search-as-you-type demo"

    CSS = """
    #demo-body {
        padding: 1 2;
    }

    #selection-status {
        margin-top: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(self, directory: UserDirectory):
        """
        Initialize the demo.

        Args:
            directory: Data source the autocomplete searches
        """
        super().__init__()
        self.directory = directory
        self.search_config: AutocompleteConfig[User] = AutocompleteConfig(
            filter_options=directory.search,
            get_option_label=lambda user: user.name,
            on_select=self._log_selection,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="demo-body"):
            yield Autocomplete(
                label="Search users",
                config=self.search_config,
                placeholder="Start typing a name",
                id="user-search",
            )
            yield Static("Nothing selected yet", id="selection-status")
        yield Footer()

    def on_autocomplete_selected(self, event: Autocomplete.Selected) -> None:
        user: User = event.option
        self.query_one("#selection-status", Static).update(f"Selected {user.name} <{user.email}>")

    def _log_selection(self, user: User) -> None:
        logger.info(f"Demo selection: {user.name}")
