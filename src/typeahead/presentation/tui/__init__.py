"""TUI (Terminal User Interface) application.

This module contains the Textual application hosting Autocomplete widgets.
"""

from typeahead.presentation.tui.app import TypeaheadApp
from typeahead.presentation.tui.demo_app import DemoApp

__all__ = ["TypeaheadApp", "DemoApp"]
