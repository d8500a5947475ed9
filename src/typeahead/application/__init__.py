"""Application layer: the search state machine and its rendering rules."""

from typeahead.application.config import AutocompleteConfig
from typeahead.application.highlight import has_match, render
from typeahead.application.search_controller import (
    DEBOUNCE_DELAY,
    LOOKUP_FAILED_MESSAGE,
    SearchController,
)
from typeahead.application.view import (
    LOADING_TEXT,
    NO_OPTIONS_TEXT,
    ListRow,
    RowKind,
    SearchView,
    build_view,
)

__all__ = [
    "AutocompleteConfig",
    "SearchController",
    "DEBOUNCE_DELAY",
    "LOOKUP_FAILED_MESSAGE",
    "render",
    "has_match",
    "build_view",
    "SearchView",
    "ListRow",
    "RowKind",
    "NO_OPTIONS_TEXT",
    "LOADING_TEXT",
]
