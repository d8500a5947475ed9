"""
typeahead - an embeddable search-as-you-type widget for Textual applications.
"""

from typeahead.application import (
    AutocompleteConfig,
    SearchController,
    build_view,
    render,
)
from typeahead.domain import SearchPhase, SearchState, Segment

__all__ = [
    "AutocompleteConfig",
    "SearchController",
    "SearchPhase",
    "SearchState",
    "Segment",
    "build_view",
    "render",
]

__version__ = "0.1.0"
