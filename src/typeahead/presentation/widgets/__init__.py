"""
Typeahead Widgets - Custom Textual widgets for search-as-you-type input.
"""

from .search_input import SearchInput
from .autocomplete import Autocomplete

__all__ = [
    "SearchInput",
    "Autocomplete",
]
