"""Domain layer: value types, caller protocols and events."""

from typeahead.domain.protocols import LabelGetter, OptionLookup, SelectHandler
from typeahead.domain.types import SearchPhase, SearchState, Segment

__all__ = [
    "LabelGetter",
    "OptionLookup",
    "SelectHandler",
    "SearchPhase",
    "SearchState",
    "Segment",
]
