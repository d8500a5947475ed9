"""Event system for decoupled component communication.

Example:
    ```python
    from typeahead.domain.events import EventBus, OptionSelected

    event_bus = EventBus()
    event_bus.subscribe(OptionSelected, lambda event: print(event.label))
    ```
"""

from .bus import EventBus
from .types import (
    Event,
    LookupCompleted,
    LookupFailed,
    LookupStarted,
    OptionSelected,
    SearchStateChanged,
    StaleResultDiscarded,
)

__all__ = [
    "EventBus",
    "Event",
    "SearchStateChanged",
    "LookupStarted",
    "LookupCompleted",
    "LookupFailed",
    "StaleResultDiscarded",
    "OptionSelected",
]
