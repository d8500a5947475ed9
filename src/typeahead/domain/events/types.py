"""Event types for the event bus system.

This module defines the events a SearchController publishes so that
renderers and host applications can follow the interaction without being
coupled to the controller internals.
"""

import time
from dataclasses import dataclass, field
from typing import Any

from typeahead.domain.types import SearchState


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class SearchStateChanged(Event):
    """Published after every mutation of a controller's SearchState.

    Attributes:
        controller_id: Identifier of the publishing controller
        state: Snapshot of the state after the mutation
    """

    controller_id: str
    """Identifier of the publishing controller."""
    state: SearchState
    """Snapshot of the state after the mutation."""


@dataclass
class LookupStarted(Event):
    """Published when the debounce timer fires and a lookup is invoked."""

    controller_id: str
    token: int
    """Generation token the lookup result will be checked against."""
    search_term: str


@dataclass
class LookupCompleted(Event):
    """Published when the current lookup resolves and its options are applied."""

    controller_id: str
    token: int
    option_count: int


@dataclass
class LookupFailed(Event):
    """Published when the current lookup rejects.

    The underlying exception is intentionally not carried; it is logged by
    the controller and never shown to the user.
    """

    controller_id: str
    token: int
    search_term: str


@dataclass
class StaleResultDiscarded(Event):
    """Published when a superseded lookup settles and is ignored."""

    controller_id: str
    token: int
    current_token: int


@dataclass
class OptionSelected(Event):
    """Published when the user picks an option from the list.

    Attributes:
        controller_id: Identifier of the publishing controller
        option: The caller-defined option value
        label: The option label now shown in the input box
    """

    controller_id: str
    option: Any
    label: str
