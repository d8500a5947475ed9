"""Core value types shared by the search controller and its renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

__all__ = ["SearchPhase", "SearchState", "Segment"]

T = TypeVar("T")


class SearchPhase(Enum):
    """Observable phase of the search-as-you-type interaction."""

    CLOSED = "closed"
    OPEN_EMPTY = "open_empty"
    OPEN_LOADING = "open_loading"
    OPEN_WITH_RESULTS = "open_with_results"
    OPEN_NO_RESULTS = "open_no_results"
    # Reported after a failed lookup even though the failure closed the list
    OPEN_ERROR = "open_error"


@dataclass(frozen=True)
class Segment:
    """A run of label text, flagged when it matches the highlight."""

    value: str
    matched: bool = False


@dataclass
class SearchState(Generic[T]):
    """Mutable state owned by a single SearchController.

    Attributes:
        is_open: Whether the option list is shown
        query: Raw text currently in the input box
        options: Options from the most recent accepted lookup
        is_loading: Whether the current lookup is still in flight
        error_message: User-facing message after a failed lookup
    """

    is_open: bool = False
    query: str = ""
    options: list[T] = field(default_factory=list)
    is_loading: bool = False
    error_message: str | None = None

    @property
    def has_error(self) -> bool:
        """True after a failed lookup, until the next lookup starts."""
        return self.error_message is not None and not self.is_loading

    @property
    def phase(self) -> SearchPhase:
        if self.has_error:
            return SearchPhase.OPEN_ERROR
        if not self.is_open:
            return SearchPhase.CLOSED
        if self.is_loading:
            return SearchPhase.OPEN_LOADING
        if self.options:
            return SearchPhase.OPEN_WITH_RESULTS
        if not self.query:
            return SearchPhase.OPEN_EMPTY
        return SearchPhase.OPEN_NO_RESULTS

    def snapshot(self) -> "SearchState[T]":
        """Return a copy safe to hand to subscribers."""
        return SearchState(
            is_open=self.is_open,
            query=self.query,
            options=list(self.options),
            is_loading=self.is_loading,
            error_message=self.error_message,
        )
