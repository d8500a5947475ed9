"""
Derive what the option list should show from a SearchState.

Keeping this separate from the Textual widget makes the rendering rules
testable without a running app.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from typeahead.application.highlight import render
from typeahead.domain.types import SearchState, Segment

NO_OPTIONS_TEXT = "No options found"
LOADING_TEXT = "Loading..."


class RowKind(Enum):
    OPTION = "option"
    NO_OPTIONS = "no_options"
    LOADING = "loading"


@dataclass(frozen=True)
class ListRow:
    """One row of the option list."""

    kind: RowKind
    key: str
    segments: tuple[Segment, ...] = ()
    option: Any = None

    @property
    def text(self) -> str:
        return "".join(segment.value for segment in self.segments)


@dataclass(frozen=True)
class SearchView:
    """Everything a renderer needs to draw the widget below the input."""

    list_visible: bool
    rows: tuple[ListRow, ...] = field(default_factory=tuple)
    error_message: str | None = None

    @property
    def options(self) -> list[Any]:
        return [row.option for row in self.rows if row.kind is RowKind.OPTION]


def build_view(state: SearchState, get_option_label: Callable[[Any], str]) -> SearchView:
    """
    Build the list view for ``state``.

    Rules:
    - rows are only produced while the list is open
    - "no options" when nothing is loading and there are no options,
      for both the initial empty list and an empty result
    - "loading" only on a cold list; stale options keep rendering
      without it while a new lookup runs
    - option labels are highlighted with the raw input text
    - the error message is reported independently of the list

    Args:
        state: Current controller state
        get_option_label: Caller label function

    Returns:
        The derived SearchView
    """
    if not state.is_open:
        return SearchView(list_visible=False, error_message=state.error_message)

    rows: list[ListRow] = []
    if state.options:
        for option in state.options:
            label = get_option_label(option)
            rows.append(
                ListRow(
                    kind=RowKind.OPTION,
                    key=label,
                    segments=tuple(render(label, state.query)),
                    option=option,
                )
            )
    elif state.is_loading:
        rows.append(ListRow(kind=RowKind.LOADING, key="loading", segments=(Segment(LOADING_TEXT),)))
    else:
        rows.append(ListRow(kind=RowKind.NO_OPTIONS, key="no-options", segments=(Segment(NO_OPTIONS_TEXT),)))

    return SearchView(list_visible=True, rows=tuple(rows), error_message=state.error_message)
