"""Configuration for the search controller."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from typeahead.domain.protocols import LabelGetter, OptionLookup, SelectHandler

T = TypeVar("T")


@dataclass
class AutocompleteConfig(Generic[T]):
    """Capabilities and options injected into a SearchController.

    The two required fields are plain callables supplied by the host; the
    controller never subclasses or overrides them.
    """

    # Required capabilities
    filter_options: OptionLookup[T]
    get_option_label: LabelGetter[T]

    # Optional selection callback, called once per selection
    on_select: Optional[SelectHandler[T]] = None

    # After a selection, keep the chosen option as the only list entry
    # instead of clearing the list
    keep_selected_option: bool = False

    def __post_init__(self) -> None:
        if not callable(self.filter_options):
            raise TypeError("filter_options must be callable")
        if not callable(self.get_option_label):
            raise TypeError("get_option_label must be callable")
        if self.on_select is not None and not callable(self.on_select):
            raise TypeError("on_select must be callable or None")
