"""
SearchController - the search-as-you-type state machine.

The controller owns one SearchState per widget and reacts to:
- focus gained on the input
- text changes (debounced before a lookup is issued)
- lookup resolution or rejection
- clicks inside or outside the widget
- option selection

Every keystroke bumps a generation counter. A lookup remembers the
generation it was started for and its result is applied only if no newer
keystroke arrived in the meantime, so out-of-order responses can never
overwrite fresher results.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import Generic, TypeVar

from typeahead.application.config import AutocompleteConfig
from typeahead.domain.events import (
    EventBus,
    LookupCompleted,
    LookupFailed,
    LookupStarted,
    OptionSelected,
    SearchStateChanged,
    StaleResultDiscarded,
)
from typeahead.domain.types import SearchPhase, SearchState
from typeahead.logger import get_logger
from typeahead.utils import shorten

logger = get_logger("search_controller")

T = TypeVar("T")

# Seconds of typing inactivity before a lookup is issued
DEBOUNCE_DELAY = 0.25

LOOKUP_FAILED_MESSAGE = "Something went wrong while searching. Please try again."


class SearchController(Generic[T]):
    """Drives the open/loading/results/error lifecycle of one autocomplete."""

    def __init__(self, config: AutocompleteConfig[T], event_bus: EventBus | None = None) -> None:
        """
        Initialize the controller.

        Args:
            config: Caller capabilities (lookup, label getter, selection callback)
            event_bus: Optional shared EventBus. If None, a private one is created.
        """
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.controller_id = uuid.uuid4().hex[:8]
        self.state: SearchState[T] = SearchState()

        self._generation = 0
        self._debounce_handle: asyncio.TimerHandle | None = None
        self._lookup_tasks: set[asyncio.Task] = set()
        self._disposed = False

        logger.debug(f"SearchController {self.controller_id} created")

    @property
    def phase(self) -> SearchPhase:
        return self.state.phase

    @property
    def generation(self) -> int:
        """Token of the most recently scheduled lookup."""
        return self._generation

    @property
    def has_pending_debounce(self) -> bool:
        return self._debounce_handle is not None

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def focus(self) -> None:
        """Open the list when the input gains focus."""
        if self._disposed or self.state.is_open:
            return
        self.state.is_open = True
        logger.debug(f"[{self.controller_id}] list opened on focus")
        self._notify()

    def text_changed(self, value: str) -> None:
        """
        React to the input text changing.

        An empty value clears the options right away. Any other value
        (re)starts the debounce timer; only the last keystroke inside the
        window reaches the lookup.

        Must be called from within a running event loop.
        """
        if self._disposed:
            return

        self.state.query = value
        self._cancel_debounce()
        # Invalidates every lookup still in flight
        self._generation += 1

        if not value:
            self.state.options = []
            self.state.is_loading = False
            logger.debug(f"[{self.controller_id}] query cleared, options reset")
            self._notify()
            return

        token = self._generation
        loop = asyncio.get_running_loop()
        self._debounce_handle = loop.call_later(DEBOUNCE_DELAY, self._on_debounce_fired, token)
        # Highlighting follows the live text even before the lookup completes
        self._notify()

    def click(self, inside: bool) -> None:
        """
        Handle a pointer press anywhere in the application.

        Args:
            inside: True when the press landed on the input or the option list
        """
        if self._disposed or inside or not self.state.is_open:
            return
        self.state.is_open = False
        logger.debug(f"[{self.controller_id}] list closed by outside click")
        self._notify()

    def select(self, option: T) -> str | None:
        """
        Commit ``option`` as the user's choice.

        The input text becomes the option label, ``on_select`` is invoked
        once and the list closes. Options that are not currently listed
        are ignored.

        Returns:
            The label of the selected option, or None if the selection was ignored
        """
        if self._disposed:
            return None
        if not self.state.is_open or option not in self.state.options:
            logger.warning(f"[{self.controller_id}] ignoring selection of an option that is not listed")
            return None

        label = self.config.get_option_label(option)

        self._cancel_debounce()
        # A lookup still in flight must not repopulate the list after selection
        self._generation += 1

        self.state.query = label
        self.state.is_open = False
        self.state.is_loading = False
        self.state.options = [option] if self.config.keep_selected_option else []

        logger.info(f"[{self.controller_id}] selected {shorten(label)!r}")
        self.event_bus.publish(OptionSelected(controller_id=self.controller_id, option=option, label=label))

        if self.config.on_select is not None:
            try:
                self.config.on_select(option)
            except Exception:
                logger.exception(f"[{self.controller_id}] on_select callback failed")

        self._notify()
        return label

    def dispose(self) -> None:
        """
        Release the pending timer and stop applying results.

        Called when the owning widget unmounts. Safe to call more than once.
        """
        if self._disposed:
            return
        self._disposed = True
        self._cancel_debounce()
        self._generation += 1
        for task in list(self._lookup_tasks):
            if not task.done():
                task.cancel()
        self._lookup_tasks.clear()
        logger.debug(f"SearchController {self.controller_id} disposed")

    def _cancel_debounce(self) -> None:
        if self._debounce_handle is not None:
            self._debounce_handle.cancel()
            self._debounce_handle = None

    def _on_debounce_fired(self, token: int) -> None:
        self._debounce_handle = None
        if self._disposed or token != self._generation:
            return

        search_term = self.state.query
        self.state.is_loading = True
        self.state.error_message = None

        logger.debug(f"[{self.controller_id}] lookup #{token} for {shorten(search_term)!r}")
        self.event_bus.publish(
            LookupStarted(controller_id=self.controller_id, token=token, search_term=search_term)
        )
        self._notify()

        task = asyncio.create_task(self._run_lookup(token, search_term))
        self._lookup_tasks.add(task)
        task.add_done_callback(self._lookup_tasks.discard)

    async def _run_lookup(self, token: int, search_term: str) -> None:
        try:
            # A synchronous raise from filter_options lands here as well
            options = list(await self.config.filter_options(search_term))
        except Exception:
            if self._is_stale(token):
                return
            logger.exception(f"[{self.controller_id}] lookup #{token} failed for {shorten(search_term)!r}")
            self.state.options = []
            self.state.is_open = False
            self.state.is_loading = False
            self.state.error_message = LOOKUP_FAILED_MESSAGE
            self.event_bus.publish(
                LookupFailed(controller_id=self.controller_id, token=token, search_term=search_term)
            )
            self._notify()
            return

        if self._is_stale(token):
            return

        self.state.options = options
        self.state.is_loading = False
        logger.debug(f"[{self.controller_id}] lookup #{token} returned {len(options)} option(s)")
        self.event_bus.publish(
            LookupCompleted(controller_id=self.controller_id, token=token, option_count=len(options))
        )
        self._notify()

    def _is_stale(self, token: int) -> bool:
        if not self._disposed and token == self._generation:
            return False
        logger.debug(f"[{self.controller_id}] discarding stale lookup #{token} (current #{self._generation})")
        if not self._disposed:
            self.event_bus.publish(
                StaleResultDiscarded(
                    controller_id=self.controller_id,
                    token=token,
                    current_token=self._generation,
                )
            )
        return True

    def _notify(self) -> None:
        self.event_bus.publish(SearchStateChanged(controller_id=self.controller_id, state=self.state.snapshot()))
