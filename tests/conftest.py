"""Shared fixtures for typeahead tests."""

import pytest

from tests.helpers import FAST_DEBOUNCE, ControlledLookup
from typeahead.application import search_controller


@pytest.fixture
def fast_debounce(monkeypatch) -> float:
    """Shrink the debounce window for tests that call the controller directly.

    Pilot keystrokes can be further apart than this window, so widget tests
    that rely on keystrokes being coalesced keep the real delay.
    """
    monkeypatch.setattr(search_controller, "DEBOUNCE_DELAY", FAST_DEBOUNCE)
    return FAST_DEBOUNCE


@pytest.fixture
def controlled_lookup() -> ControlledLookup:
    return ControlledLookup()
