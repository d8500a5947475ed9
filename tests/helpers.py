"""Helpers shared by typeahead tests."""

import asyncio
from typing import Any

FAST_DEBOUNCE = 0.02


async def flush() -> None:
    """Let already-scheduled callbacks and task steps run."""
    for _ in range(3):
        await asyncio.sleep(0)


async def settle(delay: float = FAST_DEBOUNCE) -> None:
    """Wait for the debounce timer to fire and the lookup task to run."""
    await asyncio.sleep(delay * 3)
    await flush()


class ControlledLookup:
    """Lookup whose results are resolved by the test, one future per call.

    Lets tests settle lookups in any order to exercise staleness.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._futures: dict[str, asyncio.Future] = {}

    async def __call__(self, search_term: str) -> list[Any]:
        self.calls.append(search_term)
        future = asyncio.get_running_loop().create_future()
        self._futures[search_term] = future
        return await future

    def resolve(self, search_term: str, options: list[Any]) -> None:
        self._futures[search_term].set_result(options)

    def reject(self, search_term: str, error: Exception) -> None:
        self._futures[search_term].set_exception(error)
