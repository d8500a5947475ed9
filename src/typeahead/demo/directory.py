"""
In-memory user directory backing the demo application.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from typeahead.logger import get_logger

logger = get_logger("demo.directory")


class DirectoryUnavailable(Exception):
    """Raised when a simulated lookup fails."""


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


DEFAULT_USERS: tuple[User, ...] = tuple(
    User(id=index, name=name, email=f"{name.split()[0].lower()}@example.com")
    for index, name in enumerate(
        [
            "Ada Lovelace",
            "Alan Turing",
            "Barbara Liskov",
            "Claude Shannon",
            "Donald Knuth",
            "Edsger Dijkstra",
            "Frances Allen",
            "Grace Hopper",
            "Guido van Rossum",
            "John McCarthy",
            "Ken Thompson",
            "Leslie Lamport",
            "Margaret Hamilton",
            "Niklaus Wirth",
            "Radia Perlman",
            "Tim Berners-Lee",
        ],
        start=1,
    )
)


class UserDirectory:
    """
    Searchable user list with simulated latency and failures.

    The ``search`` coroutine has the signature expected by
    ``AutocompleteConfig.filter_options``.
    """

    def __init__(
        self,
        users: Optional[Sequence[User]] = None,
        latency: float = 0.3,
        failure_rate: float = 0.0,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the directory.

        Args:
            users: Users to search (defaults to DEFAULT_USERS)
            latency: Seconds each search waits before answering
            failure_rate: Probability (0..1) that a search raises DirectoryUnavailable
            rng: Random generator used for failure simulation
        """
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be between 0 and 1, got {failure_rate}")
        if latency < 0:
            raise ValueError(f"latency must be non-negative, got {latency}")

        self.users = list(users) if users is not None else list(DEFAULT_USERS)
        self.latency = latency
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()
        self.search_count = 0

    async def search(self, search_term: str) -> list[User]:
        """
        Return users whose name contains ``search_term`` (case-insensitive).

        Raises:
            DirectoryUnavailable: When the simulated backend fails
        """
        self.search_count += 1
        if self.latency:
            await asyncio.sleep(self.latency)

        if self.failure_rate and self._rng.random() < self.failure_rate:
            logger.warning(f"Simulated directory failure for {search_term!r}")
            raise DirectoryUnavailable("user directory is unavailable")

        needle = search_term.casefold()
        matches = [user for user in self.users if needle in user.name.casefold()]
        logger.debug(f"Directory search {search_term!r} matched {len(matches)} user(s)")
        return matches
