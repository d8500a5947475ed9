"""Caller-supplied capabilities consumed by the search controller.

These protocols describe the only boundary between the widget core and the
host application: how to look options up and how to name them. Any HTTP,
database or in-memory access lives behind ``OptionLookup``.
"""

from typing import Awaitable, Protocol, Sequence, TypeVar

__all__ = ["OptionLookup", "LabelGetter", "SelectHandler"]

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class OptionLookup(Protocol[T_co]):
    """Asynchronous option search.

    Example:
        >>> async def filter_options(search_term: str) -> list[dict]:
        ...     return await api.search_users(search_term)
    """

    def __call__(self, search_term: str) -> Awaitable[Sequence[T_co]]:
        """Return the options matching ``search_term``.

        Rejection (raising from the awaitable) is reported to the user as a
        generic failure; the exception detail is only logged.
        """
        ...


class LabelGetter(Protocol[T_contra]):
    """Pure, stable mapping from an option to its display label."""

    def __call__(self, option: T_contra) -> str: ...


class SelectHandler(Protocol[T_contra]):
    """Notified exactly once per successful selection."""

    def __call__(self, option: T_contra) -> None: ...
