"""
Split option labels into highlighted and plain segments.
"""

from __future__ import annotations

import re

from typeahead.domain.types import Segment
from typeahead.logger import get_logger

logger = get_logger("highlight")


def render(text: str, highlight: str | None) -> list[Segment]:
    """
    Segment ``text`` around every occurrence of ``highlight``.

    Matching is literal, case-insensitive and global. Occurrences are taken
    left to right without overlapping, and joining the segment values gives
    back ``text`` unchanged.

    Args:
        text: Display text, usually an option label
        highlight: Substring to mark, typically the live input text

    Returns:
        Ordered segments. A single unmatched segment when there is nothing
        to highlight.

    Example:
        >>> render("Fake 1", "fake")
        [Segment(value='Fake', matched=True), Segment(value=' 1', matched=False)]
    """
    if not highlight:
        return [Segment(text)]

    try:
        pattern = re.compile(re.escape(highlight), re.IGNORECASE)
    except re.error:
        logger.debug(f"Unusable highlight {highlight!r}, rendering plain text")
        return [Segment(text)]

    segments: list[Segment] = []
    cursor = 0
    for match in pattern.finditer(text):
        start, end = match.span()
        if start > cursor:
            segments.append(Segment(text[cursor:start]))
        segments.append(Segment(text[start:end], matched=True))
        cursor = end

    if cursor < len(text) or not segments:
        segments.append(Segment(text[cursor:]))

    return segments


def has_match(text: str, highlight: str | None) -> bool:
    """Return True when ``render`` would mark at least one segment."""
    return any(segment.matched for segment in render(text, highlight))
