"""
Rich formatting for highlighted option labels.
"""

from typing import Iterable

from rich.text import Text

from typeahead.domain.types import Segment

MATCH_STYLE = "bold"


def segments_to_text(segments: Iterable[Segment], match_style: str = MATCH_STYLE) -> Text:
    """
    Convert highlight segments into a Rich Text object.

    Args:
        segments: Ordered segments from the highlight renderer
        match_style: Style applied to matched segments

    Returns:
        Text whose plain content is the joined segments
    """
    text = Text()
    for segment in segments:
        if segment.matched:
            text.append(segment.value, style=match_style)
        else:
            text.append(segment.value)
    return text
