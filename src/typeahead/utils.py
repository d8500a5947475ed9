"""
Utility functions for the typeahead package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def shorten(text: str, limit: int = 40) -> str:
    """
    Truncate text for log messages.

    Args:
        text: Text to shorten
        limit: Maximum length of the returned string

    Returns:
        The text itself, or its first characters followed by an ellipsis
    """
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."
