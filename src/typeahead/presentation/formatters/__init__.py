"""
Formatters turning domain values into rich renderables.
"""

from .highlight import segments_to_text

__all__ = ["segments_to_text"]
