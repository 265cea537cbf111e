"""Text rendering for the arrivals board."""

from cta_board.rendering.display_text import render
from cta_board.rendering.time_format import TimeParseError, format_time

__all__ = ["TimeParseError", "format_time", "render"]
