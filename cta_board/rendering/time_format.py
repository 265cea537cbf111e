"""Compact clock formatting for provider arrival timestamps."""

from __future__ import annotations

from datetime import datetime
import re

PROVIDER_TIME_FORMAT = "%Y%m%d %H:%M:%S"
_PROVIDER_TIME_PATTERN = re.compile(r"\d{8} \d{2}:\d{2}:\d{2}")


class TimeParseError(ValueError):
    """Raised when an arrival timestamp does not match the provider format."""

    def __init__(self, raw: object, reason: str) -> None:
        super().__init__(f"failed to parse time {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


def parse_time(raw: str) -> datetime:
    """Parse a ``YYYYMMDD HH:MM:SS`` timestamp into a naive datetime."""
    if not isinstance(raw, str):
        raise TimeParseError(raw, f"expected str, got {type(raw).__name__}")
    # strptime alone accepts single-digit fields, so check the shape first.
    if not _PROVIDER_TIME_PATTERN.fullmatch(raw):
        raise TimeParseError(raw, "does not match YYYYMMDD HH:MM:SS")
    try:
        return datetime.strptime(raw, PROVIDER_TIME_FORMAT)
    except ValueError as exc:
        raise TimeParseError(raw, str(exc)) from exc


def format_time(raw: str) -> str:
    """Format a provider timestamp as ``H:M`` without leading zeros."""
    parsed = parse_time(raw)
    return f"{parsed.hour}:{parsed.minute}"


__all__ = ["PROVIDER_TIME_FORMAT", "TimeParseError", "format_time", "parse_time"]
