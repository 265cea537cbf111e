"""Round-robin selection of the stop to poll on each tick."""

from __future__ import annotations

from typing import Sequence

from cta_board.config import Stop


def next_stop(cursor: int, stops: Sequence[Stop]) -> tuple[Stop, int]:
    """Return the stop at ``cursor`` and the cursor advanced modulo the stop count."""
    if not stops:
        raise ValueError("Cannot rotate through an empty stop list")
    if not 0 <= cursor < len(stops):
        raise ValueError(f"Rotation cursor {cursor} out of range for {len(stops)} stops")
    return stops[cursor], (cursor + 1) % len(stops)


__all__ = ["next_stop"]
