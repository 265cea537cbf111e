"""Text renderer for a stop's upcoming arrivals."""

from __future__ import annotations

from cta_board.config import Stop
from cta_board.data.decoder import TrainInfo
from cta_board.errors import RenderError
from cta_board.rendering.time_format import TimeParseError, format_time

SEPARATOR = "--"
NO_TRAINS_TEMPLATE = "No trains scheduled for {name}\n"


def render(stop: Stop, info: TrainInfo | None) -> str:
    """Render a display block for a stop.

    The block is the stop name, the direction label taken from the first
    arrival, a separator line and the space-joined arrival times. Raises
    RenderError if any arrival time cannot be formatted.
    """
    if info is None or not info.etas:
        return NO_TRAINS_TEMPLATE.format(name=stop.name)

    # Every record in one response shares the same description.
    label = info.etas[0].stop_description

    try:
        times = " ".join(format_time(eta.arrival_time) for eta in info.etas)
    except TimeParseError as exc:
        raise RenderError(f"Cannot render arrivals for {stop.name}: {exc}") from exc

    return f"{stop.name}\n{label}\n{SEPARATOR}\n{times}\n"


__all__ = ["NO_TRAINS_TEMPLATE", "SEPARATOR", "render"]
