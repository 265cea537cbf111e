"""One fetch, decode, render and emit pass for a single stop."""

from __future__ import annotations

import logging
from typing import Callable

from cta_board.config import Stop
from cta_board.data.cta_client import CTAClient
from cta_board.data.decoder import decode
from cta_board.rendering.display_text import render

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def print_block(text: str) -> None:
    """Default output sink: write the block to stdout."""
    print(text, flush=True)


def run_cycle(stop: Stop, client: CTAClient, emit: Emitter = print_block) -> str:
    """Fetch, decode and render arrivals for ``stop`` and emit the text.

    Makes exactly one request and emits at most once. Any failure is raised
    as a CycleError subclass before anything is emitted.
    """
    logger.debug("Fetching arrivals for %s (%s)", stop.name, stop.id)
    body = client.get_arrivals(stop.id)
    info = decode(body)
    logger.debug("Decoded %d arrivals for %s", len(info.etas), stop.name)
    text = render(stop, info)
    emit(text)
    return text


__all__ = ["Emitter", "print_block", "run_cycle"]
