"""Scheduler that rotates through stops and dispatches arrival cycles."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
import time
from typing import Sequence

from cta_board.config import Stop
from cta_board.data.cta_client import CTAClient
from cta_board.data.cycle import Emitter, print_block, run_cycle
from cta_board.errors import CycleError
from cta_board.logic.rotation import next_stop

logger = logging.getLogger(__name__)

IDLE = "IDLE"
DISPATCHING = "DISPATCHING"


@dataclass(frozen=True)
class CycleResult:
    """Outcome of the most recently finished cycle."""

    stop: Stop
    text: str | None
    error: str | None
    finished_at: float


class ArrivalsScheduler:
    """Fires a cycle for the next stop every ``interval_seconds``.

    Cycles run on their own daemon threads and are never waited on, so a
    slow request can overlap with later ticks.
    """

    def __init__(
        self,
        client: CTAClient,
        stops: Sequence[Stop],
        interval_seconds: float,
        emit: Emitter = print_block,
    ) -> None:
        if not stops:
            raise ValueError("ArrivalsScheduler needs at least one stop")
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._client = client
        self._stops = tuple(stops)
        self._interval_seconds = interval_seconds
        self._emit = emit
        self._cursor = 0
        self._state = IDLE
        self._latest: CycleResult | None = None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> str:
        return self._state

    def get_latest(self) -> CycleResult | None:
        """Return the most recent cycle result, if any."""
        with self._lock:
            return self._latest

    def tick(self) -> threading.Thread:
        """Dispatch a cycle for the next stop and return its worker thread."""
        self._state = DISPATCHING
        try:
            stop, cursor = next_stop(self._cursor, self._stops)
            worker = threading.Thread(
                target=self._execute,
                args=(stop,),
                name=f"cycle-{stop.id}",
                daemon=True,
            )
            worker.start()
            self._cursor = cursor
        finally:
            self._state = IDLE
        return worker

    def run(self) -> None:
        """Tick immediately, then every interval, until stop() is called."""
        self._stop_event.clear()
        self._run_loop()

    def _run_loop(self) -> None:
        logger.info(
            "Polling %d stop(s) every %ss", len(self._stops), self._interval_seconds
        )
        next_tick = time.monotonic()
        while not self._stop_event.is_set():
            try:
                self.tick()
            except RuntimeError:
                # The cursor is left in place, so the next tick retries this stop.
                logger.exception("Could not dispatch cycle for stop #%d", self._cursor)
            next_tick += self._interval_seconds
            self._stop_event.wait(timeout=max(0.0, next_tick - time.monotonic()))

    def run_each_once(self) -> list[CycleResult]:
        """Run one cycle per configured stop in order, on the calling thread."""
        return [self._execute(stop) for stop in self._stops]

    def start(self) -> None:
        """Start the scheduling loop on a background thread."""
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Signal the scheduling loop to stop; in-flight cycles keep running."""
        self._stop_event.set()

    def _execute(self, stop: Stop) -> CycleResult:
        try:
            text = run_cycle(stop, self._client, self._emit)
        except CycleError as exc:
            logger.warning("Cycle for %s (%s) failed: %s", stop.name, stop.id, exc)
            result = CycleResult(stop=stop, text=None, error=str(exc), finished_at=time.time())
        except Exception as exc:
            logger.exception("Unexpected error in cycle for %s (%s)", stop.name, stop.id)
            result = CycleResult(
                stop=stop,
                text=None,
                error=f"{type(exc).__name__}: {exc}",
                finished_at=time.time(),
            )
        else:
            result = CycleResult(stop=stop, text=text, error=None, finished_at=time.time())

        with self._lock:
            self._latest = result
        return result


__all__ = ["DISPATCHING", "IDLE", "ArrivalsScheduler", "CycleResult"]
