"""CTA Train Tracker arrivals client."""

from __future__ import annotations

from typing import Any

import requests

from cta_board.config import CTA_API_BASE
from cta_board.errors import HttpStatusError, RequestError


class CTAClient:
    """Thin wrapper around the Train Tracker arrivals endpoint using requests."""

    def __init__(
        self,
        api_key: str,
        base_url: str = CTA_API_BASE,
        timeout_seconds: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_params(self, stop_id: int) -> dict[str, Any]:
        """Query parameters for an arrivals request, in wire order."""
        return {"stpid": stop_id, "key": self._api_key}

    def get_arrivals(self, stop_id: int) -> bytes:
        """Fetch the raw arrivals XML for a stop.

        Returns the undecoded body so the XML declaration decides the charset.
        """
        try:
            with requests.get(
                self._base_url,
                params=self.build_params(stop_id),
                timeout=self._timeout_seconds,
                stream=True,
            ) as response:
                # Streamed: the body is only downloaded on the success path.
                if not 200 <= response.status_code < 300:
                    raise HttpStatusError(response.status_code)
                return response.content
        except requests.RequestException as exc:
            raise RequestError(f"Arrivals API request failed: {exc}") from exc
