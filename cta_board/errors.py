"""Errors raised while running a single fetch/decode/render cycle."""

from __future__ import annotations


class CycleError(Exception):
    """Base class for recoverable, per-cycle failures."""


class RequestError(CycleError):
    """Raised when the HTTP request could not be completed."""


class HttpStatusError(CycleError):
    """Raised when the arrivals API answers with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Arrivals API request failed: Status {status_code}")
        self.status_code = status_code


class DecodeError(CycleError):
    """Raised when the response body is not a usable arrivals document."""


class ProviderError(DecodeError):
    """Raised when the arrivals document carries a provider error code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"Arrivals API error {code}: {message or 'no message'}")
        self.code = code
        self.message = message


class RenderError(CycleError):
    """Raised when decoded arrivals cannot be turned into display text."""
