"""Departure-board text for CTA Train Tracker arrivals."""

__version__ = "0.1.0"
