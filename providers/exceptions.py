"""Errors raised by the CoinMetrics client. None of them are retried."""

from __future__ import annotations


class CoinMetricsError(Exception):
    """Base class for every client failure."""


class TransportError(CoinMetricsError):
    """Network, DNS, connection or timeout failure before a response arrived."""


class APIError(CoinMetricsError):
    """The API answered with a failure status."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(CoinMetricsError):
    """The success body was not valid JSON for the expected shape."""
