"""Exceptions raised by the Canvas connection layer."""

from __future__ import annotations

from typing import Any


class CanvasError(Exception):
    """Base exception for this package."""


class ConfigurationError(CanvasError):
    """Raised when a connector or dispatcher is constructed with invalid input."""


class RequestError(CanvasError):
    """Raised when a request fails: non-2xx response, network error or timeout.

    ``status_code`` is 0 when no response was received. ``body`` holds the
    decoded upstream body (JSON value or text) when there was one.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str = "",
        url: str = "",
        status_code: int = 0,
        body: Any = None,
    ):
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class RequestTimeoutError(RequestError):
    """Raised when a request exceeds the connector timeout."""
