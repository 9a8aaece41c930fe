"""Core types and constants for the Canvas connection layer."""

from __future__ import annotations

from dataclasses import dataclass

from canvas_api.connector.errors import ConfigurationError

API_PREFIX = "/api/v1"

DEFAULT_MAX_CONNECTIONS = 10
DEFAULT_TIMEOUT_SECONDS = 20.0
DEFAULT_PAGE_SIZE = 1000  # per_page forced by getall()


@dataclass(frozen=True)
class ConnectorOptions:
    """Connection configuration applied uniformly to every connector of a dispatcher."""

    max_connections: int = DEFAULT_MAX_CONNECTIONS  # Max in-flight requests per connector
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS  # Per-request timeout
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.max_connections < 1:
            raise ConfigurationError(f"max_connections must be at least 1, got {self.max_connections}")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.page_size < 1:
            raise ConfigurationError(f"page_size must be at least 1, got {self.page_size}")
