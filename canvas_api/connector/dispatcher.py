"""Dispatcher — load-balancing façade over one connector per credential.

Every forwarded call goes to the connector with the fewest in-flight plus
queued requests at the moment of selection; ties go to the first connector
in construction order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from canvas_api.connector.connector import CanvasConnector
from canvas_api.connector.errors import ConfigurationError
from canvas_api.connector.types import ConnectorOptions

if TYPE_CHECKING:
    from canvas_api.core.config import Settings

logger = logging.getLogger(__name__)


class Dispatcher:
    """Fixed, non-empty set of connectors behind one client surface.

    Usage:
        api = Dispatcher("https://canvas.example.edu", tokens=["t1", "t2"])
        course = await api.get("/courses/1")

    Omit ``tokens`` entirely for cookie-based access; an empty list is
    rejected as ambiguous.
    """

    def __init__(
        self,
        origin: str | None,
        tokens: list[str] | None = None,
        options: ConnectorOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not origin:
            raise ConfigurationError("Instantiated a canvas client with no URL.")
        if tokens is not None and not tokens:
            raise ConfigurationError(
                "Instantiated a canvas client with an empty token list. If the client depends "
                "on cookies for authentication, omit the tokens argument entirely."
            )

        options = options or ConnectorOptions()
        if tokens is None:
            connectors = [CanvasConnector(origin, None, options, transport=transport)]
        else:
            connectors = [CanvasConnector(origin, token, options, transport=transport) for token in tokens]
        self._connectors: tuple[CanvasConnector, ...] = tuple(connectors)

        logger.info(
            "Canvas client for %s with %d connector(s), max %d connections each",
            origin,
            len(self._connectors),
            options.max_connections,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs):
        """Build a client from environment-driven settings."""
        return cls(
            settings.canvas_url,
            settings.token_list,
            settings.connector_options(),
            **kwargs,
        )

    @property
    def connectors(self) -> tuple[CanvasConnector, ...]:
        return self._connectors

    def get_connector(self) -> CanvasConnector:
        """Least-busy connector; the first one wins ties."""
        return min(self._connectors, key=lambda connector: connector.tasks())

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        return await self.get_connector().get(url, params)

    async def getall(self, url: str, params: dict[str, Any] | None = None) -> list[Any]:
        return await self.get_connector().getall(url, params)

    async def delete(self, url: str, params: dict[str, Any] | None = None) -> Any:
        return await self.get_connector().delete(url, params)

    async def put(self, url: str, payload: Any) -> Any:
        return await self.get_connector().put(url, payload)

    async def post(self, url: str, payload: Any) -> Any:
        return await self.get_connector().post(url, payload)

    async def head(self, url: str) -> bool:
        return await self.get_connector().head(url)

    async def aclose(self) -> None:
        for connector in self._connectors:
            await connector.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def get_status(self) -> dict:
        """Per-connector load, in construction order."""
        return {
            "connectors": [connector.get_stats() for connector in self._connectors],
            "total_tasks": sum(connector.tasks() for connector in self._connectors),
        }
