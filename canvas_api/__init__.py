"""Async client for the Canvas LMS REST API.

Load-balances requests across one connection per API token, caps
concurrency per token, and transparently walks paginated collections.
"""

from canvas_api.api import CanvasAPI
from canvas_api.connector.connector import CanvasConnector
from canvas_api.connector.dispatcher import Dispatcher
from canvas_api.connector.errors import CanvasError, ConfigurationError, RequestError, RequestTimeoutError
from canvas_api.connector.types import ConnectorOptions

__all__ = [
    "CanvasAPI",
    "CanvasConnector",
    "CanvasError",
    "ConfigurationError",
    "ConnectorOptions",
    "Dispatcher",
    "RequestError",
    "RequestTimeoutError",
]
