"""Canvas connector — one credential-bound HTTP client with a concurrency ceiling.

Every outbound call, including each page fetched by getall(), passes through
the connector's ConcurrencyLimiter. Non-2xx responses, timeouts and network
errors surface as RequestError; HEAD is an existence check and never raises.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from canvas_api.connector.errors import RequestError, RequestTimeoutError
from canvas_api.connector.limiter import ConcurrencyLimiter
from canvas_api.connector.pagination import (
    first_page_params,
    last_page_number,
    last_page_params,
    next_page_url,
    page_items,
    page_params,
)
from canvas_api.connector.types import API_PREFIX, ConnectorOptions
from canvas_api.core.metrics import record_request

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    """JSON value of the body, its text when it is not JSON, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class CanvasConnector:
    """HTTP handle bound to one bearer token (or none, for cookie-based access).

    Usage:
        connector = CanvasConnector("https://canvas.example.edu", token="...")
        course = await connector.get("/courses/1")
        sections = await connector.getall("/courses/1/sections")
    """

    def __init__(
        self,
        origin: str,
        token: str | None = None,
        options: ConnectorOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.options = options or ConnectorOptions()
        self.base_url = origin.rstrip("/") + API_PREFIX
        self.authenticated = bool(token)
        self.limiter = ConcurrencyLimiter(self.options.max_connections)

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.options.timeout_seconds,
            limits=httpx.Limits(max_connections=self.options.max_connections),
            transport=transport,
        )

    def tasks(self) -> int:
        """In-flight plus queued requests. A load-balancing hint; may be stale."""
        return self.limiter.task_count

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """One HTTP exchange bounded by a single whole-request deadline.

        httpx applies its timeout to each phase (connect, read, write, pool)
        separately; wait_for caps the request as a whole.
        """
        return await asyncio.wait_for(
            self._client.request(method, url, **kwargs),
            timeout=self.options.timeout_seconds,
        )

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        payload: Any = None,
    ) -> httpx.Response:
        """Send one request through the limiter and return the 2xx response."""
        log_extra = {"base_url": self.base_url, "method": method, "url": url}
        async with self.limiter.slot():
            start = time.monotonic()
            try:
                resp = await self._send(method, url, params=params, json=payload)
            except (httpx.TimeoutException, asyncio.TimeoutError) as e:
                record_request(method, "timeout", time.monotonic() - start)
                logger.warning(
                    "%s %s timed out after %.1fs",
                    method,
                    url,
                    self.options.timeout_seconds,
                    extra=log_extra,
                )
                raise RequestTimeoutError(
                    f"{method} {url} timed out after {self.options.timeout_seconds}s",
                    method=method,
                    url=url,
                ) from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                record_request(method, "error", time.monotonic() - start)
                logger.warning("%s %s failed: %s", method, url, e, extra=log_extra)
                raise RequestError(f"{method} {url} failed: {e}", method=method, url=url) from e
            record_request(method, resp.status_code, time.monotonic() - start)

        if not resp.is_success:
            logger.warning(
                "%s %s returned HTTP %d",
                method,
                url,
                resp.status_code,
                extra={**log_extra, "status_code": resp.status_code},
            )
            raise RequestError(
                f"{method} {url} returned HTTP {resp.status_code}",
                method=method,
                url=str(resp.url),
                status_code=resp.status_code,
                body=_decode_body(resp),
            )
        return resp

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        resp = await self._request("GET", url, params=params or {})
        return _decode_body(resp)

    async def getall(self, url: str, params: dict[str, Any] | None = None) -> list[Any]:
        """Fetch every page of a collection and return the items in server order.

        Pages 2..N named by the "last" link are fetched concurrently and joined
        by page number. Without a numeric "last" link, "next" links are
        followed one at a time; a next link that repeats one already fetched
        raises RequestError.
        """
        resp = await self._request("GET", url, params=first_page_params(params, self.options.page_size))
        items = list(page_items(_decode_body(resp)))

        last_params = last_page_params(resp)
        last_page = last_page_number(last_params)

        if last_page is not None:
            if last_page > 1:
                logger.debug("Fetching pages 2..%d of %s", last_page, url)
                pages = await asyncio.gather(
                    *(self._get_page(url, page_params(last_params, page)) for page in range(2, last_page + 1))
                )
                for page in pages:
                    items.extend(page)
            return items

        seen = {str(resp.url)}
        next_url = next_page_url(resp)
        while next_url:
            if next_url in seen:
                logger.warning(
                    "GET %s repeated next link %s",
                    url,
                    next_url,
                    extra={"base_url": self.base_url, "method": "GET", "url": next_url},
                )
                raise RequestError(f"GET {url} repeated next link {next_url}", method="GET", url=next_url)
            seen.add(next_url)
            logger.debug("Following next link of %s", url)
            resp = await self._request("GET", next_url)
            items.extend(page_items(_decode_body(resp)))
            next_url = next_page_url(resp)

        return items

    async def _get_page(self, url: str, params: httpx.QueryParams) -> list[Any]:
        resp = await self._request("GET", url, params=params)
        return page_items(_decode_body(resp))

    async def delete(self, url: str, params: dict[str, Any] | None = None) -> Any:
        resp = await self._request("DELETE", url, params=params or {})
        return _decode_body(resp)

    async def put(self, url: str, payload: Any) -> Any:
        resp = await self._request("PUT", url, payload=payload)
        return _decode_body(resp)

    async def post(self, url: str, payload: Any) -> Any:
        resp = await self._request("POST", url, payload=payload)
        return _decode_body(resp)

    async def head(self, url: str) -> bool:
        """True when the resource answers with a 2xx/3xx status. Never raises."""
        async with self.limiter.slot():
            start = time.monotonic()
            try:
                resp = await self._send("HEAD", url)
            except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
                record_request("HEAD", "error", time.monotonic() - start)
                logger.debug(
                    "HEAD %s failed: %r",
                    url,
                    e,
                    extra={"base_url": self.base_url, "method": "HEAD", "url": url},
                )
                return False
            record_request("HEAD", resp.status_code, time.monotonic() - start)
        return 200 <= resp.status_code < 400

    async def aclose(self) -> None:
        await self._client.aclose()

    def get_stats(self) -> dict:
        return {
            "base_url": self.base_url,
            "authenticated": self.authenticated,
            **self.limiter.get_stats(),
        }
