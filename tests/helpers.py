"""Fake Canvas backend pieces shared by the test modules."""

from __future__ import annotations

import asyncio

import httpx

ORIGIN = "https://canvas.test"
BASE_URL = f"{ORIGIN}/api/v1"


def link_header(path: str, page: int, last: int, per_page: int, extra_query: str = "") -> str:
    """Canvas-style Link header for one page of ``path``."""

    def _url(p: int) -> str:
        return f"{BASE_URL}{path}?{extra_query}page={p}&per_page={per_page}"

    links = [f'<{_url(page)}>; rel="current"']
    if page < last:
        links.append(f'<{_url(page + 1)}>; rel="next"')
    links.append(f'<{_url(1)}>; rel="first"')
    links.append(f'<{_url(last)}>; rel="last"')
    return ",".join(links)


class PagedCollection:
    """Serves ``items`` in pages, like a Canvas collection endpoint.

    The server caps ``per_page`` at its own page size, so the Link header
    reflects the server's page size rather than the one requested.
    ``delays`` maps page number to seconds slept before answering.
    """

    def __init__(
        self,
        path: str,
        items: list,
        per_page: int,
        delays: dict[int, float] | None = None,
        extra_query: str = "",
        fail_page: int | None = None,
    ):
        self.path = path
        self.items = items
        self.per_page = per_page
        self.delays = delays or {}
        self.extra_query = extra_query
        self.fail_page = fail_page
        self.requests: list[httpx.Request] = []
        self.completion_order: list[int] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def last_page(self) -> int:
        return max(1, -(-len(self.items) // self.per_page))

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = int(request.url.params.get("page", "1"))
        per_page = min(int(request.url.params.get("per_page", self.per_page)), self.per_page)

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(page, 0))
        finally:
            self.in_flight -= 1
        self.completion_order.append(page)

        if page == self.fail_page:
            return httpx.Response(500, json={"errors": [{"message": "boom"}]})

        start = (page - 1) * per_page
        headers = {}
        if self.last_page > 1:
            headers["Link"] = link_header(self.path, page, self.last_page, per_page, self.extra_query)
        return httpx.Response(200, json=self.items[start : start + per_page], headers=headers)
