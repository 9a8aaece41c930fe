"""Link-header pagination helpers.

Canvas paginates collections with an RFC 5988 ``Link`` header:

    <https://x/api/v1/courses/1/sections?page=2&per_page=1000>; rel="next",
    <https://x/api/v1/courses/1/sections?page=3&per_page=1000>; rel="last"

The "last" link's query string is authoritative for every remaining page;
only ``page`` is substituted. Bookmark-paginated collections omit "last" (or
carry a non-numeric page) and can only be walked through "next".
"""

from __future__ import annotations

from typing import Any

import httpx


def first_page_params(params: dict[str, Any] | None, page_size: int) -> dict[str, Any]:
    """Caller params with page 1 and a forced page size."""
    return {**(params or {}), "page": 1, "per_page": page_size}


def last_page_params(response: httpx.Response) -> httpx.QueryParams | None:
    """Query parameters of the rel="last" link, if the response has one."""
    url = response.links.get("last", {}).get("url")
    if not url:
        return None
    return httpx.URL(url).params


def last_page_number(params: httpx.QueryParams | None) -> int | None:
    """Numeric ``page`` of a "last" link, or None for missing/bookmark pages."""
    if params is None:
        return None
    try:
        return int(params.get("page", ""))
    except ValueError:
        return None


def next_page_url(response: httpx.Response) -> str | None:
    return response.links.get("next", {}).get("url") or None


def page_params(params: httpx.QueryParams, page: int) -> httpx.QueryParams:
    return params.set("page", str(page))


def page_items(body: Any) -> list[Any]:
    """Items contributed by one page body. Empty/absent bodies contribute nothing."""
    if body is None or body == "":
        return []
    if isinstance(body, list):
        return body
    return [body]
