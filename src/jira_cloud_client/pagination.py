"""Helpers that walk paginated Jira collections.

Service operations return a single page.  These helpers call an operation
repeatedly, advancing the offset or continuation token, and yield what comes
back::

    async for project in iter_values(client.projects.search_projects, query="ops"):
        ...
"""
from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Mapping, Optional

from .request import JiraResult

LOGGER = logging.getLogger(__name__)

Operation = Callable[..., Awaitable[JiraResult[Any]]]


async def iter_pages(
    operation: Operation,
    *,
    start_at: int = 0,
    max_results: int = 50,
    **kwargs: Any,
) -> AsyncIterator[Mapping[str, Any]]:
    """Yield offset-paginated pages sequentially.

    Stops after a page flagged ``isLast``, an empty page, or once the running
    offset reaches ``total``.
    """

    current = start_at
    while True:
        LOGGER.debug("Fetching Jira page", extra={"start_at": current, "max_results": max_results})
        result = await operation(start_at=current, max_results=max_results, **kwargs)
        page = result.data or {}
        values = page.get("values", [])
        if not isinstance(values, list):
            msg = "Unexpected response structure from Jira page"
            raise ValueError(msg)
        yield page
        if page.get("isLast") or not values:
            break
        current = int(page.get("startAt", current)) + len(values)
        total = page.get("total")
        if total is not None and current >= int(total):
            break


async def iter_values(
    operation: Operation,
    *,
    start_at: int = 0,
    max_results: int = 50,
    **kwargs: Any,
) -> AsyncIterator[Any]:
    """Yield the items of every page produced by :func:`iter_pages`."""

    async for page in iter_pages(operation, start_at=start_at, max_results=max_results, **kwargs):
        for value in page.get("values", []):
            yield value


async def iter_token_pages(
    operation: Operation,
    *,
    key: Optional[str] = None,
    **kwargs: Any,
) -> AsyncIterator[Mapping[str, Any]]:
    """Yield pages of a ``nextPageToken`` paginated endpoint.

    ``key`` names the nested object that carries the token, e.g.
    ``"projects"`` for workflow project usages; without it the token is read
    from the top level of the response, as for ``/search/jql``.
    """

    token: Optional[str] = None
    while True:
        call_kwargs: Dict[str, Any] = dict(kwargs)
        if token is not None:
            call_kwargs["next_page_token"] = token
        result = await operation(**call_kwargs)
        page = result.data or {}
        yield page
        holder = (page.get(key) or {}) if key else page
        token = holder.get("nextPageToken")
        if not token or holder.get("isLast"):
            break
        LOGGER.debug("Following Jira page token", extra={"key": key})


__all__ = ["iter_pages", "iter_token_pages", "iter_values"]
