"""HTTP client helpers for communicating with Jira."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

LOGGER = logging.getLogger(__name__)


class JiraHTTPClient:
    """Wrapper around :class:`httpx.AsyncClient` with Jira specific defaults.

    Each call is a single attempt: failures are raised to the caller and
    never retried here.  Redirects are followed, so a ``303 See Other`` to a
    task resource resolves to the task itself.
    """

    def __init__(
        self,
        *,
        base_url: str,
        ca_bundle: str | bool | None = None,
        timeout: tuple[float, float] = (5.0, 30.0),
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        verify: str | bool
        if ca_bundle:
            verify = ca_bundle
        elif ca_bundle is False:
            verify = False
        else:
            verify = True

        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(connect=timeout[0], read=timeout[1], write=timeout[1], pool=None),
            verify=verify,
            transport=transport,
            follow_redirects=True,
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "JiraHTTPClient":
        return self

    async def __aexit__(self, *_exc: object) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: str | bytes | None = None,
        timeout: Any = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": headers, "content": content}
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            LOGGER.error("HTTP request failed", extra={"method": method, "path": url, "error": str(exc)})
            raise


__all__ = ["JiraHTTPClient"]
