"""Request descriptors and the shared dispatcher used by every service.

A service operation never talks HTTP directly.  It describes the call with a
:class:`RequestDescriptor` and hands it to :meth:`JiraRequester.dispatch`,
which expands the path, merges headers, sends the request through the
configured channel and maps the response to a :class:`JiraResult` or one of
the exceptions in :mod:`jira_cloud_client.errors`.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Literal, Mapping, Optional, Protocol, TypeVar

import httpx

from .config import DefaultJiraConfig, ForgeJiraConfig, JiraConfig
from .errors import HttpError, ResponseParseError
from .headers import create_headers
from .http_client import JiraHTTPClient
from .params import build_url

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
ActAs = Literal["user", "app"]


class ForgeRequester(Protocol):
    """The object returned by ``asUser()`` / ``asApp()`` on a Forge product API."""

    async def request_jira(
        self,
        path: str,
        *,
        method: str,
        headers: Mapping[str, str],
        content: str | bytes | None = None,
    ) -> httpx.Response:
        ...


class ForgeApi(Protocol):
    """Minimal surface of a Forge product API object."""

    def as_user(self) -> ForgeRequester:
        ...

    def as_app(self) -> ForgeRequester:
        ...


@dataclass(slots=True)
class RequestOptions:
    """Per-call settings that sit outside an operation's business parameters.

    ``headers`` are added to (or override) the defaults.  ``act_as`` selects
    the Forge principal and is ignored by the default client type.
    ``timeout`` is forwarded to httpx unchanged.
    """

    headers: Dict[str, str] = field(default_factory=dict)
    act_as: ActAs = "user"
    timeout: Any = None


@dataclass(slots=True, frozen=True, eq=True, unsafe_hash=False)
class RequestDescriptor:
    """Everything needed to issue one Jira request.

    Descriptors compare by value but are not hashable: they hold plain dicts.
    """

    __hash__ = None  # type: ignore[assignment]

    path: str
    method: HttpMethod
    path_params: Mapping[str, Any] = field(default_factory=dict)
    query_params: Mapping[str, Any] = field(default_factory=dict)
    body: str | bytes | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    is_response_available: bool = True
    is_experimental: bool = False
    act_as: ActAs = "user"
    timeout: Any = None

    def url(self) -> str:
        """Return the expanded path and query string."""

        return build_url(self.path, path_params=self.path_params, query_params=self.query_params)


@dataclass(slots=True, frozen=True)
class JiraResult(Generic[T]):
    """Successful outcome of a dispatched request."""

    status: int
    data: Optional[T] = None
    headers: Mapping[str, str] = field(default_factory=dict)


def _decode_json(response: httpx.Response) -> Any:
    return json.loads(response.text)


class JiraRequester:
    """Dispatches :class:`RequestDescriptor` objects for one configuration."""

    def __init__(self, config: JiraConfig, http: Optional[JiraHTTPClient] = None) -> None:
        if isinstance(config, DefaultJiraConfig) and http is None:
            msg = "A JiraHTTPClient is required for the default client type"
            raise ValueError(msg)
        self._config = config
        self._http = http

    @property
    def config(self) -> JiraConfig:
        return self._config

    async def dispatch(self, descriptor: RequestDescriptor) -> JiraResult[Any]:
        url = descriptor.url()
        headers = create_headers(self._config, descriptor.headers, is_experimental=descriptor.is_experimental)
        LOGGER.debug("Dispatching Jira request", extra={"method": descriptor.method, "path": url})
        response = await self._send(descriptor, url, headers)
        return self._handle_response(descriptor, url, response)

    async def _send(self, descriptor: RequestDescriptor, url: str, headers: Mapping[str, str]) -> httpx.Response:
        if isinstance(self._config, ForgeJiraConfig):
            api = self._config.api
            requester = api.as_app() if descriptor.act_as == "app" else api.as_user()
            return await requester.request_jira(url, method=descriptor.method, headers=headers, content=descriptor.body)
        assert self._http is not None
        return await self._http.request(
            descriptor.method,
            url,
            headers=headers,
            content=descriptor.body,
            timeout=descriptor.timeout,
        )

    def _handle_response(self, descriptor: RequestDescriptor, url: str, response: httpx.Response) -> JiraResult[Any]:
        status = response.status_code
        if not 200 <= status < 300:
            body = response.text
            try:
                data = _decode_json(response)
            except ValueError:
                data = None
            LOGGER.warning(
                "Jira request failed",
                extra={"method": descriptor.method, "path": url, "status_code": status},
            )
            raise HttpError(status, body, data, method=descriptor.method, url=url)

        if not descriptor.is_response_available:
            return JiraResult(status=status, data=None, headers=dict(response.headers))

        if status == 204 or not response.content.strip():
            return JiraResult(status=status, data=None, headers=dict(response.headers))
        try:
            data = _decode_json(response)
        except ValueError as exc:
            raise ResponseParseError(status, response.text) from exc
        return JiraResult(status=status, data=data, headers=dict(response.headers))


__all__ = [
    "ActAs",
    "ForgeApi",
    "ForgeRequester",
    "HttpMethod",
    "JiraRequester",
    "JiraResult",
    "RequestDescriptor",
    "RequestOptions",
]
