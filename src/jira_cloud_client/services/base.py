"""Shared plumbing for the service classes."""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from ..request import HttpMethod, JiraRequester, JiraResult, RequestDescriptor, RequestOptions


class Service:
    """Base class for a group of related Jira endpoints.

    Subclasses expose one coroutine per endpoint.  Each of them describes a
    single request through :meth:`_describe` and awaits its dispatch; no
    operation retries, branches on the response or keeps state between calls.
    """

    def __init__(self, requester: JiraRequester) -> None:
        self._requester = requester

    def _describe(
        self,
        path: str,
        method: HttpMethod,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        authorization: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
        is_response_available: bool = True,
        is_experimental: bool = False,
    ) -> RequestDescriptor:
        options = opts or RequestOptions()
        headers: Dict[str, str] = dict(options.headers)
        if authorization is not None:
            # the per-call token always wins over option headers
            for name in [key for key in headers if key.lower() == "authorization"]:
                del headers[name]
            headers["Authorization"] = authorization
        return RequestDescriptor(
            path=path,
            method=method,
            path_params=dict(path_params or {}),
            query_params=dict(query_params or {}),
            body=None if body is None else json.dumps(body),
            headers=headers,
            is_response_available=is_response_available,
            is_experimental=is_experimental,
            act_as=options.act_as,
            timeout=options.timeout,
        )

    async def _request(self, path: str, method: HttpMethod, **kwargs: Any) -> JiraResult[Any]:
        return await self._requester.dispatch(self._describe(path, method, **kwargs))


def with_properties(query: Mapping[str, Any], properties: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge free-form property filters into a query parameter map."""

    merged = dict(properties or {})
    merged.update({key: value for key, value in query.items() if value is not None})
    return merged


__all__ = ["Service", "with_properties"]
