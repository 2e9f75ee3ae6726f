"""The calling user and their preferences."""
from __future__ import annotations

from typing import Any, Optional

from ..models.common import User
from ..models.permissions import Locale
from ..request import JiraResult, RequestOptions
from .base import Service


class MyselfService(Service):
    async def get_current_user(
        self,
        *,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[User]:
        """Details of the user the client is authenticated as."""

        return await self._request("/rest/api/3/myself", "GET", query_params={"expand": expand}, opts=opts)

    async def get_locale(self, *, opts: Optional[RequestOptions] = None) -> JiraResult[Locale]:
        return await self._request("/rest/api/3/mypreferences/locale", "GET", opts=opts)

    async def get_preference(self, *, key: str, opts: Optional[RequestOptions] = None) -> JiraResult[str]:
        return await self._request("/rest/api/3/mypreferences", "GET", query_params={"key": key}, opts=opts)

    async def remove_preference(self, *, key: str, opts: Optional[RequestOptions] = None) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/mypreferences",
            "DELETE",
            query_params={"key": key},
            opts=opts,
            is_response_available=False,
        )

    async def set_locale(self, *, locale: Locale, opts: Optional[RequestOptions] = None) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/mypreferences/locale",
            "PUT",
            body=locale,
            opts=opts,
            is_response_available=False,
        )

    async def set_preference(
        self,
        *,
        key: str,
        value: Any,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Store ``value`` under ``key``; the value is sent as a JSON document."""

        return await self._request(
            "/rest/api/3/mypreferences",
            "PUT",
            query_params={"key": key},
            body=value,
            opts=opts,
            is_response_available=False,
        )


__all__ = ["MyselfService"]
