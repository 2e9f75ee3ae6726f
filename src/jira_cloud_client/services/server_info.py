"""Server information."""
from __future__ import annotations

from typing import Optional

from ..models.permissions import ServerInformation
from ..request import JiraResult, RequestOptions
from .base import Service


class ServerInfoService(Service):
    async def get_server_info(self, *, opts: Optional[RequestOptions] = None) -> JiraResult[ServerInformation]:
        """Version, build and base URL of the Jira site.  Works without authentication."""

        return await self._request("/rest/api/3/serverInfo", "GET", opts=opts)


__all__ = ["ServerInfoService"]
