"""Issue labels."""
from __future__ import annotations

from typing import Optional

from ..models.common import PagedCollection
from ..request import JiraResult, RequestOptions
from .base import Service


class LabelsService(Service):
    async def get_all_labels(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PagedCollection[str]]:
        return await self._request(
            "/rest/api/3/label",
            "GET",
            query_params={"startAt": start_at, "maxResults": max_results},
            opts=opts,
        )


__all__ = ["LabelsService"]
