"""DevOps components (``jiraDevOpsComponentProvider``)."""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import DevopsComponentData, SubmitComponentsRequest, SubmitComponentsResponse
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class DevopsComponentsService(Service):
    async def delete_component_by_id(
        self,
        *,
        component_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/devopscomponents/1.0/devopscomponents/{componentId}",
            "DELETE",
            path_params={"componentId": component_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_components_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """e.g. ``DELETE /bulkByProperties?accountId=account-123&createdBy=user-456``."""

        return await self._request(
            "/rest/devopscomponents/1.0/bulkByProperties",
            "DELETE",
            query_params=with_properties({}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_component_by_id(
        self,
        *,
        component_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[DevopsComponentData]:
        return await self._request(
            "/rest/devopscomponents/1.0/devopscomponents/{componentId}",
            "GET",
            path_params={"componentId": component_id},
            authorization=authorization,
            opts=opts,
        )

    async def submit_components(
        self,
        *,
        authorization: str,
        request_body: SubmitComponentsRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitComponentsResponse]:
        return await self._request(
            "/rest/devopscomponents/1.0/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["DevopsComponentsService"]
