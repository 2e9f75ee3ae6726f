"""Operations information: incidents, post-incident reviews and their workspaces."""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..models.devops import (
    IncidentData,
    OperationsWorkspaceIds,
    ReviewData,
    SubmitOperationsEntityRequest,
    SubmitOperationsEntityResponse,
)
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class OperationsService(Service):
    """Operations under ``/rest/operations/1.0``."""

    async def delete_entity_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/operations/1.0/bulkByProperties",
            "DELETE",
            query_params=with_properties({}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_incident_by_id(
        self,
        *,
        incident_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/operations/1.0/incidents/{incidentId}",
            "DELETE",
            path_params={"incidentId": incident_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_review_by_id(
        self,
        *,
        review_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/operations/1.0/post-incident-reviews/{reviewId}",
            "DELETE",
            path_params={"reviewId": review_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_workspaces(
        self,
        *,
        authorization: str,
        workspace_ids: Optional[Sequence[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/operations/1.0/linkedWorkspaces/bulk",
            "DELETE",
            query_params={"workspaceIds": workspace_ids},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_incident_by_id(
        self,
        *,
        incident_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IncidentData]:
        return await self._request(
            "/rest/operations/1.0/incidents/{incidentId}",
            "GET",
            path_params={"incidentId": incident_id},
            authorization=authorization,
            opts=opts,
        )

    async def get_review_by_id(
        self,
        *,
        review_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ReviewData]:
        return await self._request(
            "/rest/operations/1.0/post-incident-reviews/{reviewId}",
            "GET",
            path_params={"reviewId": review_id},
            authorization=authorization,
            opts=opts,
        )

    async def get_workspaces(
        self,
        *,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[OperationsWorkspaceIds]:
        return await self._request(
            "/rest/operations/1.0/linkedWorkspaces",
            "GET",
            authorization=authorization,
            opts=opts,
        )

    async def submit_entity(
        self,
        *,
        authorization: str,
        request_body: SubmitOperationsEntityRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitOperationsEntityResponse]:
        """Store incidents and reviews; per-item results are in the body."""

        return await self._request(
            "/rest/operations/1.0/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )

    async def submit_operations_workspaces(
        self,
        *,
        authorization: str,
        request_body: OperationsWorkspaceIds,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[OperationsWorkspaceIds]:
        return await self._request(
            "/rest/operations/1.0/linkedWorkspaces/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["OperationsService"]
