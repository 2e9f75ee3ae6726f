"""Security information: linked security workspaces and vulnerabilities."""
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..models.devops import (
    LinkedWorkspace,
    LinkedWorkspaces,
    SubmitVulnerabilitiesRequest,
    SubmitVulnerabilitiesResponse,
    SubmitWorkspacesRequest,
    VulnerabilityData,
)
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class SecurityInformationService(Service):
    """Operations under ``/rest/security/1.0``."""

    async def delete_linked_workspaces(
        self,
        *,
        authorization: str,
        workspace_ids: Optional[Sequence[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Unlink workspaces, e.g. ``DELETE /bulk?workspaceIds=111-222-333,444-555-666``."""

        return await self._request(
            "/rest/security/1.0/linkedWorkspaces/bulk",
            "DELETE",
            query_params={"workspaceIds": workspace_ids},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_vulnerabilities_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/security/1.0/bulkByProperties",
            "DELETE",
            query_params=with_properties({}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_vulnerability_by_id(
        self,
        *,
        vulnerability_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/security/1.0/vulnerability/{vulnerabilityId}",
            "DELETE",
            path_params={"vulnerabilityId": vulnerability_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_linked_workspace_by_id(
        self,
        *,
        workspace_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[LinkedWorkspace]:
        return await self._request(
            "/rest/security/1.0/linkedWorkspaces/{workspaceId}",
            "GET",
            path_params={"workspaceId": workspace_id},
            authorization=authorization,
            opts=opts,
        )

    async def get_linked_workspaces(
        self,
        *,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[LinkedWorkspaces]:
        return await self._request(
            "/rest/security/1.0/linkedWorkspaces",
            "GET",
            authorization=authorization,
            opts=opts,
        )

    async def get_vulnerability_by_id(
        self,
        *,
        vulnerability_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[VulnerabilityData]:
        return await self._request(
            "/rest/security/1.0/vulnerability/{vulnerabilityId}",
            "GET",
            path_params={"vulnerabilityId": vulnerability_id},
            authorization=authorization,
            opts=opts,
        )

    async def submit_vulnerabilities(
        self,
        *,
        authorization: str,
        request_body: SubmitVulnerabilitiesRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitVulnerabilitiesResponse]:
        return await self._request(
            "/rest/security/1.0/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )

    async def submit_workspaces(
        self,
        *,
        authorization: str,
        request_body: SubmitWorkspacesRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Link security workspaces to the Jira site.  Jira answers 202 with no body."""

        return await self._request(
            "/rest/security/1.0/linkedWorkspaces/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )


__all__ = ["SecurityInformationService"]
