"""Permission checks."""
from __future__ import annotations

from typing import Optional, Sequence

from ..models.permissions import (
    BulkPermissionGrants,
    BulkPermissionsRequest,
    Permissions,
    PermissionsKeys,
    PermittedProjects,
)
from ..request import JiraResult, RequestOptions
from .base import Service


class PermissionsService(Service):
    async def get_all_permissions(self, *, opts: Optional[RequestOptions] = None) -> JiraResult[Permissions]:
        return await self._request("/rest/api/3/permissions", "GET", opts=opts)

    async def get_bulk_permissions(
        self,
        *,
        bulk_permissions_request: BulkPermissionsRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[BulkPermissionGrants]:
        """Check global and project permissions of a user in one call.

        Without ``accountId`` the permissions of the calling user are checked.
        """

        return await self._request(
            "/rest/api/3/permissions/check",
            "POST",
            body=bulk_permissions_request,
            opts=opts,
        )

    async def get_my_permissions(
        self,
        *,
        project_key: Optional[str] = None,
        project_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        issue_id: Optional[str] = None,
        permissions: Optional[Sequence[str]] = None,
        project_uuid: Optional[str] = None,
        project_configuration_uuid: Optional[str] = None,
        comment_id: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Permissions]:
        return await self._request(
            "/rest/api/3/mypermissions",
            "GET",
            query_params={
                "projectKey": project_key,
                "projectId": project_id,
                "issueKey": issue_key,
                "issueId": issue_id,
                "permissions": permissions,
                "projectUuid": project_uuid,
                "projectConfigurationUuid": project_configuration_uuid,
                "commentId": comment_id,
            },
            opts=opts,
        )

    async def get_permitted_projects(
        self,
        *,
        permissions_keys: PermissionsKeys,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PermittedProjects]:
        return await self._request(
            "/rest/api/3/permissions/project",
            "POST",
            body=permissions_keys,
            opts=opts,
        )


__all__ = ["PermissionsService"]
