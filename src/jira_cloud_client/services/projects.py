"""Projects: lifecycle, search and per-project metadata."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..models.common import TaskProgress
from ..models.projects import (
    CreateProjectDetails,
    IssueTypeWithStatus,
    NotificationScheme,
    PageOfProjects,
    Project,
    ProjectIdentifiers,
    ProjectIssueTypeHierarchy,
    UpdateProjectDetails,
)
from ..request import JiraResult, RequestOptions
from .base import Service


class ProjectsService(Service):
    """Project endpoints.

    Deleting a project moves it to the recycle bin by default; it can be
    brought back with :meth:`restore` until it is purged.  Archived projects
    are restored the same way.
    """

    async def archive_project(
        self,
        *,
        project_id_or_key: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}/archive",
            "POST",
            path_params={"projectIdOrKey": project_id_or_key},
            opts=opts,
            is_response_available=False,
        )

    async def create_project(
        self,
        *,
        create_project_details: CreateProjectDetails,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ProjectIdentifiers]:
        return await self._request(
            "/rest/api/3/project",
            "POST",
            body=create_project_details,
            opts=opts,
        )

    async def delete_project(
        self,
        *,
        project_id_or_key: str,
        enable_undo: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete a project.  ``enable_undo=False`` skips the recycle bin."""

        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}",
            "DELETE",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"enableUndo": enable_undo},
            opts=opts,
            is_response_available=False,
        )

    async def delete_project_asynchronously(
        self,
        *,
        project_id_or_key: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[TaskProgress]:
        """Start a background delete; poll the returned task for progress."""

        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}/delete",
            "POST",
            path_params={"projectIdOrKey": project_id_or_key},
            opts=opts,
        )

    async def get_all_statuses(
        self,
        *,
        project_id_or_key: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[List[IssueTypeWithStatus]]:
        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}/statuses",
            "GET",
            path_params={"projectIdOrKey": project_id_or_key},
            opts=opts,
        )

    async def get_hierarchy(
        self,
        *,
        project_id: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ProjectIssueTypeHierarchy]:
        return await self._request(
            "/rest/api/3/project/{projectId}/hierarchy",
            "GET",
            path_params={"projectId": project_id},
            opts=opts,
        )

    async def get_notification_scheme_for_project(
        self,
        *,
        project_key_or_id: str,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[NotificationScheme]:
        return await self._request(
            "/rest/api/3/project/{projectKeyOrId}/notificationscheme",
            "GET",
            path_params={"projectKeyOrId": project_key_or_id},
            query_params={"expand": expand},
            opts=opts,
        )

    async def get_project(
        self,
        *,
        project_id_or_key: str,
        expand: Optional[str] = None,
        properties: Optional[Sequence[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Project]:
        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}",
            "GET",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"expand": expand, "properties": properties},
            opts=opts,
        )

    async def get_recent(
        self,
        *,
        expand: Optional[str] = None,
        properties: Optional[Sequence[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[List[Project]]:
        """Up to 20 projects the user viewed most recently."""

        return await self._request(
            "/rest/api/3/project/recent",
            "GET",
            query_params={"expand": expand, "properties": properties},
            opts=opts,
        )

    async def restore(
        self,
        *,
        project_id_or_key: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Project]:
        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}/restore",
            "POST",
            path_params={"projectIdOrKey": project_id_or_key},
            opts=opts,
        )

    async def search_projects(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        order_by: Optional[str] = None,
        ids: Optional[Sequence[int]] = None,
        keys: Optional[Sequence[str]] = None,
        query: Optional[str] = None,
        type_key: Optional[str] = None,
        category_id: Optional[int] = None,
        action: Optional[str] = None,
        expand: Optional[str] = None,
        status: Optional[Sequence[str]] = None,
        properties: Optional[Sequence[str]] = None,
        property_query: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PageOfProjects]:
        """Page through the projects visible to the user.

        ``ids``, ``keys`` and ``status`` filter on several values at once and
        are sent comma separated.
        """

        return await self._request(
            "/rest/api/3/project/search",
            "GET",
            query_params={
                "startAt": start_at,
                "maxResults": max_results,
                "orderBy": order_by,
                "id": ids,
                "keys": keys,
                "query": query,
                "typeKey": type_key,
                "categoryId": category_id,
                "action": action,
                "expand": expand,
                "status": status,
                "properties": properties,
                "propertyQuery": property_query,
            },
            opts=opts,
        )

    async def update_project(
        self,
        *,
        project_id_or_key: str,
        update_project_details: UpdateProjectDetails,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Project]:
        return await self._request(
            "/rest/api/3/project/{projectIdOrKey}",
            "PUT",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"expand": expand},
            body=update_project_details,
            opts=opts,
        )


__all__ = ["ProjectsService"]
