"""Workflows: bulk read, search, create, update, validation and usages."""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.workflows import (
    DefaultEditor,
    WorkflowCapabilities,
    WorkflowCreateRequest,
    WorkflowCreateResponse,
    WorkflowCreateValidateRequest,
    WorkflowProjectIssueTypeUsages,
    WorkflowProjectUsages,
    WorkflowReadRequest,
    WorkflowReadResponse,
    WorkflowSchemeUsages,
    WorkflowSearchResponse,
    WorkflowUpdateRequest,
    WorkflowUpdateResponse,
    WorkflowUpdateValidateRequest,
    WorkflowValidationErrorList,
)
from ..request import JiraResult, RequestOptions
from .base import Service


class WorkflowsService(Service):
    """Operations on the ``/rest/api/3/workflows`` family of endpoints.

    Create and update calls take the full workflow documents; validate them
    first with :meth:`validate_create_workflows` or
    :meth:`validate_update_workflows`, which report problems without saving.
    """

    async def create_workflows(
        self,
        *,
        workflow_create_request: WorkflowCreateRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowCreateResponse]:
        return await self._request(
            "/rest/api/3/workflows/create",
            "POST",
            body=workflow_create_request,
            opts=opts,
        )

    async def delete_inactive_workflow(
        self,
        *,
        entity_id: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Any]:
        """Delete a workflow that no scheme uses."""

        return await self._request(
            "/rest/api/3/workflow/{entityId}",
            "DELETE",
            path_params={"entityId": entity_id},
            opts=opts,
        )

    async def get_default_editor(self, *, opts: Optional[RequestOptions] = None) -> JiraResult[DefaultEditor]:
        return await self._request("/rest/api/3/workflows/defaultEditor", "GET", opts=opts)

    async def get_project_usages_for_workflow(
        self,
        *,
        workflow_id: str,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowProjectUsages]:
        return await self._request(
            "/rest/api/3/workflow/{workflowId}/projectUsages",
            "GET",
            path_params={"workflowId": workflow_id},
            query_params={"nextPageToken": next_page_token, "maxResults": max_results},
            opts=opts,
        )

    async def get_workflow_project_issue_type_usages(
        self,
        *,
        workflow_id: str,
        project_id: int,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowProjectIssueTypeUsages]:
        return await self._request(
            "/rest/api/3/workflow/{workflowId}/project/{projectId}/issueTypeUsages",
            "GET",
            path_params={"workflowId": workflow_id, "projectId": project_id},
            query_params={"nextPageToken": next_page_token, "maxResults": max_results},
            opts=opts,
        )

    async def get_workflow_scheme_usages_for_workflow(
        self,
        *,
        workflow_id: str,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowSchemeUsages]:
        return await self._request(
            "/rest/api/3/workflow/{workflowId}/workflowSchemes",
            "GET",
            path_params={"workflowId": workflow_id},
            query_params={"nextPageToken": next_page_token, "maxResults": max_results},
            opts=opts,
        )

    async def read_workflows(
        self,
        *,
        workflow_read_request: WorkflowReadRequest,
        expand: Optional[str] = None,
        use_approval_configuration: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowReadResponse]:
        """Fetch workflows by id, name or project and issue type pairs."""

        return await self._request(
            "/rest/api/3/workflows",
            "POST",
            query_params={"expand": expand, "useApprovalConfiguration": use_approval_configuration},
            body=workflow_read_request,
            opts=opts,
        )

    async def search_workflows(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        expand: Optional[str] = None,
        query_string: Optional[str] = None,
        order_by: Optional[str] = None,
        scope: Optional[str] = None,
        is_active: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowSearchResponse]:
        return await self._request(
            "/rest/api/3/workflows/search",
            "GET",
            query_params={
                "startAt": start_at,
                "maxResults": max_results,
                "expand": expand,
                "queryString": query_string,
                "orderBy": order_by,
                "scope": scope,
                "isActive": is_active,
            },
            opts=opts,
        )

    async def update_workflows(
        self,
        *,
        workflow_update_request: WorkflowUpdateRequest,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowUpdateResponse]:
        return await self._request(
            "/rest/api/3/workflows/update",
            "POST",
            query_params={"expand": expand},
            body=workflow_update_request,
            opts=opts,
        )

    async def validate_create_workflows(
        self,
        *,
        workflow_create_validate_request: WorkflowCreateValidateRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowValidationErrorList]:
        return await self._request(
            "/rest/api/3/workflows/create/validation",
            "POST",
            body=workflow_create_validate_request,
            opts=opts,
        )

    async def validate_update_workflows(
        self,
        *,
        workflow_update_validate_request: WorkflowUpdateValidateRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowValidationErrorList]:
        return await self._request(
            "/rest/api/3/workflows/update/validation",
            "POST",
            body=workflow_update_validate_request,
            opts=opts,
        )

    async def workflow_capabilities(
        self,
        *,
        workflow_id: Optional[str] = None,
        project_id: Optional[str] = None,
        issue_type_id: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[WorkflowCapabilities]:
        """Rules and editor scope available for a workflow, project or issue type."""

        query: Dict[str, Any] = {
            "workflowId": workflow_id,
            "projectId": project_id,
            "issueTypeId": issue_type_id,
        }
        return await self._request("/rest/api/3/workflows/capabilities", "GET", query_params=query, opts=opts)


__all__ = ["WorkflowsService"]
