"""JQL issue search, counting and matching."""
from __future__ import annotations

from typing import Optional, Sequence

from ..models.issues import (
    IssueMatches,
    IssuePickerSuggestions,
    IssuesAndJqlQueries,
    JqlCountRequest,
    JqlCountResults,
    SearchAndReconcileResults,
)
from ..params import compact
from ..request import JiraResult, RequestOptions
from .base import Service


class IssueSearchService(Service):
    """Search endpoints built on the enhanced ``/search/jql`` API.

    The search responses are token paginated: pass the ``nextPageToken`` of
    one page to fetch the next, or use
    :func:`jira_cloud_client.pagination.iter_token_pages`.
    """

    async def count_issues(
        self,
        *,
        jql_count_request: JqlCountRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[JqlCountResults]:
        """Approximate count of the issues a bounded JQL query matches."""

        return await self._request(
            "/rest/api/3/search/approximate-count",
            "POST",
            body=jql_count_request,
            opts=opts,
        )

    async def get_issue_picker_resource(
        self,
        *,
        query: Optional[str] = None,
        current_jql: Optional[str] = None,
        current_issue_key: Optional[str] = None,
        current_project_id: Optional[str] = None,
        show_sub_tasks: Optional[bool] = None,
        show_sub_task_parent: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssuePickerSuggestions]:
        return await self._request(
            "/rest/api/3/issue/picker",
            "GET",
            query_params={
                "query": query,
                "currentJQL": current_jql,
                "currentIssueKey": current_issue_key,
                "currentProjectId": current_project_id,
                "showSubTasks": show_sub_tasks,
                "showSubTaskParent": show_sub_task_parent,
            },
            opts=opts,
        )

    async def match_issues(
        self,
        *,
        issues_and_jql_queries: IssuesAndJqlQueries,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueMatches]:
        """Check which of the given issue ids each JQL query matches."""

        return await self._request(
            "/rest/api/3/jql/match",
            "POST",
            body=issues_and_jql_queries,
            opts=opts,
        )

    async def search_and_reconcile_issues_using_jql(
        self,
        *,
        jql: Optional[str] = None,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        fields: Optional[Sequence[str]] = None,
        expand: Optional[str] = None,
        properties: Optional[Sequence[str]] = None,
        fields_by_keys: Optional[bool] = None,
        fail_fast: Optional[bool] = None,
        reconcile_issues: Optional[Sequence[int]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SearchAndReconcileResults]:
        return await self._request(
            "/rest/api/3/search/jql",
            "GET",
            query_params={
                "jql": jql,
                "nextPageToken": next_page_token,
                "maxResults": max_results,
                "fields": fields,
                "expand": expand,
                "properties": properties,
                "fieldsByKeys": fields_by_keys,
                "failFast": fail_fast,
                "reconcileIssues": reconcile_issues,
            },
            opts=opts,
        )

    async def search_and_reconcile_issues_using_jql_post(
        self,
        *,
        jql: Optional[str] = None,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        fields: Optional[Sequence[str]] = None,
        expand: Optional[str] = None,
        properties: Optional[Sequence[str]] = None,
        fields_by_keys: Optional[bool] = None,
        reconcile_issues: Optional[Sequence[int]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SearchAndReconcileResults]:
        """Same search as the GET variant, with the parameters in a JSON body.

        Use it when the JQL or field list is too long for a query string.
        Unset parameters are left out of the body.
        """

        body = compact(
            {
                "jql": jql,
                "nextPageToken": next_page_token,
                "maxResults": max_results,
                "fields": list(fields) if fields is not None else None,
                "expand": expand,
                "properties": list(properties) if properties is not None else None,
                "fieldsByKeys": fields_by_keys,
                "reconcileIssues": list(reconcile_issues) if reconcile_issues is not None else None,
            }
        )
        return await self._request("/rest/api/3/search/jql", "POST", body=body, opts=opts)


__all__ = ["IssueSearchService"]
