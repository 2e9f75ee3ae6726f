"""Issue operations of the platform REST API (``/rest/api/3/issue``)."""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..models.common import PagedCollection, User
from ..models.issues import (
    ArchivedIssuesFilterRequest,
    ArchiveIssueAsyncRequest,
    BulkChangelogRequest,
    BulkChangelogResponse,
    BulkFetchIssueRequest,
    BulkIssueResults,
    Changelog,
    CreatedIssue,
    CreatedIssues,
    ExportArchivedIssuesTaskProgress,
    FieldCreateMetadata,
    IssueArchivalSyncRequest,
    IssueArchivalSyncResponse,
    IssueBean,
    IssueChangelogIds,
    IssueEditMetadata,
    IssueEvent,
    IssueLimitReport,
    IssuesUpdateBean,
    IssueTypeIssueCreateMetadata,
    IssueUpdateDetails,
    Notification,
    PageOfChangelogs,
    Transitions,
)
from ..request import JiraResult, RequestOptions
from .base import Service


class IssuesService(Service):
    """Create, read, edit, transition, archive and delete issues."""

    async def archive_issues(
        self,
        *,
        issue_archival_sync_request: IssueArchivalSyncRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueArchivalSyncResponse]:
        """Archive up to 1000 issues by id or key in one synchronous call."""

        return await self._request(
            "/rest/api/3/issue/archive",
            "PUT",
            body=issue_archival_sync_request,
            opts=opts,
        )

    async def archive_issues_async(
        self,
        *,
        archive_issue_async_request: ArchiveIssueAsyncRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[str]:
        """Archive the issues matched by a JQL query.  Returns the task URL."""

        return await self._request(
            "/rest/api/3/issue/archive",
            "POST",
            body=archive_issue_async_request,
            opts=opts,
        )

    async def assign_issue(
        self,
        *,
        issue_id_or_key: str,
        user: User,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Assign an issue; ``{"accountId": None}`` unassigns, ``"-1"`` picks the default assignee."""

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/assignee",
            "PUT",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=user,
            opts=opts,
            is_response_available=False,
        )

    async def bulk_fetch_issues(
        self,
        *,
        bulk_fetch_issue_request: BulkFetchIssueRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[BulkIssueResults]:
        return await self._request(
            "/rest/api/3/issue/bulkfetch",
            "POST",
            body=bulk_fetch_issue_request,
            opts=opts,
        )

    async def create_issue(
        self,
        *,
        issue_create_details: IssueUpdateDetails,
        update_history: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[CreatedIssue]:
        return await self._request(
            "/rest/api/3/issue",
            "POST",
            query_params={"updateHistory": update_history},
            body=issue_create_details,
            opts=opts,
        )

    async def create_issues(
        self,
        *,
        issues_update_bean: IssuesUpdateBean,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[CreatedIssues]:
        """Create up to 50 issues.  Per-issue failures are listed under ``errors``."""

        return await self._request(
            "/rest/api/3/issue/bulk",
            "POST",
            body=issues_update_bean,
            opts=opts,
        )

    async def delete_issue(
        self,
        *,
        issue_id_or_key: str,
        delete_subtasks: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}",
            "DELETE",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={"deleteSubtasks": delete_subtasks},
            opts=opts,
            is_response_available=False,
        )

    async def do_transition(
        self,
        *,
        issue_id_or_key: str,
        issue_update_details: IssueUpdateDetails,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Perform the transition named in ``issue_update_details["transition"]``."""

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/transitions",
            "POST",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=issue_update_details,
            opts=opts,
            is_response_available=False,
        )

    async def edit_issue(
        self,
        *,
        issue_id_or_key: str,
        issue_update_details: IssueUpdateDetails,
        notify_users: Optional[bool] = None,
        override_screen_security: Optional[bool] = None,
        override_editable_flag: Optional[bool] = None,
        return_issue: Optional[bool] = None,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueBean]:
        """Edit fields of an issue.

        Jira answers ``204`` with no body unless ``return_issue`` is true, in
        which case the edited issue is returned.
        """

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}",
            "PUT",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "notifyUsers": notify_users,
                "overrideScreenSecurity": override_screen_security,
                "overrideEditableFlag": override_editable_flag,
                "returnIssue": return_issue,
                "expand": expand,
            },
            body=issue_update_details,
            opts=opts,
        )

    async def export_archived_issues(
        self,
        *,
        archived_issues_filter_request: ArchivedIssuesFilterRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ExportArchivedIssuesTaskProgress]:
        return await self._request(
            "/rest/api/3/issues/archive/export",
            "PUT",
            body=archived_issues_filter_request,
            opts=opts,
        )

    async def get_bulk_changelogs(
        self,
        *,
        bulk_changelog_request: BulkChangelogRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[BulkChangelogResponse]:
        return await self._request(
            "/rest/api/3/changelog/bulkfetch",
            "POST",
            body=bulk_changelog_request,
            opts=opts,
        )

    async def get_change_logs(
        self,
        *,
        issue_id_or_key: str,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PagedCollection[Changelog]]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/changelog",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={"startAt": start_at, "maxResults": max_results},
            opts=opts,
        )

    async def get_change_logs_by_ids(
        self,
        *,
        issue_id_or_key: str,
        issue_changelog_ids: IssueChangelogIds,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PageOfChangelogs]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/changelog/list",
            "POST",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=issue_changelog_ids,
            opts=opts,
        )

    async def get_create_issue_meta_issue_type_id(
        self,
        *,
        project_id_or_key: str,
        issue_type_id: str,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PagedCollection[FieldCreateMetadata]]:
        return await self._request(
            "/rest/api/3/issue/createmeta/{projectIdOrKey}/issuetypes/{issueTypeId}",
            "GET",
            path_params={"projectIdOrKey": project_id_or_key, "issueTypeId": issue_type_id},
            query_params={"startAt": start_at, "maxResults": max_results},
            opts=opts,
        )

    async def get_create_issue_meta_issue_types(
        self,
        *,
        project_id_or_key: str,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PagedCollection[IssueTypeIssueCreateMetadata]]:
        return await self._request(
            "/rest/api/3/issue/createmeta/{projectIdOrKey}/issuetypes",
            "GET",
            path_params={"projectIdOrKey": project_id_or_key},
            query_params={"startAt": start_at, "maxResults": max_results},
            opts=opts,
        )

    async def get_edit_issue_meta(
        self,
        *,
        issue_id_or_key: str,
        override_screen_security: Optional[bool] = None,
        override_editable_flag: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueEditMetadata]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/editmeta",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "overrideScreenSecurity": override_screen_security,
                "overrideEditableFlag": override_editable_flag,
            },
            opts=opts,
        )

    async def get_events(self, *, opts: Optional[RequestOptions] = None) -> JiraResult[List[IssueEvent]]:
        return await self._request("/rest/api/3/events", "GET", opts=opts)

    async def get_issue(
        self,
        *,
        issue_id_or_key: str,
        fields: Optional[Sequence[str]] = None,
        fields_by_keys: Optional[bool] = None,
        expand: Optional[str] = None,
        properties: Optional[Sequence[str]] = None,
        update_history: Optional[bool] = None,
        fail_fast: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueBean]:
        """Return the details of an issue.

        ``fields`` and ``properties`` are sent comma separated, e.g.
        ``fields=["summary", "-comment"]`` becomes ``fields=summary,-comment``.
        """

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "fields": fields,
                "fieldsByKeys": fields_by_keys,
                "expand": expand,
                "properties": properties,
                "updateHistory": update_history,
                "failFast": fail_fast,
            },
            opts=opts,
        )

    async def get_issue_limit_report(
        self,
        *,
        is_returning_keys: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueLimitReport]:
        return await self._request(
            "/rest/api/3/issue/limit/report",
            "GET",
            query_params={"isReturningKeys": is_returning_keys},
            opts=opts,
        )

    async def get_transitions(
        self,
        *,
        issue_id_or_key: str,
        expand: Optional[str] = None,
        transition_id: Optional[str] = None,
        skip_remote_only_condition: Optional[bool] = None,
        include_unavailable_transitions: Optional[bool] = None,
        sort_by_ops_bar_and_status: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Transitions]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/transitions",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "expand": expand,
                "transitionId": transition_id,
                "skipRemoteOnlyCondition": skip_remote_only_condition,
                "includeUnavailableTransitions": include_unavailable_transitions,
                "sortByOpsBarAndStatus": sort_by_ops_bar_and_status,
            },
            opts=opts,
        )

    async def notify(
        self,
        *,
        issue_id_or_key: str,
        notification: Notification,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Queue an e-mail notification about an issue."""

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/notify",
            "POST",
            path_params={"issueIdOrKey": issue_id_or_key},
            body=notification,
            opts=opts,
        )

    async def unarchive_issues(
        self,
        *,
        issue_archival_sync_request: IssueArchivalSyncRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueArchivalSyncResponse]:
        return await self._request(
            "/rest/api/3/issue/unarchive",
            "PUT",
            body=issue_archival_sync_request,
            opts=opts,
        )


__all__ = ["IssuesService"]
