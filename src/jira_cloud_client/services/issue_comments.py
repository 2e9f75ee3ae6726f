"""Issue comments."""
from __future__ import annotations

from typing import Optional

from ..models.common import PagedCollection
from ..models.issues import Comment, IssueCommentListRequest, PageOfComments
from ..request import JiraResult, RequestOptions
from .base import Service


class IssueCommentsService(Service):
    async def add_comment(
        self,
        *,
        issue_id_or_key: str,
        comment: Comment,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Comment]:
        """Add a comment.  ``comment["body"]`` is an Atlassian Document Format document."""

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/comment",
            "POST",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={"expand": expand},
            body=comment,
            opts=opts,
        )

    async def delete_comment(
        self,
        *,
        issue_id_or_key: str,
        comment_id: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/comment/{id}",
            "DELETE",
            path_params={"issueIdOrKey": issue_id_or_key, "id": comment_id},
            opts=opts,
            is_response_available=False,
        )

    async def get_comment(
        self,
        *,
        issue_id_or_key: str,
        comment_id: str,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Comment]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/comment/{id}",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key, "id": comment_id},
            query_params={"expand": expand},
            opts=opts,
        )

    async def get_comments(
        self,
        *,
        issue_id_or_key: str,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        order_by: Optional[str] = None,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PageOfComments]:
        """List comments oldest first; ``order_by="-created"`` reverses it."""

        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/comment",
            "GET",
            path_params={"issueIdOrKey": issue_id_or_key},
            query_params={
                "startAt": start_at,
                "maxResults": max_results,
                "orderBy": order_by,
                "expand": expand,
            },
            opts=opts,
        )

    async def get_comments_by_ids(
        self,
        *,
        issue_comment_list_request: IssueCommentListRequest,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[PagedCollection[Comment]]:
        return await self._request(
            "/rest/api/3/comment/list",
            "POST",
            query_params={"expand": expand},
            body=issue_comment_list_request,
            opts=opts,
        )

    async def update_comment(
        self,
        *,
        issue_id_or_key: str,
        comment_id: str,
        comment: Comment,
        notify_users: Optional[bool] = None,
        override_editable_flag: Optional[bool] = None,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Comment]:
        return await self._request(
            "/rest/api/3/issue/{issueIdOrKey}/comment/{id}",
            "PUT",
            path_params={"issueIdOrKey": issue_id_or_key, "id": comment_id},
            query_params={
                "notifyUsers": notify_users,
                "overrideEditableFlag": override_editable_flag,
                "expand": expand,
            },
            body=comment,
            opts=opts,
        )


__all__ = ["IssueCommentsService"]
