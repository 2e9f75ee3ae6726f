"""Build information for Jira Software.

Available to Connect apps declaring the ``jiraBuildInfoProvider`` module, to
on-premises integrations using OAuth 2.0 credentials, and to Forge apps with
the ``devops:buildInfoProvider`` module.  Every operation must be signed with
a Connect JWT or OAuth token passed as ``authorization``; tokens from apps
without the module are rejected with a 403.
"""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import BuildData, SubmitBuildsRequest, SubmitBuildsResponse
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class BuildsService(Service):
    """Operations under ``/rest/builds/0.1``."""

    async def delete_build_by_key(
        self,
        *,
        pipeline_id: str,
        build_number: int,
        authorization: str,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete the build stored for ``pipeline_id`` and ``build_number``.

        Deletion is asynchronous; use :meth:`get_build_by_key` to confirm it.
        ``update_sequence_number`` is no longer honoured by Jira but is still
        sent as ``_updateSequenceNumber`` when given.
        """

        return await self._request(
            "/rest/builds/0.1/pipelines/{pipelineId}/builds/{buildNumber}",
            "DELETE",
            path_params={"pipelineId": pipeline_id, "buildNumber": build_number},
            query_params={"_updateSequenceNumber": update_sequence_number},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_builds_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Bulk delete every build whose properties match ALL of ``properties``.

        e.g. ``properties={"accountId": "account-123", "repoId": "repo-345"}``
        becomes ``DELETE /bulkByProperties?accountId=account-123&repoId=repo-345``.
        Deletion is asynchronous.
        """

        return await self._request(
            "/rest/builds/0.1/bulkByProperties",
            "DELETE",
            query_params=with_properties({"_updateSequenceNumber": update_sequence_number}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_build_by_key(
        self,
        *,
        pipeline_id: str,
        build_number: int,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[BuildData]:
        """Return the stored build, ignoring pending updates or deletes."""

        return await self._request(
            "/rest/builds/0.1/pipelines/{pipelineId}/builds/{buildNumber}",
            "GET",
            path_params={"pipelineId": pipeline_id, "buildNumber": build_number},
            authorization=authorization,
            opts=opts,
        )

    async def submit_builds(
        self,
        *,
        authorization: str,
        request_body: SubmitBuildsRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitBuildsResponse]:
        """Store or update build data.

        Builds are keyed by ``pipelineId`` + ``buildNumber`` and only
        overwritten when the submitted ``updateSequenceNumber`` is higher than
        the stored one.  Each build is validated on its own: the response lists
        accepted and rejected builds plus unknown issue keys and associations.
        A 2xx answer therefore does not mean every build was stored.
        """

        return await self._request(
            "/rest/builds/0.1/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["BuildsService"]
