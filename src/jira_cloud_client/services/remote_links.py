"""Remote link information (``jiraRemoteLinkInfoProvider``)."""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import RemoteLinkData, SubmitRemoteLinksRequest, SubmitRemoteLinksResponse
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class RemoteLinksService(Service):
    async def delete_remote_link_by_id(
        self,
        *,
        remote_link_id: str,
        authorization: str,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/remotelinks/1.0/remotelink/{remoteLinkId}",
            "DELETE",
            path_params={"remoteLinkId": remote_link_id},
            query_params={"_updateSequenceNumber": update_sequence_number},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_remote_links_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete remote links tagged with ALL of ``properties``.

        e.g. ``DELETE /bulkByProperties?accountId=account-123``.
        """

        return await self._request(
            "/rest/remotelinks/1.0/bulkByProperties",
            "DELETE",
            query_params=with_properties({"_updateSequenceNumber": update_sequence_number}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_remote_link_by_id(
        self,
        *,
        remote_link_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[RemoteLinkData]:
        return await self._request(
            "/rest/remotelinks/1.0/remotelink/{remoteLinkId}",
            "GET",
            path_params={"remoteLinkId": remote_link_id},
            authorization=authorization,
            opts=opts,
        )

    async def submit_remote_links(
        self,
        *,
        authorization: str,
        request_body: SubmitRemoteLinksRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitRemoteLinksResponse]:
        return await self._request(
            "/rest/remotelinks/1.0/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["RemoteLinksService"]
