"""Feature flag information (``jiraFeatureFlagInfoProvider``)."""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import FeatureFlagData, SubmitFeatureFlagsRequest, SubmitFeatureFlagsResponse
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class FeatureFlagsService(Service):
    async def delete_feature_flag_by_id(
        self,
        *,
        feature_flag_id: str,
        authorization: str,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/featureflags/0.1/flag/{featureFlagId}",
            "DELETE",
            path_params={"featureFlagId": feature_flag_id},
            query_params={"_updateSequenceId": update_sequence_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_feature_flags_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/featureflags/0.1/bulkByProperties",
            "DELETE",
            query_params=with_properties({"_updateSequenceId": update_sequence_id}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_feature_flag_by_id(
        self,
        *,
        feature_flag_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[FeatureFlagData]:
        return await self._request(
            "/rest/featureflags/0.1/flag/{featureFlagId}",
            "GET",
            path_params={"featureFlagId": feature_flag_id},
            authorization=authorization,
            opts=opts,
        )

    async def submit_feature_flags(
        self,
        *,
        authorization: str,
        request_body: SubmitFeatureFlagsRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitFeatureFlagsResponse]:
        return await self._request(
            "/rest/featureflags/0.1/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["FeatureFlagsService"]
