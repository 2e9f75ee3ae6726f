"""Development information: repositories with their commits, branches and pull requests.

Used by Connect apps with the ``jiraDevelopmentTool`` module, on-premises
OAuth integrations and Forge apps with ``devops:developmentInfoProvider``.
Entities carry an ``updateSequenceId``; Jira ignores writes whose id is not
higher than the stored one.
"""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import (
    DevinfoEntityType,
    ExistsByPropertiesResponse,
    Repository,
    StoreDevelopmentInformationRequest,
    StoreDevelopmentInformationResponse,
)
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties


class DevelopmentInformationService(Service):
    """Operations under ``/rest/devinfo/0.10``."""

    async def delete_by_properties(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete repositories (and their entities) matching ALL ``properties``.

        ``DELETE bulkByProperties?accountId=123&projectId=ABC`` removes every
        repository tagged with both properties.  Deletion is asynchronous.
        """

        return await self._request(
            "/rest/devinfo/0.10/bulkByProperties",
            "DELETE",
            query_params=with_properties({"_updateSequenceId": update_sequence_id}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_entity(
        self,
        *,
        repository_id: str,
        entity_type: DevinfoEntityType,
        entity_id: str,
        authorization: str,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete a single commit, branch or pull request of a repository."""

        return await self._request(
            "/rest/devinfo/0.10/repository/{repositoryId}/{entityType}/{entityId}",
            "DELETE",
            path_params={"repositoryId": repository_id, "entityType": entity_type, "entityId": entity_id},
            query_params={"_updateSequenceId": update_sequence_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_repository(
        self,
        *,
        repository_id: str,
        authorization: str,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete a repository and everything stored under it."""

        return await self._request(
            "/rest/devinfo/0.10/repository/{repositoryId}",
            "DELETE",
            path_params={"repositoryId": repository_id},
            query_params={"_updateSequenceId": update_sequence_id},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def exists_by_properties(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ExistsByPropertiesResponse]:
        """Check whether any data matching ALL ``properties`` is stored."""

        return await self._request(
            "/rest/devinfo/0.10/existsByProperties",
            "GET",
            query_params=with_properties({"_updateSequenceId": update_sequence_id}, properties),
            authorization=authorization,
            opts=opts,
        )

    async def get_repository(
        self,
        *,
        repository_id: str,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Repository]:
        return await self._request(
            "/rest/devinfo/0.10/repository/{repositoryId}",
            "GET",
            path_params={"repositoryId": repository_id},
            authorization=authorization,
            opts=opts,
        )

    async def store_development_information(
        self,
        *,
        authorization: str,
        request_body: StoreDevelopmentInformationRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[StoreDevelopmentInformationResponse]:
        """Store repositories, commits, branches and pull requests.

        Accepted and failed entities are reported per repository in the
        response body alongside unknown issue keys and associations.
        """

        return await self._request(
            "/rest/devinfo/0.10/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["DevelopmentInformationService"]
