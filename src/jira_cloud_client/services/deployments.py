"""Deployment information for Jira Software (``jiraDeploymentInfoProvider``)."""
from __future__ import annotations

from typing import Mapping, Optional

from ..models.devops import DeploymentData, DeploymentGatingStatus, SubmitDeploymentsRequest, SubmitDeploymentsResponse
from ..request import JiraResult, RequestOptions
from .base import Service, with_properties

_DEPLOYMENT_PATH = (
    "/rest/deployments/0.1/pipelines/{pipelineId}/environments/{environmentId}"
    "/deployments/{deploymentSequenceNumber}"
)


class DeploymentsService(Service):
    """Operations under ``/rest/deployments/0.1``."""

    async def delete_deployment_by_key(
        self,
        *,
        pipeline_id: str,
        environment_id: str,
        deployment_sequence_number: int,
        authorization: str,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete the stored deployment.  Asynchronous on the Jira side."""

        return await self._request(
            _DEPLOYMENT_PATH,
            "DELETE",
            path_params={
                "pipelineId": pipeline_id,
                "environmentId": environment_id,
                "deploymentSequenceNumber": deployment_sequence_number,
            },
            query_params={"_updateSequenceNumber": update_sequence_number},
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def delete_deployments_by_property(
        self,
        *,
        authorization: str,
        properties: Optional[Mapping[str, str]] = None,
        update_sequence_number: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        return await self._request(
            "/rest/deployments/0.1/bulkByProperties",
            "DELETE",
            query_params=with_properties({"_updateSequenceNumber": update_sequence_number}, properties),
            authorization=authorization,
            opts=opts,
            is_response_available=False,
        )

    async def get_deployment_by_key(
        self,
        *,
        pipeline_id: str,
        environment_id: str,
        deployment_sequence_number: int,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[DeploymentData]:
        return await self._request(
            _DEPLOYMENT_PATH,
            "GET",
            path_params={
                "pipelineId": pipeline_id,
                "environmentId": environment_id,
                "deploymentSequenceNumber": deployment_sequence_number,
            },
            authorization=authorization,
            opts=opts,
        )

    async def get_deployment_gating_status_by_key(
        self,
        *,
        pipeline_id: str,
        environment_id: str,
        deployment_sequence_number: int,
        authorization: str,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[DeploymentGatingStatus]:
        """Return whether Jira deployment gating allows the deployment to proceed."""

        return await self._request(
            _DEPLOYMENT_PATH + "/gating-status",
            "GET",
            path_params={
                "pipelineId": pipeline_id,
                "environmentId": environment_id,
                "deploymentSequenceNumber": deployment_sequence_number,
            },
            authorization=authorization,
            opts=opts,
        )

    async def submit_deployments(
        self,
        *,
        authorization: str,
        request_body: SubmitDeploymentsRequest,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SubmitDeploymentsResponse]:
        """Store or update deployments; per-item results come back in the body."""

        return await self._request(
            "/rest/deployments/0.1/bulk",
            "POST",
            body=request_body,
            authorization=authorization,
            opts=opts,
        )


__all__ = ["DeploymentsService"]
