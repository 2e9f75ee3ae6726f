"""High level entry point bundling every service for one Jira configuration."""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import DefaultJiraConfig, JiraConfig, validate_config
from .http_client import JiraHTTPClient
from .request import JiraRequester
from .services import (
    BuildsService,
    DeploymentsService,
    DevelopmentInformationService,
    DevopsComponentsService,
    FeatureFlagsService,
    IssueCommentsService,
    IssueSearchService,
    IssuesService,
    LabelsService,
    MyselfService,
    OperationsService,
    PermissionsService,
    ProjectsService,
    RemoteLinksService,
    SecurityInformationService,
    ServerInfoService,
    WorkflowsService,
)

LOGGER = logging.getLogger(__name__)


class JiraClient:
    """Jira Cloud client exposing one attribute per service.

    Example::

        async with JiraClient(config_from_env()) as jira:
            issue = await jira.issues.get_issue(issue_id_or_key="PROJ-1")

    The DevOps services (builds, deployments, development information, ...)
    authenticate with the per-call ``authorization`` token instead of the
    configured credentials.
    """

    def __init__(self, config: JiraConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        validate_config(config)
        self._config = config
        self._http: Optional[JiraHTTPClient] = None
        if isinstance(config, DefaultJiraConfig):
            self._http = JiraHTTPClient(
                base_url=config.base_url,
                ca_bundle=config.ca_bundle,
                timeout=config.timeout,
                transport=transport,
            )
        LOGGER.debug("Jira client created", extra={"client_type": config.type})
        requester = JiraRequester(config, self._http)
        self._requester = requester

        self.builds = BuildsService(requester)
        self.deployments = DeploymentsService(requester)
        self.development_information = DevelopmentInformationService(requester)
        self.devops_components = DevopsComponentsService(requester)
        self.feature_flags = FeatureFlagsService(requester)
        self.operations = OperationsService(requester)
        self.remote_links = RemoteLinksService(requester)
        self.security_information = SecurityInformationService(requester)

        self.issues = IssuesService(requester)
        self.issue_search = IssueSearchService(requester)
        self.issue_comments = IssueCommentsService(requester)
        self.labels = LabelsService(requester)
        self.myself = MyselfService(requester)
        self.permissions = PermissionsService(requester)
        self.projects = ProjectsService(requester)
        self.server_info = ServerInfoService(requester)
        self.workflows = WorkflowsService(requester)

    @property
    def config(self) -> JiraConfig:
        return self._config

    @property
    def requester(self) -> JiraRequester:
        return self._requester

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *_exc: object) -> None:
        await self.aclose()


__all__ = ["JiraClient"]
