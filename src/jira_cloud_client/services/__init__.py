"""One service class per group of Jira endpoints."""
from __future__ import annotations

from .base import Service
from .builds import BuildsService
from .deployments import DeploymentsService
from .development_information import DevelopmentInformationService
from .devops_components import DevopsComponentsService
from .feature_flags import FeatureFlagsService
from .issue_comments import IssueCommentsService
from .issue_search import IssueSearchService
from .issues import IssuesService
from .labels import LabelsService
from .myself import MyselfService
from .operations import OperationsService
from .permissions import PermissionsService
from .projects import ProjectsService
from .remote_links import RemoteLinksService
from .security_information import SecurityInformationService
from .server_info import ServerInfoService
from .workflows import WorkflowsService

__all__ = [
    "BuildsService",
    "DeploymentsService",
    "DevelopmentInformationService",
    "DevopsComponentsService",
    "FeatureFlagsService",
    "IssueCommentsService",
    "IssueSearchService",
    "IssuesService",
    "LabelsService",
    "MyselfService",
    "OperationsService",
    "PermissionsService",
    "ProjectsService",
    "RemoteLinksService",
    "SecurityInformationService",
    "Service",
    "ServerInfoService",
    "WorkflowsService",
]
