"""Static shapes of the JSON documents exchanged with Jira.

These are :class:`typing.TypedDict` declarations only.  Responses are the
decoded JSON dictionaries, returned without runtime validation, so keys Jira
adds beyond the declared ones are kept.
"""

from .common import (
    ErrorCollection,
    ErrorMessage,
    IssueIdOrKeysAssociation,
    JsonObject,
    PagedCollection,
    ProviderMetadata,
    StatusDetails,
    TaskProgress,
    TokenPage,
    User,
)
from .devops import (
    BuildData,
    DeploymentData,
    Repository,
    StoreDevelopmentInformationRequest,
    StoreDevelopmentInformationResponse,
    SubmitBuildsRequest,
    SubmitBuildsResponse,
    SubmitDeploymentsRequest,
    SubmitDeploymentsResponse,
)
from .issues import IssueBean, IssueUpdateDetails
from .projects import Project

__all__ = [
    "BuildData",
    "DeploymentData",
    "ErrorCollection",
    "ErrorMessage",
    "IssueBean",
    "IssueIdOrKeysAssociation",
    "IssueUpdateDetails",
    "JsonObject",
    "PagedCollection",
    "Project",
    "ProviderMetadata",
    "Repository",
    "StatusDetails",
    "StoreDevelopmentInformationRequest",
    "StoreDevelopmentInformationResponse",
    "SubmitBuildsRequest",
    "SubmitBuildsResponse",
    "SubmitDeploymentsRequest",
    "SubmitDeploymentsResponse",
    "TaskProgress",
    "TokenPage",
    "User",
]
