"""Payloads of the Jira Software DevOps APIs.

Builds, deployments, development information, feature flags, remote links,
DevOps components, security information and operations all follow the same
bulk-submit / get-by-key / delete-by-key / delete-by-property shape.  Every
submitted entity carries an ``updateSequenceNumber`` (or
``updateSequenceId``) that Jira uses to discard out-of-order writes.
"""

from typing import Any, Dict, List, Literal, NotRequired, TypedDict

from .common import ErrorMessage, IssueIdOrKeysAssociation, ProviderMetadata

Properties = Dict[str, str]


class EntityRejection(TypedDict):
    errors: List[ErrorMessage]


# Builds


class BuildKey(TypedDict):
    pipelineId: str
    buildNumber: int


class TestInfo(TypedDict):
    totalNumber: int
    numberPassed: int
    numberFailed: int
    numberSkipped: NotRequired[int]


class BuildReference(TypedDict, total=False):
    commit: Dict[str, str]
    ref: Dict[str, str]


class BuildData(TypedDict):
    schemaVersion: NotRequired[str]
    pipelineId: str
    buildNumber: int
    updateSequenceNumber: int
    displayName: str
    description: NotRequired[str]
    label: NotRequired[str]
    url: str
    state: Literal["pending", "in_progress", "successful", "failed", "cancelled", "unknown"]
    lastUpdated: str
    issueKeys: NotRequired[List[str]]
    associations: NotRequired[List[IssueIdOrKeysAssociation]]
    testInfo: NotRequired[TestInfo]
    references: NotRequired[List[BuildReference]]


class SubmitBuildsRequest(TypedDict):
    properties: NotRequired[Properties]
    builds: List[BuildData]
    providerMetadata: NotRequired[ProviderMetadata]


class RejectedBuild(EntityRejection):
    key: BuildKey


class SubmitBuildsResponse(TypedDict, total=False):
    acceptedBuilds: List[BuildKey]
    rejectedBuilds: List[RejectedBuild]
    unknownIssueKeys: List[str]
    unknownAssociations: List[IssueIdOrKeysAssociation]


# Deployments


class DeploymentKey(TypedDict):
    pipelineId: str
    environmentId: str
    deploymentSequenceNumber: int


class DeploymentPipeline(TypedDict):
    id: str
    displayName: str
    url: str


class DeploymentEnvironment(TypedDict):
    id: str
    displayName: str
    type: Literal["unmapped", "development", "testing", "staging", "production"]


class DeploymentData(TypedDict):
    deploymentSequenceNumber: int
    updateSequenceNumber: int
    associations: NotRequired[List[Dict[str, Any]]]
    displayName: str
    url: str
    description: str
    lastUpdated: str
    label: NotRequired[str]
    duration: NotRequired[int]
    state: Literal["unknown", "pending", "in_progress", "cancelled", "failed", "rolled_back", "successful"]
    pipeline: DeploymentPipeline
    environment: DeploymentEnvironment
    commands: NotRequired[List[Dict[str, str]]]
    schemaVersion: NotRequired[str]


class SubmitDeploymentsRequest(TypedDict):
    properties: NotRequired[Properties]
    deployments: List[DeploymentData]
    providerMetadata: NotRequired[ProviderMetadata]


class RejectedDeployment(EntityRejection):
    key: DeploymentKey


class SubmitDeploymentsResponse(TypedDict, total=False):
    acceptedDeployments: List[DeploymentKey]
    rejectedDeployments: List[RejectedDeployment]
    unknownIssueKeys: List[str]
    unknownAssociations: List[Dict[str, Any]]


class DeploymentGatingStatus(TypedDict, total=False):
    deploymentSequenceNumber: int
    pipelineId: str
    environmentId: str
    updatedTimestamp: str
    gatingStatus: Literal["allowed", "prevented", "awaiting", "invalid"]
    details: List[Dict[str, Any]]


# Development information


class Author(TypedDict, total=False):
    name: str
    email: str
    username: str
    url: str
    avatar: str
    accountId: str


class Commit(TypedDict):
    id: str
    issueKeys: List[str]
    updateSequenceId: int
    hash: str
    flags: NotRequired[List[Literal["MERGE_COMMIT"]]]
    message: str
    author: Author
    fileCount: int
    url: str
    files: NotRequired[List[Dict[str, Any]]]
    authorTimestamp: str
    displayId: str


class BranchCommit(TypedDict, total=False):
    id: str
    hash: str
    message: str
    url: str
    displayId: str


class Branch(TypedDict):
    id: str
    issueKeys: List[str]
    updateSequenceId: int
    name: str
    lastCommit: BranchCommit
    createPullRequestUrl: NotRequired[str]
    url: str


class Reviewer(TypedDict, total=False):
    name: str
    approvalStatus: Literal["APPROVED", "NEEDSWORK", "UNAPPROVED"]
    url: str
    avatar: str
    email: str
    accountId: str


class PullRequest(TypedDict):
    id: str
    issueKeys: List[str]
    updateSequenceId: int
    status: Literal["OPEN", "MERGED", "DECLINED", "DRAFT", "UNKNOWN"]
    title: str
    author: Author
    commentCount: int
    sourceBranch: str
    sourceBranchUrl: NotRequired[str]
    lastUpdate: str
    destinationBranch: NotRequired[str]
    destinationBranchUrl: NotRequired[str]
    reviewers: NotRequired[List[Reviewer]]
    url: str
    displayId: str


class Repository(TypedDict):
    name: str
    description: NotRequired[str]
    forkOf: NotRequired[str]
    url: str
    commits: NotRequired[List[Commit]]
    branches: NotRequired[List[Branch]]
    pullRequests: NotRequired[List[PullRequest]]
    avatar: NotRequired[str]
    avatarDescription: NotRequired[str]
    id: str
    updateSequenceId: int


class StoreDevelopmentInformationRequest(TypedDict):
    repositories: List[Repository]
    preventTransitions: NotRequired[bool]
    operationType: NotRequired[Literal["NORMAL", "BACKFILL"]]
    properties: NotRequired[Properties]
    providerMetadata: NotRequired[ProviderMetadata]


class AcceptedDevinfoEntity(TypedDict, total=False):
    commits: List[str]
    branches: List[str]
    pullRequests: List[str]


class FailedEntity(TypedDict):
    id: str
    errorMessages: NotRequired[List[ErrorMessage]]


class FailedDevinfoEntity(TypedDict, total=False):
    errorMessages: List[ErrorMessage]
    commits: List[FailedEntity]
    branches: List[FailedEntity]
    pullRequests: List[FailedEntity]


class StoreDevelopmentInformationResponse(TypedDict, total=False):
    acceptedDevinfoEntities: Dict[str, AcceptedDevinfoEntity]
    failedDevinfoEntities: Dict[str, FailedDevinfoEntity]
    unknownIssueKeys: List[str]
    unknownAssociations: List[IssueIdOrKeysAssociation]


class ExistsByPropertiesResponse(TypedDict, total=False):
    hasDataMatchingProperties: bool


DevinfoEntityType = Literal["commit", "branch", "pull_request"]


# Feature flags


class FeatureFlagSummary(TypedDict, total=False):
    url: str
    status: Dict[str, Any]
    lastUpdated: str


class FeatureFlagData(TypedDict):
    schemaVersion: NotRequired[str]
    id: str
    key: str
    updateSequenceId: int
    displayName: NotRequired[str]
    issueKeys: List[str]
    summary: FeatureFlagSummary
    details: List[Dict[str, Any]]


class SubmitFeatureFlagsRequest(TypedDict):
    properties: NotRequired[Properties]
    flags: List[FeatureFlagData]
    providerMetadata: NotRequired[ProviderMetadata]


class RejectedFeatureFlag(EntityRejection):
    key: Dict[str, str]


class SubmitFeatureFlagsResponse(TypedDict, total=False):
    acceptedFeatureFlags: List[str]
    failedFeatureFlags: Dict[str, List[ErrorMessage]]
    unknownIssueKeys: List[str]


# Remote links


class RemoteLinkStatus(TypedDict):
    appearance: Literal["default", "inprogress", "moved", "new", "removed", "prototype", "success"]
    label: str


class RemoteLinkData(TypedDict):
    schemaVersion: NotRequired[str]
    id: str
    updateSequenceNumber: int
    displayName: str
    url: str
    type: Literal["document", "alert", "test", "security", "logFile", "prototype", "coverage", "bugReport", "other"]
    description: NotRequired[str]
    lastUpdated: str
    associations: NotRequired[List[Dict[str, Any]]]
    status: NotRequired[RemoteLinkStatus]
    actionIds: NotRequired[List[str]]
    attributeMap: NotRequired[Dict[str, str]]


class SubmitRemoteLinksRequest(TypedDict):
    properties: NotRequired[Properties]
    remoteLinks: List[RemoteLinkData]
    providerMetadata: NotRequired[ProviderMetadata]


class SubmitRemoteLinksResponse(TypedDict, total=False):
    acceptedRemoteLinks: List[str]
    rejectedRemoteLinks: Dict[str, List[ErrorMessage]]
    unknownAssociations: List[Dict[str, Any]]


# DevOps components


class DevopsComponentData(TypedDict):
    schemaVersion: NotRequired[str]
    id: str
    updateSequenceNumber: int
    name: str
    description: str
    url: str
    avatarUrl: str
    tier: Literal["Tier 1", "Tier 2", "Tier 3", "Tier 4"]
    componentType: Literal["service", "application", "library", "capability", "cloud-resource", "data-pipeline", "machine-learning-model", "ui-element", "website", "other"]
    lastUpdated: str


class SubmitComponentsRequest(TypedDict):
    properties: NotRequired[Properties]
    components: List[DevopsComponentData]
    providerMetadata: NotRequired[ProviderMetadata]


class SubmitComponentsResponse(TypedDict, total=False):
    acceptedComponents: List[str]
    failedComponents: Dict[str, List[ErrorMessage]]
    unknownAssociations: List[Dict[str, Any]]


# Security information


class LinkedWorkspace(TypedDict, total=False):
    workspaceId: str
    updatedAt: str


class LinkedWorkspaces(TypedDict, total=False):
    workspaceIds: List[str]


class SubmitWorkspacesRequest(TypedDict):
    workspaceIds: List[str]


class VulnerabilityData(TypedDict):
    schemaVersion: str
    id: str
    updateSequenceNumber: int
    containerId: str
    displayName: str
    description: str
    url: str
    type: Literal["sca", "sast", "dast", "unknown"]
    introducedDate: str
    lastUpdated: str
    severity: Dict[str, str]
    identifiers: NotRequired[List[Dict[str, str]]]
    status: Literal["open", "closed", "ignored", "unknown"]
    additionalInfo: NotRequired[Dict[str, str]]
    associations: NotRequired[List[Dict[str, Any]]]


class SubmitVulnerabilitiesRequest(TypedDict):
    operationType: NotRequired[Literal["NORMAL", "SCAN", "BACKFILL"]]
    properties: NotRequired[Properties]
    vulnerabilities: List[VulnerabilityData]
    providerMetadata: NotRequired[ProviderMetadata]


class SubmitVulnerabilitiesResponse(TypedDict, total=False):
    acceptedVulnerabilities: List[str]
    failedVulnerabilities: Dict[str, List[ErrorMessage]]
    unknownAssociations: List[Dict[str, Any]]


# Operations


class IncidentData(TypedDict):
    schemaVersion: NotRequired[str]
    id: str
    updateSequenceNumber: int
    affectedComponents: List[str]
    summary: str
    description: str
    url: str
    createdDate: str
    lastUpdated: str
    status: Literal["open", "resolved", "unknown"]
    severity: NotRequired[Dict[str, str]]
    associations: NotRequired[List[Dict[str, Any]]]


class ReviewData(TypedDict):
    schemaVersion: NotRequired[str]
    id: str
    updateSequenceNumber: int
    reviews: NotRequired[List[str]]
    summary: str
    description: str
    url: str
    createdDate: str
    lastUpdated: str
    status: Literal["in progress", "outstanding actions", "completed", "unknown"]
    associations: NotRequired[List[Dict[str, Any]]]


class SubmitOperationsEntityRequest(TypedDict, total=False):
    properties: Properties
    incidents: List[IncidentData]
    reviews: List[ReviewData]
    providerMetadata: ProviderMetadata


class SubmitOperationsEntityResponse(TypedDict, total=False):
    acceptedIncidents: List[Dict[str, str]]
    failedIncidents: Dict[str, List[ErrorMessage]]
    acceptedReviews: List[Dict[str, str]]
    failedReviews: Dict[str, List[ErrorMessage]]
    unknownProperties: List[str]
    unknownAssociations: List[Dict[str, Any]]


class OperationsWorkspaceIds(TypedDict, total=False):
    workspaceIds: List[str]
