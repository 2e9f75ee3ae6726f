"""Issue, comment, changelog and search payloads of the platform REST API."""

from typing import Any, Dict, List, NotRequired, TypedDict

from .common import JsonObject, StatusDetails, TaskProgress, User


class IssueBean(TypedDict, total=False):
    expand: str
    id: str
    self: str
    key: str
    fields: Dict[str, Any]
    renderedFields: Dict[str, Any]
    properties: Dict[str, Any]
    names: Dict[str, str]
    schema: Dict[str, JsonObject]
    transitions: List["IssueTransition"]
    operations: JsonObject
    editmeta: JsonObject
    changelog: "PageOfChangelogs"
    versionedRepresentations: Dict[str, Dict[str, Any]]
    fieldsToInclude: JsonObject


class IssueUpdateDetails(TypedDict, total=False):
    transition: "IssueTransition"
    fields: Dict[str, Any]
    update: Dict[str, List[Dict[str, Any]]]
    historyMetadata: JsonObject
    properties: List[Dict[str, Any]]


class CreatedIssue(TypedDict, total=False):
    id: str
    key: str
    self: str
    transition: JsonObject
    watchers: JsonObject


class BulkIssueError(TypedDict, total=False):
    status: int
    elementErrors: JsonObject
    failedElementNumber: int


class CreatedIssues(TypedDict, total=False):
    issues: List[CreatedIssue]
    errors: List[BulkIssueError]


class IssuesUpdateBean(TypedDict):
    issueUpdates: List[IssueUpdateDetails]


class BulkFetchIssueRequest(TypedDict):
    issueIdsOrKeys: List[str]
    fields: NotRequired[List[str]]
    expand: NotRequired[List[str]]
    properties: NotRequired[List[str]]
    fieldsByKeys: NotRequired[bool]


class BulkIssueResults(TypedDict, total=False):
    expand: str
    issues: List[IssueBean]
    issueErrors: List[JsonObject]


class IssueTransition(TypedDict, total=False):
    id: str
    name: str
    to: StatusDetails
    hasScreen: bool
    isGlobal: bool
    isInitial: bool
    isAvailable: bool
    isConditional: bool
    isLooped: bool
    fields: Dict[str, JsonObject]
    expand: str


class Transitions(TypedDict, total=False):
    expand: str
    transitions: List[IssueTransition]


class ChangeItem(TypedDict, total=False):
    field: str
    fieldtype: str
    fieldId: str
    # "from" is a keyword; read with item["from"]
    toString: str
    to: str
    fromString: str


class Changelog(TypedDict, total=False):
    id: str
    author: User
    created: str
    items: List[ChangeItem]
    historyMetadata: JsonObject


class PageOfChangelogs(TypedDict, total=False):
    startAt: int
    maxResults: int
    total: int
    histories: List[Changelog]


class IssueChangelogIds(TypedDict):
    changelogIds: List[int]


class BulkChangelogRequest(TypedDict):
    issueIdsOrKeys: List[str]
    fieldIds: NotRequired[List[str]]
    maxResults: NotRequired[int]
    nextPageToken: NotRequired[str]


class BulkChangelogResponse(TypedDict, total=False):
    issueChangeLogs: List[JsonObject]
    nextPageToken: str


class IssueArchivalSyncRequest(TypedDict):
    issueIdsOrKeys: List[str]


class IssueArchivalSyncResponse(TypedDict, total=False):
    errors: JsonObject
    numberOfIssuesUpdated: int


class ArchiveIssueAsyncRequest(TypedDict):
    jql: str


class ArchivedIssuesFilterRequest(TypedDict, total=False):
    archivedBy: List[str]
    archivedDateRange: Dict[str, str]
    issueTypes: List[str]
    projects: List[str]
    reporters: List[str]


class ExportArchivedIssuesTaskProgress(TypedDict, total=False):
    payload: str
    progress: int
    status: str
    submittedTime: str
    taskId: str


class Notification(TypedDict, total=False):
    subject: str
    textBody: str
    htmlBody: str
    to: JsonObject
    restrict: JsonObject


class IssueEvent(TypedDict, total=False):
    id: int
    name: str


class IssueLimitReport(TypedDict, total=False):
    issuesApproachingLimit: Dict[str, Dict[str, int]]
    issuesBreachingLimit: Dict[str, Dict[str, int]]
    limits: Dict[str, int]


class IssueTypeIssueCreateMetadata(TypedDict, total=False):
    self: str
    id: str
    description: str
    iconUrl: str
    name: str
    subtask: bool
    hierarchyLevel: int
    fields: Dict[str, JsonObject]


class FieldCreateMetadata(TypedDict, total=False):
    fieldId: str
    key: str
    name: str
    required: bool
    schema: JsonObject
    hasDefaultValue: bool
    operations: List[str]
    allowedValues: List[Any]
    autoCompleteUrl: str
    defaultValue: Any


class IssueEditMetadata(TypedDict, total=False):
    fields: Dict[str, FieldCreateMetadata]


class Comment(TypedDict, total=False):
    self: str
    id: str
    author: User
    body: Any
    renderedBody: str
    updateAuthor: User
    created: str
    updated: str
    visibility: Dict[str, str]
    jsdPublic: bool
    jsdAuthorCanSeeRequest: bool
    properties: List[JsonObject]


class PageOfComments(TypedDict, total=False):
    startAt: int
    maxResults: int
    total: int
    comments: List[Comment]


class IssueCommentListRequest(TypedDict):
    ids: List[int]


class SearchAndReconcileResults(TypedDict, total=False):
    issues: List[IssueBean]
    isLast: bool
    nextPageToken: str
    names: Dict[str, str]
    schema: Dict[str, JsonObject]


class JqlCountRequest(TypedDict):
    jql: str


class JqlCountResults(TypedDict, total=False):
    count: int


class IssuesAndJqlQueries(TypedDict):
    issueIds: List[int]
    jqls: List[str]


class IssueMatches(TypedDict, total=False):
    matches: List[Dict[str, Any]]


class IssuePickerSuggestions(TypedDict, total=False):
    sections: List[Dict[str, Any]]


__all__ = [
    "ArchiveIssueAsyncRequest",
    "ArchivedIssuesFilterRequest",
    "BulkChangelogRequest",
    "BulkChangelogResponse",
    "BulkFetchIssueRequest",
    "BulkIssueResults",
    "Changelog",
    "Comment",
    "CreatedIssue",
    "CreatedIssues",
    "ExportArchivedIssuesTaskProgress",
    "IssueArchivalSyncRequest",
    "IssueArchivalSyncResponse",
    "IssueBean",
    "IssueChangelogIds",
    "IssueCommentListRequest",
    "IssueEditMetadata",
    "IssueEvent",
    "IssueLimitReport",
    "IssueMatches",
    "IssuePickerSuggestions",
    "IssueTransition",
    "IssueTypeIssueCreateMetadata",
    "IssueUpdateDetails",
    "IssuesAndJqlQueries",
    "IssuesUpdateBean",
    "JqlCountRequest",
    "JqlCountResults",
    "Notification",
    "PageOfChangelogs",
    "PageOfComments",
    "SearchAndReconcileResults",
    "TaskProgress",
    "Transitions",
]
