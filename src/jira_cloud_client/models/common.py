"""Shapes shared across several Jira APIs."""

from typing import Any, Dict, Generic, List, Literal, NotRequired, TypedDict, TypeVar

T = TypeVar("T")

JsonObject = Dict[str, Any]


class PagedCollection(TypedDict, Generic[T]):
    """The ``startAt``/``maxResults`` page wrapper used by list endpoints."""

    startAt: int
    maxResults: int
    total: NotRequired[int]
    isLast: NotRequired[bool]
    nextPage: NotRequired[str]
    self: NotRequired[str]
    values: List[T]


class TokenPage(TypedDict, Generic[T]):
    """Cursor style page keyed by ``nextPageToken``."""

    nextPageToken: NotRequired[str]
    isLast: NotRequired[bool]
    values: List[T]


class ErrorMessage(TypedDict):
    message: str
    errorTraceId: NotRequired[str]


class ErrorCollection(TypedDict, total=False):
    errorMessages: List[str]
    errors: Dict[str, str]
    status: int


AvatarUrls = TypedDict(
    "AvatarUrls",
    {
        "16x16": str,
        "24x24": str,
        "32x32": str,
        "48x48": str,
    },
    total=False,
)


class User(TypedDict, total=False):
    self: str
    accountId: str
    accountType: Literal["atlassian", "app", "customer", "unknown"]
    emailAddress: str
    displayName: str
    active: bool
    timeZone: str
    locale: str
    avatarUrls: AvatarUrls
    groups: JsonObject
    applicationRoles: JsonObject
    expand: str


class IssueIdOrKeysAssociation(TypedDict):
    """Links a DevOps entity to Jira issues by id or key."""

    associationType: Literal["issueKeys", "issueIdOrKeys", "serviceIdOrKeys", "ati:cloud:compass:event-source", "ati:cloud:jira:issue"]
    values: List[str]


class ProviderMetadata(TypedDict, total=False):
    product: str


class StatusCategory(TypedDict, total=False):
    self: str
    id: int
    key: str
    name: str
    colorName: str


class StatusDetails(TypedDict, total=False):
    self: str
    id: str
    name: str
    description: str
    iconUrl: str
    statusCategory: StatusCategory
    scope: JsonObject


class TaskProgress(TypedDict, total=False):
    self: str
    id: str
    description: str
    status: Literal["ENQUEUED", "RUNNING", "COMPLETE", "FAILED", "CANCEL_REQUESTED", "CANCELLED", "DEAD"]
    message: str
    result: Any
    submittedBy: int
    progress: int
    elapsedRuntime: int
    submitted: int
    started: int
    finished: int
    lastUpdate: int


__all__ = [
    "AvatarUrls",
    "ErrorCollection",
    "ErrorMessage",
    "IssueIdOrKeysAssociation",
    "JsonObject",
    "PagedCollection",
    "ProviderMetadata",
    "StatusCategory",
    "StatusDetails",
    "TaskProgress",
    "TokenPage",
    "User",
]
