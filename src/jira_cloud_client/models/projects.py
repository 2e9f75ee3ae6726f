"""Project payloads."""

from typing import Any, Dict, List, Literal, NotRequired, TypedDict

from .common import AvatarUrls, JsonObject, PagedCollection, StatusDetails, User


class ProjectCategory(TypedDict, total=False):
    self: str
    id: str
    name: str
    description: str


class Project(TypedDict, total=False):
    expand: str
    self: str
    id: str
    key: str
    name: str
    description: str
    lead: User
    components: List[JsonObject]
    issueTypes: List[JsonObject]
    url: str
    email: str
    assigneeType: Literal["PROJECT_LEAD", "UNASSIGNED"]
    versions: List[JsonObject]
    roles: Dict[str, str]
    avatarUrls: AvatarUrls
    projectCategory: ProjectCategory
    projectTypeKey: Literal["software", "service_desk", "business"]
    simplified: bool
    style: Literal["classic", "next-gen"]
    favourite: bool
    isPrivate: bool
    uuid: str
    properties: Dict[str, Any]
    archived: bool
    archivedDate: str
    archivedBy: User
    deleted: bool
    deletedDate: str
    deletedBy: User
    retentionTillDate: str


PageOfProjects = PagedCollection[Project]


class CreateProjectDetails(TypedDict):
    key: str
    name: str
    leadAccountId: NotRequired[str]
    projectTypeKey: NotRequired[Literal["software", "service_desk", "business"]]
    projectTemplateKey: NotRequired[str]
    description: NotRequired[str]
    url: NotRequired[str]
    assigneeType: NotRequired[Literal["PROJECT_LEAD", "UNASSIGNED"]]
    avatarId: NotRequired[int]
    issueSecurityScheme: NotRequired[int]
    permissionScheme: NotRequired[int]
    notificationScheme: NotRequired[int]
    categoryId: NotRequired[int]
    workflowScheme: NotRequired[int]
    issueTypeScheme: NotRequired[int]
    issueTypeScreenScheme: NotRequired[int]
    fieldConfigurationScheme: NotRequired[int]


class UpdateProjectDetails(TypedDict, total=False):
    key: str
    name: str
    description: str
    leadAccountId: str
    url: str
    assigneeType: Literal["PROJECT_LEAD", "UNASSIGNED"]
    avatarId: int
    issueSecurityScheme: int
    permissionScheme: int
    notificationScheme: int
    categoryId: int
    releasedProjectKeys: List[str]


class ProjectIdentifiers(TypedDict, total=False):
    self: str
    id: int
    key: str


class IssueTypeWithStatus(TypedDict, total=False):
    self: str
    id: str
    name: str
    subtask: bool
    statuses: List[StatusDetails]


class ProjectIssueTypeHierarchy(TypedDict, total=False):
    projectId: int
    hierarchy: List[JsonObject]


class NotificationScheme(TypedDict, total=False):
    expand: str
    id: int
    self: str
    name: str
    description: str
    notificationSchemeEvents: List[JsonObject]
    scope: JsonObject
    projects: List[int]
