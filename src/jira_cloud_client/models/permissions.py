"""Permission and current-user payloads."""

from typing import Dict, List, Literal, NotRequired, TypedDict


class UserPermission(TypedDict, total=False):
    id: str
    key: str
    name: str
    type: Literal["GLOBAL", "PROJECT"]
    description: str
    havePermission: bool
    deprecatedKey: bool


class Permissions(TypedDict, total=False):
    permissions: Dict[str, UserPermission]


class BulkProjectPermissions(TypedDict):
    permissions: List[str]
    projects: NotRequired[List[int]]
    issues: NotRequired[List[int]]


class BulkPermissionsRequest(TypedDict, total=False):
    accountId: str
    globalPermissions: List[str]
    projectPermissions: List[BulkProjectPermissions]


class BulkPermissionGrants(TypedDict, total=False):
    globalPermissions: List[str]
    projectPermissions: List[Dict[str, object]]


class PermissionsKeys(TypedDict):
    permissions: List[str]


class PermittedProjects(TypedDict, total=False):
    projects: List[Dict[str, object]]


class Locale(TypedDict, total=False):
    locale: str


class ServerInformation(TypedDict, total=False):
    baseUrl: str
    version: str
    versionNumbers: List[int]
    deploymentType: str
    buildNumber: int
    buildDate: str
    serverTime: str
    scmInfo: str
    serverTitle: str
    healthChecks: List[Dict[str, object]]
    displayUrl: str
    displayUrlServicedeskHelpCenter: str
    displayUrlConfluence: str
    serverTimeZone: Dict[str, object]
