"""Workflow payloads (the bulk ``/rest/api/3/workflows`` family)."""

from typing import Any, Dict, List, Literal, NotRequired, TypedDict

from .common import JsonObject, PagedCollection, TokenPage


class WorkflowScope(TypedDict, total=False):
    type: Literal["PROJECT", "GLOBAL"]
    project: Dict[str, str]


class WorkflowStatusLayout(TypedDict, total=False):
    statusReference: str
    layout: Dict[str, float]
    properties: Dict[str, str]
    deprecated: bool


class WorkflowTransition(TypedDict, total=False):
    id: str
    name: str
    description: str
    type: Literal["INITIAL", "GLOBAL", "DIRECTED"]
    toStatusReference: str
    links: List[JsonObject]
    actions: List[JsonObject]
    conditions: JsonObject
    validators: List[JsonObject]
    triggers: List[JsonObject]
    properties: Dict[str, str]


class JiraWorkflow(TypedDict, total=False):
    id: str
    name: str
    description: str
    scope: WorkflowScope
    version: Dict[str, Any]
    statuses: List[WorkflowStatusLayout]
    transitions: List[WorkflowTransition]
    startPointLayout: Dict[str, float]
    usages: List[JsonObject]
    isEditable: bool
    created: str
    updated: str
    loopedTransitionContainerLayout: Dict[str, float]


class JiraWorkflowStatus(TypedDict, total=False):
    id: str
    name: str
    statusReference: str
    statusCategory: Literal["TODO", "IN_PROGRESS", "DONE"]
    scope: WorkflowScope
    description: str
    usages: List[JsonObject]


class WorkflowReadRequest(TypedDict, total=False):
    workflowIds: List[str]
    workflowNames: List[str]
    projectAndIssueTypes: List[Dict[str, str]]


class WorkflowReadResponse(TypedDict, total=False):
    statuses: List[JiraWorkflowStatus]
    workflows: List[JiraWorkflow]


WorkflowSearchResponse = PagedCollection[JiraWorkflow]


class WorkflowCreateRequest(TypedDict):
    scope: WorkflowScope
    statuses: List[JsonObject]
    workflows: List[JsonObject]


class WorkflowUpdateRequest(TypedDict):
    statuses: List[JsonObject]
    workflows: List[JsonObject]


class WorkflowCreateResponse(TypedDict, total=False):
    statuses: List[JiraWorkflowStatus]
    workflows: List[JiraWorkflow]


class WorkflowUpdateResponse(TypedDict, total=False):
    statuses: List[JiraWorkflowStatus]
    workflows: List[JiraWorkflow]
    taskId: str


class ValidationOptions(TypedDict, total=False):
    levels: List[Literal["WARNING", "ERROR"]]


class WorkflowCreateValidateRequest(TypedDict):
    payload: WorkflowCreateRequest
    validationOptions: NotRequired[ValidationOptions]


class WorkflowUpdateValidateRequest(TypedDict):
    payload: WorkflowUpdateRequest
    validationOptions: NotRequired[ValidationOptions]


class WorkflowValidationErrorList(TypedDict, total=False):
    errors: List[JsonObject]


class DefaultEditor(TypedDict, total=False):
    value: Literal["NEW", "LEGACY"]


class WorkflowCapabilities(TypedDict, total=False):
    connectRules: List[JsonObject]
    editorScope: Literal["PROJECT", "GLOBAL"]
    forgeRules: List[JsonObject]
    projectTypes: List[str]
    systemRules: List[JsonObject]
    triggerRules: List[JsonObject]


class WorkflowProjectUsages(TypedDict, total=False):
    projects: TokenPage[Dict[str, str]]
    workflowId: str


class WorkflowProjectIssueTypeUsages(TypedDict, total=False):
    issueTypes: TokenPage[Dict[str, str]]
    projectId: str
    workflowId: str


class WorkflowSchemeUsages(TypedDict, total=False):
    workflowId: str
    workflowSchemes: TokenPage[Dict[str, str]]
