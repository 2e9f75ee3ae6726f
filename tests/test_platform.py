from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest

from jira_cloud_client import JiraClient, RequestOptions


def recorder_for(seen: List[httpx.Request], payload: object = None) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if payload is None:
            return httpx.Response(204)
        return httpx.Response(200, json=payload)

    return handler


@pytest.mark.asyncio
async def test_search_workflows_query(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    page = {"startAt": 0, "maxResults": 20, "total": 1, "isLast": True, "values": [{"id": "wf-1"}]}
    async with make_client(recorder_for(seen, page)) as jira:
        result = await jira.workflows.search_workflows(query_string="Bug", is_active=True, max_results=20)

    assert seen[0].url.path == "/rest/api/3/workflows/search"
    assert dict(seen[0].url.params) == {"maxResults": "20", "queryString": "Bug", "isActive": "true"}
    assert result.data["values"][0]["id"] == "wf-1"


@pytest.mark.asyncio
async def test_workflow_usage_endpoints(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen, {"workflowId": "wf-1"})) as jira:
        await jira.workflows.get_project_usages_for_workflow(workflow_id="wf-1", max_results=10)
        await jira.workflows.get_workflow_project_issue_type_usages(
            workflow_id="wf-1", project_id=10001, next_page_token="abc"
        )
        await jira.workflows.get_workflow_scheme_usages_for_workflow(workflow_id="wf-1")

    assert [request.url.path for request in seen] == [
        "/rest/api/3/workflow/wf-1/projectUsages",
        "/rest/api/3/workflow/wf-1/project/10001/issueTypeUsages",
        "/rest/api/3/workflow/wf-1/workflowSchemes",
    ]
    assert seen[1].url.params["nextPageToken"] == "abc"


@pytest.mark.asyncio
async def test_read_and_validate_workflows(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen, {"workflows": [], "statuses": []})) as jira:
        await jira.workflows.read_workflows(
            workflow_read_request={"workflowNames": ["Software workflow"]}, use_approval_configuration=False
        )
        await jira.workflows.validate_create_workflows(
            workflow_create_validate_request={"payload": {"scope": {"type": "GLOBAL"}, "statuses": [], "workflows": []}}
        )
        await jira.workflows.workflow_capabilities(project_id="10001")

    assert seen[0].method == "POST"
    assert seen[0].url.path == "/rest/api/3/workflows"
    assert seen[0].url.params["useApprovalConfiguration"] == "false"
    assert json.loads(seen[0].content) == {"workflowNames": ["Software workflow"]}
    assert seen[1].url.path == "/rest/api/3/workflows/create/validation"
    assert dict(seen[2].url.params) == {"projectId": "10001"}


@pytest.mark.asyncio
async def test_search_projects_joins_multi_value_filters(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    page = {"startAt": 0, "maxResults": 50, "total": 0, "isLast": True, "values": []}
    async with make_client(recorder_for(seen, page)) as jira:
        await jira.projects.search_projects(ids=[10000, 10001], keys=["A", "B"], status=["live", "archived"])

    params = seen[0].url.params
    assert seen[0].url.path == "/rest/api/3/project/search"
    assert params["id"] == "10000,10001"
    assert params["keys"] == "A,B"
    assert params["status"] == "live,archived"
    assert "query" not in params


@pytest.mark.asyncio
async def test_project_lifecycle_requests(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "DELETE" or request.url.path.endswith("/archive"):
            return httpx.Response(204)
        return httpx.Response(200, json={"id": "10000", "key": "PROJ"})

    async with make_client(handler) as jira:
        await jira.projects.archive_project(project_id_or_key="PROJ")
        await jira.projects.restore(project_id_or_key="PROJ")
        await jira.projects.delete_project(project_id_or_key="PROJ", enable_undo=False)
        created = await jira.projects.create_project(
            create_project_details={"key": "NEW", "name": "New project", "leadAccountId": "abc"}
        )

    assert [(request.method, request.url.path) for request in seen] == [
        ("POST", "/rest/api/3/project/PROJ/archive"),
        ("POST", "/rest/api/3/project/PROJ/restore"),
        ("DELETE", "/rest/api/3/project/PROJ"),
        ("POST", "/rest/api/3/project"),
    ]
    assert seen[2].url.params["enableUndo"] == "false"
    assert created.data == {"id": "10000", "key": "PROJ"}


@pytest.mark.asyncio
async def test_delete_project_asynchronously_posts(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen, {"id": "task-1", "status": "ENQUEUED"})) as jira:
        result = await jira.projects.delete_project_asynchronously(project_id_or_key="PROJ")

    assert (seen[0].method, seen[0].url.path) == ("POST", "/rest/api/3/project/PROJ/delete")
    assert result.data["status"] == "ENQUEUED"


@pytest.mark.asyncio
async def test_delete_project_asynchronously_follows_task_redirect(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/rest/api/3/project/PROJ/delete":
            return httpx.Response(303, headers={"Location": "https://example.atlassian.net/rest/api/3/task/10010"})
        if request.url.path == "/rest/api/3/task/10010":
            return httpx.Response(200, json={"id": "10010", "status": "ENQUEUED"})
        raise AssertionError(f"Unexpected URL {request.url}")

    async with make_client(handler) as jira:
        result = await jira.projects.delete_project_asynchronously(project_id_or_key="PROJ")

    assert [(request.method, request.url.path) for request in seen] == [
        ("POST", "/rest/api/3/project/PROJ/delete"),
        ("GET", "/rest/api/3/task/10010"),
    ]
    assert seen[1].headers["Authorization"].startswith("Basic ")
    assert result.status == 200
    assert result.data == {"id": "10010", "status": "ENQUEUED"}


@pytest.mark.asyncio
async def test_option_authorization_replaces_configured_basic_auth(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen, {"accountId": "abc"})) as jira:
        await jira.myself.get_current_user(opts=RequestOptions(headers={"Authorization": "Bearer oauth-token"}))
        await jira.myself.get_current_user()

    assert seen[0].headers.get_list("Authorization") == ["Bearer oauth-token"]
    assert seen[1].headers["Authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_permission_checks(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen, {"permissions": {}})) as jira:
        await jira.permissions.get_my_permissions(project_key="PROJ", permissions=["BROWSE_PROJECTS", "EDIT_ISSUES"])
        await jira.permissions.get_permitted_projects(permissions_keys={"permissions": ["BROWSE_PROJECTS"]})
        await jira.permissions.get_bulk_permissions(
            bulk_permissions_request={"projectPermissions": [{"permissions": ["EDIT_ISSUES"], "projects": [10000]}]}
        )
        await jira.permissions.get_all_permissions()

    assert seen[0].url.path == "/rest/api/3/mypermissions"
    assert seen[0].url.params["permissions"] == "BROWSE_PROJECTS,EDIT_ISSUES"
    assert [(request.method, request.url.path) for request in seen[1:]] == [
        ("POST", "/rest/api/3/permissions/project"),
        ("POST", "/rest/api/3/permissions/check"),
        ("GET", "/rest/api/3/permissions"),
    ]


@pytest.mark.asyncio
async def test_myself_preferences(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []
    async with make_client(recorder_for(seen)) as jira:
        await jira.myself.set_preference(key="jira.user.timezone", value="Europe/Oslo")
        await jira.myself.set_locale(locale={"locale": "nb_NO"})
        removed = await jira.myself.remove_preference(key="jira.user.timezone")

    assert seen[0].method == "PUT"
    assert seen[0].url.params["key"] == "jira.user.timezone"
    assert json.loads(seen[0].content) == "Europe/Oslo"
    assert seen[1].url.path == "/rest/api/3/mypreferences/locale"
    assert seen[2].method == "DELETE"
    assert removed.data is None


@pytest.mark.asyncio
async def test_current_user_labels_and_server_info(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/rest/api/3/myself":
            return httpx.Response(200, json={"accountId": "abc", "displayName": "Bot"})
        if request.url.path == "/rest/api/3/label":
            return httpx.Response(200, json={"startAt": 0, "maxResults": 2, "isLast": False, "values": ["a", "b"]})
        return httpx.Response(200, json={"baseUrl": "https://example.atlassian.net", "deploymentType": "Cloud"})

    async with make_client(handler) as jira:
        user = await jira.myself.get_current_user(expand="groups")
        labels = await jira.labels.get_all_labels(max_results=2)
        server = await jira.server_info.get_server_info()

    assert seen[0].url.params["expand"] == "groups"
    assert user.data["displayName"] == "Bot"
    assert labels.data["values"] == ["a", "b"]
    assert server.data["deploymentType"] == "Cloud"
    assert seen[2].url.path == "/rest/api/3/serverInfo"
