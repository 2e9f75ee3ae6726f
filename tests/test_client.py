from __future__ import annotations

from typing import Any, Mapping

import httpx
import pytest

from jira_cloud_client import ConfigurationError, DefaultJiraConfig, ForgeJiraConfig, JiraClient, RequestOptions
from jira_cloud_client.services import BuildsService, IssuesService, WorkflowsService


def test_client_exposes_services(config: DefaultJiraConfig) -> None:
    client = JiraClient(config, transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    assert isinstance(client.builds, BuildsService)
    assert isinstance(client.issues, IssuesService)
    assert isinstance(client.workflows, WorkflowsService)
    for name in (
        "deployments",
        "development_information",
        "devops_components",
        "feature_flags",
        "issue_comments",
        "issue_search",
        "labels",
        "myself",
        "operations",
        "permissions",
        "projects",
        "remote_links",
        "security_information",
        "server_info",
    ):
        assert hasattr(client, name)
    assert client.config is config


def test_client_rejects_invalid_config() -> None:
    with pytest.raises(ConfigurationError):
        JiraClient(DefaultJiraConfig(base_url="https://example.atlassian.net", email="", api_token="t"))


@pytest.mark.asyncio
async def test_client_closes_http_client(config: DefaultJiraConfig) -> None:
    async with JiraClient(config, transport=httpx.MockTransport(lambda request: httpx.Response(200))) as jira:
        http = jira._http
        assert http is not None and not http.is_closed
    assert http.is_closed


@pytest.mark.asyncio
async def test_clients_do_not_share_state() -> None:
    def handler_for(tag: str) -> Any:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"site": tag, "auth": request.headers["Authorization"]})

        return handler

    first_config = DefaultJiraConfig(base_url="https://one.atlassian.net", email="a@one", api_token="1")
    second_config = DefaultJiraConfig(base_url="https://two.atlassian.net", email="b@two", api_token="2")
    async with JiraClient(first_config, transport=httpx.MockTransport(handler_for("one"))) as first:
        async with JiraClient(second_config, transport=httpx.MockTransport(handler_for("two"))) as second:
            one = await first.server_info.get_server_info()
            two = await second.server_info.get_server_info()

    assert one.data["site"] == "one"
    assert two.data["site"] == "two"
    assert one.data["auth"] != two.data["auth"]


class RecordingForgeApi:
    def __init__(self) -> None:
        self.principals: list[str] = []

    def _requester(self, principal: str) -> Any:
        api = self

        class Requester:
            async def request_jira(self, path: str, *, method: str, headers: Mapping[str, str], content: Any = None) -> httpx.Response:
                api.principals.append(principal)
                return httpx.Response(200, json={"path": path})

        return Requester()

    def as_user(self) -> Any:
        return self._requester("user")

    def as_app(self) -> Any:
        return self._requester("app")


@pytest.mark.asyncio
async def test_forge_client_selects_principal_per_call() -> None:
    api = RecordingForgeApi()
    async with JiraClient(ForgeJiraConfig(api=api)) as jira:
        result = await jira.issues.get_issue(issue_id_or_key="PROJ-1")
        await jira.projects.get_project(project_id_or_key="PROJ", opts=RequestOptions(act_as="app"))

    assert result.data == {"path": "/rest/api/3/issue/PROJ-1"}
    assert api.principals == ["user", "app"]
