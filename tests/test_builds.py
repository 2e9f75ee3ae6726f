from __future__ import annotations

import inspect
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from jira_cloud_client import JiraClient, RequestOptions
from jira_cloud_client.services import (
    BuildsService,
    DeploymentsService,
    DevelopmentInformationService,
    DevopsComponentsService,
    FeatureFlagsService,
    OperationsService,
    RemoteLinksService,
    SecurityInformationService,
)

BUILD = {
    "schemaVersion": "1.0",
    "pipelineId": "pipe-1",
    "buildNumber": 42,
    "updateSequenceNumber": 1,
    "displayName": "Build 42",
    "url": "https://ci.example.com/pipe-1/42",
    "state": "successful",
    "lastUpdated": "2024-01-01T00:00:00Z",
    "issueKeys": ["PROJ-1"],
}


@pytest.mark.asyncio
async def test_delete_build_by_key_substitutes_path(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(202)

    async with make_client(handler) as jira:
        result = await jira.builds.delete_build_by_key(pipeline_id="pipe-1", build_number=42, authorization="JWT abc")

    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/rest/builds/0.1/pipelines/pipe-1/builds/42"
    assert seen[0].url.query == b""
    assert result.data is None


@pytest.mark.asyncio
async def test_undefined_sequence_number_is_not_sent(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(202)

    async with make_client(handler) as jira:
        await jira.builds.delete_build_by_key(
            pipeline_id="pipe-1", build_number=42, authorization="JWT abc", update_sequence_number=None
        )
        await jira.builds.delete_build_by_key(
            pipeline_id="pipe-1", build_number=42, authorization="JWT abc", update_sequence_number=7
        )

    assert "_updateSequenceNumber" not in seen[0].url.params
    assert b"undefined" not in seen[0].url.query
    assert seen[1].url.params["_updateSequenceNumber"] == "7"


@pytest.mark.asyncio
async def test_delete_ignores_response_body(make_client: Callable[..., JiraClient]) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(202, json={"unexpected": True})

    async with make_client(handler) as jira:
        result = await jira.builds.delete_build_by_key(pipeline_id="p", build_number=1, authorization="JWT abc")

    assert result.status == 202
    assert result.data is None


@pytest.mark.asyncio
async def test_authorization_header_wins_over_option_headers(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=BUILD)

    opts = RequestOptions(headers={"authorization": "Bearer other", "X-Trace": "t-1"})
    async with make_client(handler) as jira:
        await jira.builds.get_build_by_key(pipeline_id="pipe-1", build_number=42, authorization="JWT abc", opts=opts)
        await jira.builds.submit_builds(authorization="JWT abc", request_body={"builds": [BUILD]})

    for request in seen:
        assert request.headers.get_list("Authorization") == ["JWT abc"]
    assert seen[0].headers["X-Trace"] == "t-1"
    assert opts.headers["authorization"] == "Bearer other"


DEVOPS_SERVICES = (
    BuildsService,
    DeploymentsService,
    DevelopmentInformationService,
    DevopsComponentsService,
    FeatureFlagsService,
    OperationsService,
    RemoteLinksService,
    SecurityInformationService,
)

AUTHORIZED_OPERATIONS = [
    (service, name)
    for service in DEVOPS_SERVICES
    for name, method in inspect.getmembers(service, inspect.iscoroutinefunction)
    if not name.startswith("_") and "authorization" in inspect.signature(method).parameters
]

DUMMY_ARGUMENTS: Dict[str, Any] = {
    "build_number": 7,
    "deployment_sequence_number": 7,
    "entity_type": "commit",
    "request_body": {},
}


def test_every_devops_operation_takes_authorization() -> None:
    assert len(AUTHORIZED_OPERATIONS) == 44


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("service", "name"),
    AUTHORIZED_OPERATIONS,
    ids=[f"{service.__name__}.{name}" for service, name in AUTHORIZED_OPERATIONS],
)
async def test_devops_authorization_always_wins(recorder, service: type, name: str) -> None:
    method = getattr(service(recorder), name)
    kwargs: Dict[str, Any] = {}
    for parameter in inspect.signature(method).parameters.values():
        if parameter.default is inspect.Parameter.empty and parameter.name != "authorization":
            kwargs[parameter.name] = DUMMY_ARGUMENTS.get(parameter.name, "value-1")

    opts = RequestOptions(headers={"authorization": "Bearer other", "AUTHORIZATION": "Basic other"})
    await method(authorization="JWT abc", opts=opts, **kwargs)

    (descriptor,) = recorder.descriptors
    auth_values = [value for key, value in descriptor.headers.items() if key.lower() == "authorization"]
    assert auth_values == ["JWT abc"]


@pytest.mark.asyncio
async def test_descriptors_are_identical_for_identical_calls(recorder) -> None:
    builds = BuildsService(recorder)
    for _ in range(2):
        await builds.delete_builds_by_property(
            authorization="JWT abc",
            properties={"accountId": "account-123"},
            update_sequence_number=3,
        )
        await builds.submit_builds(authorization="JWT abc", request_body={"builds": [BUILD]})

    first_delete, first_submit, second_delete, second_submit = recorder.descriptors
    assert first_delete == second_delete
    assert first_submit == second_submit
    assert first_delete.query_params == {"accountId": "account-123", "_updateSequenceNumber": 3}
    assert first_delete.is_response_available is False
    assert json.loads(first_submit.body) == {"builds": [BUILD]}


@pytest.mark.asyncio
async def test_submit_builds_passes_partial_failures_through(make_client: Callable[..., JiraClient]) -> None:
    response_body = {
        "acceptedBuilds": [{"pipelineId": "pipe-1", "buildNumber": 42}],
        "rejectedBuilds": [
            {
                "key": {"pipelineId": "pipe-1", "buildNumber": 43},
                "errors": [{"message": "Invalid state"}],
            }
        ],
        "unknownIssueKeys": ["NOPE-1"],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/rest/builds/0.1/bulk"
        payload = json.loads(request.content)
        assert len(payload["builds"]) == 2
        return httpx.Response(202, json=response_body)

    second = dict(BUILD, buildNumber=43, state="bogus")
    async with make_client(handler) as jira:
        result = await jira.builds.submit_builds(authorization="JWT abc", request_body={"builds": [BUILD, second]})

    assert result.status == 202
    assert result.data == response_body
    assert result.data["acceptedBuilds"] == response_body["acceptedBuilds"]
    assert result.data["rejectedBuilds"] == response_body["rejectedBuilds"]


@pytest.mark.asyncio
async def test_delete_builds_by_property_sends_filters(make_client: Callable[..., JiraClient]) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(202)

    async with make_client(handler) as jira:
        await jira.builds.delete_builds_by_property(
            authorization="JWT abc", properties={"accountId": "account-123", "repoId": "repo-345"}
        )

    assert seen[0].url.path == "/rest/builds/0.1/bulkByProperties"
    assert dict(seen[0].url.params) == {"accountId": "account-123", "repoId": "repo-345"}
