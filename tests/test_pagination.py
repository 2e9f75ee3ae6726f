from __future__ import annotations

from typing import Callable, Dict, List

import httpx
import pytest

from jira_cloud_client import JiraClient, iter_pages, iter_token_pages, iter_values


def offset_pages(pages: Dict[int, dict], seen: List[int]) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        start_at = int(request.url.params["startAt"])
        seen.append(start_at)
        page = pages.get(start_at)
        if page is None:
            raise AssertionError(f"Unexpected startAt {start_at}")
        return httpx.Response(200, json=page)

    return handler


@pytest.mark.asyncio
async def test_iter_pages_follows_offsets_until_total(make_client: Callable[..., JiraClient]) -> None:
    seen: List[int] = []
    pages = {
        0: {"startAt": 0, "maxResults": 2, "total": 3, "values": [{"key": "A"}, {"key": "B"}]},
        2: {"startAt": 2, "maxResults": 2, "total": 3, "values": [{"key": "C"}]},
    }
    async with make_client(offset_pages(pages, seen)) as jira:
        keys = [project["key"] async for project in iter_values(jira.projects.search_projects, max_results=2, query="x")]

    assert keys == ["A", "B", "C"]
    assert seen == [0, 2]


@pytest.mark.asyncio
async def test_iter_pages_stops_on_is_last(make_client: Callable[..., JiraClient]) -> None:
    seen: List[int] = []
    pages = {
        0: {"startAt": 0, "maxResults": 2, "isLast": False, "values": ["a", "b"]},
        2: {"startAt": 2, "maxResults": 2, "isLast": True, "values": ["c", "d"]},
    }
    async with make_client(offset_pages(pages, seen)) as jira:
        collected = [page async for page in iter_pages(jira.labels.get_all_labels, max_results=2)]

    assert [page["values"] for page in collected] == [["a", "b"], ["c", "d"]]
    assert seen == [0, 2]


@pytest.mark.asyncio
async def test_iter_pages_stops_on_empty_page(make_client: Callable[..., JiraClient]) -> None:
    seen: List[int] = []
    pages = {
        5: {"startAt": 5, "maxResults": 50, "values": ["x"]},
        6: {"startAt": 6, "maxResults": 50, "values": []},
    }
    async with make_client(offset_pages(pages, seen)) as jira:
        values = [value async for value in iter_values(jira.labels.get_all_labels, start_at=5)]

    assert values == ["x"]
    assert seen == [5, 6]


@pytest.mark.asyncio
async def test_iter_token_pages_follows_top_level_token(make_client: Callable[..., JiraClient]) -> None:
    tokens: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        token = request.url.params.get("nextPageToken")
        tokens.append(token or "")
        if token is None:
            return httpx.Response(200, json={"issues": [{"key": "A-1"}], "nextPageToken": "t2"})
        return httpx.Response(200, json={"issues": [{"key": "A-2"}], "isLast": True})

    async with make_client(handler) as jira:
        pages = [
            page
            async for page in iter_token_pages(
                jira.issue_search.search_and_reconcile_issues_using_jql, jql="project = A", max_results=1
            )
        ]

    assert [issue["key"] for page in pages for issue in page["issues"]] == ["A-1", "A-2"]
    assert tokens == ["", "t2"]


@pytest.mark.asyncio
async def test_iter_token_pages_reads_nested_token(make_client: Callable[..., JiraClient]) -> None:
    calls: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if "nextPageToken" not in request.url.params:
            return httpx.Response(
                200, json={"workflowId": "wf-1", "projects": {"nextPageToken": "n2", "values": [{"id": "1"}]}}
            )
        return httpx.Response(200, json={"workflowId": "wf-1", "projects": {"values": [{"id": "2"}]}})

    async with make_client(handler) as jira:
        pages = [
            page
            async for page in iter_token_pages(
                jira.workflows.get_project_usages_for_workflow, key="projects", workflow_id="wf-1"
            )
        ]

    assert len(pages) == 2
    assert calls[1].url.params["nextPageToken"] == "n2"
    assert calls[1].url.path == "/rest/api/3/workflow/wf-1/projectUsages"
