from __future__ import annotations

from typing import Any, Callable, List

import httpx
import pytest

from jira_cloud_client import DefaultJiraConfig, JiraClient
from jira_cloud_client.request import JiraResult, RequestDescriptor

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingRequester:
    """Stands in for JiraRequester and keeps every descriptor it receives."""

    def __init__(self, data: Any = None) -> None:
        self.descriptors: List[RequestDescriptor] = []
        self._data = data

    async def dispatch(self, descriptor: RequestDescriptor) -> JiraResult[Any]:
        self.descriptors.append(descriptor)
        return JiraResult(status=200, data=self._data)


@pytest.fixture
def config() -> DefaultJiraConfig:
    return DefaultJiraConfig(base_url="https://example.atlassian.net", email="bot@example.com", api_token="token")


@pytest.fixture
def make_client(config: DefaultJiraConfig) -> Callable[[Handler], JiraClient]:
    def factory(handler: Handler) -> JiraClient:
        return JiraClient(config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def recorder() -> RecordingRequester:
    return RecordingRequester()
