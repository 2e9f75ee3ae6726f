from __future__ import annotations

import base64

from jira_cloud_client.config import DefaultJiraConfig, ForgeJiraConfig
from jira_cloud_client.headers import basic_auth_header, create_headers, mask_secret


def test_default_headers_include_basic_auth(config: DefaultJiraConfig) -> None:
    headers = create_headers(config)
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"
    expected = base64.b64encode(b"bot@example.com:token").decode("ascii")
    assert headers["Authorization"] == f"Basic {expected}"
    assert "X-ExperimentalApi" not in headers


def test_experimental_header_is_opt_in(config: DefaultJiraConfig) -> None:
    assert create_headers(config, is_experimental=True)["X-ExperimentalApi"] == "opt-in"


def test_caller_headers_override_case_insensitively(config: DefaultJiraConfig) -> None:
    headers = create_headers(config, {"authorization": "JWT abc", "X-Trace": "1"})
    assert headers["authorization"] == "JWT abc"
    assert "Authorization" not in headers
    assert headers["X-Trace"] == "1"


def test_forge_headers_have_no_authorization() -> None:
    headers = create_headers(ForgeJiraConfig(api=object()))
    assert "Authorization" not in headers


def test_basic_auth_header_format() -> None:
    assert basic_auth_header("a", "b") == "Basic YTpi"


def test_mask_secret() -> None:
    assert mask_secret(None) == "Not Provided"
    assert mask_secret("short") == "*****"
    assert mask_secret("abcdefghijkl") == "********ijkl"
