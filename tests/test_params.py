from __future__ import annotations

import pytest

from jira_cloud_client.errors import MissingPathParameterError
from jira_cloud_client.params import build_path, build_query, build_url, compact, format_value


def test_build_path_substitutes_every_placeholder() -> None:
    path = build_path(
        "/rest/builds/0.1/pipelines/{pipelineId}/builds/{buildNumber}",
        {"pipelineId": "pipe-1", "buildNumber": 42},
    )
    assert path == "/rest/builds/0.1/pipelines/pipe-1/builds/42"
    assert "{" not in path and "}" not in path


def test_build_path_percent_encodes_values() -> None:
    path = build_path("/rest/devinfo/0.10/repository/{repositoryId}", {"repositoryId": "org/repo name"})
    assert path == "/rest/devinfo/0.10/repository/org%2Frepo%20name"


def test_build_path_missing_value_raises() -> None:
    with pytest.raises(MissingPathParameterError) as excinfo:
        build_path("/rest/api/3/issue/{issueIdOrKey}", {})
    assert excinfo.value.name == "issueIdOrKey"
    assert "issueIdOrKey" in str(excinfo.value)


def test_build_path_none_value_raises() -> None:
    with pytest.raises(MissingPathParameterError):
        build_path("/rest/api/3/issue/{issueIdOrKey}", {"issueIdOrKey": None})


def test_build_query_omits_none_values() -> None:
    query = build_query({"_updateSequenceNumber": None, "expand": "names"})
    assert query == "expand=names"
    assert "_updateSequenceNumber" not in query
    assert build_query({"a": None}) == ""


def test_format_value_renders_booleans_and_sequences() -> None:
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(["summary", "status"]) == "summary,status"
    assert format_value(10) == "10"


def test_build_url_without_query_has_no_question_mark() -> None:
    assert build_url("/rest/api/3/myself") == "/rest/api/3/myself"
    url = build_url("/rest/api/3/label", query_params={"startAt": 0, "maxResults": 10})
    assert url == "/rest/api/3/label?startAt=0&maxResults=10"


def test_compact_drops_none_only() -> None:
    assert compact({"jql": "project = A", "maxResults": None, "fieldsByKeys": False}) == {
        "jql": "project = A",
        "fieldsByKeys": False,
    }
