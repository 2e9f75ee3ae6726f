"""Exception hierarchy raised by the Jira Cloud client.

Transport failures such as connection errors or timeouts are not wrapped;
they surface as the underlying :mod:`httpx` exceptions.
"""
from __future__ import annotations

from typing import Any


class JiraClientError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(JiraClientError, ValueError):
    """The client configuration is missing or inconsistent."""


class MissingPathParameterError(JiraClientError, KeyError):
    """A ``{placeholder}`` in a path template had no value."""

    def __init__(self, name: str, path: str) -> None:
        super().__init__(name)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"Missing value for path parameter '{self.name}' in {self.path}"


class HttpError(JiraClientError):
    """Jira answered with a non-2xx status code.

    ``body`` is always the raw response text; ``data`` holds the decoded JSON
    document when the body could be parsed, otherwise ``None``.
    """

    def __init__(self, status: int, body: str, data: Any = None, *, method: str = "", url: str = "") -> None:
        super().__init__(f"Jira request failed with status {status}")
        self.status = status
        self.body = body
        self.data = data
        self.method = method
        self.url = url

    def __str__(self) -> str:
        target = f" ({self.method} {self.url})" if self.method else ""
        return f"Jira request failed with status {self.status}{target}"

    @property
    def error_messages(self) -> list[str]:
        """Return ``errorMessages`` from a Jira error collection, if present."""

        if isinstance(self.data, dict):
            messages = self.data.get("errorMessages")
            if isinstance(messages, list):
                return [str(message) for message in messages]
        return []


class ResponseParseError(JiraClientError):
    """A JSON response was expected but the body could not be decoded."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Could not decode JSON response (status {status})")
        self.status = status
        self.body = body


__all__ = [
    "ConfigurationError",
    "HttpError",
    "JiraClientError",
    "MissingPathParameterError",
    "ResponseParseError",
]
