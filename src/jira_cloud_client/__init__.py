"""Async client for the Jira Cloud platform and DevOps REST APIs."""
from __future__ import annotations

from .client import JiraClient
from .config import DefaultJiraConfig, ForgeJiraConfig, JiraConfig, config_from_env, load_config, validate_config
from .errors import ConfigurationError, HttpError, JiraClientError, MissingPathParameterError, ResponseParseError
from .pagination import iter_pages, iter_token_pages, iter_values
from .request import JiraRequester, JiraResult, RequestDescriptor, RequestOptions

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DefaultJiraConfig",
    "ForgeJiraConfig",
    "HttpError",
    "JiraClient",
    "JiraClientError",
    "JiraConfig",
    "JiraRequester",
    "JiraResult",
    "MissingPathParameterError",
    "RequestDescriptor",
    "RequestOptions",
    "ResponseParseError",
    "config_from_env",
    "iter_pages",
    "iter_token_pages",
    "iter_values",
    "load_config",
    "validate_config",
]
