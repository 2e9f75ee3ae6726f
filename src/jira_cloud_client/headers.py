"""Header construction for outbound Jira requests."""
from __future__ import annotations

import base64
from typing import Dict, Mapping, Optional

from .config import DefaultJiraConfig, JiraConfig


def basic_auth_header(email: str, api_token: str) -> str:
    token = base64.b64encode(f"{email}:{api_token}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def create_headers(
    config: JiraConfig,
    headers: Optional[Mapping[str, str]] = None,
    *,
    is_experimental: bool = False,
) -> Dict[str, str]:
    """Return the full header set for a request.

    Caller supplied ``headers`` are applied last and win over the defaults,
    including the basic ``Authorization`` derived from the configuration.
    """

    merged: Dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if isinstance(config, DefaultJiraConfig):
        merged["Authorization"] = basic_auth_header(config.email, config.api_token)
    if is_experimental:
        merged["X-ExperimentalApi"] = "opt-in"
    for name, value in (headers or {}).items():
        # header names are case-insensitive; keep a single entry per name
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def mask_secret(value: Optional[str], keep_chars: int = 4) -> str:
    """Redact a token for log output, keeping a few trailing characters."""

    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]


__all__ = ["basic_auth_header", "create_headers", "mask_secret"]
