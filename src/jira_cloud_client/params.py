"""Helpers turning path templates and parameter maps into request URLs."""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

from .errors import MissingPathParameterError

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


def format_value(value: Any) -> str:
    """Render a parameter value the way Jira expects it on the wire."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(format_value(item) for item in value)
    return str(value)


def build_path(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute every ``{name}`` placeholder in ``template``.

    Raises :class:`MissingPathParameterError` when a placeholder has no key in
    ``params`` or its value is ``None``.
    """

    params = params or {}

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            raise MissingPathParameterError(name, template)
        return quote(format_value(value), safe="")

    return _PLACEHOLDER.sub(replace, template)


def build_query(params: Optional[Mapping[str, Any]] = None) -> str:
    """Encode query parameters, omitting keys whose value is ``None``."""

    if not params:
        return ""
    pairs = [(key, format_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs, quote_via=quote)


def build_url(template: str, *, path_params: Optional[Mapping[str, Any]] = None, query_params: Optional[Mapping[str, Any]] = None) -> str:
    """Return the path plus query string for a request."""

    path = build_path(template, path_params)
    query = build_query(query_params)
    return f"{path}?{query}" if query else path


def compact(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop top level keys set to ``None`` before serialising a body."""

    return {key: value for key, value in payload.items() if value is not None}


__all__ = ["build_path", "build_query", "build_url", "compact", "format_value"]
