"""Logging helpers for the Jira client scripts."""
from __future__ import annotations

import logging
from typing import Iterable


def configure_logging(level: int = logging.INFO, *, modules: Iterable[str] | None = None) -> None:
    """Configure plain console logging for command line entry points.

    ``modules`` lists logger names that should log at ``level`` even when the
    root logger was configured elsewhere, e.g. ``["jira_cloud_client.request"]``
    to trace every dispatched call.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    # httpx logs one INFO line per request; keep it for DEBUG runs only
    logging.getLogger("httpx").setLevel(level if level <= logging.DEBUG else logging.WARNING)
    if modules:
        for module in modules:
            logging.getLogger(module).setLevel(level)


__all__ = ["configure_logging"]
