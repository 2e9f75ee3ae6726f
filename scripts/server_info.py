"""CLI helper that checks connectivity by printing the Jira server information."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging

from jira_cloud_client import JiraClient, config_from_env, load_config
from jira_cloud_client.config import DefaultJiraConfig
from jira_cloud_client.headers import mask_secret
from jira_cloud_client.logging_setup import configure_logging

LOGGER = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print Jira server information and the current user")
    parser.add_argument("--config", help="Path to a YAML configuration file; defaults to JIRA_* environment variables")
    parser.add_argument("--verbose", action="store_true", help="Log every dispatched request")
    return parser.parse_args()


async def run(config: DefaultJiraConfig) -> None:
    async with JiraClient(config) as jira:
        server = await jira.server_info.get_server_info()
        print(json.dumps(server.data, indent=2))
        myself = await jira.myself.get_current_user()
        LOGGER.info("Authenticated as %s", (myself.data or {}).get("displayName"))


def main() -> None:
    args = parse_args()
    level = logging.DEBUG if args.verbose else logging.INFO
    configure_logging(level=level, modules=["jira_cloud_client"])
    config = load_config(args.config) if args.config else config_from_env()
    LOGGER.info("Connecting to %s as %s (token %s)", config.base_url, config.email, mask_secret(config.api_token))
    asyncio.run(run(config))


if __name__ == "__main__":
    main()
