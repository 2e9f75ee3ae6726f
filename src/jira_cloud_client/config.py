"""Configuration helpers for the Jira Cloud client.

Two client types are supported.  ``DefaultJiraConfig`` talks to a Jira site
directly over HTTPS with basic authentication built from an account e-mail
and API token.  ``ForgeJiraConfig`` routes every call through a Forge-style
product API object that performs its own authentication.

Configuration can be built by hand, read from the environment (optionally
seeded from a ``.env`` file) or loaded from a YAML document.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Mapping, Optional, Union

from .errors import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover
    from .request import ForgeApi

ClientType = Literal["default", "forge"]


@dataclass(slots=True)
class DefaultJiraConfig:
    """Direct REST access to a Jira Cloud site."""

    base_url: str
    email: str
    api_token: str
    ca_bundle: str | bool | None = None
    timeout: tuple[float, float] = (5.0, 30.0)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.strip().rstrip("/") if isinstance(self.base_url, str) else self.base_url

    @property
    def type(self) -> ClientType:
        return "default"


@dataclass(slots=True)
class ForgeJiraConfig:
    """Requests are executed through a Forge product API object."""

    api: "ForgeApi"

    @property
    def type(self) -> ClientType:
        return "forge"


JiraConfig = Union[DefaultJiraConfig, ForgeJiraConfig]


def validate_config(config: object) -> None:
    """Ensure ``config`` carries everything its client type needs."""

    if config is None:
        msg = "Config is required"
        raise ConfigurationError(msg)
    if isinstance(config, DefaultJiraConfig):
        if not config.email:
            msg = "Default config must have an 'email'"
            raise ConfigurationError(msg)
        if not config.api_token:
            msg = "Default config must have an 'api_token'"
            raise ConfigurationError(msg)
        if not config.base_url:
            msg = "Default config must have a 'base_url'"
            raise ConfigurationError(msg)
        if not config.base_url.startswith(("https://", "http://")):
            msg = f"Base URL must be an absolute http(s) URL, got {config.base_url!r}"
            raise ConfigurationError(msg)
    elif isinstance(config, ForgeJiraConfig):
        if config.api is None:
            msg = "Forge config must have an 'api'"
            raise ConfigurationError(msg)
    else:
        msg = f"Invalid config type: {type(config).__name__}. Must be DefaultJiraConfig or ForgeJiraConfig"
        raise ConfigurationError(msg)


def load_env_file(start: Path | None = None) -> Optional[Path]:
    """Load variables from the nearest ``.env`` file without overriding existing ones.

    Returns the path of the file that was read, if any.
    """

    start = start or Path.cwd()
    for directory in (start, *start.parents):
        env_path = directory / ".env"
        if not env_path.is_file():
            continue
        with env_path.open("r", encoding="utf-8") as env_file:
            for raw_line in env_file:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))
        return env_path
    return None


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if value is not None:
        value = value.strip()
    if not value:
        msg = f"Environment variable {name} is not set"
        raise ConfigurationError(msg)
    return value


def _ca_bundle_from_env(name: Optional[str]) -> str | bool | None:
    if not name:
        return None
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    cleaned = raw.strip()
    if cleaned.lower() in {"false", "0", "no"}:
        return False
    return cleaned


def config_from_env(
    *,
    base_url_env: str = "JIRA_BASE_URL",
    email_env: str = "JIRA_EMAIL",
    api_token_env: str = "JIRA_API_TOKEN",
    ca_bundle_env: Optional[str] = "JIRA_CA_BUNDLE",
    env_file: bool = True,
) -> DefaultJiraConfig:
    """Build a :class:`DefaultJiraConfig` from environment variables."""

    if env_file:
        load_env_file()
    config = DefaultJiraConfig(
        base_url=_require_env(base_url_env),
        email=_require_env(email_env),
        api_token=_require_env(api_token_env),
        ca_bundle=_ca_bundle_from_env(ca_bundle_env),
    )
    validate_config(config)
    return config


def _load_yaml(path: Path) -> Mapping[str, object]:
    import yaml

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, Mapping):
        msg = "Configuration file must contain a mapping"
        raise ConfigurationError(msg)
    return data


def _value_or_env(raw: Mapping[str, object], key: str, default_env: str) -> str:
    value = raw.get(key)
    if value is not None and str(value).strip():
        return str(value).strip()
    env_name = raw.get(f"{key}_env", default_env)
    return _require_env(str(env_name))


def load_config(path: Path | str) -> DefaultJiraConfig:
    """Load a :class:`DefaultJiraConfig` from the ``jira`` mapping of a YAML file.

    Every value may be given inline or through a ``<key>_env`` indirection;
    the API token is only ever read from the environment.
    """

    data = _load_yaml(Path(path))
    jira = data.get("jira")
    if not isinstance(jira, Mapping):
        msg = "Configuration requires a 'jira' mapping"
        raise ConfigurationError(msg)

    ca_bundle = jira.get("ca_bundle")
    if ca_bundle is None:
        ca_bundle = _ca_bundle_from_env(str(jira.get("ca_bundle_env", "JIRA_CA_BUNDLE")))

    timeout_raw = jira.get("timeout")
    if isinstance(timeout_raw, Mapping):
        timeout = (float(timeout_raw.get("connect", 5.0)), float(timeout_raw.get("read", 30.0)))
    elif isinstance(timeout_raw, (int, float)):
        timeout = (float(timeout_raw), float(timeout_raw))
    else:
        timeout = (5.0, 30.0)

    config = DefaultJiraConfig(
        base_url=_value_or_env(jira, "base_url", "JIRA_BASE_URL"),
        email=_value_or_env(jira, "email", "JIRA_EMAIL"),
        api_token=_require_env(str(jira.get("api_token_env", "JIRA_API_TOKEN"))),
        ca_bundle=ca_bundle,
        timeout=timeout,
    )
    validate_config(config)
    return config


__all__ = [
    "ClientType",
    "DefaultJiraConfig",
    "ForgeJiraConfig",
    "JiraConfig",
    "config_from_env",
    "load_config",
    "load_env_file",
    "validate_config",
]
