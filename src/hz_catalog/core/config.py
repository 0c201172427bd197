"""Configuration management for hz-catalog.

Handles TOML config files, environment variables, named profiles,
and configuration precedence resolution.

Precedence order (highest to lowest):
1. CLI flags (--member, --cluster-name, --timeout)
2. --dsn flag (parsed into components)
3. Environment variables (HZ_MEMBERS, HZ_CLUSTER_NAME, HZ_CONNECT_TIMEOUT)
4. Named profile (--profile or HZ_CATALOG_PROFILE env var)
5. Config file defaults
6. Built-in defaults
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlsplit

from pydantic import BaseModel, computed_field, field_validator, model_validator

from hz_catalog.core.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hz-catalog" / "config.toml"

DEFAULT_MEMBER = "127.0.0.1:5701"

_HZ_ENV_VARS: dict[str, str] = {
    "HZ_MEMBERS": "cluster_members",
    "HZ_CLUSTER_NAME": "cluster_name",
    "HZ_CONNECT_TIMEOUT": "connect_timeout",
}

_PROFILE_DEFAULTS: dict[str, Any] = {
    "cluster_members": [DEFAULT_MEMBER],
    "cluster_name": "dev",
    "connect_timeout": 10.0,
    "client_name": "hz-catalog",
}


def split_members(value: str) -> list[str]:
    """Split a comma-separated member list, dropping blanks."""
    return [m.strip() for m in value.split(",") if m.strip()]


def parse_dsn(dsn: str) -> dict[str, Any]:
    """Parse hazelcast://host:port[,host:port]/cluster_name?connect_timeout=5."""
    parsed = urlsplit(dsn)
    if parsed.scheme != "hazelcast":
        msg = f"Invalid DSN scheme: '{parsed.scheme}'. Expected 'hazelcast'"
        raise ConfigError(msg)

    result: dict[str, Any] = {}
    members = split_members(parsed.netloc)
    if members:
        result["cluster_members"] = members
    if parsed.path and parsed.path.strip("/"):
        result["cluster_name"] = parsed.path.strip("/")
    query_params = parse_qs(parsed.query)
    if "connect_timeout" in query_params:
        raw = query_params["connect_timeout"][0]
        try:
            result["connect_timeout"] = float(raw)
        except ValueError:
            msg = f"Invalid connect_timeout in DSN: '{raw}'"
            raise ConfigError(msg) from None
    if "client_name" in query_params:
        result["client_name"] = query_params["client_name"][0]
    return result


def _validate_member(member: str) -> str:
    host, sep, port = member.rpartition(":")
    if not sep:
        return member
    if not host:
        msg = f"Invalid member address: '{member}'. Expected host[:port]"
        raise ValueError(msg)
    if not port.isdigit() or not (1 <= int(port) <= 65535):
        msg = f"Invalid port in member '{member}'. Must be 1-65535"
        raise ValueError(msg)
    return member


def _validate_members(members: list[str]) -> list[str]:
    if not members:
        msg = "At least one cluster member is required"
        raise ValueError(msg)
    return [_validate_member(m) for m in members]


class HzProfile(BaseModel):
    dsn: str | None = None
    cluster_members: list[str] = [DEFAULT_MEMBER]
    cluster_name: str = "dev"
    connect_timeout: float = 10.0
    client_name: str = "hz-catalog"

    @model_validator(mode="before")
    @classmethod
    def parse_dsn_into_components(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("dsn"):
            dsn_fields = parse_dsn(data["dsn"])
            for key, value in dsn_fields.items():
                if key not in data:
                    data[key] = value
        return data

    @field_validator("cluster_members", mode="before")
    @classmethod
    def split_member_string(cls, v: Any) -> Any:
        if isinstance(v, str):
            return split_members(v)
        return v

    @field_validator("cluster_members")
    @classmethod
    def validate_members(cls, v: list[str]) -> list[str]:
        return _validate_members(v)

    @field_validator("connect_timeout")
    @classmethod
    def validate_connect_timeout(cls, v: float) -> float:
        if v <= 0:
            msg = f"Invalid connect_timeout: {v}. Must be positive"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def connection_url(self) -> str:
        return f"hazelcast://{','.join(self.cluster_members)}/{self.cluster_name}"


class AppConfig(BaseModel):
    default_timeout: float = 30.0
    default_format: str = "table"
    default_profile: str | None = None
    profiles: dict[str, HzProfile] = {}


class ResolvedConfig(BaseModel):
    cluster_members: list[str] = [DEFAULT_MEMBER]
    cluster_name: str = "dev"
    connect_timeout: float = 10.0
    client_name: str = "hz-catalog"
    default_timeout: float = 30.0
    default_format: str = "table"
    active_profile: str | None = None
    sources: dict[str, str] = {}

    @field_validator("cluster_members")
    @classmethod
    def validate_members(cls, v: list[str]) -> list[str]:
        return _validate_members(v)


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Returns default AppConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return AppConfig.model_validate(data)
    except (ValueError, ConfigError) as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e


def _env_value(env_var: str, field_name: str, value: str) -> Any:
    if field_name == "cluster_members":
        return split_members(value)
    if field_name == "connect_timeout":
        try:
            return float(value)
        except ValueError:
            msg = f"Invalid {env_var} value: '{value}'. Must be a number"
            raise ConfigError(msg) from None
    return value


def resolve_config(
    config: AppConfig,
    profile_name: str | None = None,
    dsn: str | None = None,
    **cli_overrides: Any,
) -> ResolvedConfig:
    """Resolve configuration using precedence chain.

    CLI > DSN > env > profile > config defaults > built-in defaults.
    """
    sources: dict[str, str] = {}
    resolved: dict[str, Any] = {}

    # Layer 1: Built-in defaults
    resolved.update(_PROFILE_DEFAULTS)
    resolved["default_timeout"] = 30.0
    resolved["default_format"] = "table"
    for key in resolved:
        sources[key] = "default"

    # Layer 2: Config file global defaults
    if config.default_timeout != 30.0:
        resolved["default_timeout"] = config.default_timeout
        sources["default_timeout"] = "config"
    if config.default_format != "table":
        resolved["default_format"] = config.default_format
        sources["default_format"] = "config"

    # Layer 3: Named profile
    effective_profile = profile_name
    if not effective_profile:
        effective_profile = os.environ.get("HZ_CATALOG_PROFILE")
    if not effective_profile:
        effective_profile = config.default_profile

    if effective_profile:
        if effective_profile not in config.profiles:
            available = (
                ", ".join(sorted(config.profiles.keys())) if config.profiles else "none"
            )
            msg = (
                f"Unknown profile: '{effective_profile}'. "
                f"Available profiles: {available}"
            )
            raise ConfigError(msg)
        profile = config.profiles[effective_profile]
        for key in profile.model_fields_set:
            if key in resolved:
                resolved[key] = getattr(profile, key)
                sources[key] = f"profile: {effective_profile}"

    # Layer 4: Environment variables
    for env_var, field_name in _HZ_ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is not None:
            resolved[field_name] = _env_value(env_var, field_name, value)
            sources[field_name] = f"env: {env_var}"

    # Layer 5: DSN flag
    if dsn:
        for key, value in parse_dsn(dsn).items():
            if key in resolved:
                resolved[key] = value
                sources[key] = "dsn"

    # Layer 6: CLI flags (highest priority)
    cli_to_field = {
        "member": "cluster_members",
        "cluster_name": "cluster_name",
        "connect_timeout": "connect_timeout",
        "timeout": "default_timeout",
    }
    for cli_name, field_name in cli_to_field.items():
        value = cli_overrides.get(cli_name)
        if value is not None:
            resolved[field_name] = value
            sources[field_name] = f"cli: --{cli_name.replace('_', '-')}"

    resolved["active_profile"] = effective_profile
    resolved["sources"] = sources
    try:
        return ResolvedConfig(**resolved)
    except ValueError as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigError(msg) from e
