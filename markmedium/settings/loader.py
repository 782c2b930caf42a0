"""Helpers for loading configuration."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from markmedium.errors import ConfigError
from markmedium.platforms.medium.api import DEFAULT_API_BASE
from markmedium.platforms.medium.credentials import default_credentials_path

CONFIG_ENV_VAR = "MARKMEDIUM_CONFIG"
CREDENTIALS_ENV_VAR = "MARKMEDIUM_CREDENTIALS"
DEFAULT_CONFIG_PATH = Path("~/.config/markmedium/config.toml")
DEFAULT_TIMEOUT = 10.0


@dataclass(slots=True)
class AppConfig:
    api_base_url: str
    timeout: float
    credentials_path: Path


def _config_path(explicit: str | os.PathLike[str] | None, env: Mapping[str, str]) -> tuple[Path, bool]:
    """Return the config location and whether the caller asked for it explicitly."""
    if explicit:
        return Path(explicit).expanduser(), True
    env_value = env.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser(), True
    return DEFAULT_CONFIG_PATH.expanduser(), False


def _load_toml(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}", details={"path": str(path)})
        return {}
    try:
        with path.open("rb") as fp:
            return tomllib.load(fp)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid TOML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}", details={"path": str(path)}) from exc


def _section(data: Mapping[str, Any], name: str, path: Path) -> Mapping[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{name}] in {path} must be a table", details={"path": str(path)})
    return section


def load_config(
    config_path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    env = env if env is not None else os.environ
    path, required = _config_path(config_path, env)
    data = _load_toml(path, required=required)

    medium_section = _section(data, "medium", path)
    credentials_section = _section(data, "credentials", path)

    credentials_value = env.get(CREDENTIALS_ENV_VAR) or credentials_section.get("path")
    if credentials_value is not None and not isinstance(credentials_value, str):
        raise ConfigError(f"[credentials] path in {path} must be a string", details={"path": str(path)})
    credentials_path = (
        Path(credentials_value).expanduser() if credentials_value else default_credentials_path()
    )

    api_base_url = medium_section.get("api_base_url", DEFAULT_API_BASE)
    if not isinstance(api_base_url, str) or not api_base_url:
        raise ConfigError(f"[medium] api_base_url in {path} must be a string", details={"path": str(path)})

    timeout_value = medium_section.get("timeout", DEFAULT_TIMEOUT)
    try:
        if isinstance(timeout_value, bool):
            raise TypeError(timeout_value)
        timeout = float(timeout_value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"[medium] timeout in {path} must be a number, got {timeout_value!r}",
            details={"path": str(path)},
        ) from exc
    if timeout <= 0:
        raise ConfigError(f"[medium] timeout in {path} must be positive", details={"path": str(path)})

    return AppConfig(
        api_base_url=api_base_url,
        timeout=timeout,
        credentials_path=credentials_path,
    )


__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "CREDENTIALS_ENV_VAR",
    "load_config",
]
