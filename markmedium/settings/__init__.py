"""Settings package exports."""

from .loader import AppConfig, CONFIG_ENV_VAR, CREDENTIALS_ENV_VAR, load_config

__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "CREDENTIALS_ENV_VAR",
    "load_config",
]
