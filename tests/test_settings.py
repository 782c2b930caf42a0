from __future__ import annotations

from pathlib import Path

import pytest

from markmedium.errors import ConfigError
from markmedium.settings import CONFIG_ENV_VAR, CREDENTIALS_ENV_VAR, load_config


def test_defaults_without_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    config = load_config(env={})

    assert config.api_base_url == "https://api.medium.com/v1"
    assert config.timeout == 10.0
    assert config.credentials_path == tmp_path / ".markmedium"


def test_values_from_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        '[medium]\napi_base_url = "http://localhost:9000/v1"\ntimeout = 2.5\n'
        f'[credentials]\npath = "{(tmp_path / "creds").as_posix()}"\n',
        encoding="utf-8",
    )

    config = load_config(config_path, env={})

    assert config.api_base_url == "http://localhost:9000/v1"
    assert config.timeout == 2.5
    assert config.credentials_path == tmp_path / "creds"


def test_environment_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('[credentials]\npath = "/ignored"\n', encoding="utf-8")
    env = {CONFIG_ENV_VAR: str(config_path), CREDENTIALS_ENV_VAR: str(tmp_path / "env-creds")}

    config = load_config(env=env)

    assert config.credentials_path == tmp_path / "env-creds"


def test_missing_explicit_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.toml", env={})


def test_invalid_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("[medium\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path, env={})


@pytest.mark.parametrize(
    "content",
    [
        '[medium]\ntimeout = "fast"\n',
        "[medium]\ntimeout = true\n",
        "[medium]\ntimeout = 0\n",
        "[medium]\napi_base_url = 42\n",
        "medium = 3\n",
        'credentials = "~/creds"\n',
        "[credentials]\npath = 5\n",
    ],
)
def test_wrongly_shaped_values_are_config_errors(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_path, env={})


def test_config_path_that_is_a_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_integer_timeout_is_accepted(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("[medium]\ntimeout = 30\n", encoding="utf-8")

    assert load_config(config_path, env={}).timeout == 30.0
