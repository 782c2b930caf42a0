"""Credential management for the Medium integration."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from markmedium.errors import CredentialMissingOrCorruptError

DEFAULT_CREDENTIALS_NAME = ".markmedium"


def default_credentials_path() -> Path:
    return Path.home() / DEFAULT_CREDENTIALS_NAME


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """Integration token together with the author it belongs to."""

    token: str
    author_id: str


class MediumCredentialStore:
    """Persists the integration token and author id as a small JSON file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_credentials_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> CredentialRecord:
        """Read the stored record, failing when it is missing or unusable."""
        path = self._path
        hint = "run `markmedium init <token>` first"
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise CredentialMissingOrCorruptError(
                f"No credentials found at {path}; {hint}", details={"path": str(path)}
            ) from exc
        except OSError as exc:
            raise CredentialMissingOrCorruptError(
                f"Cannot read credentials at {path}: {exc}", details={"path": str(path)}
            ) from exc

        try:
            payload = json.loads(raw)
            token = payload["token"]
            author_id = payload["id"]
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            raise CredentialMissingOrCorruptError(
                f"Credentials at {path} are corrupt; {hint}", details={"path": str(path)}
            ) from exc

        if not isinstance(token, str) or not token or not isinstance(author_id, str) or not author_id:
            raise CredentialMissingOrCorruptError(
                f"Credentials at {path} are incomplete; {hint}", details={"path": str(path)}
            )
        return CredentialRecord(token=token, author_id=author_id)

    def save(self, record: CredentialRecord) -> Path:
        """Overwrite the stored record and return its location."""
        path = self._path
        if not record.token or not record.author_id:
            raise CredentialMissingOrCorruptError(
                "Refusing to store credentials without a token and author id",
                details={"path": str(path)},
            )
        data = json.dumps({"token": record.token, "id": record.author_id})
        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", delete=False, dir=str(path.parent)) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
            tmp_path.replace(path)
            if os.name != "nt":  # the file holds a bearer token
                os.chmod(path, 0o600)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise CredentialMissingOrCorruptError(
                f"Cannot write credentials to {path}: {exc}", details={"path": str(path)}
            ) from exc
        return path


__all__ = [
    "CredentialRecord",
    "DEFAULT_CREDENTIALS_NAME",
    "MediumCredentialStore",
    "default_credentials_path",
]
