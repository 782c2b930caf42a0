"""Error taxonomy shared by every publishing step."""

from __future__ import annotations

from typing import Any, Mapping


class MarkMediumError(RuntimeError):
    """Base class for failures that terminate an invocation."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = dict(details or {})


class ConfigError(MarkMediumError):
    """Raised when the configuration file is missing or not valid TOML."""


class MalformedDocumentError(MarkMediumError):
    """Raised when the front matter is missing, undecodable or lacks a title."""


class DocumentReadError(MarkMediumError):
    """Raised when the markdown file cannot be read from disk."""


class InvalidUrlError(MarkMediumError):
    """Raised when ``canonicalUrl`` is not an absolute URL with a host."""


class CredentialMissingOrCorruptError(MarkMediumError):
    """Raised when the stored credential file is absent or unusable."""


class ApiFailure(MarkMediumError):
    """Raised when Medium answers with an ``errors`` envelope."""


class ProtocolMismatchError(MarkMediumError):
    """Raised when a response matches neither the success nor the error shape."""


class TransportError(MarkMediumError):
    """Raised when the Medium API cannot be reached."""


__all__ = [
    "ApiFailure",
    "ConfigError",
    "CredentialMissingOrCorruptError",
    "DocumentReadError",
    "InvalidUrlError",
    "MalformedDocumentError",
    "MarkMediumError",
    "ProtocolMismatchError",
    "TransportError",
]
