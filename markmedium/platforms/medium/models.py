"""Data models exchanged with the Medium API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

DEFAULT_CONTENT_FORMAT = "markdown"


class PublishStatus(str, Enum):
    """Visibility of a freshly created post."""

    PUBLIC = "public"
    DRAFT = "draft"
    UNLISTED = "unlisted"

    @classmethod
    def parse(cls, value: str) -> "PublishStatus":
        try:
            return cls(value)
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown publish status {value!r}, expected one of: {choices}") from exc


@dataclass(slots=True)
class PostMetadata:
    """Everything needed to create a single Medium post."""

    title: str
    content: str = ""
    content_format: str = DEFAULT_CONTENT_FORMAT
    tags: list[str] | None = None
    canonical_url: str | None = None
    status: PublishStatus | None = None

    def to_payload(self) -> dict[str, Any]:
        """Render the request body expected by ``POST /users/{id}/posts``."""
        payload: dict[str, Any] = {
            "title": self.title,
            "content": self.content,
            "contentFormat": self.content_format,
        }
        if self.tags is not None:
            payload["tags"] = list(self.tags)
        if self.canonical_url is not None:
            payload["canonicalUrl"] = self.canonical_url
        if self.status is not None:
            payload["publishStatus"] = self.status.value
        return payload


@dataclass(slots=True)
class MediumUser:
    """Identity returned by ``GET /me``."""

    id: str

    @classmethod
    def from_data(cls, body: Mapping[str, Any]) -> "MediumUser":
        return cls(id=_required_string(body, "id"))


@dataclass(slots=True)
class PublishedPost:
    """Post returned by ``POST /users/{id}/posts``."""

    url: str

    @classmethod
    def from_data(cls, body: Mapping[str, Any]) -> "PublishedPost":
        return cls(url=_required_string(body, "url"))


def _required_string(body: Mapping[str, Any], key: str) -> str:
    data = body["data"]
    if not isinstance(data, Mapping):
        raise TypeError("'data' is not an object")
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'data.{key}' is not a string")
    if not value:
        raise ValueError(f"'data.{key}' is empty")
    return value


__all__ = [
    "DEFAULT_CONTENT_FORMAT",
    "MediumUser",
    "PostMetadata",
    "PublishStatus",
    "PublishedPost",
]
