"""Split markdown documents into YAML front matter and body."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from markmedium.errors import DocumentReadError, MalformedDocumentError
from markmedium.platforms.medium.models import DEFAULT_CONTENT_FORMAT, PostMetadata, PublishStatus
from markmedium.utils.logging import get_logger

LOGGER = get_logger(__name__)

DELIMITER = "---"

# Header keys, camelCase first; the snake_case spellings are accepted as well.
_ALIASES = {
    "content_format": ("contentFormat", "content_format"),
    "canonical_url": ("canonicalUrl", "canonical_url"),
    "status": ("publishStatus", "status"),
}


def split_front_matter(text: str) -> tuple[str, str]:
    """Return ``(header, body)``; the body is kept byte for byte."""
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].lstrip("\ufeff").strip() != DELIMITER:
        raise MalformedDocumentError("Document does not start with a '---' front matter block")

    for index in range(1, len(lines)):
        if lines[index].strip() == DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return header, body

    raise MalformedDocumentError("Front matter block is not closed by a '---' line")


def parse_document(text: str) -> PostMetadata:
    """Decode the front matter of ``text`` and attach the body as content."""
    header, body = split_front_matter(text)
    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise MalformedDocumentError(f"Front matter is not valid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise MalformedDocumentError("Front matter must be a mapping of keys to values")

    metadata = _build_metadata(data)
    metadata.content = body
    return metadata


def load_document(path: Path) -> PostMetadata:
    """Read and parse a markdown file from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"Cannot read {path}: {exc}", details={"path": str(path)}) from exc
    metadata = parse_document(text)
    LOGGER.info(
        "Parsed document",
        extra={"event": "document.parsed", "path": str(path), "title": metadata.title},
    )
    return metadata


def _build_metadata(data: Mapping[str, Any]) -> PostMetadata:
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise MalformedDocumentError("Front matter is missing a non-empty 'title'")

    content_format = _lookup(data, "content_format")
    if content_format is None:
        content_format = DEFAULT_CONTENT_FORMAT
    elif not isinstance(content_format, str):
        raise MalformedDocumentError("'contentFormat' must be a string")

    tags = data.get("tags")
    if tags is not None:
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise MalformedDocumentError("'tags' must be a list of strings")
        tags = list(tags)

    canonical_url = _lookup(data, "canonical_url")
    if canonical_url is not None:
        if not isinstance(canonical_url, str):
            raise MalformedDocumentError("'canonicalUrl' must be a string")
        canonical_url = canonical_url.strip()

    raw_status = _lookup(data, "status")
    status: PublishStatus | None = None
    if raw_status is not None:
        if not isinstance(raw_status, str):
            raise MalformedDocumentError("'publishStatus' must be a string")
        try:
            status = PublishStatus.parse(raw_status)
        except ValueError as exc:
            raise MalformedDocumentError(str(exc)) from exc

    return PostMetadata(
        title=title,
        content_format=content_format,
        tags=tags,
        canonical_url=canonical_url,
        status=status,
    )


def _lookup(data: Mapping[str, Any], field: str) -> Any:
    for key in _ALIASES[field]:
        if data.get(key) is not None:
            return data[key]
    return None


__all__ = ["DELIMITER", "load_document", "parse_document", "split_front_matter"]
