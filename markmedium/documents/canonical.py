"""Attribution line pointing back to the original publication."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

import idna

from markmedium.errors import InvalidUrlError
from markmedium.platforms.medium.models import PostMetadata

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}

REFERENCE_TEMPLATE = "\n\n---\n\n*Originally published at [{base}]({url}).*"


def origin_of(url: str) -> str:
    """Reduce ``url`` to ``scheme://host[:port]`` without a trailing slash."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid canonical URL: {url}", details={"url": url}) from exc

    scheme = parts.scheme.lower()
    host = parts.hostname
    if not scheme or not host:
        raise InvalidUrlError(
            f"Canonical URL must be absolute with a host: {url}", details={"url": url}
        )

    if ":" in host:
        host = f"[{host}]"
    elif not host.isascii():
        # UTS 46 non-transitional processing keeps "ß" and "ς" distinct.
        try:
            host = idna.encode(host, uts46=True).decode("ascii")
        except idna.IDNAError as exc:
            raise InvalidUrlError(
                f"Invalid host in canonical URL: {url}", details={"url": url}
            ) from exc

    netloc = host
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{host}:{port}"

    return urlunsplit((scheme, netloc, "", "", "")).rstrip("/")


def canonical_reference(url: str) -> str:
    """Return the markdown suffix crediting the origin of ``url``."""
    url = url.strip()
    return REFERENCE_TEMPLATE.format(base=origin_of(url), url=url)


def apply_canonical_reference(metadata: PostMetadata) -> PostMetadata:
    """Append the attribution line to ``metadata.content`` when a canonical URL is set."""
    if metadata.canonical_url is not None:
        metadata.content += canonical_reference(metadata.canonical_url)
    return metadata


__all__ = [
    "REFERENCE_TEMPLATE",
    "apply_canonical_reference",
    "canonical_reference",
    "origin_of",
]
