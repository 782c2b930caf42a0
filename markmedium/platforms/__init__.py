"""Platform integration package."""

from __future__ import annotations

from .base import ContentPublisher, IdentityResolver

__all__ = [
    "ContentPublisher",
    "IdentityResolver",
]
