"""Base contracts for content publishing platforms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markmedium.platforms.medium.models import PostMetadata


class ContentPublisher(ABC):
    """Publishes a finalised post to a concrete platform."""

    @abstractmethod
    def prepare(self) -> None:
        """Execute pre-flight checks, e.g., credential loading."""

    @abstractmethod
    def publish(self, metadata: PostMetadata) -> str:
        """Publish the post and return its public URL."""


class IdentityResolver(Protocol):
    """Maps an integration token to the author it belongs to."""

    def resolve_author(self, token: str) -> str:
        """Return the author id for ``token``."""
