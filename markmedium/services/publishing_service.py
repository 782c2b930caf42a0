"""High-level orchestration for the ``init`` and ``publish`` commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from markmedium.documents import apply_canonical_reference, load_document
from markmedium.platforms import ContentPublisher, IdentityResolver
from markmedium.platforms.medium import CredentialRecord, MediumCredentialStore, PostMetadata
from markmedium.utils.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class PublishOutcome:
    """Result of a publish invocation."""

    metadata: PostMetadata
    payload: dict[str, Any] = field(default_factory=dict)
    url: str | None = None

    @property
    def dry_run(self) -> bool:
        return self.url is None


class PublishingService:
    """Wires document parsing, credentials and the platform publisher together."""

    def __init__(
        self,
        publisher: ContentPublisher,
        credential_store: MediumCredentialStore,
        identity_resolver: IdentityResolver,
    ) -> None:
        self._publisher = publisher
        self._credentials = credential_store
        self._identity = identity_resolver

    def initialize(self, token: str) -> Path:
        """Look up the author behind ``token`` and store both for later runs."""
        author_id = self._identity.resolve_author(token)
        path = self._credentials.save(CredentialRecord(token=token, author_id=author_id))
        LOGGER.info("Credentials saved", extra={"event": "credentials.saved", "path": str(path)})
        return path

    def prepare_post(self, article_path: Path) -> PostMetadata:
        """Parse ``article_path`` and finalise its content."""
        metadata = load_document(article_path)
        return apply_canonical_reference(metadata)

    def publish_file(self, article_path: Path, *, dry_run: bool = False) -> PublishOutcome:
        """Publish a markdown file; ``dry_run`` stops before any network call."""
        if not dry_run:
            self._publisher.prepare()
        metadata = self.prepare_post(article_path)
        payload = metadata.to_payload()

        if dry_run:
            LOGGER.info(
                "Dry run, skipping publish",
                extra={"event": "publish.dry_run", "path": str(article_path)},
            )
            return PublishOutcome(metadata=metadata, payload=payload)

        url = self._publisher.publish(metadata)
        return PublishOutcome(metadata=metadata, payload=payload, url=url)


__all__ = ["PublishOutcome", "PublishingService"]
