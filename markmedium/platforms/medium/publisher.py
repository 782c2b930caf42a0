"""Medium content publisher."""

from __future__ import annotations

from markmedium.platforms.base import ContentPublisher
from markmedium.utils.logging import get_logger

from .api import MediumApiClient
from .credentials import CredentialRecord, MediumCredentialStore
from .models import PostMetadata

LOGGER = get_logger(__name__)


class MediumContentPublisher(ContentPublisher):
    """Coordinates identity lookup and post creation against Medium."""

    def __init__(
        self,
        credential_store: MediumCredentialStore,
        api_client: MediumApiClient,
    ) -> None:
        self._credentials = credential_store
        self._api_client = api_client
        self._record: CredentialRecord | None = None

    def prepare(self) -> None:
        """Load the stored token and author id."""
        self._record = self._credentials.load()

    def resolve_author(self, token: str) -> str:
        user = self._api_client.fetch_me(token)
        LOGGER.info("Resolved Medium author", extra={"event": "medium.identity", "author_id": user.id})
        return user.id

    def publish(self, metadata: PostMetadata) -> str:
        record = self._record
        if record is None:
            record = self._record = self._credentials.load()

        post = self._api_client.create_post(record.token, record.author_id, metadata.to_payload())
        LOGGER.info(
            "Post published",
            extra={"event": "medium.published", "title": metadata.title, "url": post.url},
        )
        return post.url
