"""Medium platform adapters."""

from __future__ import annotations

from .api import DEFAULT_API_BASE, MediumApiClient
from .credentials import CredentialRecord, MediumCredentialStore, default_credentials_path
from .models import MediumUser, PostMetadata, PublishedPost, PublishStatus
from .publisher import MediumContentPublisher

__all__ = [
    "CredentialRecord",
    "DEFAULT_API_BASE",
    "MediumApiClient",
    "MediumContentPublisher",
    "MediumCredentialStore",
    "MediumUser",
    "PostMetadata",
    "PublishStatus",
    "PublishedPost",
    "default_credentials_path",
]
