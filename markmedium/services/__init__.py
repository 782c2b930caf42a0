"""Application services."""

from .publishing_service import PublishOutcome, PublishingService

__all__ = ["PublishOutcome", "PublishingService"]
