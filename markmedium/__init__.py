"""Publish Medium articles from markdown files with YAML front matter."""

from .errors import MarkMediumError

__all__ = ["MarkMediumError"]
