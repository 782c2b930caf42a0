"""Markdown document handling."""

from .canonical import apply_canonical_reference, canonical_reference, origin_of
from .front_matter import load_document, parse_document, split_front_matter

__all__ = [
    "apply_canonical_reference",
    "canonical_reference",
    "load_document",
    "origin_of",
    "parse_document",
    "split_front_matter",
]
