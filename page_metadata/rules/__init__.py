"""Rules package initialization."""
from page_metadata.rules.catalog import metadata_rules
from page_metadata.rules.extractors import attribute, constant, document_root, text
from page_metadata.rules.processors import (
    primary_language,
    resolve_url,
    split_keywords,
    strip_whitespace,
)
from page_metadata.rules.scorers import ANY_SIZE_SCORE, score_icon_size

__all__ = [
    "metadata_rules",
    "attribute",
    "constant",
    "document_root",
    "text",
    "primary_language",
    "resolve_url",
    "split_keywords",
    "strip_whitespace",
    "ANY_SIZE_SCORE",
    "score_icon_size",
]
