"""
Page metadata parser.
Extracts title, description, canonical URL, icon, preview image, type,
keywords, language and provider from a parsed HTML document using
prioritized, declarative rules.
"""
from page_metadata.adapters import make_url_absolute, parse_document, parse_url
from page_metadata.engine import build_ruleset, get_metadata, get_provider
from page_metadata.models import Context, RuleEntry, RuleSet
from page_metadata.rules import metadata_rules

__version__ = "1.0.0"

__all__ = [
    "build_ruleset",
    "get_metadata",
    "get_provider",
    "metadata_rules",
    "parse_document",
    "make_url_absolute",
    "parse_url",
    "Context",
    "RuleEntry",
    "RuleSet",
]
