"""
Value processors for the default catalog.
Every processor has the signature processor(value, context) -> value.
"""
from typing import Any, List

from page_metadata.models.rules import Context


def strip_whitespace(value: Any, context: Context) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def resolve_url(value: str, context: Context) -> str:
    """Resolve a relative URL against the page URL."""
    if not context.url:
        return value
    return context.make_url_absolute(context.url, value)


def split_keywords(value: str, context: Context) -> List[str]:
    """Split a comma separated keyword list, dropping blank entries."""
    return [keyword.strip() for keyword in value.split(",") if keyword.strip()]


def primary_language(value: str, context: Context) -> str:
    """Reduce a language tag to its primary subtag (en-US -> en)."""
    return value.split("-")[0]
