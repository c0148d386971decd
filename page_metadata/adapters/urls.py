"""
Default URL helpers injected into the extraction context.
Callers may supply their own implementations to get_metadata.
"""
from typing import Optional
from urllib.parse import urljoin, urlparse


def make_url_absolute(base: Optional[str], relative: str) -> str:
    """Resolve a possibly relative reference against a base URL."""
    if urlparse(relative).scheme:
        return relative
    if not base:
        return relative
    return urljoin(base, relative)


def parse_url(url: Optional[str]) -> Optional[str]:
    """Return the hostname of a URL, or None when it has none."""
    if not url:
        return None
    return urlparse(url).hostname
