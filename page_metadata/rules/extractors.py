"""
Extractors and selector helpers for building rule entries.
"""
from typing import Any, Callable, List

from bs4 import Tag


def attribute(name: str) -> Callable[[Tag], Any]:
    """Extractor returning an attribute value, or None when it is missing."""
    def extract(element: Tag) -> Any:
        value = element.get(name)
        # bs4 returns multi-valued attributes such as rel as lists
        if isinstance(value, list):
            return " ".join(value)
        return value
    extract.__name__ = f"attribute_{name}"
    return extract


def text() -> Callable[[Tag], str]:
    """Extractor returning the element's text content."""
    def extract(element: Tag) -> str:
        return element.get_text()
    return extract


def constant(value: Any) -> Callable[[Tag], Any]:
    """Extractor that ignores the element and returns a fixed value."""
    def extract(element: Tag) -> Any:
        return value
    return extract


def document_root(document: Tag) -> List[Tag]:
    """Selector matching the document itself, so the rule always applies."""
    return [document]
