"""Adapters package initialization."""
from page_metadata.adapters.html_document import parse_document
from page_metadata.adapters.urls import make_url_absolute, parse_url

__all__ = ["parse_document", "make_url_absolute", "parse_url"]
