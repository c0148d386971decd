"""
Shared fixtures for the page metadata parser tests.
"""
import pytest

from page_metadata.adapters import make_url_absolute, parse_url
from page_metadata.models import Context
from tests.helpers import SAMPLE_URL, string_to_dom


@pytest.fixture
def context():
    """Extraction context for http://www.example.com/."""
    return Context(url=SAMPLE_URL, make_url_absolute=make_url_absolute, parse_url=parse_url)


@pytest.fixture
def empty_doc():
    return string_to_dom("<html><head></head></html>")
