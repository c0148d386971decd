"""
HTML document adapter.
Converts raw HTML into the BeautifulSoup tree the rule engine queries.
"""
from typing import Optional, Union

from bs4 import BeautifulSoup

from page_metadata.config import config
from page_metadata.utils.logger import LayerLogger

logger = LayerLogger("html_document")


def parse_document(html: Union[str, bytes], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse HTML into a document.

    Args:
        html: Raw HTML text or bytes
        parser: bs4 tree builder name, defaults to config.HTML_PARSER

    Returns:
        Parsed BeautifulSoup document
    """
    builder = parser or config.HTML_PARSER
    logger.log_action("parse_html", "started", parser=builder, content_length=len(html))
    return BeautifulSoup(html, builder)
