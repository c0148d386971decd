"""
HTML helpers shared by the test modules.
"""
from page_metadata.adapters import parse_document

SAMPLE_URL = "http://www.example.com/"


def string_to_dom(html: str):
    """Parse an HTML string the way callers of the engine do."""
    return parse_document(html)


def build_html(tag: str) -> str:
    return f"""
    <html>
      <head>
        {tag}
      </head>
    </html>
    """
