"""Engine package initialization."""
from page_metadata.engine.ruleset import build_ruleset, is_empty
from page_metadata.engine.dispatcher import get_metadata
from page_metadata.engine.provider import get_provider

__all__ = ["build_ruleset", "is_empty", "get_metadata", "get_provider"]
