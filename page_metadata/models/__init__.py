"""Models package initialization."""
from page_metadata.models.rules import Context, RuleEntry, RuleSet, RuleTree

__all__ = ["Context", "RuleEntry", "RuleSet", "RuleTree"]
