"""
Rule models for the page metadata parser.
A RuleSet describes how to find one metadata field; a rule tree maps field
names to RuleSets or to nested groups of them.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from bs4 import Tag

# (document) -> matched elements, in document order
SelectorFn = Callable[[Tag], Iterable[Tag]]
Selector = Union[str, SelectorFn]
Extractor = Callable[[Tag], Any]
Processor = Callable[[Any, "Context"], Any]
Scorer = Callable[[Any, Tag], float]


@dataclass(frozen=True)
class Context:
    """Per-call values shared by every ruleset in one extraction."""
    url: Optional[str]
    make_url_absolute: Callable[[str, str], str]
    parse_url: Callable[[str], Optional[str]]


@dataclass(frozen=True)
class RuleEntry:
    """One syntactic way of locating a field: a selector plus an extractor."""
    selector: Selector
    extractor: Extractor

    def select(self, document: Tag) -> list:
        """Return every element matching the selector, in document order."""
        if isinstance(self.selector, str):
            return document.select(self.selector)
        return list(self.selector(document))


@dataclass(frozen=True)
class RuleSet:
    """
    Ordered rules, processor chain and optional scorer for one field.

    Rules are tried in declared order and the first one yielding a value
    wins. The scorer only ranks candidates produced by that winning rule.
    """
    name: str
    rules: Tuple[RuleEntry, ...]
    processors: Tuple[Processor, ...] = field(default_factory=tuple)
    scorer: Optional[Scorer] = None

    def __post_init__(self):
        # Accept lists from callers; store tuples so the set stays immutable
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "processors", tuple(self.processors))

    def compile(self) -> Callable[[Tag, Context], Any]:
        """Compile into a matcher callable."""
        from page_metadata.engine.ruleset import build_ruleset
        return build_ruleset(self.name, self.rules, self.processors, self.scorer)


RuleTree = Mapping[str, Union[RuleSet, "RuleTree"]]
