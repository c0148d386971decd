"""
RuleSet compiler.
Turns a declarative list of rules, processors and an optional scorer into a
matcher callable: matcher(document, context) -> value or None.
"""
from typing import Any, Callable, List, Optional, Sequence, Tuple

from bs4 import Tag

from page_metadata.models.rules import Context, Processor, RuleEntry, Scorer
from page_metadata.utils.logger import LayerLogger

logger = LayerLogger("ruleset")

Matcher = Callable[[Tag, Context], Any]


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty lists."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _normalize_rule(rule: Any, name: str, position: int) -> RuleEntry:
    if isinstance(rule, RuleEntry):
        entry = rule
    elif isinstance(rule, (tuple, list)) and len(rule) == 2:
        entry = RuleEntry(selector=rule[0], extractor=rule[1])
    else:
        raise ValueError(
            f"Rule {position} of ruleset '{name}' must be a RuleEntry or a (selector, extractor) pair"
        )

    if not isinstance(entry.selector, str) and not callable(entry.selector):
        raise ValueError(f"Rule {position} of ruleset '{name}' has an invalid selector")
    if not callable(entry.extractor):
        raise ValueError(f"Rule {position} of ruleset '{name}' has a non-callable extractor")
    return entry


def _pick_best(
    candidates: List[Tuple[Any, Tag]],
    scorer: Scorer,
) -> Tuple[Any, float]:
    # Strict comparison keeps the earliest candidate on ties
    best_value, best_element = candidates[0]
    best_score = scorer(best_value, best_element)
    for value, element in candidates[1:]:
        score = scorer(value, element)
        if score > best_score:
            best_value, best_score = value, score
    return best_value, best_score


def build_ruleset(
    name: str,
    rules: Sequence[Any],
    processors: Optional[Sequence[Processor]] = None,
    scorer: Optional[Scorer] = None,
) -> Matcher:
    """
    Compile a ruleset into a matcher.

    Args:
        name: Field name, used in logs and error messages
        rules: Ordered RuleEntry objects or (selector, extractor) pairs
        processors: Transforms applied in order as processor(value, context)
        scorer: Optional scorer(value, element) used to pick one candidate
            when the winning rule matches several elements

    Returns:
        matcher(document, context) returning the resolved value or None

    Raises:
        ValueError: If the rule list is empty or an entry is malformed
    """
    if not rules:
        raise ValueError(f"Ruleset '{name}' must define at least one rule")

    entries = tuple(_normalize_rule(rule, name, i) for i, rule in enumerate(rules))
    chain = tuple(processors or ())

    def process(raw: Any, context: Context) -> Any:
        value = raw
        for processor in chain:
            value = processor(value, context)
        return value

    def matcher(document: Tag, context: Context) -> Any:
        for position, entry in enumerate(entries):
            elements = entry.select(document)
            if not elements:
                continue

            candidates = []
            for element in elements:
                raw = entry.extractor(element)
                if is_empty(raw):
                    continue
                value = process(raw, context)
                if is_empty(value):
                    continue
                if scorer is None:
                    logger.log_rule_match(name, position, url=context.url)
                    return value
                candidates.append((value, element))

            if candidates:
                value, score = _pick_best(candidates, scorer)
                logger.log_rule_match(
                    name,
                    position,
                    url=context.url,
                    candidates=len(candidates),
                    score=score,
                )
                return value

        return None

    matcher.__name__ = f"ruleset_{name}"
    return matcher
