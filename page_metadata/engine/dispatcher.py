"""
Rule tree dispatcher.
Applies a (possibly nested) tree of rulesets to a document and assembles a
result dict of the same shape.
"""
from typing import Any, Callable, Dict, Mapping, Optional

from bs4 import Tag

from page_metadata.adapters import urls
from page_metadata.engine.provider import get_provider
from page_metadata.models.rules import Context, RuleSet, RuleTree
from page_metadata.utils.logger import LayerLogger

logger = LayerLogger("dispatcher")


def _resolve_tree(document: Tag, tree: RuleTree, context: Context) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, node in tree.items():
        if isinstance(node, RuleSet):
            value = node.compile()(document, context)
            if value is not None:
                result[key] = value
        elif isinstance(node, Mapping):
            result[key] = _resolve_tree(document, node, context)
        else:
            # Not a rule definition; carried over as given
            result[key] = node
    return result


def _missing_fields(tree: RuleTree, result: Mapping[str, Any], prefix: str = "") -> list:
    missing = []
    for key, node in tree.items():
        if isinstance(node, RuleSet) and key not in result:
            missing.append(prefix + key)
        elif isinstance(node, Mapping):
            missing.extend(_missing_fields(node, result.get(key, {}), f"{prefix}{key}."))
    return missing


def get_metadata(
    document: Tag,
    url: Optional[str],
    rule_tree: Optional[RuleTree] = None,
    make_url_absolute: Optional[Callable[[str, str], str]] = None,
    parse_url: Optional[Callable[[str], Optional[str]]] = None,
) -> Dict[str, Any]:
    """
    Extract metadata from a parsed document.

    Args:
        document: Parsed HTML document
        url: Page URL, used to resolve relative links and for fallbacks
        rule_tree: Field name -> RuleSet or nested group; defaults to
            the built-in metadata_rules catalog
        make_url_absolute: (base, relative) -> absolute URL
        parse_url: url -> hostname

    Returns:
        Dict mirroring the rule tree. Fields that resolved to nothing are
        absent; groups are always present.

    Errors raised by rule selectors, extractors or processors propagate.
    """
    if rule_tree is None:
        from page_metadata.rules.catalog import metadata_rules
        rule_tree = metadata_rules

    context = Context(
        url=url,
        make_url_absolute=make_url_absolute or urls.make_url_absolute,
        parse_url=parse_url or urls.parse_url,
    )

    logger.log_action("get_metadata", "started", url=url, fields=list(rule_tree.keys()))
    metadata = _resolve_tree(document, rule_tree, context)

    if url and "url" not in metadata:
        metadata["url"] = url
        logger.log_fallback(
            field="url",
            source="caller_url",
            reason="No canonical URL found in document",
            url=url,
        )

    if url and isinstance(rule_tree.get("provider"), RuleSet) and "provider" not in metadata:
        provider = get_provider(context.parse_url(url))
        if provider:
            metadata["provider"] = provider
            logger.log_fallback(
                field="provider",
                source="hostname",
                reason="No provider declared in document",
                url=url,
                provider=provider,
            )

    logger.log_extraction(
        url=url,
        fields_present=sorted(metadata.keys()),
        fields_missing=_missing_fields(rule_tree, metadata),
    )
    return metadata
