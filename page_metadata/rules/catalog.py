"""
Default rule catalog.
One RuleSet per standard metadata field. Rules are listed in priority
order; callers can reuse, override or regroup any of them in their own tree.
"""
from types import MappingProxyType

from page_metadata.models.rules import RuleEntry, RuleSet
from page_metadata.rules.extractors import attribute, constant, document_root, text
from page_metadata.rules.processors import (
    primary_language,
    resolve_url,
    split_keywords,
    strip_whitespace,
)
from page_metadata.rules.scorers import score_icon_size

content = attribute("content")
href = attribute("href")


# Read-only; build a new dict to customise
metadata_rules = MappingProxyType({
    "description": RuleSet(
        name="description",
        rules=(
            RuleEntry('meta[property="og:description"]', content),
            RuleEntry('meta[name="description" i]', content),
        ),
        processors=(strip_whitespace,),
    ),
    "icon_url": RuleSet(
        name="icon_url",
        rules=(
            RuleEntry('link[rel="apple-touch-icon"]', href),
            RuleEntry('link[rel="apple-touch-icon-precomposed"]', href),
            RuleEntry('link[rel="icon" i]', href),
            RuleEntry('link[rel="fluid-icon"]', href),
            RuleEntry('link[rel="shortcut icon" i]', href),
            RuleEntry('link[rel="mask-icon"]', href),
            # Browsers request /favicon.ico when nothing is declared
            RuleEntry(document_root, constant("favicon.ico")),
        ),
        processors=(strip_whitespace, resolve_url),
        scorer=score_icon_size,
    ),
    "image_url": RuleSet(
        name="image_url",
        rules=(
            RuleEntry('meta[property="og:image:secure_url"]', content),
            RuleEntry('meta[property="og:image:url"]', content),
            RuleEntry('meta[property="og:image"]', content),
            RuleEntry('meta[name="twitter:image"]', content),
            RuleEntry('meta[property="twitter:image"]', content),
            RuleEntry('meta[name="thumbnail"]', content),
        ),
        processors=(strip_whitespace, resolve_url),
    ),
    "keywords": RuleSet(
        name="keywords",
        rules=(
            RuleEntry('meta[name="keywords" i]', content),
        ),
        processors=(split_keywords,),
    ),
    "title": RuleSet(
        name="title",
        rules=(
            RuleEntry('meta[property="og:title"]', content),
            RuleEntry('meta[name="twitter:title"]', content),
            RuleEntry('meta[property="twitter:title"]', content),
            RuleEntry('meta[name="hdl"]', content),
            RuleEntry("title", text()),
        ),
        processors=(strip_whitespace,),
    ),
    "language": RuleSet(
        name="language",
        rules=(
            RuleEntry("html[lang]", attribute("lang")),
            RuleEntry('meta[name="language" i]', content),
        ),
        processors=(strip_whitespace, primary_language),
    ),
    "type": RuleSet(
        name="type",
        rules=(
            RuleEntry('meta[property="og:type"]', content),
        ),
        processors=(strip_whitespace,),
    ),
    "url": RuleSet(
        name="url",
        rules=(
            RuleEntry("a.amp-canurl", href),
            RuleEntry('link[rel="canonical"]', href),
            RuleEntry('meta[property="og:url"]', content),
        ),
        processors=(strip_whitespace, resolve_url),
    ),
    "provider": RuleSet(
        name="provider",
        rules=(
            RuleEntry('meta[property="og:site_name"]', content),
        ),
        processors=(strip_whitespace,),
    ),
})
