"""
Tests for the default rule catalog, one field at a time.
"""
import pytest

from page_metadata.engine import build_ruleset
from page_metadata.rules import ANY_SIZE_SCORE, metadata_rules, score_icon_size
from tests.helpers import build_html, string_to_dom


def run_rule(field, tag, context, with_scorer=False):
    ruleset = metadata_rules[field]
    matcher = build_ruleset(
        field,
        ruleset.rules,
        ruleset.processors,
        ruleset.scorer if with_scorer else None,
    )
    return matcher(string_to_dom(build_html(tag)), context)


PAGE_TITLE = "Page Title"
PAGE_URL = "http://www.example.com/page.html"
PAGE_ICON = "http://www.example.com/favicon.ico"
PAGE_IMAGE = "http://www.example.com/image.png"


class TestTitleRules:
    @pytest.mark.parametrize("tag", [
        f'<meta property="og:title" content="{PAGE_TITLE}" />',
        f'<meta name="twitter:title" content="{PAGE_TITLE}" />',
        f'<meta property="twitter:title" content="{PAGE_TITLE}" />',
        f'<meta name="hdl" content="{PAGE_TITLE}" />',
        f"<title>{PAGE_TITLE}</title>",
        f"<title>\n   {PAGE_TITLE}  \n</title>",
    ])
    def test_finds_title(self, tag, context):
        assert run_rule("title", tag, context) == PAGE_TITLE

    def test_og_title_beats_title_tag(self, context):
        tag = '<title>Fallback</title><meta property="og:title" content="Preferred" />'
        assert run_rule("title", tag, context) == "Preferred"


class TestCanonicalUrlRules:
    @pytest.mark.parametrize("tag", [
        f'<meta property="og:url" content="{PAGE_URL}" />',
        f'<link rel="canonical" href="{PAGE_URL}" />',
        '<link rel="canonical" href="/page.html" />',
    ])
    def test_finds_url(self, tag, context):
        assert run_rule("url", tag, context) == PAGE_URL

    def test_amp_canonical_link(self, context):
        html = f'<html><body><a class="amp-canurl" href="{PAGE_URL}">x</a></body></html>'
        matcher = build_ruleset("url", metadata_rules["url"].rules, metadata_rules["url"].processors)
        assert matcher(string_to_dom(html), context) == PAGE_URL


class TestIconRules:
    @pytest.mark.parametrize("tag", [
        f'<link rel="apple-touch-icon" href="{PAGE_ICON}" />',
        f'<link rel="apple-touch-icon-precomposed" href="{PAGE_ICON}" />',
        f'<link rel="icon" href="{PAGE_ICON}" />',
        f'<link rel="fluid-icon" href="{PAGE_ICON}" />',
        f'<link rel="shortcut icon" href="{PAGE_ICON}" />',
        f'<link rel="Shortcut Icon" href="{PAGE_ICON}" />',
        f'<link rel="mask-icon" href="{PAGE_ICON}" />',
        '<link rel="icon" href="/favicon.ico" />',
    ])
    def test_finds_icon(self, tag, context):
        assert run_rule("icon_url", tag, context) == PAGE_ICON

    def test_defaults_to_favicon(self, context):
        assert run_rule("icon_url", "", context) == PAGE_ICON

    def test_prefers_higher_resolution_icons(self, context):
        tags = """
          <link rel="icon" href="small.png" sizes="16x16">
          <link rel="icon" href="large.png" sizes="32x32">
          <link rel="icon" href="any.png" sizes="any">
        """
        found = run_rule("icon_url", tags, context, with_scorer=True)
        assert found == "http://www.example.com/large.png"

    def test_any_size_only_wins_alone(self, context):
        tags = """
          <link rel="icon" href="any.png" sizes="any">
          <link rel="icon" href="plain.png">
        """
        found = run_rule("icon_url", tags, context, with_scorer=True)
        assert found == "http://www.example.com/any.png"


class TestIconSizeScorer:
    def _link(self, sizes=None):
        attr = f' sizes="{sizes}"' if sizes is not None else ""
        return string_to_dom(f'<link rel="icon" href="i.png"{attr}>').find("link")

    @pytest.mark.parametrize("sizes,expected", [
        ("16x16", 256),
        ("32X32", 1024),
        ("16x16 48x48 32x32", 2304),
        ("any", ANY_SIZE_SCORE),
        ("any 16x16", 256),
        (None, 0),
        ("", 0),
        ("large", 0),
    ])
    def test_scores(self, sizes, expected):
        assert score_icon_size("i.png", self._link(sizes)) == expected

    def test_any_ranks_between_none_and_smallest(self):
        assert 0 < score_icon_size("i.png", self._link("any")) < score_icon_size("i.png", self._link("1x1"))


class TestImageRules:
    @pytest.mark.parametrize("tag", [
        f'<meta property="og:image" content="{PAGE_IMAGE}" />',
        f'<meta property="og:image:url" content="{PAGE_IMAGE}" />',
        f'<meta property="og:image:secure_url" content="{PAGE_IMAGE}" />',
        f'<meta name="twitter:image" content="{PAGE_IMAGE}" />',
        f'<meta property="twitter:image" content="{PAGE_IMAGE}" />',
        f'<meta name="thumbnail" content="{PAGE_IMAGE}" />',
        '<meta name="thumbnail" content="/image.png" />',
    ])
    def test_finds_image(self, tag, context):
        assert run_rule("image_url", tag, context) == PAGE_IMAGE


class TestDescriptionRules:
    @pytest.mark.parametrize("tag", [
        '<meta property="og:description" content="Example page description." />',
        '<meta name="description" content="Example page description." />',
        '<meta name="Description" content="Example page description." />',
    ])
    def test_finds_description(self, tag, context):
        assert run_rule("description", tag, context) == "Example page description."


class TestTypeRules:
    def test_finds_og_type(self, context):
        assert run_rule("type", '<meta property="og:type" content="article" />', context) == "article"


class TestKeywordsRules:
    def test_splits_keywords(self, context):
        tag = '<meta name="keywords" content="Cats, Kitties, Meow" />'
        assert run_rule("keywords", tag, context) == ["Cats", "Kitties", "Meow"]

    def test_drops_blank_keywords(self, context):
        tag = '<meta name="keywords" content="Cats,, Meow ," />'
        assert run_rule("keywords", tag, context) == ["Cats", "Meow"]

    def test_only_separators_is_absent(self, context):
        assert run_rule("keywords", '<meta name="keywords" content=", ," />', context) is None


class TestLanguageRules:
    def test_html_lang_primary_subtag(self, context):
        html = '<html lang="en-US"><head></head></html>'
        ruleset = metadata_rules["language"]
        matcher = build_ruleset("language", ruleset.rules, ruleset.processors)
        assert matcher(string_to_dom(html), context) == "en"

    def test_meta_language(self, context):
        assert run_rule("language", '<meta name="language" content="fr" />', context) == "fr"


class TestProviderRules:
    def test_finds_site_name(self, context):
        tag = '<meta property="og:site_name" content="Example provider" />'
        assert run_rule("provider", tag, context) == "Example provider"


class TestCatalog:
    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            metadata_rules["title"] = metadata_rules["description"]

    def test_only_icon_is_scored(self):
        scored = [name for name, ruleset in metadata_rules.items() if ruleset.scorer is not None]
        assert scored == ["icon_url"]
