"""
Unit tests for DocumentCleaner.
"""

import pytest
from bs4 import BeautifulSoup, Comment
from hypothesis import HealthCheck, example, given, settings
from hypothesis import strategies as st

from articlecore.cleaner import DocumentCleaner
from articlecore.config import CleanerConfig

from tests.helpers import body_fragment


@pytest.fixture
def cleaner():
    """Provide a cleaner with the default signature tables."""
    return DocumentCleaner()


def clean(cleaner, markup):
    return cleaner.clean(body_fragment(markup))


@pytest.mark.unit
class TestAttributeScrubbing:
    """Body and article attributes."""

    def test_body_classes_are_removed(self, cleaner):
        body = BeautifulSoup('<html><body class="home page" id="top"><p>x</p></body></html>', "lxml").body
        cleaner.clean(body)
        assert "class" not in body.attrs
        assert body["id"] == "top"

    def test_article_identity_attributes_are_removed(self, cleaner):
        body = clean(cleaner, '<article id="a" name="n" class="c" data-x="1"><p>text</p></article>')
        assert body.article.attrs == {"data-x": "1"}

    def test_clean_returns_the_same_node(self, cleaner):
        body = body_fragment("<p>x</p>")
        assert cleaner.clean(body) is body


@pytest.mark.unit
class TestInlineUnwrapping:
    """Emphasis, drop caps and paragraph spans keep their text."""

    def test_em_is_unwrapped(self, cleaner):
        body = clean(cleaner, "<p>an <em>important</em> point</p>")
        assert body.find("em") is None
        assert body.p.get_text() == "an important point"

    def test_em_with_image_is_kept(self, cleaner):
        body = clean(cleaner, '<p>text <em><img src="a.jpg"></em></p>')
        assert body.find("em") is not None

    @pytest.mark.parametrize("css_class", ["dropcap", "drop_cap", "big dropcap"])
    def test_drop_caps_are_unwrapped(self, cleaner, css_class):
        body = clean(cleaner, f'<p><span class="{css_class}">T</span>he story begins</p>')
        assert body.find("span") is None
        assert body.p.get_text() == "The story begins"

    def test_paragraph_spans_are_unwrapped(self, cleaner):
        body = clean(cleaner, "<p>Hello <span>world</span></p>")
        assert str(body.p) == "<p>Hello world</p>"


@pytest.mark.unit
class TestRemoval:
    """Scripts, widgets and boilerplate blocks."""

    def test_scripts_styles_and_comments(self, cleaner):
        body = clean(cleaner, "<p>text<script>track()</script></p><style>p {}</style><!-- note --><p>more</p>")
        assert body.find(["script", "style"]) is None
        assert body.find(string=lambda text: isinstance(text, Comment)) is None
        assert [p.get_text() for p in body.find_all("p")] == ["text", "more"]

    def test_bad_ids_and_classes(self, cleaner):
        body = clean(
            cleaner,
            '<div class="footer">f</div><div id="comments"><p>c</p></div><div class="byline">b</div><p>keep</p>',
        )
        assert body.get_text(strip=True) == "keep"

    def test_bad_container_holding_article_is_kept(self, cleaner):
        body = clean(cleaner, '<div class="comment-wrapper"><article><p>story</p></article></div>')
        assert body.find("div") is not None
        assert body.article.p.get_text() == "story"

    def test_bad_name_attribute(self, cleaner):
        body = clean(cleaner, '<div name="sponsor-box">paid</div><p>keep</p>')
        assert body.get_text(strip=True) == "keep"

    def test_bad_tags(self, cleaner):
        body = clean(cleaner, "<aside>a</aside><nav>n</nav><noscript>ns</noscript><menu>m</menu><p>keep</p>")
        assert body.get_text(strip=True) == "keep"

    def test_google_marker_needs_surrounding_classes(self, cleaner):
        body = clean(cleaner, '<div class="ad google block">g</div><div class="google">h</div>')
        assert body.get_text(strip=True) == "h"

    @pytest.mark.parametrize(
        "markup",
        [
            '<div class="facebook-share"><a href="#">Share</a></div>',
            '<div id="twitter-feed">tweets</div>',
            '<div class="fb facebook-broadcasting">live</div>',
            '<div id="cookie-banner">We use cookies</div>',
            '<div class="gdpr-notice">Consent</div>',
            '<div class="related-articles"><p>Other story</p></div>',
            '<div class="content-related">Also read</div>',
        ],
    )
    def test_widgets_are_removed(self, cleaner, markup):
        body = clean(cleaner, f"{markup}<p>keep</p>")
        assert body.get_text(strip=True) == "keep"

    def test_custom_bad_tags(self):
        cleaner = DocumentCleaner(CleanerConfig(bad_tags=["table"]))
        body = clean(cleaner, "<table><tr><td>grid</td></tr></table><aside>side</aside>")
        assert body.find("table") is None
        assert body.find("aside") is not None


@pytest.mark.unit
class TestCaptions:
    """Figures and caption widgets."""

    def test_figure_is_replaced_by_its_images(self, cleaner):
        body = clean(cleaner, '<figure><img src="a.jpg"><figcaption>A caption</figcaption></figure><p>text</p>')
        assert body.find(["figure", "figcaption"]) is None
        assert body.img["src"] == "a.jpg"
        assert body.img.parent is body
        assert "A caption" not in body.get_text()

    def test_figure_keeps_image_position(self, cleaner):
        body = clean(cleaner, '<p>before</p><figure><img src="a.jpg"><img src="b.jpg"></figure><p>after</p>')
        names = [child.name for child in body.children if child.name]
        assert names == ["p", "img", "img", "p"]

    def test_figure_without_images_is_removed(self, cleaner):
        body = clean(cleaner, "<figure><figcaption>only text</figcaption></figure><p>keep</p>")
        assert body.get_text(strip=True) == "keep"

    @pytest.mark.parametrize(
        "markup",
        [
            '<div class="caption">cap</div>',
            '<span itemprop="caption">cap</span>',
            '<p class="image-caption">cap</p>',
            '<p class="instagram-media">cap</p>',
            '<div class="photo-caption-block">cap</div>',
        ],
    )
    def test_caption_widgets(self, cleaner, markup):
        body = clean(cleaner, f"{markup}<p>keep</p>")
        assert body.get_text(strip=True) == "keep"


@pytest.mark.unit
class TestReduceArticle:
    """Empty tag pruning."""

    def test_empty_tags_outside_keep_list_are_removed(self, cleaner):
        body = clean(
            cleaner,
            '<div id="wrap"><span></span><p></p><div></div><img src="a.jpg"><br><a href="/x"></a><p>Keep</p></div>',
        )
        wrap = body.find(id="wrap")
        assert [child.name for child in wrap.children if child.name] == ["p", "img", "br", "p"]

    def test_nested_empty_tags_collapse(self, cleaner):
        body = clean(cleaner, "<div><div><b></b></div></div><p>keep</p>")
        assert body.find("div") is None
        assert body.find("b") is None


@pytest.mark.unit
class TestWhitespaceAndIdempotence:
    """Text normalisation and repeatability."""

    def test_clean_whitespace(self):
        assert DocumentCleaner.clean_whitespace("one\n\n\n two\t\nthree") == "one\n\ntwo\n\nthree"
        assert DocumentCleaner.clean_whitespace("") == ""

    @pytest.mark.parametrize(
        "markup",
        [
            "<p>plain paragraph</p>",
            '<article class="story"><p>an <em>important</em> <span class="dropcap">p</span>oint</p></article>',
            '<figure><img src="a.jpg"><figcaption>cap</figcaption></figure><div><span></span></div>',
            '<div class="facebook-share">x</div><div id="main"><p>text <span>inner</span></p><script>x</script></div>',
            '<div class="comments"><article><p>kept</p></article></div><!-- c --><div><div></div></div>',
            '<div class="footer"><p>Footer text</p><div class="facebook-box"><article><p>x</p></article></div></div>',
            '<div class="footer"><aside><article><p>x</p></article></aside></div><p>keep</p>',
            '<div id="comments"><div name="sponsor"><div itemprop="articleBody">x</div></div></div>',
            '<div class="footer"><div id="article"></div></div><p>keep</p>',
        ],
    )
    def test_cleaning_twice_changes_nothing(self, cleaner, markup):
        body = clean(cleaner, markup)
        once = str(body)
        cleaner.clean(body)
        assert str(body) == once

    def test_realistic_composite(self, cleaner):
        body = clean(
            cleaner,
            """
            <div id="main">
              <div class="share-tools facebook-share"><a href="#">Share</a></div>
              <p>The council approved the plan on <em>Monday</em>.</p>
              <figure><img src="bridge.jpg"><figcaption>The bridge</figcaption></figure>
              <p>Work starts next year.</p>
              <div id="cookie-consent">Accept cookies</div>
              <script>track();</script>
            </div>
            """,
        )
        text = " ".join(body.get_text().split())
        assert text == "The council approved the plan on Monday. Work starts next year."
        assert body.find("img")["src"] == "bridge.jpg"


TAGS = ["div", "p", "span", "em", "figure", "figcaption", "article", "aside", "b", "section"]
CLASSES = ["", "footer", "caption", "dropcap", "facebook-share", "story", "related-content"]


@st.composite
def documents(draw, depth=0):
    """Small random documents built from the tags and classes the cleaner reacts to."""
    parts = []
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        kind = draw(st.sampled_from(["text", "img", "element"] if depth < 3 else ["text", "img"]))
        if kind == "text":
            parts.append(draw(st.sampled_from(["", " ", "word", "two words"])))
        elif kind == "img":
            parts.append('<img src="i.jpg">')
        else:
            tag = draw(st.sampled_from(TAGS))
            css_class = draw(st.sampled_from(CLASSES))
            attrs = f' class="{css_class}"' if css_class else ""
            parts.append(f"<{tag}{attrs}>{draw(documents(depth + 1))}</{tag}>")
    return "".join(parts)


@pytest.mark.unit
class TestCleanerProperties:
    """Property-based checks over generated documents."""

    @given(documents())
    @example('<div class="footer"><div class="facebook-share"><article><p>x</p></article></div></div>')
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_idempotent(self, cleaner, document):
        body = cleaner.clean(body_fragment(document))
        once = str(body)
        cleaner.clean(body)
        assert str(body) == once

    @given(documents())
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_images_outside_removed_blocks_survive(self, cleaner, document):
        body = cleaner.clean(body_fragment(f'<p>lead <img src="keep.jpg"></p>{document}'))
        assert body.find("img", src="keep.jpg") is not None


@pytest.mark.unit
class TestSocialWidgetNextToArticle:
    """A share widget is dropped while the neighbouring story stays."""

    def test_facebook_share_removed_article_kept(self, cleaner):
        body = clean(cleaner, '<div id="facebook-share"><a href="#">Share</a></div><article><p>Story text</p></article>')
        assert body.find(id="facebook-share") is None
        assert body.article.p.get_text() == "Story text"

    def test_container_loses_protection_with_removed_article(self, cleaner):
        body = clean(
            cleaner,
            '<div class="footer"><p>Footer text</p><div class="facebook-box"><article><p>x</p></article></div></div>'
            "<p>keep</p>",
        )
        assert str(body) == "<body><p>keep</p></body>"

    def test_container_with_surviving_article_is_kept(self, cleaner):
        body = clean(
            cleaner, '<div class="footer"><div class="facebook-box">share</div><article><p>x</p></article></div>'
        )
        assert body.find("div", class_="footer") is not None
        assert body.find(class_="facebook-box") is None
        assert body.article.get_text() == "x"
