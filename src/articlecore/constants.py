"""
Signature tables and tuned weights for article body extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

# Tags whose text is inspected when looking for the article body.
CANDIDATE_TAGS: Tuple[str, ...] = ("p", "pre", "td", "article", "div")

# Word tokens on div id/class that mark a probable article container.
ARTICLE_DIV_WORDS: Tuple[str, ...] = ("articlebody", "article", "story")

# Regex applied to div class attributes during candidate discovery.
ARTICLE_DIV_CLASS_PATTERN = r"paragraph"

# schema.org itemprop values that always join the candidate set.
ARTICLE_ITEMPROPS: Tuple[str, ...] = ("articleBody", "articleText", "articleSection")

# Tags that never contain article text.
TEXT_EXCLUDED_TAGS: Tuple[str, ...] = ("script", "style", "select", "option", "textarea")

# Elements counted as links by the link density test.
LINK_TAGS: Tuple[str, ...] = ("a", "button")


@dataclass(frozen=True)
class ArticleBodyTag:
    """A structural signature that marks an element as a likely article body.

    Attribute values prefixed with ``re:`` are regular expressions searched
    case-insensitively; other values must match exactly (case-insensitive).
    """

    score_boost: int
    tag: Optional[str] = None
    class_: Optional[str] = None
    itemprop: Optional[str] = None
    itemtype: Optional[str] = None
    role: Optional[str] = None

    def attributes(self) -> Dict[str, str]:
        attrs = {
            "class": self.class_,
            "itemprop": self.itemprop,
            "itemtype": self.itemtype,
            "role": self.role,
        }
        return {key: value for key, value in attrs.items() if value}


ARTICLE_BODY_TAGS: List[ArticleBodyTag] = [
    ArticleBodyTag(tag="article", score_boost=25),
    ArticleBodyTag(role="article", score_boost=25),
    ArticleBodyTag(itemprop="articleBody", score_boost=100),
    ArticleBodyTag(itemprop="articleText", score_boost=40),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/Article$", score_boost=30),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/NewsArticle$", score_boost=30),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/BlogPosting$", score_boost=20),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/ScholarlyArticle$", score_boost=20),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/SocialMediaPosting$", score_boost=20),
    ArticleBodyTag(itemtype=r"re:^https?://schema\.org/TechArticle$", score_boost=20),
    ArticleBodyTag(class_="re:paragraph|entry-content|article-text|article-body", score_boost=15),
]

# --- Document cleaner tables ---

REMOVE_NODES_PATTERN = (
    "^side$|combx|retweet|mediaarticlerelated|menucontainer|"
    "navbar|storytopbar-bucket|utility-bar|inline-share-tools|"
    "comment|PopularQuestions|contact|foot|footer|Footer|footnote|"
    "cnn_strycaptiontxt|cnn_html_slideshow|cnn_strylftcntnt|"
    "links|meta$|shoutbox|sponsor|"
    "tags|socialnetworking|socialNetworking|cnnStryHghLght|"
    "cnn_stryspcvbx|^inset$|pagetools|post-attributes|"
    "welcome_form|contentTools2|the_answers|"
    "communitypromo|runaroundLeft|subscribe|vcard|articleheadings|"
    "date|^print$|popup|author-dropdown|tools|socialtools|byline|"
    "konafilter|KonaFilter|breadcrumbs|^fn$|wp-caption-text|"
    "legende|ajoutVideo|timestamp|js_replies"
)

RELATED_NODES_PATTERN = (
    r"related[-\s_]?(search|topics|media|info|tags|article|content|links)|"
    r"(search|topics|media|info|tags|article|content|links)[-\s_]?related"
)

CONSENT_PATTERN = (
    "cookie|cookies|cookieconsent|cookie-consent|cookie_banner|cookie-banner|"
    "cookie_notice|cookie-notice|cookiepolicy|cookie_policy|cookiePolicy|"
    "consent|consent-banner|consent-popup|gdpr|eu-consent|ccpa|accept-cookies|cookieNotice"
)

CAPTION_PATTERN = "^caption$"
GOOGLE_PATTERN = " google "
ENTRIES_PATTERN = "^[^entry-]more.*$"
FACEBOOK_PATTERN = "facebook"
FACEBOOK_BROADCASTING_PATTERN = "facebook-broadcasting"
TWITTER_PATTERN = "twitter"

BAD_TAGS: Tuple[str, ...] = ("aside", "nav", "noscript", "menu")

KEEP_TAGS: Tuple[str, ...] = (
    "p",
    "br",
    "img",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "body",
    "article",
    "section",
)

DROP_CAP_CLASSES: Tuple[str, ...] = ("dropcap", "drop_cap")
