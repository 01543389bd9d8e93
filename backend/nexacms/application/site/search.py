"""
Public page search.

Scoring: title +10, SEO title +5, SEO description +3, SEO keywords +2 and
+1 for every section whose text props mention the query. Only PUBLISHED
pages are searched.
"""
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from markupsafe import Markup, escape
from nexacms.models.page import Page
from nexacms.sections.renderer import parse_props

MIN_QUERY_LENGTH = 2
EXCERPT_RADIUS = 50
MAX_RESULTS = 20

FIELD_WEIGHTS = (
    ("title", 10),
    ("seo_title", 5),
    ("seo_description", 3),
    ("seo_keywords", 2),
)
SECTION_TEXT_KEYS = ("content", "title", "subtitle")


@dataclass(frozen=True)
class SearchResult:
    page: Page
    score: int
    excerpt: Markup


def _text(value: Any) -> Optional[str]:
    # Hero variants store {"text": ..., "tag": ...}; older sections a plain string
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("text"), str):
        return value["text"]
    return None


def section_texts(props: Any) -> List[str]:
    props = parse_props(props)
    texts = []
    for key in SECTION_TEXT_KEYS:
        text = _text(props.get(key))
        if text:
            texts.append(text)
    return texts


def excerpt(text: str, query: str) -> Markup:
    """Up to 50 characters either side of the first match, match in <strong>."""
    start = text.lower().find(query.lower())
    if start < 0:
        return Markup("")

    end = start + len(query)
    lo = max(0, start - EXCERPT_RADIUS)
    hi = min(len(text), end + EXCERPT_RADIUS)

    prefix = "..." if lo > 0 else ""
    suffix = "..." if hi < len(text) else ""

    return Markup("{}{}<strong>{}</strong>{}{}").format(
        prefix, text[lo:start], text[start:end], text[end:hi], suffix,
    )


def score_page(page: Page, query: str) -> Optional[SearchResult]:
    needle = query.lower()
    score = 0
    first_hit: Optional[str] = None

    for field, weight in FIELD_WEIGHTS:
        value = getattr(page, field) or ""
        if needle in value.lower():
            score += weight
            first_hit = first_hit or value

    for section in page.sections:
        hits = [t for t in section_texts(section.props) if needle in t.lower()]
        if hits:
            score += 1
            first_hit = first_hit or hits[0]

    if not score:
        return None

    source = page.seo_description or first_hit or page.title
    snippet = excerpt(source, query) or excerpt(first_hit, query)
    if not snippet:
        snippet = Markup(escape(source[: EXCERPT_RADIUS * 2]))

    return SearchResult(page=page, score=score, excerpt=snippet)


def _candidates() -> Iterable[Page]:
    # Section props are JSON, so text matches there are found in Python
    return Page.query.filter(Page.status == "PUBLISHED").order_by(Page.title.asc()).all()


def search_pages(query: str, limit: int = MAX_RESULTS) -> List[SearchResult]:
    query = (query or "").strip()
    if len(query) < MIN_QUERY_LENGTH:
        return []

    results = [r for r in (score_page(p, query) for p in _candidates()) if r]
    results.sort(key=lambda r: (-r.score, r.page.title.lower()))
    return results[:limit]
