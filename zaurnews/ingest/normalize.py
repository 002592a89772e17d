"""Turn raw feed entries and API articles into uniform NewsItem records."""

from __future__ import annotations

import html
import logging
import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from dateutil import parser as date_parser

from zaurnews.config import settings
from zaurnews.models import NewsItem, NewsSource
from zaurnews.seeded import short_hash

logger = logging.getLogger(__name__)

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s{2,}")

_HN_ARTICLE_URL_RE = re.compile(r"Article URL:\s*<a[^>]*href=[\"']([^\"']+)[\"']", re.IGNORECASE)
_HN_NOISE_RES = [
    re.compile(r"Points:\s*\d+"),
    re.compile(r"#\s*Comments:\s*\d+"),
    re.compile(r"Article URL:\s*\S*"),
    re.compile(r"Comments URL:\s*\S*"),
]
HN_FALLBACK_SUMMARY = "View the full article on Hacker News for more details."

_SPANISH_PATTERNS = [
    re.compile(r"\b(el|la|los|las|un|una|unos|unas)\b", re.IGNORECASE),
    re.compile(r"\b(y|o|pero|porque|como|cuando|donde|que)\b", re.IGNORECASE),
    re.compile(r"\b(en|de|con|por|para|sin|sobre|entre)\b", re.IGNORECASE),
    re.compile(r"\b(es|son|está|están|tiene|tienen)\b", re.IGNORECASE),
    re.compile(r"[áéíóúñ¿¡]", re.IGNORECASE),
    re.compile(r"\b(más|también|muy|mucho|muchos|muchas)\b", re.IGNORECASE),
]


@dataclass
class RawFeedItem:
    """One entry as it came off the wire, before normalization."""

    title: str
    description: str
    link: str
    pub_date: Any
    guid: str = ""
    author: str = ""
    image_url: str | None = None


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        # xml-ish shapes such as {"_": "text"} or {"name": "Source"}
        value = value.get("_") or value.get("name") or value.get("value") or ""
    return str(value).strip()


def _first_url(candidates: Any) -> str | None:
    if not candidates:
        return None
    if isinstance(candidates, Mapping):
        candidates = [candidates]
    for candidate in candidates:
        url = candidate.get("url") or candidate.get("href") if isinstance(candidate, Mapping) else None
        if url:
            return str(url)
    return None


def parse_feed_entry(entry: Mapping[str, Any]) -> RawFeedItem | None:
    """Map a feedparser entry onto a RawFeedItem.

    Entries with neither a title nor a link are rejected.
    """
    title = _text(entry.get("title"))
    link = _text(entry.get("link"))
    if not title and not link:
        return None

    description = (
        entry.get("summary")
        or entry.get("description")
        or _first_content(entry.get("content"))
        or ""
    )
    image_url = (
        _first_url(entry.get("media_content"))
        or _first_url(entry.get("media_thumbnail"))
        or _first_url(entry.get("enclosures"))
    )
    return RawFeedItem(
        title=title,
        description=_text(description),
        link=link,
        pub_date=entry.get("published_parsed") or entry.get("updated_parsed") or entry.get("published") or entry.get("updated"),
        guid=_text(entry.get("id") or entry.get("guid")),
        author=_text(entry.get("author") or entry.get("dc_creator")),
        image_url=image_url,
    )


def _first_content(content: Any) -> str:
    if isinstance(content, list) and content:
        first = content[0]
        return first.get("value", "") if isinstance(first, Mapping) else str(first)
    return ""


def parse_api_article(article: Mapping[str, Any]) -> RawFeedItem | None:
    """Map a JSON news-API article (GNews, Currents, NewsData) onto a RawFeedItem."""
    title = _text(article.get("title"))
    link = _text(article.get("url") or article.get("link"))
    if not title and not link:
        return None

    creator = article.get("creator") or article.get("author") or article.get("source") or ""
    if isinstance(creator, list):
        creator = creator[0] if creator else ""

    return RawFeedItem(
        title=title,
        description=_text(article.get("description") or article.get("content")),
        link=link,
        pub_date=article.get("publishedAt") or article.get("published") or article.get("pubDate"),
        guid=_text(article.get("id") or article.get("article_id")),
        author=_text(creator),
        image_url=article.get("image") or article.get("image_url") or None,
    )


def clean_html(text: str | None) -> str:
    """Strip tags, decode entities and collapse runs of whitespace."""
    if not text:
        return ""
    text = _HTML_TAG_RE.sub(" ", text)
    text = html.unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def parse_publish_date(value: Any, now: datetime) -> datetime:
    """Best-effort conversion to an aware UTC datetime; ``now`` on failure."""
    if not value:
        return now
    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, (time.struct_time, tuple)):
            parsed = datetime(*value[:6], tzinfo=timezone.utc)
        else:
            parsed = date_parser.parse(str(value))
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("Unparseable publish date %r: %s", value, exc)
        return now

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def make_item_id(raw: RawFeedItem, source_id: str) -> str:
    """Stable id: the guid's hash when present, else the hash of title + link."""
    if raw.guid:
        return f"{source_id}-{short_hash(raw.guid)}"
    return f"{source_id}-{short_hash(raw.title + raw.link)}"


def is_likely_spanish(text: str) -> bool:
    if not text:
        return False
    matches = sum(len(p.findall(text)) for p in _SPANISH_PATTERNS)
    threshold = max(3, len(text.split()) * 0.2)
    return matches > threshold


def _is_hacker_news(source: NewsSource) -> bool:
    return "hnrss.org" in source.url


def _hacker_news_fields(raw: RawFeedItem) -> tuple[str, str, str]:
    """hnrss descriptions are boilerplate around the real article link."""
    title = re.sub(r"URL:.*$", "", raw.title).strip()
    link = raw.link
    match = _HN_ARTICLE_URL_RE.search(raw.description)
    if match:
        link = match.group(1)

    summary = clean_html(raw.description)
    for pattern in _HN_NOISE_RES:
        summary = pattern.sub("", summary)
    summary = _WHITESPACE_RE.sub(" ", summary).strip()
    if len(summary) < 20:
        summary = HN_FALLBACK_SUMMARY
    return title, link, summary


def to_news_item(
    raw: RawFeedItem,
    source: NewsSource,
    now: datetime,
    summary_max_length: int,
) -> NewsItem | None:
    if _is_hacker_news(source):
        title, link, summary = _hacker_news_fields(raw)
    else:
        title, link, summary = raw.title, raw.link, clean_html(raw.description)

    if is_likely_spanish(title) or is_likely_spanish(summary):
        logger.info("Skipping likely Spanish content: %s", title[:80])
        return None

    return NewsItem(
        id=make_item_id(raw, source.id),
        title=title or "Untitled",
        summary=truncate(summary, summary_max_length),
        url=link,
        publish_date=parse_publish_date(raw.pub_date, now),
        source=source.name,
        source_id=source.id,
        category=source.category,
        image_url=raw.image_url or None,
        author=raw.author or "",
    )


def normalize(
    entries: Iterable[Mapping[str, Any]],
    source: NewsSource,
    now: datetime | None = None,
    summary_max_length: int | None = None,
) -> list[NewsItem]:
    """Normalize a batch of raw entries from one source.

    A malformed entry is logged and skipped; the rest of the batch proceeds.
    """
    now = now or datetime.now(timezone.utc)
    limit = summary_max_length or settings.summary_max_length
    parse = parse_api_article if source.type == "api" else parse_feed_entry

    items: list[NewsItem] = []
    for index, entry in enumerate(entries):
        try:
            raw = parse(entry)
            if raw is None:
                logger.debug("Skipping entry %d from %s: no title or link", index, source.id)
                continue
            item = to_news_item(raw, source, now, limit)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed entry %d from %s: %s", index, source.id, exc)
            continue
        if item is not None:
            items.append(item)
    return items
