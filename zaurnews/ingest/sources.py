"""Source registry -- fetch every configured feed concurrently and normalize."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

import feedparser
import httpx

from zaurnews.config import settings
from zaurnews.ingest.normalize import normalize
from zaurnews.models import NewsItem, NewsSource

logger = logging.getLogger(__name__)

# Fetch collaborator: URL in, response body out.
Fetcher = Callable[[str], Awaitable[str]]

FEED_ACCEPT = "application/rss+xml, application/xml, text/xml, application/atom+xml"

CATEGORIES: dict[str, str] = {
    "tech": "Technology",
    "programming": "Programming",
    "products": "Products",
    "design": "Design",
    "business": "Business",
    "science": "Science",
}

SOURCES: list[NewsSource] = [
    # Programming
    NewsSource("webdevelopernews", "Web Developer News", "https://dev.to/feed/tag/webdev", "programming", 10),
    NewsSource("javascriptweekly", "JavaScript Weekly", "https://javascriptweekly.com/rss", "programming", 8),
    NewsSource("reactblog", "React Blog", "https://reactjs.org/feed.xml", "programming", 7),
    NewsSource("redditprogramming", "Reddit Programming", "https://www.reddit.com/r/programming/.rss", "programming", 6),
    # Tech
    NewsSource("techmeme", "Hacker News", "https://hnrss.org/newest?count=15", "tech", 9),
    NewsSource("techcrunch", "TechCrunch", "https://techcrunch.com/feed/", "tech", 8),
    # Design
    NewsSource("smashingmagazine", "Smashing Magazine", "https://www.smashingmagazine.com/feed/", "design", 8),
    NewsSource("css-tricks", "CSS-Tricks", "https://css-tricks.com/feed/", "design", 7),
    # Products
    NewsSource("producthunt", "Product Hunt", "https://www.producthunt.com/feed", "products", 9),
    NewsSource("betalist", "BetaList", "https://betalist.com/feed", "products", 8),
    # Business
    NewsSource("forbes", "Forbes", "https://www.forbes.com/business/feed/", "business", 9),
    NewsSource("entrepreneur", "Entrepreneur", "https://www.entrepreneur.com/latest.rss", "business", 8),
    NewsSource("fastcompany", "Fast Company", "https://www.fastcompany.com/feed", "business", 7),
    # Science
    NewsSource("sciencedaily", "Science Daily", "https://www.sciencedaily.com/rss/all.xml", "science", 9),
    NewsSource("nature", "Nature", "https://www.nature.com/nature.rss", "science", 10),
    NewsSource("scientificamerican", "Scientific American", "https://rss.sciam.com/ScientificAmerican-Global", "science", 8),
]


def sources_for(category: str | None = None) -> list[NewsSource]:
    if not category:
        return list(SOURCES)
    return [s for s in SOURCES if s.category == category]


def http_fetcher(client: httpx.AsyncClient) -> Fetcher:
    """Wrap an httpx client as a Fetcher that raises on non-2xx responses."""

    async def fetch(url: str) -> str:
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.text

    return fetch


def parse_payload(text: str, source: NewsSource) -> list[Any]:
    """Split a response body into raw entries for the normalizer.

    RSS/Atom goes through feedparser; ``api`` sources are JSON documents with
    an ``articles``, ``news`` or ``results`` array.
    """
    if source.type == "api":
        data = json.loads(text)
        for key in ("articles", "news", "results", "items"):
            entries = data.get(key) if isinstance(data, dict) else None
            if isinstance(entries, list):
                return entries
        logger.warning("No article array in JSON payload from %s", source.id)
        return []

    feed = feedparser.parse(text)
    if feed.bozo and not feed.entries:
        logger.warning("feedparser reported an error for %s: %s", source.id, feed.bozo_exception)
        return []
    return list(feed.entries)


async def fetch_source(source: NewsSource, fetcher: Fetcher, now: datetime | None = None) -> list[NewsItem]:
    """Fetch and normalize one source. Any failure yields an empty list."""
    try:
        text = await fetcher(source.url)
    except (httpx.HTTPError, OSError) as exc:
        logger.warning("Fetch failed for %s (%s): %s", source.id, source.url, exc)
        return []

    try:
        entries = parse_payload(text, source)
    except ValueError as exc:
        logger.warning("Could not parse payload from %s: %s", source.id, exc)
        return []

    items = normalize(entries, source, now=now)
    logger.info("Processed %d items from %s", len(items), source.id)
    return items


async def _run_source(source: NewsSource, fetcher: Fetcher, now: datetime | None) -> list[NewsItem]:
    """Run a single source, catching and logging anything unexpected."""
    try:
        return await fetch_source(source, fetcher, now)
    except Exception as exc:
        logger.error("Source '%s' failed: %s", source.id, exc)
        return []


async def ingest_all(
    sources: list[NewsSource] | None = None,
    fetcher: Fetcher | None = None,
    now: datetime | None = None,
) -> list[NewsItem]:
    """Fetch every source concurrently and return all normalized items.

    A failing source contributes zero items; the others are unaffected. When
    no ``fetcher`` is given an httpx client with a bounded timeout is used.
    """
    sources = SOURCES if sources is None else sources
    now = now or datetime.now(timezone.utc)

    if fetcher is not None:
        results = await asyncio.gather(*[_run_source(s, fetcher, now) for s in sources])
    else:
        headers = {"Accept": FEED_ACCEPT, "User-Agent": settings.user_agent}
        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout, headers=headers, follow_redirects=True
        ) as client:
            fetch = http_fetcher(client)
            results = await asyncio.gather(*[_run_source(s, fetch, now) for s in sources])

    all_items: list[NewsItem] = []
    for items in results:
        all_items.extend(items)

    logger.info("Collected %d items from %d sources", len(all_items), len(sources))
    return all_items
