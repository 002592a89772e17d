"""Cap items per source so the feed stays diverse, then rank by recency."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from zaurnews.config import settings
from zaurnews.ingest.sources import CATEGORIES
from zaurnews.models import NewsItem, NewsSource

logger = logging.getLogger(__name__)


def _group_by_source(items: list[NewsItem]) -> dict[str, list[NewsItem]]:
    groups: dict[str, list[NewsItem]] = {}
    for item in items:
        groups.setdefault(item.source_id, []).append(item)
    for group in groups.values():
        group.sort(key=lambda i: i.publish_date, reverse=True)
    return groups


def _default_cap(active_sources: int) -> int:
    if active_sources <= settings.few_sources_threshold:
        return settings.few_sources_cap
    return settings.per_source_cap


def balance_items(
    items: list[NewsItem],
    sources: list[NewsSource],
    per_source_cap: int | None = None,
    dominant_source: str | None = None,
) -> list[NewsItem]:
    """Pick a source-diverse subset of ``items``.

    Every source gets its newest item first, then up to ``per_source_cap - 1``
    more. The dominant source (matched as a substring of the source id) never
    contributes more than one item. The result is sorted newest first, with
    source priority breaking exact timestamp ties.
    """
    groups = _group_by_source(items)
    if not groups:
        return []

    cap = per_source_cap if per_source_cap is not None else _default_cap(len(groups))
    dominant = (dominant_source if dominant_source is not None else settings.dominant_source).lower()

    balanced = [group[0] for group in groups.values()]
    for source_id, group in groups.items():
        if dominant and dominant in source_id.lower():
            continue
        balanced.extend(group[1:cap])

    priorities = {s.id: s.priority for s in sources}
    balanced.sort(key=lambda i: (i.publish_date, priorities.get(i.source_id, 0)), reverse=True)

    logger.info("Balanced %d items from %d sources down to %d", len(items), len(groups), len(balanced))
    return balanced


def placeholder_items(
    sources: list[NewsSource],
    now: datetime | None = None,
    count: int = 15,
) -> list[NewsItem]:
    """Synthetic stand-in items, one hour apart, cycling through sources."""
    if not sources:
        return []
    now = now or datetime.now(timezone.utc)

    items: list[NewsItem] = []
    for i in range(count):
        source = sources[i % len(sources)]
        label = CATEGORIES.get(source.category, source.category.title())
        items.append(
            NewsItem(
                id=f"placeholder-{source.id}-{i}",
                title=f"{label} News {i + 1} from {source.name}",
                summary=f"This is a generated placeholder for {source.name} in the {label} category.",
                url=source.url,
                publish_date=now - timedelta(hours=i),
                source=source.name,
                source_id=source.id,
                category=source.category,
                image_url=None,
                author="Generated Author",
            )
        )
    return items


def build_feed(
    items: list[NewsItem],
    sources: list[NewsSource],
    now: datetime | None = None,
    per_source_cap: int | None = None,
) -> tuple[list[NewsItem], bool]:
    """Balance ``items``; fall back to placeholders when nothing survives.

    Returns the feed and whether it is synthetic.
    """
    balanced = balance_items(items, sources, per_source_cap=per_source_cap)
    if balanced:
        return balanced, False

    logger.warning("No news items from any source; using placeholder feed")
    return placeholder_items(sources, now=now), True
