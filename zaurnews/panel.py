"""Prepare stored items for one rendering pass of the news panel."""

from __future__ import annotations

import html
import logging
import re
from dataclasses import replace
from datetime import datetime, timedelta

from zaurnews.commentary.generator import generate_comment, pick_mood
from zaurnews.config import settings
from zaurnews.models import DiscoveredItem, NewsItem, PanelItem
from zaurnews.seeded import hash_string, hour_seed, seeded_shuffle

logger = logging.getLogger(__name__)

_COMMENT_NOISE_RE = re.compile(r"\bComments?\b(\.\.\.)?")
_WHITESPACE_RE = re.compile(r"\s{2,}")


def _clean_summary(summary: str) -> str:
    if not summary:
        return summary
    return _WHITESPACE_RE.sub(" ", _COMMENT_NOISE_RE.sub("", summary)).strip()


def _has_reacted(comment: str | None) -> bool:
    return bool(comment) and "\n\n" in comment


def process_news_items(items: list[NewsItem], saved_comments: dict[str, str]) -> list[PanelItem]:
    """Decorate items with commentary.

    One ``used_comments`` set is shared across the pass so neighbouring items
    do not repeat each other.
    """
    used_comments: set[str] = set()
    processed = []
    for item in items:
        saved = saved_comments.get(item.id)
        summary = _clean_summary(item.summary) or item.summary
        processed.append(
            PanelItem(
                item=item,
                comment=generate_comment(item.title, item.category, saved, used_comments),
                mood=pick_mood(hash_string(item.id)),
                decoded_title=html.unescape(item.title),
                decoded_summary=html.unescape(summary),
                has_reacted=_has_reacted(saved),
            )
        )
    return processed


def mark_discovered_items(
    items: list[PanelItem],
    discoveries: list[DiscoveredItem],
    saved_comments: dict[str, str],
    now: datetime,
    recent_hours: int | None = None,
) -> tuple[list[PanelItem], set[str]]:
    """Apply saved comments to discovered items and emphasize recent ones.

    Returns the updated copies and the ids that have already been seen.
    """
    if not discoveries or not items:
        return list(items), set()

    recent = timedelta(hours=recent_hours if recent_hours is not None else settings.recent_discovery_hours)
    discovered_at = {d.item_id: d.timestamp for d in discoveries}
    seen: set[str] = set()
    updated = []

    for panel_item in items:
        panel_item = replace(panel_item)
        timestamp = discovered_at.get(panel_item.id)
        if timestamp is not None:
            seen.add(panel_item.id)
            saved = saved_comments.get(panel_item.id)
            if saved:
                panel_item.comment = saved
                panel_item.has_reacted = _has_reacted(saved)
            if now - timestamp < recent:
                panel_item.is_emphasized = True
        updated.append(panel_item)

    return updated, seen


def sort_with_discoveries_at_top(items: list[PanelItem], discoveries: list[DiscoveredItem]) -> list[PanelItem]:
    """Discovered items first (latest discovery first), then newest first."""
    discovered_at = {d.item_id: d.timestamp for d in discoveries}
    found = [i for i in items if i.id in discovered_at]
    rest = [i for i in items if i.id not in discovered_at]
    found.sort(key=lambda i: discovered_at[i.id], reverse=True)
    rest.sort(key=lambda i: i.publish_date, reverse=True)
    return found + rest


def rotate_items(items: list[PanelItem], now: datetime, count: int) -> list[PanelItem]:
    """An hourly, viewer-independent selection of ``count`` items."""
    return seeded_shuffle(items, hour_seed(now))[:count]
