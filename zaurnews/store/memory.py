"""Process-local store, used for tests and throwaway runs."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone

from zaurnews.models import Comment, DiscoveredItem, NewsItem
from zaurnews.store.base import NewsStore, prune_items

logger = logging.getLogger(__name__)


class MemoryNewsStore(NewsStore):
    def __init__(self) -> None:
        self._items: dict[str, NewsItem] = {}
        self._comments: dict[str, Comment] = {}
        self._discoveries: dict[str, DiscoveredItem] = {}

    def upsert(self, item: NewsItem) -> bool:
        self._items[item.id] = replace(item)
        return True

    def query(self, category: str | None = None) -> list[NewsItem]:
        items = [replace(i) for i in self._items.values() if not category or i.category == category]
        items.sort(key=lambda i: i.publish_date, reverse=True)
        return items

    def get(self, item_id: str) -> NewsItem | None:
        item = self._items.get(item_id)
        return replace(item) if item else None

    def prune(self, max_items: int) -> int:
        _, pruned = prune_items(self._items.values(), max_items)
        for item in pruned:
            del self._items[item.id]
        if pruned:
            logger.info("Pruned %d items, %d remain", len(pruned), len(self._items))
        return len(pruned)

    def save_comment(self, item_id: str, text: str) -> bool:
        self._comments[item_id] = Comment(item_id=item_id, comment=text)
        return True

    def get_comment(self, item_id: str) -> str | None:
        comment = self._comments.get(item_id)
        return comment.comment if comment else None

    def list_comments(self) -> list[Comment]:
        return list(self._comments.values())

    def add_discovery(self, item_id: str, timestamp: datetime | None = None) -> bool:
        timestamp = timestamp or datetime.now(timezone.utc)
        existing = self._discoveries.get(item_id)
        if existing is not None:
            existing.timestamp = timestamp
            logger.debug("Discovery already exists for %s, updated timestamp", item_id)
        else:
            self._discoveries[item_id] = DiscoveredItem(item_id=item_id, timestamp=timestamp)
        return True

    def list_discoveries(self) -> list[DiscoveredItem]:
        found = [replace(d) for d in self._discoveries.values()]
        found.sort(key=lambda d: d.timestamp, reverse=True)
        return found

    def prune_discoveries(self, older_than: datetime) -> int:
        stale = [d.item_id for d in self._discoveries.values() if d.timestamp < older_than]
        for item_id in stale:
            del self._discoveries[item_id]
        return len(stale)
