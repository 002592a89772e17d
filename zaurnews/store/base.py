"""Storage interface and the backend-independent merge/prune rules."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from zaurnews.models import Comment, DiscoveredItem, NewsItem, UpdateResult

logger = logging.getLogger(__name__)


class NewsStore(ABC):
    """What the pipeline needs from a backend.

    Writes report failure through their return value (False / 0) and log the
    cause; reads degrade to empty results.
    """

    def open(self) -> "NewsStore":
        return self

    def close(self) -> None:
        pass

    def __enter__(self) -> "NewsStore":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    @abstractmethod
    def upsert(self, item: NewsItem) -> bool: ...

    @abstractmethod
    def query(self, category: str | None = None) -> list[NewsItem]:
        """Items newest first, optionally restricted to one category."""

    @abstractmethod
    def get(self, item_id: str) -> NewsItem | None: ...

    @abstractmethod
    def prune(self, max_items: int) -> int:
        """Keep the ``max_items`` newest items; return how many were removed."""

    @abstractmethod
    def save_comment(self, item_id: str, text: str) -> bool: ...

    @abstractmethod
    def get_comment(self, item_id: str) -> str | None: ...

    @abstractmethod
    def list_comments(self) -> list[Comment]: ...

    @abstractmethod
    def add_discovery(self, item_id: str, timestamp: datetime | None = None) -> bool:
        """Record a discovery, refreshing the timestamp if already present."""

    @abstractmethod
    def list_discoveries(self) -> list[DiscoveredItem]:
        """Discoveries, most recent first."""

    @abstractmethod
    def prune_discoveries(self, older_than: datetime) -> int: ...

    def comment_map(self) -> dict[str, str]:
        return {c.item_id: c.comment for c in self.list_comments()}


def merge_news(
    existing: Iterable[NewsItem], new_items: Iterable[NewsItem]
) -> tuple[list[NewsItem], UpdateResult]:
    """Decide which incoming items should be written.

    Unknown ids are added; a known id is replaced only when the incoming
    publish date is strictly newer. Everything else is ignored.
    """
    by_id = {item.id: item for item in existing}
    known = len(by_id)
    changed: dict[str, NewsItem] = {}
    result = UpdateResult()

    for item in new_items:
        current = by_id.get(item.id)
        if current is None:
            result.added += 1
        elif item.publish_date > current.publish_date:
            if item.id not in changed:
                result.updated += 1
        else:
            continue
        by_id[item.id] = item
        changed[item.id] = item

    result.total = known + result.added
    return list(changed.values()), result


def prune_items(items: Iterable[NewsItem], max_items: int) -> tuple[list[NewsItem], list[NewsItem]]:
    """Split ``items`` into the ``max_items`` newest and the rest."""
    ordered = sorted(items, key=lambda i: i.publish_date, reverse=True)
    max_items = max(0, max_items)
    return ordered[:max_items], ordered[max_items:]


def update_news(store: NewsStore, new_items: list[NewsItem]) -> UpdateResult:
    """Merge ``new_items`` into ``store`` with newer-publish-date-wins."""
    existing = store.query()
    existing_ids = {item.id for item in existing}
    changed, planned = merge_news(existing, new_items)

    result = UpdateResult()
    for item in changed:
        if not store.upsert(item):
            continue
        if item.id in existing_ids:
            result.updated += 1
        else:
            result.added += 1
    result.total = len(existing_ids) + result.added

    failed = planned.added + planned.updated - result.added - result.updated
    if failed:
        logger.warning("Store rejected %d of %d writes", failed, len(changed))
    logger.info("News updated: added=%d updated=%d total=%d", result.added, result.updated, result.total)
    return result
