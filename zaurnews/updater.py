"""One aggregation cycle: fetch everything, merge into the store, prune."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from zaurnews.config import settings
from zaurnews.ingest.sources import SOURCES, Fetcher, ingest_all
from zaurnews.models import NewsSource, UpdateResult
from zaurnews.store.base import NewsStore, update_news

logger = logging.getLogger(__name__)


async def run_update(
    store: NewsStore,
    sources: list[NewsSource] | None = None,
    fetcher: Fetcher | None = None,
    now: datetime | None = None,
    max_items: int | None = None,
) -> UpdateResult:
    """Fetch all sources and fold the results into ``store``.

    Failed sources simply contribute nothing; the next cycle tries again.
    """
    now = now or datetime.now(timezone.utc)
    max_items = settings.max_news_items if max_items is None else max_items

    items = await ingest_all(SOURCES if sources is None else sources, fetcher=fetcher, now=now)
    if items:
        result = update_news(store, items)
    else:
        logger.info("No new items found from any source")
        result = UpdateResult(total=len(store.query()))

    pruned = store.prune(max_items)
    if pruned:
        result.total -= pruned

    stale = store.prune_discoveries(now - timedelta(days=settings.discovery_retention_days))
    if stale:
        logger.info("Dropped %d discoveries older than %d days", stale, settings.discovery_retention_days)
    return result
