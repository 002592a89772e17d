"""Tests for the full update cycle."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from zaurnews.models import NewsSource
from zaurnews.store.memory import MemoryNewsStore
from zaurnews.updater import run_update

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example</title>
    <link>https://example.com</link>
    <description>Example feed</description>
    <item>
      <title>First post</title>
      <link>https://example.com/1</link>
      <guid>https://example.com/1</guid>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <description>Hello there</description>
    </item>
    <item>
      <title>Second post</title>
      <link>https://example.com/2</link>
      <guid>https://example.com/2</guid>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
      <description>Plain text</description>
    </item>
    <item>
      <title>Third post</title>
      <link>https://example.com/3</link>
      <guid>https://example.com/3</guid>
      <pubDate>Wed, 03 Jan 2024 10:00:00 GMT</pubDate>
      <description>More text</description>
    </item>
  </channel>
</rss>
"""

GOOD = NewsSource("good", "Good Feed", "https://good.example.com/rss", "tech", 5)
DOWN = NewsSource("down", "Down Feed", "https://down.example.com/rss", "tech", 3)


async def _fake_fetch(url: str) -> str:
    if "good" in url:
        return RSS
    raise httpx.ConnectError("connection refused")


@pytest.mark.asyncio
async def test_run_update_is_idempotent():
    store = MemoryNewsStore()

    first = await run_update(store, sources=[GOOD, DOWN], fetcher=_fake_fetch, now=NOW, max_items=100)
    assert (first.added, first.updated, first.total) == (3, 0, 3)

    second = await run_update(store, sources=[GOOD, DOWN], fetcher=_fake_fetch, now=NOW, max_items=100)
    assert (second.added, second.updated, second.total) == (0, 0, 3)


@pytest.mark.asyncio
async def test_run_update_prunes_oldest():
    store = MemoryNewsStore()

    result = await run_update(store, sources=[GOOD], fetcher=_fake_fetch, now=NOW, max_items=2)

    assert result.added == 3
    assert result.total == 2
    assert [i.title for i in store.query()] == ["Third post", "Second post"]


@pytest.mark.asyncio
async def test_run_update_with_nothing_fetched_keeps_store():
    store = MemoryNewsStore()
    await run_update(store, sources=[GOOD], fetcher=_fake_fetch, now=NOW, max_items=100)

    result = await run_update(store, sources=[DOWN], fetcher=_fake_fetch, now=NOW, max_items=100)
    assert (result.added, result.updated, result.total) == (0, 0, 3)


@pytest.mark.asyncio
async def test_run_update_drops_stale_discoveries():
    store = MemoryNewsStore()
    store.add_discovery("ancient", NOW - timedelta(days=60))
    store.add_discovery("fresh", NOW - timedelta(days=1))

    await run_update(store, sources=[DOWN], fetcher=_fake_fetch, now=NOW, max_items=100)

    assert [d.item_id for d in store.list_discoveries()] == ["fresh"]
