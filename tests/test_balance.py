"""Tests for zaurnews.ingest.balance."""

from datetime import datetime, timedelta, timezone

from zaurnews.ingest.balance import balance_items, build_feed, placeholder_items
from zaurnews.models import NewsItem, NewsSource

T0 = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)

A = NewsSource("a", "Source A", "https://a.example.com/rss", "tech", 5)
B = NewsSource("b", "Source B", "https://b.example.com/rss", "tech", 1)
NATURE = NewsSource("nature", "Nature", "https://www.nature.com/nature.rss", "science", 10)


def _item(source: NewsSource, n: int, hours_ago: float) -> NewsItem:
    return NewsItem(
        id=f"{source.id}-{n}",
        title=f"{source.name} item {n}",
        summary="",
        url=f"https://example.com/{source.id}/{n}",
        publish_date=T0 - timedelta(hours=hours_ago),
        source=source.name,
        source_id=source.id,
        category=source.category,
    )


def test_two_per_source_with_priority_tiebreak():
    items = [_item(s, n, hours_ago=n) for s in (B, A) for n in range(3)]
    result = balance_items(items, [A, B], per_source_cap=2)

    assert [i.id for i in result] == ["a-0", "b-0", "a-1", "b-1"]


def test_every_source_is_represented():
    sources = [NewsSource(f"s{k}", f"S{k}", f"https://s{k}.example.com", "tech", k) for k in range(6)]
    items = [_item(s, n, hours_ago=k * 10 + n) for k, s in enumerate(sources) for n in range(4)]
    result = balance_items(items, sources)

    assert {i.source_id for i in result} == {s.id for s in sources}
    # More than the few-sources threshold: default cap of 2 applies.
    assert len(result) == 12


def test_few_sources_get_a_larger_cap():
    items = [_item(s, n, hours_ago=n) for s in (A, B) for n in range(5)]
    result = balance_items(items, [A, B])
    assert len(result) == 6


def test_dominant_source_is_capped_at_one():
    items = [_item(NATURE, n, hours_ago=n) for n in range(3)] + [_item(A, n, hours_ago=n) for n in range(3)]
    result = balance_items(items, [NATURE, A], per_source_cap=3)

    assert [i.id for i in result if i.source_id == "nature"] == ["nature-0"]
    assert len([i for i in result if i.source_id == "a"]) == 3


def test_result_is_newest_first():
    items = [_item(A, 0, hours_ago=5), _item(B, 0, hours_ago=1), _item(A, 1, hours_ago=0.5)]
    result = balance_items(items, [A, B], per_source_cap=2)
    dates = [i.publish_date for i in result]
    assert dates == sorted(dates, reverse=True)


def test_empty_input_balances_to_empty():
    assert balance_items([], [A, B]) == []


def test_placeholders_cycle_through_sources():
    items = placeholder_items([A, B], now=T0, count=4)
    assert [i.source_id for i in items] == ["a", "b", "a", "b"]
    assert items[0].publish_date == T0
    assert items[3].publish_date == T0 - timedelta(hours=3)
    assert placeholder_items([], now=T0) == []


def test_build_feed_falls_back_to_placeholders():
    feed, synthetic = build_feed([], [A, B], now=T0)
    assert synthetic is True
    assert len(feed) == 15

    feed, synthetic = build_feed([_item(A, 0, hours_ago=1)], [A, B], now=T0)
    assert synthetic is False
    assert [i.id for i in feed] == ["a-0"]
