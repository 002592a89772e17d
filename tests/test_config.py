"""Tests for zaurnews.config."""

from zaurnews.config import Settings


def test_defaults():
    s = Settings()
    assert s.store_backend == "sqlite"
    assert s.max_news_items == 100
    assert s.per_source_cap == 2
    assert s.dominant_source == "nature"


def test_discovery_minutes_parsing():
    s = Settings(discovery_minutes="5, 20,35,,50")
    assert s.discovery_minute_set() == frozenset({5, 20, 35, 50})


def test_default_discovery_minutes():
    assert Settings().discovery_minute_set() == frozenset({10, 25, 40, 55})
