"""Tests for zaurnews.models."""

from datetime import datetime, timezone

from zaurnews.models import Comment, DiscoveredItem, NewsItem, NewsSource, PanelItem, UpdateResult


def _item() -> NewsItem:
    return NewsItem(
        id="src-abc",
        title="Title",
        summary="Summary",
        url="https://example.com",
        publish_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        source="Source",
        source_id="src",
        category="tech",
    )


def test_news_item_optional_defaults():
    item = _item()
    assert item.image_url is None
    assert item.author == ""


def test_source_defaults_to_rss():
    s = NewsSource("id", "Name", "https://example.com/feed", "tech")
    assert s.type == "rss"
    assert s.priority == 0


def test_timestamps_are_aware():
    assert DiscoveredItem(item_id="x").timestamp.tzinfo is not None
    assert Comment(item_id="x", comment="hi").timestamp.tzinfo is not None


def test_update_result_defaults():
    assert UpdateResult() == UpdateResult(added=0, updated=0, total=0)


def test_panel_item_proxies_identity():
    item = _item()
    panel = PanelItem(item=item)
    assert panel.id == "src-abc"
    assert panel.publish_date == item.publish_date
    assert panel.is_new is False
    assert panel.comment is None
