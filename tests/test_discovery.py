"""Tests for zaurnews.discovery."""

from datetime import datetime, timedelta, timezone

import pytest

from zaurnews.commentary.data import CATEGORY_COMMENTARY, DISCOVERY_COMMENTS
from zaurnews.discovery import (
    InvalidTransition,
    LoadingCycle,
    LoadingState,
    check_for_time_based_discoveries,
    discover_new_item,
)
from zaurnews.models import NewsItem
from zaurnews.store.memory import MemoryNewsStore

T0 = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)


def _item(n: int, hours_ago: float, category: str = "science") -> NewsItem:
    return NewsItem(
        id=f"item-{n}",
        title=f"Quantum widgets {n}",
        summary="Fish &amp; chips",
        url=f"https://example.com/{n}",
        publish_date=T0 - timedelta(hours=hours_ago),
        source="Example",
        source_id="example",
        category=category,
    )


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------


def test_fires_on_discovery_minute():
    check = check_for_time_based_discoveries(datetime(2024, 1, 1, 10, 10), False, [_item(1, 0)])
    assert check.should_discover is True
    assert check.seed == 1010


def test_does_not_fire_off_schedule():
    check = check_for_time_based_discoveries(datetime(2024, 1, 1, 10, 11), False, [_item(1, 0)])
    assert check.should_discover is False
    assert check.seed == 0


def test_does_not_fire_while_showing_discovery():
    check = check_for_time_based_discoveries(datetime(2024, 1, 1, 10, 25), True, [_item(1, 0)])
    assert check.should_discover is False


def test_does_not_fire_without_undiscovered_items():
    now = datetime(2024, 1, 1, 10, 40)
    assert not check_for_time_based_discoveries(now, False, []).should_discover
    assert not check_for_time_based_discoveries(now, False, [_item(1, 0)], {"item-1"}).should_discover


def test_custom_minutes():
    check = check_for_time_based_discoveries(datetime(2024, 1, 1, 23, 5), False, [_item(1, 0)], minutes={5})
    assert check.should_discover
    assert check.seed == 2305


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def test_selection_is_deterministic():
    available = [_item(n, hours_ago=n) for n in range(12)]
    current = [_item(100, hours_ago=20)]

    first = discover_new_item(available, current, set(), 1010)
    second = discover_new_item(list(reversed(available)), current, set(), 1010)
    assert first.id == second.id
    assert first.discovery_comment == second.discovery_comment


def test_selection_comes_from_newest_quarter():
    # Eight candidates -> window of 2; seed 1010 gives index 1.
    available = [_item(n, hours_ago=n) for n in range(8)]
    found = discover_new_item(available, [], set(), 1010)
    assert found.id == "item-1"


def test_discovered_items_are_excluded():
    available = [_item(n, hours_ago=n) for n in range(4)]
    found = discover_new_item(available, [], {"item-0", "item-1", "item-2"}, 1010)
    assert found.id == "item-3"


def test_falls_back_to_items_not_on_screen():
    available = [_item(n, hours_ago=n) for n in range(3)]
    current = [available[0], available[1]]
    found = discover_new_item(available, current, {"item-0", "item-1", "item-2"}, 1010)
    assert found.id == "item-2"


def test_falls_back_to_everything_as_last_resort():
    available = [_item(0, hours_ago=0)]
    found = discover_new_item(available, available, {"item-0"}, 1010)
    assert found.id == "item-0"


def test_no_newer_item_gets_synthetic_date():
    available = [_item(n, hours_ago=n + 5) for n in range(3)]
    current = [_item(100, hours_ago=1)]
    found = discover_new_item(available, current, set(), 1010)

    assert found.publish_date == current[0].publish_date + timedelta(seconds=60)
    # The stored record is untouched.
    assert all(i.publish_date < current[0].publish_date for i in available)


def test_newer_item_keeps_real_date():
    available = [_item(0, hours_ago=0)]
    current = [_item(100, hours_ago=3)]
    found = discover_new_item(available, current, set(), 1010)
    assert found.publish_date == available[0].publish_date


def test_discovery_is_decorated_and_persisted():
    store = MemoryNewsStore()
    available = [_item(0, hours_ago=0)]

    found = discover_new_item(available, [], set(), 1010, store=store)

    assert found.is_new and found.just_discovered and found.is_emphasized
    assert found.mood == "excited"
    assert found.discovery_comment in DISCOVERY_COMMENTS
    assert found.comment in CATEGORY_COMMENTARY["science"]
    assert found.decoded_summary == "Fish & chips"
    assert [d.item_id for d in store.list_discoveries()] == ["item-0"]
    assert store.get_comment("item-0") == found.comment


def test_discovery_without_comment_saves_only_discovery():
    store = MemoryNewsStore()
    found = discover_new_item([_item(0, hours_ago=0, category="business")], [], set(), 1010, store=store)
    assert found.comment is None
    assert store.list_comments() == []
    assert len(store.list_discoveries()) == 1


def test_empty_pool_raises():
    with pytest.raises(ValueError):
        discover_new_item([], [], set(), 1010)


# ---------------------------------------------------------------------------
# Loading cycle
# ---------------------------------------------------------------------------


def test_loading_cycle_happy_path():
    cycle = LoadingCycle()
    assert cycle.send("start") is LoadingState.FETCHING
    assert cycle.send("loaded") is LoadingState.REFRESHING
    assert cycle.send("done") is LoadingState.IDLE


def test_loading_cycle_error_and_retry():
    cycle = LoadingCycle()
    cycle.send("start")
    cycle.send("fail", error="timeout")
    assert cycle.state is LoadingState.ERROR
    assert cycle.error == "timeout"
    assert cycle.send("retry") is LoadingState.FETCHING
    assert cycle.error is None


def test_loading_cycle_rejects_invalid_transition():
    cycle = LoadingCycle()
    with pytest.raises(InvalidTransition):
        cycle.send("done")
