"""Scheduled, deterministic "discoveries" of fresh news items.

Every process that evaluates the same minute against the same items picks the
same discovery, so concurrent viewers agree without any coordination.
"""

from __future__ import annotations

import enum
import html
import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Collection, Iterable, Protocol

from zaurnews.commentary.generator import discovery_comment, generate_comment
from zaurnews.config import settings
from zaurnews.models import NewsItem, PanelItem
from zaurnews.seeded import seeded_random
from zaurnews.store.base import NewsStore

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Share of the newest candidates the seeded pick is drawn from.
RECENT_WINDOW = 0.25
SYNTHETIC_BUMP = timedelta(seconds=60)


class LoadingState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    REFRESHING = "refreshing"
    ERROR = "error"


class InvalidTransition(ValueError):
    pass


_TRANSITIONS: dict[tuple[LoadingState, str], LoadingState] = {
    (LoadingState.IDLE, "start"): LoadingState.FETCHING,
    (LoadingState.FETCHING, "loaded"): LoadingState.REFRESHING,
    (LoadingState.REFRESHING, "done"): LoadingState.IDLE,
    (LoadingState.FETCHING, "fail"): LoadingState.ERROR,
    (LoadingState.REFRESHING, "fail"): LoadingState.ERROR,
    (LoadingState.ERROR, "retry"): LoadingState.FETCHING,
}


class LoadingCycle:
    """Sequencing of the panel's fetch/display cycle."""

    def __init__(self) -> None:
        self.state = LoadingState.IDLE
        self.error: str | None = None

    def send(self, event: str, error: str | None = None) -> LoadingState:
        target = _TRANSITIONS.get((self.state, event))
        if target is None:
            raise InvalidTransition(f"cannot {event!r} while {self.state.value}")
        logger.debug("Loading state %s -> %s", self.state.value, target.value)
        self.state = target
        self.error = error if target is LoadingState.ERROR else None
        return target


@dataclass
class DiscoveryCheck:
    should_discover: bool
    seed: int = 0


class _Dated(Protocol):
    id: str
    publish_date: datetime


def check_for_time_based_discoveries(
    now: datetime,
    showing_discovery: bool,
    available_items: Iterable[NewsItem],
    discovered_ids: Collection[str] = (),
    minutes: Collection[int] | None = None,
) -> DiscoveryCheck:
    """Decide whether a discovery fires at ``now``.

    It fires only on a discovery minute, while nothing is being shown, and
    when at least one item has not been discovered yet.
    """
    minutes = settings.discovery_minute_set() if minutes is None else minutes
    if now.minute not in minutes or showing_discovery:
        return DiscoveryCheck(False)
    if not any(item.id not in discovered_ids for item in available_items):
        return DiscoveryCheck(False)
    return DiscoveryCheck(True, seed=now.hour * 100 + now.minute)


def _candidate_pool(
    available: list[NewsItem],
    current: list[_Dated],
    discovered_ids: Collection[str],
    newer: list[NewsItem],
) -> list[NewsItem]:
    pool = [i for i in (newer or available) if i.id not in discovered_ids]
    if pool:
        return pool

    logger.info("No undiscovered items available, widening to items not on screen")
    shown = {c.id for c in current}
    pool = [i for i in available if i.id not in shown]
    return pool or list(available)


def discover_new_item(
    available: list[NewsItem],
    current: list[_Dated],
    discovered_ids: Collection[str],
    seed: int,
    store: NewsStore | None = None,
    used_comments: set[str] | None = None,
) -> PanelItem:
    """Select, decorate and record the discovery for ``seed``.

    Raises ValueError when there is nothing at all to choose from.
    """
    if not available:
        raise ValueError("no items available to discover")

    newest_current = max((c.publish_date for c in current), default=EPOCH)
    newer = [i for i in available if i.publish_date > newest_current]

    pool = _candidate_pool(available, current, discovered_ids, newer)
    pool.sort(key=lambda i: i.publish_date, reverse=True)
    window = max(1, int(len(pool) * RECENT_WINDOW))
    selected = pool[int(seeded_random(seed) * window)]

    comment = generate_comment(selected.title, selected.category, None, used_comments)
    if not newer:
        # Rank it as newest on screen without touching the stored record.
        selected = replace(selected, publish_date=newest_current + SYNTHETIC_BUMP)

    found = PanelItem(
        item=selected,
        comment=comment,
        discovery_comment=discovery_comment(seed),
        mood="excited",
        is_new=True,
        just_discovered=True,
        is_emphasized=True,
        decoded_title=html.unescape(selected.title),
        decoded_summary=html.unescape(selected.summary),
    )

    if store is not None:
        if not store.add_discovery(found.id):
            logger.warning("Discovery of %s was not persisted", found.id)
        if comment and not store.save_comment(found.id, comment):
            logger.warning("Comment for %s was not persisted", found.id)

    logger.info("Discovered %s (seed=%d, pool=%d, window=%d)", found.id, seed, len(pool), window)
    return found
