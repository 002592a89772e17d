from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class NewsSource:
    id: str
    name: str
    url: str
    category: str
    priority: int = 0
    type: str = "rss"


@dataclass
class NewsItem:
    id: str
    title: str
    summary: str
    url: str
    publish_date: datetime
    source: str
    source_id: str
    category: str
    image_url: str | None = None
    author: str = ""


@dataclass
class DiscoveredItem:
    item_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Comment:
    item_id: str
    comment: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class UpdateResult:
    added: int = 0
    updated: int = 0
    total: int = 0


@dataclass
class PanelItem:
    """A stored news item decorated for display in the panel."""

    item: NewsItem
    comment: str | None = None
    discovery_comment: str | None = None
    mood: str = "curious"
    is_new: bool = False
    just_discovered: bool = False
    is_emphasized: bool = False
    has_reacted: bool = False
    decoded_title: str = ""
    decoded_summary: str = ""

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def publish_date(self) -> datetime:
        return self.item.publish_date
