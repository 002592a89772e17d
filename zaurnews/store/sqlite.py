from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone

from zaurnews.models import Comment, DiscoveredItem, NewsItem
from zaurnews.store.base import NewsStore

logger = logging.getLogger(__name__)

# Fixed-width UTC timestamps so that text ordering matches time ordering.
_TS_FORMAT = "%Y-%m-%dT%H:%M:%S.%f+00:00"

SCHEMA = """
CREATE TABLE IF NOT EXISTS news (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    summary TEXT NOT NULL DEFAULT '',
    url TEXT NOT NULL DEFAULT '',
    publish_date TIMESTAMP NOT NULL,
    source TEXT NOT NULL DEFAULT '',
    source_id TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL DEFAULT '',
    image_url TEXT,
    author TEXT NOT NULL DEFAULT ''
);
CREATE INDEX IF NOT EXISTS idx_news_category ON news(category);
CREATE INDEX IF NOT EXISTS idx_news_source_id ON news(source_id);
CREATE INDEX IF NOT EXISTS idx_news_publish_date ON news(publish_date);

CREATE TABLE IF NOT EXISTS comments (
    item_id TEXT PRIMARY KEY,
    comment TEXT NOT NULL,
    timestamp TIMESTAMP NOT NULL
);

CREATE TABLE IF NOT EXISTS discoveries (
    item_id TEXT PRIMARY KEY,
    timestamp TIMESTAMP NOT NULL
);
"""


def _ts(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(_TS_FORMAT)


def _parse_ts(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


class SqliteNewsStore(NewsStore):
    """SQLite backend with an explicitly opened and closed connection."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    def open(self) -> "SqliteNewsStore":
        if self._conn is None:
            conn = sqlite3.connect(self.path)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA journal_mode=WAL")
            conn.executescript(SCHEMA)
            self._conn = conn
            logger.debug("Opened SQLite store at %s", self.path)
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("SqliteNewsStore used before open()")
        return self._conn

    def upsert(self, item: NewsItem) -> bool:
        try:
            with self.conn:
                self.conn.execute(
                    """
                    INSERT INTO news (id, title, summary, url, publish_date, source, source_id, category, image_url, author)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        title=excluded.title, summary=excluded.summary, url=excluded.url,
                        publish_date=excluded.publish_date, source=excluded.source,
                        source_id=excluded.source_id, category=excluded.category,
                        image_url=excluded.image_url, author=excluded.author
                    """,
                    (
                        item.id,
                        item.title,
                        item.summary,
                        item.url,
                        _ts(item.publish_date),
                        item.source,
                        item.source_id,
                        item.category,
                        item.image_url,
                        item.author,
                    ),
                )
        except (sqlite3.Error, UnicodeEncodeError) as exc:
            logger.error("Failed to upsert news item %s: %s", item.id, exc)
            return False
        return True

    def query(self, category: str | None = None) -> list[NewsItem]:
        try:
            if category:
                rows = self.conn.execute(
                    "SELECT * FROM news WHERE category = ? ORDER BY publish_date DESC", (category,)
                ).fetchall()
            else:
                rows = self.conn.execute("SELECT * FROM news ORDER BY publish_date DESC").fetchall()
        except sqlite3.Error as exc:
            logger.error("Failed to query news: %s", exc)
            return []
        return [_row_to_item(r) for r in rows]

    def get(self, item_id: str) -> NewsItem | None:
        try:
            row = self.conn.execute("SELECT * FROM news WHERE id = ?", (item_id,)).fetchone()
        except sqlite3.Error as exc:
            logger.error("Failed to read news item %s: %s", item_id, exc)
            return None
        return _row_to_item(row) if row else None

    def prune(self, max_items: int) -> int:
        try:
            with self.conn:
                cursor = self.conn.execute(
                    """
                    DELETE FROM news WHERE id NOT IN (
                        SELECT id FROM news ORDER BY publish_date DESC LIMIT ?
                    )
                    """,
                    (max(0, max_items),),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to prune news: %s", exc)
            return 0
        if cursor.rowcount:
            logger.info("Pruned %d news items (keeping %d)", cursor.rowcount, max_items)
        return cursor.rowcount

    def save_comment(self, item_id: str, text: str) -> bool:
        try:
            with self.conn:
                self.conn.execute(
                    """
                    INSERT INTO comments (item_id, comment, timestamp) VALUES (?, ?, ?)
                    ON CONFLICT(item_id) DO UPDATE SET comment=excluded.comment, timestamp=excluded.timestamp
                    """,
                    (item_id, text, _ts(datetime.now(timezone.utc))),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to save comment for %s: %s", item_id, exc)
            return False
        return True

    def get_comment(self, item_id: str) -> str | None:
        try:
            row = self.conn.execute("SELECT comment FROM comments WHERE item_id = ?", (item_id,)).fetchone()
        except sqlite3.Error as exc:
            logger.error("Failed to read comment for %s: %s", item_id, exc)
            return None
        return row["comment"] if row else None

    def list_comments(self) -> list[Comment]:
        try:
            rows = self.conn.execute("SELECT * FROM comments ORDER BY timestamp DESC").fetchall()
        except sqlite3.Error as exc:
            logger.error("Failed to list comments: %s", exc)
            return []
        return [Comment(item_id=r["item_id"], comment=r["comment"], timestamp=_parse_ts(r["timestamp"])) for r in rows]

    def add_discovery(self, item_id: str, timestamp: datetime | None = None) -> bool:
        timestamp = timestamp or datetime.now(timezone.utc)
        try:
            with self.conn:
                self.conn.execute(
                    """
                    INSERT INTO discoveries (item_id, timestamp) VALUES (?, ?)
                    ON CONFLICT(item_id) DO UPDATE SET timestamp=excluded.timestamp
                    """,
                    (item_id, _ts(timestamp)),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to record discovery %s: %s", item_id, exc)
            return False
        return True

    def list_discoveries(self) -> list[DiscoveredItem]:
        try:
            rows = self.conn.execute("SELECT * FROM discoveries ORDER BY timestamp DESC").fetchall()
        except sqlite3.Error as exc:
            logger.error("Failed to list discoveries: %s", exc)
            return []
        return [DiscoveredItem(item_id=r["item_id"], timestamp=_parse_ts(r["timestamp"])) for r in rows]

    def prune_discoveries(self, older_than: datetime) -> int:
        try:
            with self.conn:
                cursor = self.conn.execute("DELETE FROM discoveries WHERE timestamp < ?", (_ts(older_than),))
        except sqlite3.Error as exc:
            logger.error("Failed to prune discoveries: %s", exc)
            return 0
        return cursor.rowcount


def _row_to_item(row: sqlite3.Row) -> NewsItem:
    return NewsItem(
        id=row["id"],
        title=row["title"],
        summary=row["summary"] or "",
        url=row["url"] or "",
        publish_date=_parse_ts(row["publish_date"]),
        source=row["source"] or "",
        source_id=row["source_id"] or "",
        category=row["category"] or "",
        image_url=row["image_url"],
        author=row["author"] or "",
    )
