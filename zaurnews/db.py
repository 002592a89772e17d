from __future__ import annotations

import logging

from zaurnews.config import Settings, settings as default_settings
from zaurnews.store.base import NewsStore
from zaurnews.store.memory import MemoryNewsStore
from zaurnews.store.sqlite import SqliteNewsStore

logger = logging.getLogger(__name__)

BACKENDS = ("sqlite", "memory")


def open_store(settings: Settings | None = None) -> NewsStore:
    """Build and open the backend named by ``settings.store_backend``.

    The caller owns the returned handle and must close it.
    """
    settings = settings or default_settings
    backend = settings.store_backend.strip().lower()

    if backend == "sqlite":
        store: NewsStore = SqliteNewsStore(settings.database_path)
    elif backend == "memory":
        store = MemoryNewsStore()
    else:
        raise ValueError(f"Unknown store backend {settings.store_backend!r}; expected one of {BACKENDS}")

    logger.info("Using %s news store", backend)
    return store.open()
