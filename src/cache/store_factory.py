# src/cache/store_factory.py — v1
"""Factory for result store instantiation."""

from __future__ import annotations

from aidetector.cache.base_result_store import BaseResultStore
from aidetector.config.settings import Settings


def create_result_store(settings: Settings | None = None) -> BaseResultStore:
    """Instantiate the configured store backend.

    Args:
        settings: Application settings. Defaults to SQLite at ./data.db.

    Returns:
        Configured BaseResultStore implementation.
    """
    backend = "sqlite" if settings is None else settings.store_backend

    if backend == "sqlite":
        from aidetector.cache.sqlite_store import SqliteResultStore
        db_path = "data.db" if settings is None else settings.store_sqlite_path
        return SqliteResultStore(db_path=db_path)

    if backend == "redis":
        from aidetector.cache.redis_store import RedisResultStore
        if settings is None or not settings.store_redis_url:
            raise ValueError(
                "STORE_REDIS_URL must be set when STORE_BACKEND=redis"
            )
        return RedisResultStore(redis_url=settings.store_redis_url)

    raise ValueError(f"Unsupported store backend: {backend!r}")
