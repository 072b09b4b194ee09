# src/cache/redis_store.py — v2
"""Redis-based result store (STORE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for multi-instance deployments sharing one cache. Each record is a
JSON string under its fingerprint key, written with SET NX so the first
writer wins. A sorted set scored by creation time backs history listings.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from aidetector.cache.base_result_store import BaseResultStore
from aidetector.cache.models import PREVIEW_CHARS, AnalysisRecord, HistoryItem
from aidetector.core.errors import StoreError

logger = logging.getLogger(__name__)

_KEY_PREFIX = "aidetector:analysis:"
_RECENT_KEY = "aidetector:analysis:__recent__"


class RedisResultStore(BaseResultStore):
    """Redis-backed result store for distributed deployments."""

    def __init__(self, redis_url: str) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._redis_error = redis.RedisError
        self._client = redis.Redis.from_url(redis_url, decode_responses=True)

    async def find_by_fingerprint(self, fingerprint: str) -> AnalysisRecord | None:
        """Retrieve the stored analysis for a fingerprint."""
        try:
            data = self._client.get(f"{_KEY_PREFIX}{fingerprint}")
        except self._redis_error as e:
            raise StoreError(f"Lookup failed for {fingerprint}: {e}") from e
        if data is None:
            return None
        return _decode(data, AnalysisRecord)

    async def insert(self, record: AnalysisRecord, raw_text: str) -> bool:
        """Store a record unless one already exists for its fingerprint."""
        payload = record.model_dump(mode="json")
        payload["content_preview"] = raw_text[:PREVIEW_CHARS]
        try:
            written = self._client.set(
                f"{_KEY_PREFIX}{record.fingerprint}", json.dumps(payload), nx=True
            )
            if not written:
                return False
            self._client.zadd(
                _RECENT_KEY, {record.fingerprint: record.created_at.timestamp()}
            )
        except self._redis_error as e:
            raise StoreError(f"Insert failed for {record.fingerprint}: {e}") from e
        return True

    async def list_recent(
        self,
        limit: int,
        offset: int = 0,
        author: str | None = None,
    ) -> tuple[list[HistoryItem], int]:
        """Newest-first page of analyses.

        Redis has no secondary index on author, so a filtered listing scans
        the recent index.
        """
        try:
            if author is None:
                total = self._client.zcard(_RECENT_KEY)
                fingerprints = self._client.zrevrange(
                    _RECENT_KEY, offset, offset + limit - 1
                )
                return self._load_items(fingerprints), total

            items = [
                item
                for item in self._load_items(self._client.zrevrange(_RECENT_KEY, 0, -1))
                if item.author == author
            ]
        except self._redis_error as e:
            raise StoreError(f"History query failed: {e}") from e
        return items[offset : offset + limit], len(items)

    def _load_items(self, fingerprints: list[str]) -> list[HistoryItem]:
        items: list[HistoryItem] = []
        for fingerprint in fingerprints:
            data = self._client.get(f"{_KEY_PREFIX}{fingerprint}")
            if data is not None:
                items.append(_decode(data, HistoryItem))
        return items

    def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()


def _decode(data: str, model: type[AnalysisRecord]):
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        raise StoreError(f"Corrupt analysis entry: {e}") from e
