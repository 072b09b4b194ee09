# src/cache/base_result_store.py — v2
"""Abstract result store interface.

Collision policy for every backend is first-writer-wins: ``insert`` on a
fingerprint that already has a record leaves the existing record untouched
and returns False.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from aidetector.cache.models import AnalysisRecord, HistoryItem


class BaseResultStore(ABC):
    """Unified interface for result storage backends.

    All methods raise StoreError on backend failure.
    """

    @abstractmethod
    async def find_by_fingerprint(self, fingerprint: str) -> AnalysisRecord | None:
        """Retrieve the stored analysis for a fingerprint."""

    @abstractmethod
    async def insert(self, record: AnalysisRecord, raw_text: str) -> bool:
        """Store a new analysis. Returns False if the fingerprint already exists."""

    @abstractmethod
    async def list_recent(
        self,
        limit: int,
        offset: int = 0,
        author: str | None = None,
    ) -> tuple[list[HistoryItem], int]:
        """Newest-first page of analyses plus the total matching count."""

    def close(self) -> None:
        """Release backend resources."""
