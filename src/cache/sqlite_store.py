# src/cache/sqlite_store.py — v2
"""SQLite-based result store (STORE_BACKEND=sqlite, the default).

Uses stdlib sqlite3 — no external dependency. A UNIQUE index on
content_hash gives first-writer-wins semantics: concurrent first-time
inserts for the same text keep the earliest row and report False to the
others.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from aidetector.cache.base_result_store import BaseResultStore
from aidetector.cache.models import PREVIEW_CHARS, AnalysisRecord, HistoryItem
from aidetector.core.errors import StoreError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS analyses (
    id TEXT PRIMARY KEY,
    content_hash TEXT NOT NULL,
    content TEXT NOT NULL,
    platform TEXT NOT NULL,
    post_id TEXT,
    author TEXT,
    score INTEGER NOT NULL,
    confidence REAL NOT NULL,
    label TEXT NOT NULL,
    llm_score INTEGER,
    heuristic_score INTEGER NOT NULL,
    signals TEXT NOT NULL DEFAULT '[]',
    created_at TEXT NOT NULL
);
CREATE UNIQUE INDEX IF NOT EXISTS idx_content_hash ON analyses(content_hash);
CREATE INDEX IF NOT EXISTS idx_created_at ON analyses(created_at);
CREATE INDEX IF NOT EXISTS idx_author ON analyses(author);
"""

_RECORD_COLUMNS = (
    "id, content_hash, platform, post_id, author, score, confidence, label, "
    "llm_score, heuristic_score, signals, created_at"
)


class SqliteResultStore(BaseResultStore):
    """SQLite-backed result store."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = (
            db_path if str(db_path) == ":memory:" else Path(db_path).expanduser()
        )
        try:
            if isinstance(self._db_path, Path):
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path))
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._conn.executescript(_SCHEMA)
        except (OSError, sqlite3.Error) as e:
            raise StoreError(f"Cannot open result store {db_path}: {e}") from e

    async def find_by_fingerprint(self, fingerprint: str) -> AnalysisRecord | None:
        """Retrieve the stored analysis for a fingerprint."""
        try:
            row = self._conn.execute(
                f"SELECT {_RECORD_COLUMNS} FROM analyses WHERE content_hash = ?",
                (fingerprint,),
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreError(f"Lookup failed for {fingerprint}: {e}") from e
        if row is None:
            return None
        return _row_to_record(row, AnalysisRecord)

    async def insert(self, record: AnalysisRecord, raw_text: str) -> bool:
        """Insert a record; False if the fingerprint was already stored."""
        try:
            cursor = self._conn.execute(
                """INSERT OR IGNORE INTO analyses
                   (id, content_hash, content, platform, post_id, author, score,
                    confidence, label, llm_score, heuristic_score, signals, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    record.id,
                    record.fingerprint,
                    raw_text,
                    record.platform.value,
                    record.post_id,
                    record.author,
                    record.final_score,
                    record.confidence,
                    record.label,
                    record.llm_score,
                    record.heuristic_score,
                    json.dumps(record.signals),
                    record.created_at.isoformat(),
                ),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Insert failed for {record.fingerprint}: {e}") from e
        return cursor.rowcount == 1

    async def list_recent(
        self,
        limit: int,
        offset: int = 0,
        author: str | None = None,
    ) -> tuple[list[HistoryItem], int]:
        """Newest-first page of analyses, optionally for one author."""
        where = "WHERE author = ?" if author is not None else ""
        params: tuple[Any, ...] = (author,) if author is not None else ()
        try:
            rows = self._conn.execute(
                f"""SELECT {_RECORD_COLUMNS}, SUBSTR(content, 1, {PREVIEW_CHARS})
                       AS content_preview
                    FROM analyses {where}
                    ORDER BY created_at DESC
                    LIMIT ? OFFSET ?""",
                (*params, limit, offset),
            ).fetchall()
            total = self._conn.execute(
                f"SELECT COUNT(*) FROM analyses {where}", params
            ).fetchone()[0]
        except sqlite3.Error as e:
            raise StoreError(f"History query failed: {e}") from e

        return [_row_to_record(row, HistoryItem) for row in rows], total

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()


def _row_to_record(row: sqlite3.Row, model: type[AnalysisRecord]) -> Any:
    data = dict(row)
    try:
        return model(
            id=data["id"],
            fingerprint=data["content_hash"],
            platform=data["platform"],
            post_id=data["post_id"],
            author=data["author"],
            final_score=data["score"],
            confidence=data["confidence"],
            label=data["label"],
            llm_score=data["llm_score"],
            heuristic_score=data["heuristic_score"],
            signals=json.loads(data["signals"] or "[]"),
            created_at=datetime.fromisoformat(data["created_at"]),
            **(
                {"content_preview": data["content_preview"]}
                if "content_preview" in data
                else {}
            ),
        )
    except (ValueError, ValidationError) as e:
        raise StoreError(f"Corrupt analysis row {data.get('id')}: {e}") from e
