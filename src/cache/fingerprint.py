# src/cache/fingerprint.py — v3
"""Content fingerprint used as the cache / dedup key.

SHA-256 over the raw UTF-8 bytes of the post text. The text is not trimmed
or normalized, and platform/author/post_id are not part of the key: two
requests with byte-identical text share one cached analysis.
"""

from __future__ import annotations

import hashlib


def compute_fingerprint(content: str) -> str:
    """Hex SHA-256 of the raw document text."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
