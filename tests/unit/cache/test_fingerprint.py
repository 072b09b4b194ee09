# tests/unit/cache/test_fingerprint.py — v1
"""Tests for cache/fingerprint.py."""

from __future__ import annotations

import hashlib

from aidetector.cache.fingerprint import compute_fingerprint


class TestComputeFingerprint:
    def test_sha256_hex(self):
        assert compute_fingerprint("hello") == hashlib.sha256(b"hello").hexdigest()
        assert len(compute_fingerprint("hello")) == 64

    def test_whitespace_is_significant(self):
        assert compute_fingerprint("hello") != compute_fingerprint("hello ")

    def test_case_is_significant(self):
        assert compute_fingerprint("Hello") != compute_fingerprint("hello")

    def test_utf8_bytes(self):
        text = "café — ok"
        assert compute_fingerprint(text) == hashlib.sha256(text.encode("utf-8")).hexdigest()
