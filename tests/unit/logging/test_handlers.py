# tests/unit/logging/test_handlers.py — v1
"""Tests for logging/handlers.py."""

from __future__ import annotations

import pytest

from aidetector.logging.handlers import create_rotating_handler, parse_size


class TestParseSize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10MB", 10 * 1024**2),
            ("512 KB", 512 * 1024),
            ("1gb", 1024**3),
            ("4096", 4096),
            (" 20B ", 20),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", ["", "MB", "1.5MB", "10TB", "ten"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid size format"):
            parse_size(text)


class TestCreateRotatingHandler:
    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "a" / "b" / "app.log"
        handler = create_rotating_handler(path, rotation="2KB", retention=5)
        try:
            assert path.parent.is_dir()
            assert handler.maxBytes == 2048
            assert handler.backupCount == 5
        finally:
            handler.close()

    def test_negative_retention_clamped(self, tmp_path):
        handler = create_rotating_handler(tmp_path / "app.log", retention=-1)
        try:
            assert handler.backupCount == 0
        finally:
            handler.close()
