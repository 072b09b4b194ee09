# tests/unit/config/test_auth_profiles.py — v1
"""Tests for config/auth_profiles.py — Claude auth-profiles discovery."""

from __future__ import annotations

import json
import logging

from aidetector.config.auth_profiles import read_claude_token


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestReadClaudeToken:
    def test_missing_file(self, tmp_path):
        assert read_claude_token(tmp_path / "nope.json") is None

    def test_last_good_profile_wins(self, tmp_path):
        path = _write(tmp_path / "p.json", {
            "profiles": {
                "anthropic:first": {"token": "tok-first"},
                "anthropic:work": {"token": "tok-work"},
            },
            "lastGood": {"anthropic": "anthropic:work"},
        })
        assert read_claude_token(path) == "tok-work"

    def test_first_anthropic_profile_fallback(self, tmp_path):
        path = _write(tmp_path / "p.json", {
            "profiles": {
                "openai:default": {"key": "sk-openai"},
                "anthropic:default": {"key": "sk-ant-key"},
            },
        })
        assert read_claude_token(path) == "sk-ant-key"

    def test_token_preferred_over_key(self, tmp_path):
        path = _write(tmp_path / "p.json", {
            "profiles": {"anthropic:default": {"token": "tok", "key": "key"}},
        })
        assert read_claude_token(path) == "tok"

    def test_no_anthropic_profile(self, tmp_path):
        path = _write(tmp_path / "p.json", {"profiles": {"openai:x": {"key": "k"}}})
        assert read_claude_token(path) is None

    def test_last_good_points_to_missing_profile(self, tmp_path):
        path = _write(tmp_path / "p.json", {
            "profiles": {"anthropic:default": {"token": "tok"}},
            "lastGood": {"anthropic": "anthropic:gone"},
        })
        assert read_claude_token(path) is None

    def test_empty_profile(self, tmp_path):
        path = _write(tmp_path / "p.json", {"profiles": {"anthropic:default": {}}})
        assert read_claude_token(path) is None

    def test_malformed_json_warns(self, tmp_path, caplog):
        path = tmp_path / "p.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert read_claude_token(path) is None
        assert "Ignoring unreadable auth profiles" in caplog.text

    def test_accepts_str_path(self, tmp_path):
        path = _write(tmp_path / "p.json", {
            "profiles": {"anthropic:default": {"key": "k"}},
        })
        assert read_claude_token(str(path)) == "k"
