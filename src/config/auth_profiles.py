# src/config/auth_profiles.py — v1
"""Read an Anthropic credential from a Claude auth-profiles file.

The file (``~/.claude/auth-profiles.json``, written by ``claude
setup-token``) looks like::

    {"profiles": {"anthropic:default": {"token": "...", "key": "..."}},
     "lastGood": {"anthropic": "anthropic:default"}}

The ``lastGood`` anthropic profile wins; otherwise the first profile whose
id starts with ``anthropic:``. A profile's ``token`` is preferred over its
``key``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class AuthProfile(BaseModel):
    token: str | None = None
    key: str | None = None


class AuthProfileStore(BaseModel):
    profiles: dict[str, AuthProfile] = Field(default_factory=dict)
    last_good: dict[str, str] | None = Field(default=None, alias="lastGood")


def read_claude_token(path: Path | str) -> str | None:
    """Return the preferred Anthropic credential in ``path``, if any.

    Missing or unreadable files yield None; this is a best-effort fallback.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        return None
    try:
        store = AuthProfileStore.model_validate(
            json.loads(path.read_text(encoding="utf-8"))
        )
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Ignoring unreadable auth profiles %s: %s", path, e)
        return None

    profile_id = (store.last_good or {}).get("anthropic")
    if profile_id is None:
        profile_id = next(
            (k for k in store.profiles if k.startswith("anthropic:")), None
        )
    if profile_id is None:
        return None

    profile = store.profiles.get(profile_id)
    if profile is None:
        return None
    return profile.token or profile.key or None
