# src/api/facade.py — v2
"""Public API facade — entry points for analysis, history and status.

Usage:
    from aidetector.api.facade import analyze
    response = await analyze(AnalyzeRequest(content=text, platform="twitter"))

Callers that serve many requests should build one orchestrator with
build_orchestrator() and pass it in, so the provider selection, judge client
and store are created once per process.
"""

from __future__ import annotations

import logging
from typing import Any

from aidetector.api.models import AnalyzeRequest, AnalyzeResponse, HistoryPage
from aidetector.cache.base_result_store import BaseResultStore
from aidetector.cache.store_factory import create_result_store
from aidetector.config.settings import Settings
from aidetector.core.numeric import clamp
from aidetector.llm.client_factory import create_judge
from aidetector.llm.config import resolve_provider
from aidetector.pipeline.orchestrator import DetectionOrchestrator
from aidetector.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20
MAX_HISTORY_LIMIT = 100


def build_orchestrator(
    settings: Settings | None = None,
    store: BaseResultStore | None = None,
) -> DetectionOrchestrator:
    """Resolve the provider once and wire judge + store into an orchestrator.

    Raises:
        ProviderUnavailable: PRIMARY_AI_PROVIDER names a provider with no
            credential.
    """
    settings = settings or Settings()
    selection = resolve_provider(settings)

    return DetectionOrchestrator(
        store=store or create_result_store(settings),
        judge=create_judge(selection, settings),
        max_content_chars=settings.max_content_chars,
    )


async def analyze(
    request: AnalyzeRequest,
    orchestrator: DetectionOrchestrator | None = None,
    settings: Settings | None = None,
) -> AnalyzeResponse:
    """Analyze one post and return the public response shape.

    Args:
        request: Post content, platform and optional metadata.
        orchestrator: Shared orchestrator. A throwaway one is built from
            ``settings`` when None.
        settings: Used only when no orchestrator is given.

    Raises:
        InvalidInput: Blank or oversize content.
        JudgeError: The LLM judge failed.
        InternalError: The heuristic engine crashed.
    """
    if orchestrator is not None:
        result = await orchestrator.analyze(request.to_document())
        return AnalyzeResponse.from_result(result)

    settings = settings or Settings()
    store = create_result_store(settings)
    try:
        owned = build_orchestrator(settings, store=store)
        result = await owned.analyze(request.to_document())
    finally:
        store.close()
    return AnalyzeResponse.from_result(result)


async def history(
    limit: int = DEFAULT_HISTORY_LIMIT,
    offset: int = 0,
    author: str | None = None,
    store: BaseResultStore | None = None,
    settings: Settings | None = None,
) -> HistoryPage:
    """Newest-first page of stored analyses.

    ``limit`` is clamped to 1..100 and ``offset`` to >= 0.

    Raises:
        StoreError: The store could not be read.
    """
    limit = clamp(limit, 1, MAX_HISTORY_LIMIT)
    offset = max(offset, 0)

    owned = store is None
    if owned:
        store = create_result_store(settings or Settings())
    try:
        items, total = await store.list_recent(limit, offset=offset, author=author)
    finally:
        if owned:
            store.close()
    return HistoryPage(items=items, total=total, limit=limit, offset=offset)


def provider_status(settings: Settings | None = None) -> dict[str, Any]:
    """Service status with the active judge provider and model.

    Raises:
        ProviderUnavailable: PRIMARY_AI_PROVIDER names a provider with no
            credential.
    """
    selection = resolve_provider(settings or Settings())
    return {
        "status": "ok",
        "version": __version__,
        "provider": selection.provider.value,
        "model": selection.model or None,
    }
