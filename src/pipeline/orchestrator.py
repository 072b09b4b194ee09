# src/pipeline/orchestrator.py — v4
"""Detection orchestrator — the single entry point for one analysis.

Flow per request:
  validate → fingerprint → single-flight → store lookup
  → [heuristic engine ‖ LLM judge] → combine → label → persist

The heuristic engine runs in a worker thread so it never blocks the event
loop while the judge awaits its provider. Both must finish before the
results are combined; there is no partial-result path.
"""

from __future__ import annotations

import asyncio
import logging

from aidetector.cache.base_result_store import BaseResultStore
from aidetector.cache.fingerprint import compute_fingerprint
from aidetector.cache.models import AnalysisRecord
from aidetector.core.errors import (
    InternalError,
    InvalidInput,
    JudgeError,
    StoreError,
)
from aidetector.core.models import (
    AnalysisResult,
    Document,
    HeuristicResult,
    LlmResult,
)
from aidetector.heuristics import engine as heuristic_engine
from aidetector.llm.base_client import BaseLLMJudge
from aidetector.logging.context import set_analysis_context, set_step
from aidetector.pipeline.inflight import InFlightRegistry
from aidetector.pipeline.scoring import (
    HEURISTICS_ONLY_CONFIDENCE,
    combine,
    score_to_label,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_CHARS = 50_000


class DetectionOrchestrator:
    """Run, combine and cache both judges for a document.

    Args:
        store: Result store used as cache and persistence.
        judge: LLM judge selected at startup; None = heuristics-only mode.
        max_content_chars: Upper bound on document length.
    """

    def __init__(
        self,
        store: BaseResultStore,
        judge: BaseLLMJudge | None = None,
        max_content_chars: int = DEFAULT_MAX_CONTENT_CHARS,
    ) -> None:
        self._store = store
        self._judge = judge
        self._max_content_chars = max_content_chars
        self._inflight: InFlightRegistry[AnalysisResult] = InFlightRegistry()

    @property
    def heuristics_only(self) -> bool:
        return self._judge is None

    @property
    def provider_name(self) -> str:
        return "none" if self._judge is None else self._judge.provider_name

    async def analyze(self, document: Document) -> AnalysisResult:
        """Analyze a document, serving byte-identical text from the cache.

        Raises:
            InvalidInput: Blank, oversize or non-UTF-8 content. Raised before
                any work.
            JudgeError: The LLM judge failed (provider, timeout or parse).
            InternalError: The heuristic engine crashed.
        """
        self._validate(document.content)
        fingerprint = compute_fingerprint(document.content)
        return await self._inflight.run(
            fingerprint, lambda: self._lookup_or_compute(document, fingerprint)
        )

    def _validate(self, content: str) -> None:
        if not content.strip():
            raise InvalidInput("Content cannot be empty")
        if len(content) > self._max_content_chars:
            raise InvalidInput(
                f"Content too long (max {self._max_content_chars} chars)"
            )
        try:
            content.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidInput("Content is not valid UTF-8 text") from e

    async def _lookup_or_compute(
        self, document: Document, fingerprint: str
    ) -> AnalysisResult:
        set_analysis_context(fingerprint, self.provider_name)

        set_step("lookup")
        cached = await self._find_cached(fingerprint)
        if cached is not None:
            logger.info("Cache hit for %s", fingerprint[:12])
            return cached.to_result(cached=True)

        set_step("judge")
        heuristic, llm = await self._run_judges(document.content)

        set_step("combine")
        if llm is None:
            final_score = heuristic.score
            confidence = HEURISTICS_ONLY_CONFIDENCE
        else:
            final_score, confidence = combine(llm, heuristic)
        label = score_to_label(final_score, heuristics_only=llm is None)

        record = AnalysisRecord(
            fingerprint=fingerprint,
            platform=document.platform,
            post_id=document.post_id,
            author=document.author,
            final_score=final_score,
            confidence=confidence,
            label=label,
            llm_score=None if llm is None else llm.score,
            heuristic_score=heuristic.score,
            signals=heuristic.signals,
        )

        set_step("persist")
        result = await self._persist(record, document.content)
        logger.info(
            "Analysis complete: score=%d label=%s llm=%s heuristic=%d",
            result.score, result.label, result.llm_score, result.heuristic_score,
        )
        return result

    async def _find_cached(self, fingerprint: str) -> AnalysisRecord | None:
        """Store lookup; a failing store is treated as a cache miss."""
        try:
            return await self._store.find_by_fingerprint(fingerprint)
        except StoreError as e:
            logger.warning("Cache lookup failed, treating as miss: %s", e)
            return None

    async def _run_judges(
        self, text: str
    ) -> tuple[HeuristicResult, LlmResult | None]:
        """Run heuristic and LLM judges concurrently and join both."""
        heuristic_task = asyncio.to_thread(heuristic_engine.analyze, text)
        if self._judge is None:
            outcomes = await asyncio.gather(heuristic_task, return_exceptions=True)
            outcomes.append(None)
        else:
            outcomes = await asyncio.gather(
                heuristic_task, self._judge.judge(text), return_exceptions=True
            )
        heuristic, llm = outcomes

        if isinstance(llm, BaseException):
            if isinstance(llm, JudgeError):
                logger.error("LLM judge failed: %s", llm)
            raise llm
        if isinstance(heuristic, BaseException):
            if isinstance(heuristic, asyncio.CancelledError):
                raise heuristic
            logger.error("Heuristic analysis crashed", exc_info=heuristic)
            raise InternalError(f"Heuristic analysis failed: {heuristic}") from heuristic
        return heuristic, llm

    async def _persist(self, record: AnalysisRecord, raw_text: str) -> AnalysisResult:
        """Write the record; keep the computed result if the store fails.

        If another writer stored this fingerprint first, its record wins.
        """
        try:
            inserted = await self._store.insert(record, raw_text)
        except StoreError as e:
            logger.error("Failed to persist analysis %s: %s", record.id, e)
            return record.to_result(cached=False)

        if inserted:
            return record.to_result(cached=False)

        logger.info(
            "Fingerprint %s already stored, returning first writer",
            record.fingerprint[:12],
        )
        winner = await self._find_cached(record.fingerprint)
        if winner is None:
            return record.to_result(cached=False)
        return winner.to_result(cached=True)
