"""
Analyzer: Analysis Orchestrator

Picks an analysis depth from the word count, runs the algorithmic
components that depth allows, computes the composite score, and
optionally blends in the AI pass.

    insufficient   (< 3 words)    message only, no results
    basic          (3-9 words)    sentiment, readability, URL-only source
    standard       (10-49 words)  everything, with a small-sample note
    full           (50-199 words) everything
    comprehensive  (200+ words)   everything

The composite is a weighted mean over the components actually present,
so partial depths still land on 0-100. When the model supplied its own
credibility score the final score is algorithmic * 0.6 + AI * 0.4.
"""

from __future__ import annotations

import asyncio
import dataclasses
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from claritylens.bias import BiasDetector, BiasResult
from claritylens.claims import ClaimClassifier, ClaimReport
from claritylens.config import settings
from claritylens.enhancer import AIAnnotation, AIEnhancementClient, AIFailure, AIResult
from claritylens.fallacies import FallacyDetector, FallacyReport
from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.readability import ReadabilityMetrics, ReadabilityScorer
from claritylens.reflection import ReflectionBundle, ReflectionQuestionGenerator
from claritylens.sentiment import SentimentAnalyzer, SentimentResult
from claritylens.source import SourceCredibility, SourceCredibilityScorer
from claritylens.text import word_count
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, clamp

logger = get_logger("analyzer")

# --- Depth thresholds (word counts) ---
MINIMUM_WORDS = 3
BASIC_WORDS = 10
STANDARD_WORDS = 50
FULL_WORDS = 200

BASIC_NOTE = "Limited analysis — select more text for bias, fallacy, and claim detection."
STANDARD_NOTE = "Short sample — results are indicative but may not capture full context."


class AnalysisDepth(str, Enum):
    INSUFFICIENT = "insufficient"
    BASIC = "basic"
    STANDARD = "standard"
    FULL = "full"
    COMPREHENSIVE = "comprehensive"


def depth_for(words: int) -> AnalysisDepth:
    if words < MINIMUM_WORDS:
        return AnalysisDepth.INSUFFICIENT
    if words < BASIC_WORDS:
        return AnalysisDepth.BASIC
    if words < STANDARD_WORDS:
        return AnalysisDepth.STANDARD
    if words < FULL_WORDS:
        return AnalysisDepth.FULL
    return AnalysisDepth.COMPREHENSIVE


def insufficient_message(words: int) -> str:
    plural = "" if words == 1 else "s"
    return f"Only {words} word{plural} selected. Select a sentence or paragraph for meaningful analysis."


def to_plain(value: Any) -> Any:
    """Recursively convert result objects to JSON-ready builtins."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class AnalysisRequest:
    text: str
    source_url: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResults:
    """Per-component results. None marks a component the depth skipped."""
    sentiment: SentimentResult
    readability: ReadabilityMetrics
    source: SourceCredibility
    bias: Optional[BiasResult] = None
    fallacies: Optional[FallacyReport] = None
    claims: Optional[ClaimReport] = None
    reflection: Optional[ReflectionBundle] = None


@dataclass(frozen=True)
class CompositeAnalysis:
    """Everything one analyze() call produced."""
    depth: AnalysisDepth
    word_count: int
    timestamp: int  # epoch milliseconds
    depth_note: str = ""
    composite_score: Optional[int] = None
    algorithmic_score: Optional[int] = None
    results: Optional[AnalysisResults] = None
    ai: Optional[AIAnnotation] = None
    ai_error: Optional[str] = None
    has_ai_key: bool = False
    message: Optional[str] = None

    def to_dict(self) -> dict:
        return to_plain(self)


# ============================================================
# THE ORCHESTRATOR
# ============================================================

class AnalysisOrchestrator:
    """
    Top-level entry point.

    Components share one read-only lexicon and one set of weights.
    The only awaited step is the optional AI pass, which is bounded
    by ai_deadline seconds.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        enhancer: Optional[AIEnhancementClient] = None,
        rng: Optional[random.Random] = None,
        ai_deadline: Optional[float] = None,
    ):
        self._weights = weights
        self.sentiment = SentimentAnalyzer(lexicon, weights)
        self.bias = BiasDetector(lexicon, weights)
        self.fallacies = FallacyDetector(lexicon, weights)
        self.claims = ClaimClassifier(lexicon, weights)
        self.readability = ReadabilityScorer(weights)
        self.source = SourceCredibilityScorer(lexicon, weights)
        self.reflection = ReflectionQuestionGenerator(
            rng if rng is not None else random.Random(settings.REFLECTION_SEED),
            weights,
        )
        self.enhancer = enhancer if enhancer is not None else AIEnhancementClient()
        self._ai_deadline = ai_deadline if ai_deadline is not None else settings.AI_DEADLINE

    async def analyze(self, text: str, source_url: Optional[str] = None) -> CompositeAnalysis:
        started = time.monotonic()
        clean = (text or "").strip()
        words = word_count(clean)
        depth = depth_for(words)
        has_key = self.enhancer.has_api_key()
        timestamp = int(time.time() * 1000)

        if depth is AnalysisDepth.INSUFFICIENT:
            logger.info("Insufficient text", extra={"depth": depth.value, "word_count": words})
            return CompositeAnalysis(
                depth=depth,
                word_count=words,
                timestamp=timestamp,
                has_ai_key=has_key,
                message=insufficient_message(words),
            )

        results = self.run_components(clean, source_url, depth)
        algorithmic = self.composite_score(results)

        ai: Optional[AIAnnotation] = None
        ai_error: Optional[str] = None
        if has_key and words >= BASIC_WORDS:
            outcome = await self._run_ai(clean, source_url)
            if outcome.error:
                ai_error = outcome.message
            else:
                ai = outcome

        score = algorithmic
        if ai is not None and ai.credibility_estimated:
            score = round(algorithmic * (1 - self._weights.ai_blend) + ai.credibility_score * self._weights.ai_blend)

        if depth is AnalysisDepth.BASIC:
            note = BASIC_NOTE
        elif depth is AnalysisDepth.STANDARD:
            note = STANDARD_NOTE
        else:
            note = ""

        logger.info(
            "Analysis complete",
            extra={
                "depth": depth.value,
                "word_count": words,
                "composite_score": score,
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )

        return CompositeAnalysis(
            depth=depth,
            word_count=words,
            timestamp=timestamp,
            depth_note=note,
            composite_score=score,
            algorithmic_score=algorithmic,
            results=results,
            ai=ai,
            ai_error=ai_error,
            has_ai_key=has_key,
        )

    async def analyze_request(self, request: AnalysisRequest) -> CompositeAnalysis:
        return await self.analyze(request.text, request.source_url)

    def run_components(
        self, text: str, source_url: Optional[str], depth: AnalysisDepth
    ) -> AnalysisResults:
        """Run the algorithmic components allowed at this depth."""
        sentiment = self.sentiment.analyze(text)
        readability = self.readability.analyze(text)

        if depth is AnalysisDepth.BASIC:
            return AnalysisResults(
                sentiment=sentiment,
                readability=readability,
                source=self.source.analyze(source_url or "", ""),
            )

        bias = self.bias.analyze(text)
        fallacies = self.fallacies.analyze(text)
        claims = self.claims.analyze(text)
        source = self.source.analyze(source_url or "", text)
        reflection = self.reflection.generate(
            sentiment=sentiment,
            bias=bias,
            fallacies=fallacies,
            claims=claims,
            source=source,
        )
        return AnalysisResults(
            sentiment=sentiment,
            readability=readability,
            source=source,
            bias=bias,
            fallacies=fallacies,
            claims=claims,
            reflection=reflection,
        )

    def composite_score(self, results: AnalysisResults) -> int:
        """Weighted mean over the components present, 0-100."""
        values = {
            "source": results.source.score,
            "sentiment": results.sentiment.objectivity,
        }
        if results.bias is not None:
            values["bias"] = 100 - results.bias.bias_score
        if results.fallacies is not None:
            values["fallacy"] = 100 - results.fallacies.fallacy_density
        if not results.readability.is_empty:
            values["readability"] = min(100, results.readability.scores.flesch_ease)

        present = [(name, weight) for name, weight in self._weights.composite_weights if name in values]
        total_weight = sum(weight for _, weight in present)
        if not total_weight:
            return 50
        score = sum(values[name] * weight for name, weight in present) / total_weight
        return int(clamp(round(score)))

    async def _run_ai(self, text: str, source_url: Optional[str]) -> AIResult:
        try:
            return await asyncio.wait_for(
                self.enhancer.enhance(text, source_url),
                timeout=self._ai_deadline,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "AI enhancement timed out",
                extra={"error_type": "timeout", "duration_ms": self._ai_deadline * 1000},
            )
            return AIFailure(kind="timeout", message=f"AI analysis timed out after {self._ai_deadline:g}s")
        except Exception as e:
            logger.error(
                "AI enhancement failed unexpectedly",
                extra={"error": str(e), "error_type": type(e).__name__},
                exc_info=True,
            )
            return AIFailure(kind="unexpected", message=str(e) or type(e).__name__)


# ============================================================
# MODULE ENTRY POINT
# ============================================================

_orchestrator: Optional[AnalysisOrchestrator] = None


def get_orchestrator() -> AnalysisOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = AnalysisOrchestrator()
    return _orchestrator


async def analyze(text: str, source_url: Optional[str] = None) -> CompositeAnalysis:
    """Analyze text with the default orchestrator."""
    return await get_orchestrator().analyze(text, source_url)
