"""
AI Enhancement Client

Optional second opinion from a remote language model. Sends the text
with one exhaustive system prompt, retries transient failures, and maps
whatever comes back onto a fully populated AIAnnotation.

The result is a tagged union: AIAnnotation (error=False) or AIFailure
(error=True). enhance() never raises for AI-layer problems.

Retry policy (max_retries extra attempts after the first):
  - 429           sleep Retry-After (default 3s)
  - 5xx, network,
    empty reply   sleep retry_delay * attempt number
  - 401, 403,
    parse failure terminal (one local repair pass, no re-request)
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union
from urllib.parse import urlsplit

from claritylens.config import settings
from claritylens.credentials import CredentialStore, EnvCredentialStore
from claritylens.errors import AIError, AIRateLimited
from claritylens.llm import LLMProvider
from claritylens.llm.factory import get_provider
from claritylens.logging import get_logger

logger = get_logger("enhancer")

DEFAULT_RATE_LIMIT_WAIT = 3.0
HEAD_SHARE = 0.7
TRUNCATION_MARKER = "\n\n[... middle section truncated for length ...]\n\n"
MAX_SUGGESTED_QUESTIONS = 7
MIN_QUESTION_CHARS = 10


# ============================================================
# PROMPT
# ============================================================

ANALYSIS_SYSTEM_PROMPT = """You are a rigorous critical-thinking analyst. Your task is to deeply analyze a piece of text and return a structured JSON assessment.

ANALYSIS METHODOLOGY — follow this exact order:
1. Read the full text carefully. Identify the author's thesis/purpose.
2. Isolate every discrete claim, assertion, or evaluative statement.
3. For each: classify it, assess evidence, note what's missing.
4. Identify reasoning patterns — look for logical gaps, not just keyword matches.
5. Assess persuasion techniques by examining HOW the author builds their argument, not just what words they use.
6. Consider what a knowledgeable, fair-minded critic would say.

Return ONLY valid JSON (no markdown fencing, no commentary, no preamble) matching this EXACT schema:

{
  "overallAssessment": "2-4 sentence summary: What is this text trying to do? How reliable is it? What should a reader be cautious about?",

  "purpose": "inform | persuade | entertain | provoke | sell | mixed",
  "purposeConfidence": 0.0-1.0,

  "biasAnalysis": {
    "direction": "left | right | pro-industry | anti-industry | pro-government | anti-government | neutral | mixed | other",
    "severity": "none | mild | moderate | strong",
    "explanation": "Specific explanation grounded in text evidence. Name the framing choices.",
    "framingTechniques": ["list of specific framing techniques used, e.g., 'selective emphasis', 'false equivalence', 'loaded language'"]
  },

  "fallacies": [
    {
      "name": "Standard fallacy name (e.g., 'Appeal to Authority', 'Straw Man', 'False Dilemma')",
      "quote": "Exact phrase from the text (max 20 words)",
      "explanation": "Why this constitutes the named fallacy — explain the logical error",
      "severity": "low | medium | high",
      "confidence": 0.0-1.0
    }
  ],

  "manipulationTechniques": [
    {
      "technique": "Specific technique name from this taxonomy: emotional manipulation, social proof, false urgency, anchoring, framing effect, appeal to fear, appeal to identity, bandwagon pressure, false authority, cherry-picking, manufactured consensus, thought-terminating cliché, whataboutism, sealioning, gish gallop, loaded question, presupposition, or other (specify)",
      "quote": "Relevant phrase from text (max 20 words)",
      "explanation": "How this technique operates on the reader and what response it's designed to provoke"
    }
  ],

  "claimAssessment": [
    {
      "claim": "The exact claim from text (max 30 words)",
      "type": "verifiable_fact | opinion | value_judgment | prediction | unsupported_claim | well_supported_claim | misleading_claim | definitional_claim",
      "confidence": 0.0-1.0,
      "reasoning": "1-2 sentences: WHY this classification. What specific evidence is present or absent?",
      "evidenceNeeded": "What would verify or falsify this claim?",
      "redFlags": ["any red flags about this specific claim: e.g., 'no source cited', 'uses absolute language', 'cherry-picked timeframe'"]
    }
  ],

  "missingContext": {
    "perspectives": ["What viewpoints or stakeholders are absent?"],
    "evidence": ["What data or evidence types are missing?"],
    "caveats": ["What important qualifications or exceptions are omitted?"],
    "summary": "1-2 sentence summary of what's missing"
  },

  "rhetoricalStrategies": [
    {
      "strategy": "e.g., 'anecdote as proof', 'appeal to common sense', 'strategic ambiguity', 'false balance', 'narrative framing'",
      "explanation": "How it works in this text"
    }
  ],

  "credibilityScore": 0-100,
  "credibilityReasoning": "2-3 sentences explaining the score. Reference specific strengths and weaknesses.",

  "suggestedQuestions": [
    "5 specific, actionable critical thinking questions tailored to THIS text (not generic). Each should point to a specific gap, assumption, or claim that deserves scrutiny."
  ],

  "keyTakeaway": "One sentence: the single most important thing a critical reader should know about this text."
}

CRITICAL RULES:
- Every finding MUST reference specific text. Do not make generic observations.
- If the text is balanced and well-sourced, SAY SO. Do not manufacture problems.
- "confidence" means YOUR confidence in the classification, not the claim's truth.
- Distinguish between intentional manipulation and incidental bias.
- For "verifiable_fact": the claim could be checked against public data/records.
- For "opinion": inherently subjective — no amount of evidence would settle it.
- For "value_judgment": a moral/ethical assessment that reasonable people could disagree on.
- For "prediction": a forward-looking claim about what will happen.
- For "unsupported_claim": presented as fact but lacking cited evidence in the text.
- For "well_supported_claim": backed by specific evidence, data, or sourcing in the text.
- For "misleading_claim": technically true but presented in a way that leads to false conclusions.
- For "definitional_claim": depends on how a term is defined.
- Return 3-8 claims, prioritizing the most consequential ones.
- Return 3-5 suggested questions, each targeting a different analytical angle.
- If no fallacies or manipulation techniques are present, return empty arrays — do NOT fabricate findings.
- credibilityScore: 80-100 = well-sourced, balanced, transparent; 60-79 = mostly reliable with some gaps; 40-59 = mixed reliability; 20-39 = significant concerns; 0-19 = unreliable/deceptive."""

USER_MESSAGE = (
    "Analyze the following text. Apply your full critical thinking methodology. "
    "Be specific and evidence-grounded.\n\n---\n{text}\n---"
)


# ============================================================
# RESULT TYPES
# ============================================================

PURPOSES = ("inform", "persuade", "entertain", "provoke", "sell", "mixed")
BIAS_SEVERITIES = ("none", "mild", "moderate", "strong")
FALLACY_SEVERITIES = ("low", "medium", "high")
CLAIM_TYPES = (
    "verifiable_fact", "opinion", "value_judgment", "prediction",
    "unsupported_claim", "well_supported_claim", "misleading_claim",
    "definitional_claim",
)


@dataclass(frozen=True)
class BiasAnalysis:
    direction: str = "neutral"
    severity: str = "none"
    explanation: str = "No bias analysis generated."
    framing_techniques: tuple = ()


@dataclass(frozen=True)
class AIFallacy:
    name: str
    quote: str
    explanation: str
    severity: str
    confidence: float


@dataclass(frozen=True)
class ManipulationTechnique:
    technique: str
    quote: str
    explanation: str


@dataclass(frozen=True)
class ClaimAssessment:
    claim: str
    type: str
    confidence: float
    reasoning: str
    evidence_needed: str
    red_flags: tuple


@dataclass(frozen=True)
class MissingContext:
    perspectives: tuple = ()
    evidence: tuple = ()
    caveats: tuple = ()
    summary: str = ""


@dataclass(frozen=True)
class RhetoricalStrategy:
    strategy: str
    explanation: str


@dataclass(frozen=True)
class AIAnnotation:
    """Normalized model assessment. Every field is always populated."""
    overall_assessment: str = "Analysis completed but overall assessment was not generated."
    purpose: str = "mixed"
    purpose_confidence: float = 0.5
    bias_analysis: BiasAnalysis = field(default_factory=BiasAnalysis)
    fallacies: tuple = ()
    manipulation_techniques: tuple = ()
    claim_assessment: tuple = ()
    missing_context: MissingContext = field(default_factory=MissingContext)
    rhetorical_strategies: tuple = ()
    credibility_score: int = 50
    credibility_reasoning: str = ""
    suggested_questions: tuple = ()
    key_takeaway: str = ""
    # False when the model gave no usable score and 50 was filled in
    credibility_estimated: bool = False
    error: bool = field(default=False, init=False)


@dataclass(frozen=True)
class AIFailure:
    """Why the AI pass produced nothing."""
    kind: str
    message: str
    status: Optional[int] = None
    error: bool = field(default=True, init=False)


AIResult = Union[AIAnnotation, AIFailure]


# ============================================================
# NORMALIZATION: raw JSON in, AIAnnotation out, never raises
# ============================================================

def _text(value: Any, default: str = "") -> str:
    if value is None or isinstance(value, (dict, list)):
        return default
    return value if isinstance(value, str) else str(value)


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _unit(value: Any, default: float = 0.5) -> float:
    number = _number(value)
    return default if number is None else max(0.0, min(1.0, number))


def _choice(value: Any, allowed: tuple, default: str) -> str:
    return value if value in allowed else default


def _items(value: Any) -> list:
    return value if isinstance(value, list) else []


def _strings(value: Any) -> tuple:
    return tuple(_text(v) for v in _items(value) if v is not None and not isinstance(v, (dict, list)))


def _dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def normalize_annotation(raw: Any) -> AIAnnotation:
    """Map untyped model JSON onto AIAnnotation, defaulting every field."""
    data = _dict(raw)

    score = _number(data.get("credibilityScore"))
    credibility = 50 if score is None else int(max(0, min(100, round(score))))

    bias_raw = data.get("biasAnalysis")
    if isinstance(bias_raw, dict):
        bias = BiasAnalysis(
            direction=_text(bias_raw.get("direction")) or "neutral",
            severity=_choice(bias_raw.get("severity"), BIAS_SEVERITIES, "none"),
            explanation=_text(bias_raw.get("explanation")),
            framing_techniques=_strings(bias_raw.get("framingTechniques")),
        )
    else:
        bias = BiasAnalysis()

    fallacies = tuple(
        AIFallacy(
            name=_text(f.get("name")),
            quote=_text(f.get("quote")),
            explanation=_text(f.get("explanation")),
            severity=_choice(f.get("severity"), FALLACY_SEVERITIES, "medium"),
            confidence=_unit(f.get("confidence")),
        )
        for f in _items(data.get("fallacies"))
        if isinstance(f, dict) and f.get("name") and f.get("explanation")
    )

    techniques = tuple(
        ManipulationTechnique(
            technique=_text(t.get("technique")),
            quote=_text(t.get("quote")),
            explanation=_text(t.get("explanation")),
        )
        for t in _items(data.get("manipulationTechniques"))
        if isinstance(t, dict) and t.get("technique")
    )

    claims = tuple(
        ClaimAssessment(
            claim=_text(c.get("claim")),
            type=_choice(c.get("type"), CLAIM_TYPES, "unsupported_claim"),
            confidence=_unit(c.get("confidence")),
            reasoning=_text(c.get("reasoning")),
            evidence_needed=_text(c.get("evidenceNeeded") or c.get("evidence_needed")),
            red_flags=_strings(c["redFlags"] if isinstance(c.get("redFlags"), list) else c.get("red_flags")),
        )
        for c in _items(data.get("claimAssessment"))
        if isinstance(c, dict) and c.get("claim")
    )

    context_raw = _dict(data.get("missingContext"))
    perspectives = _strings(context_raw.get("perspectives"))
    evidence = _strings(context_raw.get("evidence"))
    caveats = _strings(context_raw.get("caveats"))
    summary = context_raw.get("summary")
    if not isinstance(summary, str):
        summary = " ".join((perspectives + evidence + caveats)[:2])

    strategies = tuple(
        RhetoricalStrategy(
            strategy=_text(r.get("strategy")),
            explanation=_text(r.get("explanation")),
        )
        for r in _items(data.get("rhetoricalStrategies"))
        if isinstance(r, dict) and r.get("strategy")
    )

    questions = tuple(
        q for q in _items(data.get("suggestedQuestions"))
        if isinstance(q, str) and len(q) > MIN_QUESTION_CHARS
    )[:MAX_SUGGESTED_QUESTIONS]

    overall = data.get("overallAssessment")
    return AIAnnotation(
        overall_assessment=overall if isinstance(overall, str) and overall else AIAnnotation.overall_assessment,
        purpose=_choice(data.get("purpose"), PURPOSES, "mixed"),
        purpose_confidence=_unit(data.get("purposeConfidence")),
        bias_analysis=bias,
        fallacies=fallacies,
        manipulation_techniques=techniques,
        claim_assessment=claims,
        missing_context=MissingContext(
            perspectives=perspectives,
            evidence=evidence,
            caveats=caveats,
            summary=summary,
        ),
        rhetorical_strategies=strategies,
        credibility_score=credibility,
        credibility_reasoning=_text(data.get("credibilityReasoning")),
        suggested_questions=questions,
        key_takeaway=_text(data.get("keyTakeaway")),
        credibility_estimated=score is not None,
    )


# ============================================================
# TEXT PREPARATION
# ============================================================

def prepare_text(text: str, source_url: Optional[str] = None, max_chars: int = 7000) -> str:
    """Keep the head and tail of long texts and append the source domain."""
    prepared = text
    if len(text) > max_chars:
        head = int(max_chars * HEAD_SHARE)
        tail = max_chars - head - 50
        prepared = text[:head] + TRUNCATION_MARKER + text[-tail:]

    host = None
    if source_url:
        try:
            host = urlsplit(source_url).hostname
        except ValueError:
            host = None
    if host:
        if host.startswith("www."):
            host = host[4:]
        prepared += f"\n\nSource domain: {host}"
    return prepared


# ============================================================
# CLIENT
# ============================================================

class AIEnhancementClient:
    """
    Runs the AI pass with retries and returns AIAnnotation or AIFailure.

    Args:
        credentials: Where the API key comes from.
        provider: A ready provider. When omitted one is built per call
            from the factory using the credential store's key.
        sleep: Awaitable sleep, injectable so tests do not wait.
    """

    def __init__(
        self,
        credentials: Optional[CredentialStore] = None,
        provider: Optional[LLMProvider] = None,
        provider_name: Optional[str] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        max_chars: Optional[int] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.credentials = credentials or EnvCredentialStore(provider_name)
        self._provider = provider
        self._provider_name = provider_name
        self._max_retries = settings.AI_MAX_RETRIES if max_retries is None else max_retries
        self._retry_delay = settings.AI_RETRY_DELAY if retry_delay is None else retry_delay
        self._max_chars = max_chars or settings.AI_MAX_CHARS
        self._sleep = sleep

    def has_api_key(self) -> bool:
        return self.credentials.has_api_key()

    def _get_provider(self) -> LLMProvider:
        if self._provider is not None:
            return self._provider
        return get_provider(self._provider_name, api_key=self.credentials.get_api_key().strip())

    async def enhance(self, text: str, source_url: Optional[str] = None) -> AIResult:
        try:
            provider = self._get_provider()
        except ValueError as e:
            return AIFailure(kind="config", message=str(e))

        prompt = USER_MESSAGE.format(text=prepare_text(text, source_url, self._max_chars))
        attempts = max(1, self._max_retries + 1)
        last: Optional[AIError] = None

        for attempt in range(attempts):
            try:
                raw = await provider.generate_json(
                    prompt,
                    system_instruction=ANALYSIS_SYSTEM_PROMPT,
                    temperature=settings.AI_TEMPERATURE,
                    max_tokens=settings.AI_MAX_TOKENS,
                )
                return normalize_annotation(raw)
            except AIError as e:
                last = e
                if not e.retryable or attempt == attempts - 1:
                    break
                delay = self._delay_for(e, attempt)
                logger.warning(
                    "AI request failed, retrying",
                    extra={
                        "provider": provider.name,
                        "attempt": attempt + 1,
                        "status_code": e.status,
                        "retry_after": delay,
                        "error_type": e.kind,
                    },
                )
                await self._sleep(delay)

        logger.warning(
            "AI enhancement degraded",
            extra={
                "provider": provider.name,
                "status_code": last.status,
                "error": last.message,
                "error_type": last.kind,
            },
        )
        return AIFailure(kind=last.kind, message=last.message, status=last.status)

    def _delay_for(self, error: AIError, attempt: int) -> float:
        if isinstance(error, AIRateLimited):
            return error.retry_after if error.retry_after is not None else DEFAULT_RATE_LIMIT_WAIT
        return self._retry_delay * (attempt + 1)
