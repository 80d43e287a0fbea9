"""
Reflection Question Generator

Picks Socratic follow-up questions from fixed banks according to which
analysis signals fired, plus a short synthesis paragraph. Works only
from the other analyzers' results, never the raw text.

Sampling goes through an injected random.Random; two generators seeded
the same produce the same bundle for the same inputs.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from claritylens.bias import BiasResult
from claritylens.claims import ClaimReport
from claritylens.fallacies import FallacyReport
from claritylens.sentiment import SentimentResult
from claritylens.source import SourceCredibility
from claritylens.text import unique
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights

QUESTION_BANKS: Mapping[str, tuple] = MappingProxyType({
    "high_emotion": (
        "This text uses strong emotional language. What would the argument look like stripped of emotional framing?",
        "If you removed all emotional words, would the core point still be compelling?",
        "Who benefits from you feeling the emotions this text evokes?",
        "Is the emotional reaction this triggers proportional to the evidence presented?",
    ),
    "high_bias": (
        "What perspective is missing or underrepresented here?",
        "Whose interests are served by this particular framing?",
        "If the opposing side wrote about this topic, what different language would they use?",
        "Which facts are emphasized and which might be omitted to support this narrative?",
    ),
    "fallacies_detected": (
        "Can you identify where the reasoning breaks down?",
        "What evidence would actually be needed to support the claims being made?",
        "Could the conclusion still be true even if the reasoning is flawed?",
        "What alternative explanations exist that the author doesn't consider?",
    ),
    "strong_claims": (
        "What specific evidence would you need to verify these claims?",
        "Are the claims here falsifiable? How would you test them?",
        "What would change your mind about the claims in this text?",
        "How would a domain expert evaluate these assertions?",
    ),
    "low_credibility": (
        "Can you verify these claims with more established sources?",
        "Is this source trying to inform you or persuade you?",
        "What is the funding model of this publication, and how might it influence content?",
        "Would you trust this source for important decisions?",
    ),
    "opinion_heavy": (
        "What facts would you need to form your own independent view?",
        "Can you separate the author's opinions from any factual claims?",
        "If someone you disagreed with made the same argument, would you evaluate it differently?",
    ),
    "general": (
        "Before sharing this, ask: Is it true? Is it fair? Is it necessary?",
        "What is the author's purpose — to inform, persuade, entertain, or provoke?",
        "What questions does this text leave unanswered?",
        "How does this fit with what you already know? Does it confirm or challenge existing beliefs?",
    ),
})

SYNTHESIS_EMOTION_AND_BIAS = (
    "This content combines emotional language with bias markers — often indicating "
    "persuasive rather than informational intent."
)
SYNTHESIS_FALLACIES = "{count} potential logical fallacy pattern(s) detected."
SYNTHESIS_LOW_CREDIBILITY = "Source credibility signals suggest caution. Cross-reference key claims."
SYNTHESIS_DEFAULT = (
    "Consider what perspective might be missing and whether evidence supports the conclusions."
)


@dataclass(frozen=True)
class ReflectionBundle:
    questions: tuple = ()
    categories: tuple = ()
    synthesis: str = ""


class ReflectionQuestionGenerator:

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        banks: Mapping[str, tuple] = QUESTION_BANKS,
    ):
        self._rng = rng if rng is not None else random.Random()
        self._weights = weights
        self._banks = banks

    def generate(
        self,
        sentiment: Optional[SentimentResult] = None,
        bias: Optional[BiasResult] = None,
        fallacies: Optional[FallacyReport] = None,
        claims: Optional[ClaimReport] = None,
        source: Optional[SourceCredibility] = None,
    ) -> ReflectionBundle:
        w = self._weights
        triggers = (
            ("high_emotion", 2,
             sentiment is not None and sentiment.emotional_intensity > w.reflection_emotion_threshold),
            ("high_bias", 2,
             bias is not None and bias.bias_score > w.reflection_bias_threshold),
            ("fallacies_detected", 2,
             fallacies is not None and fallacies.total_matches > 0),
            ("strong_claims", 1,
             claims is not None and claims.counts.get("strong_claim", 0) > w.reflection_strong_claims),
            ("low_credibility", 2,
             source is not None and source.score < w.reflection_credibility_threshold),
            ("opinion_heavy", 1,
             claims is not None
             and claims.distribution.opinion_percent > w.reflection_opinion_threshold),
        )

        categories: list[str] = []
        questions: list[str] = []
        for category, picks, fired in triggers:
            if fired:
                categories.append(category)
                questions.extend(self._pick(category, picks))
        questions.extend(self._pick("general", 2))

        parts = []
        if "high_emotion" in categories and "high_bias" in categories:
            parts.append(SYNTHESIS_EMOTION_AND_BIAS)
        if "fallacies_detected" in categories:
            parts.append(SYNTHESIS_FALLACIES.format(count=fallacies.total_matches))
        if "low_credibility" in categories:
            parts.append(SYNTHESIS_LOW_CREDIBILITY)
        if not parts:
            parts.append(SYNTHESIS_DEFAULT)

        return ReflectionBundle(
            questions=tuple(unique(questions)[:w.reflection_max_questions]),
            categories=tuple(categories),
            synthesis=" ".join(parts),
        )

    def _pick(self, category: str, count: int) -> list[str]:
        bank = self._banks.get(category, ())
        return self._rng.sample(list(bank), min(count, len(bank)))
