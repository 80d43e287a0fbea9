"""
Sentiment Analyzer

Lexicon-based tone scoring with negation and intensifier handling.

Each token is looked up on its letters-only form. A negator within the
preceding window flips the sign and dampens the value; an intensifier
immediately before multiplies it. Hedges and intensifiers are tallied
separately from scoring, and the raw text is scanned for emotional
appeal patterns.

    normalized  = (positive - negative) / sqrt(word_count)
    intensity   = emotional density * 2.5 + intensifier density * 4
                  + pattern matches * 6            (capped at 100)
    objectivity = 100 - intensity
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.text import letters_only, matches, unique, unique_casefold
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, clamp

logger = get_logger("sentiment")

_EDGE_JUNK = re.compile(r"^[^a-z']+|[^a-z']+$")
_NOT_WORDISH = re.compile(r"[^a-z']")
_CURLY_APOSTROPHES = str.maketrans({"‘": "'", "’": "'"})

MAX_WORDS = 15
MAX_TALLY_WORDS = 10
MAX_PATTERN_EXAMPLES = 3


@dataclass(frozen=True)
class IntensifierSummary:
    count: int = 0
    density: float = 0.0
    words: tuple = ()


@dataclass(frozen=True)
class HedgeSummary:
    count: int = 0
    words: tuple = ()


@dataclass(frozen=True)
class EmotionalPatternMatch:
    label: str
    count: int
    examples: tuple


@dataclass(frozen=True)
class SentimentResult:
    """Tone assessment for one span of text."""
    tone_label: str = "Neutral"
    normalized_score: float = 0.0
    positive_score: float = 0.0
    negative_score: float = 0.0
    net_score: float = 0.0
    emotional_intensity: int = 0
    objectivity: int = 100
    positive_words: tuple = ()
    negative_words: tuple = ()
    intensifiers: IntensifierSummary = field(default_factory=IntensifierSummary)
    hedges: HedgeSummary = field(default_factory=HedgeSummary)
    emotional_patterns: tuple = ()
    word_count: int = 0


def tokenize(text: str) -> list[str]:
    """Lowercase, normalise apostrophes, split on whitespace, trim edge punctuation."""
    tokens = []
    for raw in text.lower().translate(_CURLY_APOSTROPHES).split():
        token = _EDGE_JUNK.sub("", raw)
        if token:
            tokens.append(token)
    return tokens


class SentimentAnalyzer:
    """Deterministic tone scorer. Holds no mutable state."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lexicon = lexicon
        self._weights = weights

    def analyze(self, text: str) -> SentimentResult:
        if not text or not text.strip():
            return SentimentResult()

        tokens = tokenize(text)
        if not tokens:
            return SentimentResult()
        word_count = len(tokens)

        positive, negative = 0.0, 0.0
        positive_words: list[str] = []
        negative_words: list[str] = []
        intensifier_count, hedge_count = 0, 0
        intensifier_words: list[str] = []
        hedge_words: list[str] = []

        for i, token in enumerate(tokens):
            clean = letters_only(token)

            if clean in self._lexicon.hedges:
                hedge_count += 1
                hedge_words.append(clean)
            if clean in self._lexicon.intensifiers:
                intensifier_count += 1
                intensifier_words.append(clean)

            value = self._lexicon.sentiment.get(clean, 0)
            if not value:
                continue

            score = float(value)
            if self._is_negated(tokens, i):
                score = -score * self._weights.negation_dampening
            if i > 0:
                score *= self._lexicon.intensifiers.get(letters_only(tokens[i - 1]), 1.0)

            if score > 0:
                positive += score
                positive_words.append(clean)
            elif score < 0:
                negative += abs(score)
                negative_words.append(clean)

        positive = round(positive, 2)
        negative = round(negative, 2)
        positive_words = unique(positive_words)
        negative_words = unique(negative_words)

        patterns = self._match_emotional_patterns(text)

        net = positive - negative
        normalized = net / math.sqrt(word_count)

        emotional_density = (len(positive_words) + len(negative_words)) / word_count * 100
        intensifier_density = intensifier_count / word_count * 100
        pattern_hits = sum(p.count for p in patterns)
        w = self._weights
        intensity = int(clamp(round(
            emotional_density * w.emotional_density_weight
            + intensifier_density * w.intensifier_density_weight
            + pattern_hits * w.emotional_pattern_weight
        )))

        result = SentimentResult(
            tone_label=self._tone(normalized),
            normalized_score=round(normalized, 2),
            positive_score=positive,
            negative_score=negative,
            net_score=round(net, 2),
            emotional_intensity=intensity,
            objectivity=max(0, 100 - intensity),
            positive_words=tuple(positive_words[:MAX_WORDS]),
            negative_words=tuple(negative_words[:MAX_WORDS]),
            intensifiers=IntensifierSummary(
                count=intensifier_count,
                density=round(intensifier_density, 2),
                words=tuple(unique(intensifier_words)[:MAX_TALLY_WORDS]),
            ),
            hedges=HedgeSummary(
                count=hedge_count,
                words=tuple(unique(hedge_words)[:MAX_TALLY_WORDS]),
            ),
            emotional_patterns=tuple(patterns),
            word_count=word_count,
        )
        logger.debug(
            "Sentiment scored",
            extra={"word_count": word_count},
        )
        return result

    def _is_negated(self, tokens: list[str], index: int) -> bool:
        start = max(0, index - self._weights.negation_window)
        return any(
            _NOT_WORDISH.sub("", tokens[j]) in self._lexicon.negators
            for j in range(start, index)
        )

    def _match_emotional_patterns(self, text: str) -> list[EmotionalPatternMatch]:
        found = []
        for pattern in self._lexicon.emotional_patterns:
            hits = matches(pattern.pattern, text)
            if hits:
                found.append(EmotionalPatternMatch(
                    label=pattern.label,
                    count=len(hits),
                    examples=tuple(unique_casefold(hits)[:MAX_PATTERN_EXAMPLES]),
                ))
        return found

    def _tone(self, score: float) -> str:
        w = self._weights
        magnitude = abs(score)
        if magnitude < w.tone_neutral:
            return "Neutral"
        direction = "Positive" if score > 0 else "Negative"
        if magnitude < w.tone_mild:
            return f"Mildly {direction}"
        if magnitude < w.tone_strong:
            return direction
        return f"Strongly {direction}"


_analyzer = SentimentAnalyzer()


def analyze_sentiment(text: str) -> SentimentResult:
    """Score text against the default lexicon."""
    return _analyzer.analyze(text)
