"""
Bias Detector

Scans text for loaded language, weasel phrases, ideological framing,
passive voice and leading questions, then folds them into a 0-100 score:

    loaded density * 6 + weasel density * 10 + framing findings * 5
    + absolutist / words * 400 + passive bonus + leading questions * 4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.text import matches, split_sentences, unique, unique_casefold, word_count
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, band, clamp

logger = get_logger("bias")

MAX_FRAMING_EXAMPLES = 3
MAX_LEADING_QUESTIONS = 5
PASSIVE_SENTENCE_MIN_CHARS = 5


@dataclass(frozen=True)
class PhraseCount:
    phrase: str
    count: int


@dataclass(frozen=True)
class FramingFinding:
    label: str
    bias: str
    count: int
    examples: tuple


@dataclass(frozen=True)
class PassiveVoice:
    count: int = 0
    density: int = 0


@dataclass(frozen=True)
class BiasResult:
    bias_score: int = 0
    bias_label: str = "Low Bias"
    balance_label: str = "Balanced"
    loaded_language: Mapping = field(default_factory=lambda: MappingProxyType({}))
    total_loaded_count: int = 0
    weasel_words: tuple = ()
    framing: tuple = ()
    passive_voice: PassiveVoice = field(default_factory=PassiveVoice)
    leading_questions: tuple = ()
    absolutist_count: int = 0
    word_count: int = 0


def _total(findings) -> int:
    return sum(f.count for f in findings)


class BiasDetector:
    """Rule-based bias scanner over an injected lexicon."""

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lexicon = lexicon
        self._weights = weights

    def analyze(self, text: str) -> BiasResult:
        w = self._weights
        if not text or len(text.strip()) < w.bias_min_chars:
            return BiasResult()

        words = word_count(text)
        sentences = split_sentences(text, PASSIVE_SENTENCE_MIN_CHARS)

        # --- Loaded language, by category ---
        loaded: dict[str, tuple] = {}
        for category, phrases in self._lexicon.loaded_language.items():
            found = self._count_phrases(phrases, text)
            if found:
                loaded[category] = found
        total_loaded = sum(_total(found) for found in loaded.values())

        weasels = self._count_phrases(self._lexicon.weasel_phrases, text)

        # --- Framing ---
        framing = []
        for frame in self._lexicon.framing_patterns:
            hits = matches(frame.pattern, text)
            if hits:
                framing.append(FramingFinding(
                    label=frame.label,
                    bias=frame.bias,
                    count=len(hits),
                    examples=tuple(unique_casefold(hits)[:MAX_FRAMING_EXAMPLES]),
                ))

        # --- Passive voice ---
        passive_count = sum(1 for _ in self._lexicon.passive_voice.finditer(text))
        passive_density = round(passive_count / len(sentences) * 100) if sentences else 0

        # --- Leading questions ---
        leading = []
        for pattern in self._lexicon.leading_questions:
            leading.extend(matches(pattern, text))
        leading = unique(leading)[:MAX_LEADING_QUESTIONS]

        absolutist = _total(loaded.get("absolutist", ()))

        if passive_density > w.passive_high_density:
            passive_bonus = w.passive_high_bonus
        elif passive_density > w.passive_mid_density:
            passive_bonus = w.passive_mid_bonus
        else:
            passive_bonus = 0

        score = int(clamp(round(
            total_loaded / words * 100 * w.loaded_density_weight
            + _total(weasels) / words * 100 * w.weasel_density_weight
            + len(framing) * w.framing_weight
            + absolutist / words * w.absolutist_weight
            + passive_bonus
            + len(leading) * w.leading_question_weight
        )))

        result = BiasResult(
            bias_score=score,
            bias_label=band(score, w.bias_bands),
            balance_label=self._balance(loaded),
            loaded_language=MappingProxyType(loaded),
            total_loaded_count=total_loaded,
            weasel_words=weasels,
            framing=tuple(framing),
            passive_voice=PassiveVoice(count=passive_count, density=passive_density),
            leading_questions=tuple(leading),
            absolutist_count=absolutist,
            word_count=words,
        )
        logger.debug("Bias scored", extra={"word_count": words, "composite_score": score})
        return result

    @staticmethod
    def _count_phrases(phrases, text: str) -> tuple:
        found = []
        for entry in phrases:
            count = sum(1 for _ in entry.pattern.finditer(text))
            if count:
                found.append(PhraseCount(phrase=entry.phrase, count=count))
        return tuple(found)

    def _balance(self, loaded: dict) -> str:
        """Compare glorifying against demonizing and fear-mongering mentions."""
        positive = _total(loaded.get("glorification", ()))
        negative = _total(loaded.get("demonization", ())) + _total(loaded.get("fear_mongering", ()))
        if positive + negative < self._weights.balance_min_mentions:
            return "Balanced"

        ratio = (positive + 1) / (negative + 1)
        if ratio > 3:
            return "Heavily positive framing"
        if ratio > 1.8:
            return "Leans positive"
        if ratio < 0.33:
            return "Heavily negative framing"
        if ratio < 0.55:
            return "Leans negative"
        return "Balanced"


_detector = BiasDetector()


def detect_bias(text: str) -> BiasResult:
    return _detector.analyze(text)
