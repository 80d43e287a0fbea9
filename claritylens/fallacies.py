"""
Fallacy Detector

Sentence-scoped pattern matching against thirteen fallacy families.
A family is only checked against sentences long enough to carry the
argument shape it describes.
"""

from __future__ import annotations

from dataclasses import dataclass

from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.text import matches, split_sentences, unique_casefold, word_count
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, band

logger = get_logger("fallacies")

MAX_EXAMPLES = 3
SEVERITY_RANK = {"high": 3, "medium": 2, "low": 1}


@dataclass(frozen=True)
class FallacyFinding:
    name: str
    description: str
    severity: str
    match_count: int
    examples: tuple  # Unique excerpts, first spelling kept


@dataclass(frozen=True)
class FallacyReport:
    fallacies: tuple = ()
    total_matches: int = 0
    fallacy_density: int = 0
    risk_label: str = "Low Risk"
    sentence_count: int = 0


class FallacyDetector:

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lexicon = lexicon
        self._weights = weights

    def analyze(self, text: str) -> FallacyReport:
        w = self._weights
        if not text or len(text.strip()) < w.fallacy_min_chars:
            return FallacyReport()

        sentences = split_sentences(text, w.fallacy_min_sentence_chars)
        findings: list[FallacyFinding] = []
        total = 0

        for fallacy in self._lexicon.fallacies:
            hits: list[str] = []
            for sentence in sentences:
                if word_count(sentence) < fallacy.min_sentence_words:
                    continue
                for pattern in fallacy.patterns:
                    hits.extend(matches(pattern, sentence))
            if not hits:
                continue

            findings.append(FallacyFinding(
                name=fallacy.name,
                description=fallacy.description,
                severity=fallacy.severity,
                match_count=len(hits),
                examples=tuple(unique_casefold(hits)[:MAX_EXAMPLES]),
            ))
            total += len(hits)

        findings.sort(key=lambda f: (-SEVERITY_RANK[f.severity], -f.match_count))

        density = min(100, round(total / len(sentences) * w.fallacy_density_weight)) if sentences else 0

        if findings:
            logger.debug(
                "Fallacy patterns matched",
                extra={"word_count": word_count(text), "composite_score": density},
            )

        return FallacyReport(
            fallacies=tuple(findings),
            total_matches=total,
            fallacy_density=density,
            risk_label=band(density, w.fallacy_bands),
            sentence_count=len(sentences),
        )


_detector = FallacyDetector()


def detect_fallacies(text: str) -> FallacyReport:
    return _detector.analyze(text)
