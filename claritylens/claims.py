"""
Claim Classifier

Labels each sentence as opinion, factual claim, hedged fact, strong claim,
hedged claim or rhetorical question from the marker families it contains.

Opinion, factual and claim markers count double, hedges count once. The
heaviest of the first three families decides the class; any hedge demotes
a strong claim to a hedged claim and a factual claim to a hedged fact.
Ties resolve in the order opinion, factual, claim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.text import matches, split_on_boundaries, truncate
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights

logger = get_logger("claims")

MAX_MARKERS = 5

EXPLANATIONS = {
    "opinion": "Contains subjective language or value judgments.",
    "factual_claim": "Presents verifiable information — consider checking sources.",
    "hedged_fact": "Presents data with appropriate qualification.",
    "strong_claim": "Makes a strong assertion — verify supporting evidence.",
    "hedged_claim": "Makes an assertion with some qualification.",
    "rhetorical_question": "Rhetorical question — asserts a position disguised as inquiry.",
}


@dataclass(frozen=True)
class Marker:
    text: str
    family: str  # "opinion", "factual", "claim", "hedged"


@dataclass(frozen=True)
class ClaimClassification:
    text: str
    classification: str
    confidence: float
    markers: tuple
    explanation: str


@dataclass(frozen=True)
class Distribution:
    opinion_percent: int = 0
    claim_percent: int = 0
    factual_percent: int = 0


@dataclass(frozen=True)
class ClaimReport:
    classifications: tuple = ()
    counts: Mapping = field(default_factory=lambda: MappingProxyType({}))
    distribution: Distribution = field(default_factory=Distribution)
    content_type: str = "N/A"
    total_sentences: int = 0
    total_classified: int = 0


def _unique_markers(markers: list[Marker]) -> tuple:
    seen = set()
    kept = []
    for marker in markers:
        key = marker.text.lower()
        if key not in seen:
            seen.add(key)
            kept.append(marker)
    return tuple(kept[:MAX_MARKERS])


class ClaimClassifier:

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lexicon = lexicon
        self._weights = weights
        self._families = (
            ("opinion", lexicon.opinion_markers),
            ("factual", lexicon.factual_markers),
            ("claim", lexicon.claim_markers),
            ("hedged", lexicon.hedge_markers),
        )

    def analyze(self, text: str) -> ClaimReport:
        w = self._weights
        if not text or len(text.strip()) < w.claim_text_min_chars:
            return ClaimReport()

        sentences = [s for s in split_on_boundaries(text) if len(s.strip()) > w.claim_min_chars]
        results = [c for c in map(self.classify_sentence, sentences) if c is not None]

        counts: dict[str, int] = {}
        for result in results:
            counts[result.classification] = counts.get(result.classification, 0) + 1

        total = len(results) or 1
        opinion_pct = round(counts.get("opinion", 0) / total * 100)
        claim_pct = round((counts.get("strong_claim", 0) + counts.get("hedged_claim", 0)) / total * 100)
        factual_pct = round((counts.get("factual_claim", 0) + counts.get("hedged_fact", 0)) / total * 100)

        if opinion_pct > 50:
            content_type = "Opinion / Editorial"
        elif factual_pct > 50:
            content_type = "Informational / Factual"
        elif claim_pct > 40:
            content_type = "Argumentative / Persuasive"
        else:
            content_type = "Mixed Content"

        logger.debug("Claims classified", extra={"word_count": len(text.split())})

        return ClaimReport(
            classifications=tuple(results[:w.max_classifications]),
            counts=MappingProxyType(counts),
            distribution=Distribution(
                opinion_percent=opinion_pct,
                claim_percent=claim_pct,
                factual_percent=factual_pct,
            ),
            content_type=content_type,
            total_sentences=len(sentences),
            total_classified=len(results),
        )

    def classify_sentence(self, sentence: str) -> Optional[ClaimClassification]:
        """Classify a single sentence, or None when it carries no signal."""
        w = self._weights
        s = sentence.strip()
        if len(s) < w.claim_min_chars or len(s.split()) < w.claim_min_words:
            return None

        markers: list[Marker] = []
        raw: dict[str, int] = {}
        for family, patterns in self._families:
            hits = [hit for pattern in patterns for hit in matches(pattern, s)]
            raw[family] = len(hits)
            markers.extend(Marker(text=hit, family=family) for hit in hits)

        scores = {
            "opinion": raw["opinion"] * w.claim_marker_weight,
            "factual": raw["factual"] * w.claim_marker_weight,
            "claim": raw["claim"] * w.claim_marker_weight,
        }
        hedged = raw["hedged"] * w.hedge_marker_weight

        if s.rstrip().endswith("?"):
            if not self._lexicon.rhetorical_question.search(s):
                return None
            return ClaimClassification(
                text=truncate(s),
                classification="rhetorical_question",
                confidence=w.rhetorical_confidence,
                markers=_unique_markers(markers),
                explanation=EXPLANATIONS["rhetorical_question"],
            )

        if sum(scores.values()) + hedged == 0:
            return None

        winner = max(scores, key=scores.get)
        signal = sum(scores.values())
        dominance = scores[winner] / signal if signal else 0

        if winner == "opinion":
            classification = "opinion"
        elif winner == "factual":
            classification = "hedged_fact" if hedged else "factual_claim"
        else:
            classification = "hedged_claim" if hedged else "strong_claim"

        confidence = min(
            w.claim_confidence_cap,
            w.claim_confidence_base
            + dominance * w.claim_dominance_weight
            + min(scores[winner] * w.claim_signal_weight, w.claim_signal_cap),
        )

        return ClaimClassification(
            text=truncate(s),
            classification=classification,
            confidence=round(confidence, 2),
            markers=_unique_markers(markers),
            explanation=EXPLANATIONS[classification],
        )


_classifier = ClaimClassifier()


def classify_claims(text: str) -> ClaimReport:
    return _classifier.analyze(text)
