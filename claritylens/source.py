"""
Source Credibility Scorer

Heuristic credibility estimate for a page, from its URL and a text sample.

Starts from a neutral baseline and applies, in order:
  1. Domain tier (high, then low, then medium; label-boundary suffix match)
  2. TLD adjustment (first matching suffix wins)
  3. HTTPS bonus / plain-HTTP penalty
  4. Content signals, author attribution and dates (text over 50 chars)
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from claritylens.lexicon import DEFAULT_LEXICON, Lexicon
from claritylens.logging import get_logger
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, band, clamp

logger = get_logger("source")

MAX_SIGNALS = 10
TLD_SIGNAL_ABOVE = 5
TLD_WARNING_BELOW = -3


@dataclass(frozen=True)
class Signal:
    type: str  # "positive", "neutral", "negative"
    label: str
    detail: str = ""


@dataclass(frozen=True)
class SourceCredibility:
    score: int
    credibility_label: str
    domain: str
    signals: tuple = ()
    warnings: tuple = ()


def extract_domain(url: str) -> str:
    """Hostname without a leading www., or the raw string when it is not a URL."""
    try:
        host = urlsplit(url).hostname if url else None
    except ValueError:
        host = None
    if not host:
        return url or "unknown"
    return host[4:] if host.startswith("www.") else host


def _on_domain(domain: str, candidate: str) -> bool:
    return domain == candidate or domain.endswith("." + candidate)


class SourceCredibilityScorer:

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
    ):
        self._lexicon = lexicon
        self._weights = weights

    def analyze(self, url: str = "", text: str = "") -> SourceCredibility:
        w = self._weights
        url = url or ""
        text = text or ""
        score = float(w.source_baseline)
        signals: list[Signal] = []
        warnings: list[Signal] = []
        domain = extract_domain(url)

        # --- Domain tier ---
        tier = self._tier(domain)
        if tier == "high":
            score += w.high_tier_bonus
            signals.append(Signal("positive", "High-credibility domain", domain))
        elif tier == "low":
            score += w.low_tier_penalty
            warnings.append(Signal("negative", "Low-credibility domain", domain))
        elif tier == "medium":
            score += w.medium_tier_bonus
            signals.append(Signal("neutral", "Known media source", domain))

        # --- TLD ---
        for tld, value in self._lexicon.tld_scores:
            if domain.endswith(tld):
                score += value
                if value > TLD_SIGNAL_ABOVE:
                    signals.append(Signal("positive", f"Government/academic domain ({tld})", domain))
                if value < TLD_WARNING_BELOW:
                    warnings.append(Signal("negative", f"Low-trust TLD ({tld})", domain))
                break

        # --- Transport ---
        if url.startswith("https://"):
            score += w.https_bonus
        elif url:
            score += w.no_https_penalty
            warnings.append(Signal("negative", "No HTTPS", url[:60]))

        # --- Content ---
        if len(text) > w.source_min_text_chars:
            for signal in self._lexicon.positive_signals:
                hits = sum(1 for _ in signal.pattern.finditer(text))
                if hits:
                    score += min(signal.weight * 2, signal.weight * hits)
                    signals.append(Signal("positive", signal.label, f"{hits} instance(s)"))
            for signal in self._lexicon.negative_signals:
                hits = sum(1 for _ in signal.pattern.finditer(text))
                if hits:
                    score += max(signal.weight * 2, signal.weight * hits)
                    warnings.append(Signal("negative", signal.label, f"{hits} instance(s)"))
            if self._lexicon.author_attribution.search(text):
                score += w.author_bonus
                signals.append(Signal("positive", "Author attributed"))
            if any(p.search(text) for p in self._lexicon.date_patterns):
                score += w.date_bonus
                signals.append(Signal("positive", "Date provided"))

        final = int(clamp(round(score)))
        logger.debug("Source scored", extra={"composite_score": final})
        return SourceCredibility(
            score=final,
            credibility_label=band(final, w.credibility_bands),
            domain=domain,
            signals=tuple(signals[:MAX_SIGNALS]),
            warnings=tuple(warnings[:MAX_SIGNALS]),
        )

    def _tier(self, domain: str) -> str:
        for tier in ("high", "low", "medium"):
            if any(_on_domain(domain, d) for d in self._lexicon.domain_tiers.get(tier, ())):
                return tier
        return ""


_scorer = SourceCredibilityScorer()


def score_source(url: str = "", text: str = "") -> SourceCredibility:
    return _scorer.analyze(url, text)
