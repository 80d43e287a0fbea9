"""
Scoring Weights

Every heuristic multiplier and band threshold used by the analyzers.
The values reproduce the reference behaviour; override by constructing
a new ScoringWeights (or dataclasses.replace) and passing it to the
components that need it.

Bands are (threshold, label) pairs checked in order with "value < threshold"
(readability grades use "<=");
the trailing label applies when no threshold matches.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    """Immutable scoring constants."""

    # --- Sentiment ---
    negation_window: int = 3
    negation_dampening: float = 0.75
    emotional_density_weight: float = 2.5
    intensifier_density_weight: float = 4.0
    emotional_pattern_weight: float = 6.0
    tone_neutral: float = 0.2
    tone_mild: float = 0.7
    tone_strong: float = 1.5

    # --- Bias ---
    bias_min_chars: int = 10
    loaded_density_weight: float = 6.0
    weasel_density_weight: float = 10.0
    framing_weight: float = 5.0
    absolutist_weight: float = 400.0
    passive_high_density: int = 40
    passive_high_bonus: int = 8
    passive_mid_density: int = 20
    passive_mid_bonus: int = 4
    leading_question_weight: float = 4.0
    balance_min_mentions: int = 2
    bias_bands: tuple = (
        (15, "Low Bias"),
        (35, "Mild Bias"),
        (55, "Moderate Bias"),
        (75, "High Bias"),
        (None, "Very High Bias"),
    )

    # --- Fallacies ---
    fallacy_min_chars: int = 20
    fallacy_min_sentence_chars: int = 10
    fallacy_density_weight: float = 40.0
    fallacy_bands: tuple = (
        (10, "Low Risk"),
        (25, "Mild Risk"),
        (50, "Moderate Risk"),
        (75, "High Risk"),
        (None, "Very High Risk"),
    )

    # --- Claims ---
    claim_text_min_chars: int = 20
    claim_min_chars: int = 15
    claim_min_words: int = 4
    claim_marker_weight: int = 2
    hedge_marker_weight: int = 1
    claim_confidence_base: float = 0.35
    claim_dominance_weight: float = 0.4
    claim_signal_weight: float = 0.04
    claim_signal_cap: float = 0.2
    claim_confidence_cap: float = 0.92
    rhetorical_confidence: float = 0.65
    max_classifications: int = 30

    # --- Readability ---
    words_per_minute: int = 238
    smog_min_sentences: int = 3
    readability_bands: tuple = (
        (5, "Elementary"),
        (8, "Middle School"),
        (12, "High School"),
        (16, "College"),
        (None, "Graduate / Professional"),
    )

    # --- Source credibility ---
    source_baseline: int = 50
    high_tier_bonus: int = 20
    medium_tier_bonus: int = 5
    low_tier_penalty: int = -25
    https_bonus: int = 2
    no_https_penalty: int = -5
    author_bonus: int = 3
    date_bonus: int = 2
    source_min_text_chars: int = 50
    credibility_bands: tuple = (
        (20, "Very Low Credibility"),
        (40, "Low Credibility"),
        (60, "Mixed Credibility"),
        (80, "Moderate Credibility"),
        (None, "High Credibility"),
    )

    # --- Reflection triggers ---
    reflection_emotion_threshold: int = 40
    reflection_bias_threshold: int = 30
    reflection_strong_claims: int = 2
    reflection_credibility_threshold: int = 40
    reflection_opinion_threshold: int = 50
    reflection_max_questions: int = 7

    # --- Composite score ---
    composite_weights: tuple = (
        ("source", 0.30),
        ("bias", 0.25),
        ("fallacy", 0.20),
        ("sentiment", 0.15),
        ("readability", 0.10),
    )
    ai_blend: float = 0.4


def band(value: float, bands: tuple, inclusive: bool = False) -> str:
    """Return the label of the first band whose threshold exceeds value.

    With inclusive=True a value equal to the threshold stays in that band.
    """
    for threshold, label in bands:
        if threshold is None or value < threshold or (inclusive and value == threshold):
            return label
    return bands[-1][1]


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


DEFAULT_WEIGHTS = ScoringWeights()
