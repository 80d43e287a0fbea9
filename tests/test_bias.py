"""
Bias Detector Tests
"""

from __future__ import annotations

from claritylens.bias import BiasDetector, BiasResult, PhraseCount, detect_bias
from claritylens.weights import ScoringWeights


class TestThresholds:

    def test_short_text_returns_sentinel(self):
        assert detect_bias("Too short") == BiasResult()

    def test_neutral_text_scores_zero(self):
        result = detect_bias("The city council approved the park budget on Tuesday evening.")
        assert result.bias_score == 0
        assert result.bias_label == "Low Bias"
        assert result.balance_label == "Balanced"
        assert result.total_loaded_count == 0


class TestLoadedLanguage:

    def test_demonization_and_bandwagon(self):
        result = detect_bias("The corrupt politician destroyed everything and everyone knows it.")
        assert result.loaded_language["demonization"] == (PhraseCount("corrupt", 1),)
        assert PhraseCount("everyone knows", 1) in result.weasel_words
        assert result.absolutist_count == 1
        assert result.bias_score == 100
        assert result.bias_label == "Very High Bias"

    def test_heavily_negative_balance(self):
        result = detect_bias("The radical extremist thug and the corrupt tyrant ruined it all.")
        assert result.total_loaded_count == 5
        assert result.balance_label == "Heavily negative framing"

    def test_heavily_positive_balance(self):
        result = detect_bias("A hero and a patriot, this fearless visionary led the town.")
        assert result.balance_label == "Heavily positive framing"

    def test_phrases_match_on_word_boundaries(self):
        result = detect_bias("The herons nested quietly beside the lake all spring.")
        assert "glorification" not in result.loaded_language


class TestWeaselAndFraming:

    def test_weasel_phrase_counted_per_occurrence(self):
        result = detect_bias("Some say it works, and some say it fails.")
        assert result.weasel_words == (PhraseCount("some say", 2),)

    def test_framing_examples_deduplicated_case_insensitively(self):
        result = detect_bias("Big Pharma lies. big pharma wins again.")
        framing = {f.label: f for f in result.framing}
        finding = framing["Anti-establishment framing"]
        assert finding.count == 2
        assert finding.examples == ("Big Pharma",)
        assert finding.bias == "populist"


class TestPassiveAndQuestions:

    def test_passive_density_bonus(self):
        result = detect_bias("The law was passed. The vote was delayed. The bill was signed.")
        assert result.passive_voice.count == 3
        assert result.passive_voice.density == 100
        assert result.bias_score == 8

    def test_leading_question(self):
        result = detect_bias("Isn't it true that the plan failed?")
        assert result.leading_questions == ("Isn't it true that",)
        assert result.bias_score >= 4


class TestInjectedWeights:

    def test_weights_override(self):
        weights = ScoringWeights(passive_high_bonus=20)
        result = BiasDetector(weights=weights).analyze(
            "The law was passed. The vote was delayed. The bill was signed."
        )
        assert result.bias_score == 20
