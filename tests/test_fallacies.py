"""
Fallacy Detector Tests
"""

from __future__ import annotations

import pytest

from claritylens.fallacies import FallacyReport, detect_fallacies


class TestFallacyDetection:

    def test_short_text_returns_sentinel(self):
        assert detect_fallacies("Short text.") == FallacyReport()

    def test_no_fallacies_in_neutral_text(self):
        report = detect_fallacies("The corrupt politician destroyed everything and everyone knows it.")
        assert report.fallacies == ()
        assert report.total_matches == 0
        assert report.fallacy_density == 0
        assert report.risk_label == "Low Risk"

    def test_same_phrase_twice_one_example_two_matches(self):
        report = detect_fallacies("Where does it end, and WHERE DOES IT END for the rest of us")
        assert len(report.fallacies) == 1
        finding = report.fallacies[0]
        assert finding.name == "Slippery Slope"
        assert finding.match_count == 2
        assert finding.examples == ("Where does it end",)
        assert report.total_matches == 2
        assert report.fallacy_density == 80
        assert report.risk_label == "Very High Risk"

    def test_short_sentences_are_skipped(self):
        report = detect_fallacies("You're just a shill. Nothing more to add here.")
        assert all(f.name != "Ad Hominem" for f in report.fallacies)

    def test_ad_hominem_in_long_enough_sentence(self):
        report = detect_fallacies("Honestly, you're just a shill for the industry.")
        assert [f.name for f in report.fallacies] == ["Ad Hominem"]
        assert report.fallacies[0].severity == "high"

    def test_sorted_by_severity(self):
        report = detect_fallacies(
            "Where does it end for all of us? Honestly, you're just a shill for the industry."
        )
        names = [f.name for f in report.fallacies]
        assert names == ["Ad Hominem", "Slippery Slope"]
        assert report.sentence_count == 2

    @pytest.mark.parametrize("text", [
        "Everyone knows that the old bridge is unsafe to cross.",
        "Everyone knows the vote was rigged from the start.",
        "Millions of people believe the cure works for them.",
    ])
    def test_bandwagon_appeal(self, text):
        report = detect_fallacies(text)
        assert [f.name for f in report.fallacies] == ["Bandwagon / Appeal to Popularity"]

    @pytest.mark.parametrize("text", [
        "Honestly, by now everybody knows it and nobody cares.",
        "The mayor spoke and everyone believes him on this matter.",
    ])
    def test_bandwagon_skips_bare_pronoun_object(self, text):
        assert detect_fallacies(text).fallacies == ()
