"""
Source Credibility Tests
"""

from __future__ import annotations

import pytest

from claritylens.source import extract_domain, score_source


class TestExtractDomain:

    @pytest.mark.parametrize("url,expected", [
        ("https://www.reuters.com/world/europe", "reuters.com"),
        ("http://uk.reuters.com/x", "uk.reuters.com"),
        ("not a url", "not a url"),
        ("", "unknown"),
    ])
    def test_extract(self, url, expected):
        assert extract_domain(url) == expected


class TestDomainTiers:

    def test_high_tier_https(self):
        result = score_source("https://www.reuters.com/world")
        assert result.score == 72
        assert result.credibility_label == "Moderate Credibility"
        assert result.signals[0].label == "High-credibility domain"

    def test_subdomain_inherits_tier(self):
        assert score_source("https://uk.reuters.com/x").score == 72

    def test_tier_requires_label_boundary(self):
        result = score_source("https://notreuters.com/x")
        assert result.score == 52
        assert result.signals == ()

    def test_low_tier_over_plain_http(self):
        result = score_source("http://www.infowars.com/article")
        assert result.score == 35
        assert result.credibility_label == "Low Credibility"
        labels = [w.label for w in result.warnings]
        assert labels == ["Low-credibility domain", "No HTTPS"]

    def test_government_tld(self):
        result = score_source("https://www.cdc.gov/flu")
        assert result.score == 87
        assert result.credibility_label == "High Credibility"
        assert "Government/academic domain (.gov)" in [s.label for s in result.signals]

    def test_no_url_no_text_is_neutral(self):
        result = score_source()
        assert result.score == 50
        assert result.domain == "unknown"
        assert result.credibility_label == "Mixed Credibility"


class TestContentSignals:

    def test_negative_signals(self):
        text = "SHOCKING!!! Click here to learn the miracle cure they don't want you to know about."
        result = score_source("", text)
        assert result.score == 35
        labels = {w.label for w in result.warnings}
        assert {"Conspiracy framing", "Pseudoscience markers", "Clickbait / marketing",
                "Sensationalist caps", "Excessive punctuation"} == labels

    def test_repeated_signal_penalty_is_capped(self):
        text = "Miracle cure, miracle cure, miracle cure for everyone reading this post today."
        result = score_source("", text)
        assert result.score == 42
        assert result.warnings[0].detail == "3 instance(s)"

    def test_positive_signals(self):
        text = (
            "According to the journal, the methodology was reviewed twice. "
            "However, critics argue otherwise. Written by Jane Doe, published March 3, 2024."
        )
        labels = {s.label for s in score_source("https://example.org/report", text).signals}
        assert {"Evidence citation", "Academic context", "Balanced perspective",
                "Author attributed", "Date provided"} <= labels

    def test_short_text_ignored(self):
        assert score_source("", "Click here!!!").score == 50
