"""
Claim Classifier Tests
"""

from __future__ import annotations

import pytest

from claritylens.claims import ClaimClassifier, ClaimReport, classify_claims

classifier = ClaimClassifier()


class TestClassifySentence:

    def test_opinion(self):
        result = classifier.classify_sentence("I think the new policy is a terrible idea for everyone.")
        assert result.classification == "opinion"
        assert result.confidence == 0.91
        assert {m.family for m in result.markers} == {"opinion"}

    def test_factual_claim_confidence_capped(self):
        result = classifier.classify_sentence("The company reported revenue of 4 billion dollars in 2020.")
        assert result.classification == "factual_claim"
        assert result.confidence == 0.92

    def test_hedge_demotes_fact(self):
        result = classifier.classify_sentence("Revenue may have grown to roughly 4 billion dollars in 2020.")
        assert result.classification == "hedged_fact"

    def test_strong_claim(self):
        result = classifier.classify_sentence("This evidence proves the plan will cause massive damage.")
        assert result.classification == "strong_claim"

    def test_hedge_demotes_claim(self):
        result = classifier.classify_sentence("This might prove the plan will cause some damage.")
        assert result.classification == "hedged_claim"

    def test_rhetorical_question(self):
        result = classifier.classify_sentence("Isn't it obvious that the plan failed completely?")
        assert result.classification == "rhetorical_question"
        assert result.confidence == 0.65

    def test_plain_question_is_unclassified(self):
        assert classifier.classify_sentence("Who ate my sandwich today at lunch?") is None

    def test_no_markers_is_unclassified(self):
        assert classifier.classify_sentence("The cat walked across the garden slowly.") is None

    @pytest.mark.parametrize("sentence", ["Too short.", "Antidisestablishmentarianism rules"])
    def test_too_short_or_too_few_words(self, sentence):
        assert classifier.classify_sentence(sentence) is None

    def test_tie_prefers_opinion(self):
        result = classifier.classify_sentence("I think the population grew.")
        assert result.classification == "opinion"
        assert result.confidence == 0.63

    def test_hedge_only_sentence(self):
        result = classifier.classify_sentence("Prices might rise over the next few months.")
        assert result.classification == "opinion"
        assert result.confidence == 0.35

    def test_long_sentence_truncated(self):
        sentence = "I think " + "the committee debated the budget again " * 6 + "today."
        result = classifier.classify_sentence(sentence)
        assert result.text.endswith("…")
        assert len(result.text) == 121


class TestClaimReport:

    def test_short_text_returns_sentinel(self):
        assert classify_claims("Nothing here.") == ClaimReport()

    def test_mixed_content(self):
        report = classify_claims(
            "I think the new policy is a terrible idea for everyone. "
            "The company reported revenue of 4 billion dollars in 2020. "
            "This evidence proves the plan will cause massive damage."
        )
        assert report.total_classified == 3
        assert dict(report.counts) == {"opinion": 1, "factual_claim": 1, "strong_claim": 1}
        assert report.distribution.opinion_percent == 33
        assert report.content_type == "Mixed Content"

    def test_opinion_editorial(self):
        report = classify_claims(
            "I think the council is wrong about this. "
            "Frankly, the plan is the worst idea in years. "
            "I believe the voters deserve a fair hearing."
        )
        assert report.content_type == "Opinion / Editorial"
        assert report.distribution.opinion_percent == 100
