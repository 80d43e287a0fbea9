"""
Sentiment Analyzer Tests

Covers lexicon scoring, negation windows, intensifiers, hedges,
emotional appeal patterns and the empty-input sentinel.
"""

from __future__ import annotations

import pytest

from claritylens.lexicon import Lexicon
from claritylens.sentiment import SentimentAnalyzer, SentimentResult, analyze_sentiment, tokenize


class TestEmptyInput:

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_returns_neutral_sentinel(self, text):
        result = analyze_sentiment(text)
        assert result == SentimentResult()
        assert result.tone_label == "Neutral"
        assert result.objectivity == 100
        assert result.emotional_intensity == 0

    def test_punctuation_only(self):
        assert analyze_sentiment("... !!! ???") == SentimentResult()


class TestScoring:

    def test_positive_word(self):
        result = analyze_sentiment("This is good")
        assert result.positive_score == 2.0
        assert result.negative_score == 0.0
        assert result.normalized_score == 1.15
        assert result.tone_label == "Positive"
        assert result.positive_words == ("good",)

    def test_negation_flips_and_dampens(self):
        result = analyze_sentiment("This is not good")
        assert result.positive_score == 0.0
        assert result.negative_score == 1.5
        assert result.normalized_score == -0.75
        assert result.tone_label == "Negative"
        assert result.negative_words == ("good",)

    def test_negator_outside_window_is_ignored(self):
        result = analyze_sentiment("Not that I ever thought it was good")
        assert result.positive_words == ("good",)
        assert result.negative_words == ()

    def test_intensifier_multiplies_following_word(self):
        result = analyze_sentiment("This is very good")
        assert result.positive_score == 2.5
        assert result.intensifiers.count == 1
        assert result.intensifiers.words == ("very",)

    def test_intensity_caps_at_100(self):
        result = analyze_sentiment("This is very good")
        assert result.emotional_intensity == 100
        assert result.objectivity == 0

    def test_words_are_deduplicated(self):
        result = analyze_sentiment("Good news, good people, good times.")
        assert result.positive_words == ("good",)
        assert result.positive_score == 6.0

    def test_adding_negative_words_lowers_net(self):
        base = analyze_sentiment("This is good")
        worse = analyze_sentiment("This is good but terrible")
        worst = analyze_sentiment("This is good but terrible and awful")
        assert base.net_score > worse.net_score > worst.net_score

    @pytest.mark.parametrize("word", ["good", "brilliant", "happy", "terrible"])
    def test_negation_never_more_positive(self, word):
        plain = analyze_sentiment(f"The result was {word}")
        negated = analyze_sentiment(f"The result was not {word}")
        if plain.net_score > 0:
            assert negated.net_score < plain.net_score
        else:
            assert negated.net_score > plain.net_score
        assert abs(negated.net_score) <= abs(plain.net_score)

    def test_neutral_text(self):
        result = analyze_sentiment("The committee met on Tuesday to review the schedule.")
        assert result.tone_label == "Neutral"
        assert result.normalized_score == 0.0
        assert result.objectivity == 100
        assert result.word_count == 9


class TestHedgesAndPatterns:

    def test_hedges_counted(self):
        result = analyze_sentiment("Perhaps this might work, or perhaps not.")
        assert result.hedges.count == 3
        assert result.hedges.words == ("perhaps", "might")

    def test_emotional_pattern_examples_are_case_insensitive_unique(self):
        result = analyze_sentiment("Everyone knows this. EVERYONE KNOWS that.")
        matched = {p.label: p for p in result.emotional_patterns}
        common = matched["Appeal to common belief"]
        assert common.count == 2
        assert common.examples == ("Everyone knows",)

    def test_pattern_hits_raise_intensity(self):
        calm = analyze_sentiment("The plan was discussed at length by the board.")
        urgent = analyze_sentiment("The plan is a crisis and an emergency for the board.")
        assert urgent.emotional_intensity > calm.emotional_intensity


class TestTokenize:

    def test_curly_apostrophes_and_edges(self):
        assert tokenize("Don’t PANIC!") == ["don't", "panic"]

    def test_drops_pure_punctuation(self):
        assert tokenize("Well -- fine.") == ["well", "fine"]


class TestInjectedLexicon:

    def test_substitute_lexicon(self):
        lexicon = Lexicon(sentiment={"widget": 3})
        analyzer = SentimentAnalyzer(lexicon=lexicon)
        assert analyzer.analyze("The widget arrived").positive_words == ("widget",)
        assert analyzer.analyze("This is good").positive_words == ()
