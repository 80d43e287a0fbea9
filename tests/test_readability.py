"""
Readability Scorer Tests
"""

from __future__ import annotations

import pytest

from claritylens.readability import count_syllables, is_complex, score_readability

SIMPLE_TEXT = "The cat sat on the mat. The dog ran to the park. We had fun in the sun."


class TestSyllables:

    @pytest.mark.parametrize("word,expected", [
        ("cat", 1),
        ("be", 1),
        ("the", 1),
        ("make", 1),
        ("table", 2),
        ("jumped", 1),
        ("wanted", 2),
        ("area", 3),
        ("beautiful", 3),
        ("international", 5),
    ])
    def test_count(self, word, expected):
        assert count_syllables(word) == expected

    def test_punctuation_ignored(self):
        assert count_syllables("Table,") == 2

    def test_complex_words(self):
        assert is_complex("international") is True
        assert is_complex("cat") is False
        assert is_complex("table") is False


class TestScores:

    def test_simple_text_is_elementary(self):
        metrics = score_readability(SIMPLE_TEXT)
        assert metrics.scores.flesch_ease > 80
        assert metrics.scores.composite_grade <= 5
        assert metrics.level_label == "Elementary"
        assert metrics.complex_words == ()
        assert metrics.stats.sentence_count == 3
        assert metrics.stats.word_count == 18

    def test_smog_falls_back_below_three_sentences(self):
        metrics = score_readability("The cat sat on the mat. The dog ran to the park.")
        assert metrics.scores.smog == metrics.scores.flesch_kincaid

    def test_dense_text_grades_higher(self):
        dense = (
            "Comprehensive institutional accountability necessitates unprecedented "
            "organizational transparency regarding environmental sustainability initiatives "
            "and intergovernmental regulatory considerations."
        )
        simple = score_readability(SIMPLE_TEXT)
        metrics = score_readability(dense)
        assert metrics.scores.composite_grade > simple.scores.composite_grade
        assert metrics.scores.flesch_ease < simple.scores.flesch_ease
        assert metrics.level_label == "Graduate / Professional"
        assert metrics.stats.complex_word_count > 5

    def test_grades_never_negative(self):
        scores = score_readability(SIMPLE_TEXT).scores
        for grade in (scores.flesch_kincaid, scores.gunning_fog, scores.coleman_liau,
                      scores.smog, scores.ari):
            assert grade >= 0
        assert 0 <= scores.flesch_ease <= 100

    def test_reading_time_at_least_one_minute(self):
        assert score_readability(SIMPLE_TEXT).stats.reading_time_minutes == 1


class TestEmpty:

    @pytest.mark.parametrize("text", ["", "short", "1 2 3 4 5 6 7 8 9"])
    def test_empty_metrics(self, text):
        metrics = score_readability(text)
        assert metrics.is_empty
        assert metrics.level_label == "N/A"
        assert metrics.scores.flesch_ease == 0.0
