"""
Reflection Question Generator Tests
"""

from __future__ import annotations

import random

from claritylens.bias import BiasResult
from claritylens.fallacies import FallacyReport
from claritylens.reflection import (
    QUESTION_BANKS,
    SYNTHESIS_DEFAULT,
    SYNTHESIS_EMOTION_AND_BIAS,
    SYNTHESIS_LOW_CREDIBILITY,
    ReflectionQuestionGenerator,
)
from claritylens.sentiment import SentimentResult
from claritylens.source import SourceCredibility

ALL_QUESTIONS = {q for bank in QUESTION_BANKS.values() for q in bank}


def generator(seed: int = 42) -> ReflectionQuestionGenerator:
    return ReflectionQuestionGenerator(random.Random(seed))


class TestTriggers:

    def test_no_signals_gives_general_questions(self):
        bundle = generator().generate()
        assert bundle.categories == ()
        assert len(bundle.questions) == 2
        assert set(bundle.questions) <= set(QUESTION_BANKS["general"])
        assert bundle.synthesis == SYNTHESIS_DEFAULT

    def test_emotion_and_bias(self):
        bundle = generator().generate(
            sentiment=SentimentResult(emotional_intensity=60),
            bias=BiasResult(bias_score=50),
        )
        assert bundle.categories == ("high_emotion", "high_bias")
        assert bundle.synthesis == SYNTHESIS_EMOTION_AND_BIAS
        assert len(bundle.questions) == 6

    def test_fallacies_and_low_credibility(self):
        bundle = generator().generate(
            fallacies=FallacyReport(total_matches=3),
            source=SourceCredibility(score=30, credibility_label="Low Credibility", domain="x.biz"),
        )
        assert bundle.categories == ("fallacies_detected", "low_credibility")
        assert bundle.synthesis == (
            "3 potential logical fallacy pattern(s) detected. " + SYNTHESIS_LOW_CREDIBILITY
        )

    def test_thresholds_are_strict(self):
        bundle = generator().generate(
            sentiment=SentimentResult(emotional_intensity=40),
            bias=BiasResult(bias_score=30),
            source=SourceCredibility(score=40, credibility_label="Mixed Credibility", domain="a.com"),
        )
        assert bundle.categories == ()

    def test_question_cap(self):
        bundle = generator().generate(
            sentiment=SentimentResult(emotional_intensity=90),
            bias=BiasResult(bias_score=90),
            fallacies=FallacyReport(total_matches=1),
            source=SourceCredibility(score=10, credibility_label="Very Low Credibility", domain="a.com"),
        )
        assert len(bundle.questions) == 7
        assert len(set(bundle.questions)) == 7
        assert set(bundle.questions) <= ALL_QUESTIONS


class TestSeeding:

    def test_same_seed_same_bundle(self):
        kwargs = {"bias": BiasResult(bias_score=80), "fallacies": FallacyReport(total_matches=2)}
        assert generator(7).generate(**kwargs) == generator(7).generate(**kwargs)

    def test_questions_come_from_banks(self):
        for seed in range(5):
            bundle = generator(seed).generate(bias=BiasResult(bias_score=80))
            assert set(bundle.questions) <= ALL_QUESTIONS
