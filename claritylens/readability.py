"""
Readability Scorer

Six published readability formulas over a shared set of text statistics:

    Flesch Reading Ease   206.835 - 1.015 * WPS - 84.6 * SPW   (0-100)
    Flesch-Kincaid        0.39 * WPS + 11.8 * SPW - 15.59
    Gunning Fog           0.4 * (WPS + % complex words)
    Coleman-Liau          0.0588 * L - 0.296 * S - 15.8
    SMOG                  1.043 * sqrt(complex * 30 / sentences) + 3.1291
    ARI                   4.71 * letters/word + 0.5 * WPS - 21.43

Grades are floored at zero and rounded to one decimal. SMOG needs at
least three sentences; below that it reports the Flesch-Kincaid grade.
The composite grade is the mean of the five grade formulas.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from claritylens.logging import get_logger
from claritylens.text import letters_only, split_sentences, unique
from claritylens.weights import DEFAULT_WEIGHTS, ScoringWeights, band, clamp

logger = get_logger("readability")

SYLLABLE_EXCEPTIONS = {
    "area": 3, "idea": 3, "real": 2, "realize": 3, "create": 2, "science": 2,
    "every": 3, "favorite": 3, "chocolate": 3, "camera": 3, "different": 3,
    "evening": 3, "interest": 3, "beautiful": 3, "business": 2, "average": 3,
    "family": 3, "several": 3, "basically": 4, "generally": 4, "literally": 4,
    "naturally": 4, "especially": 4, "occasionally": 5, "immediately": 5,
    "unfortunately": 5, "comfortable": 4, "temperature": 4, "vegetable": 4,
    "restaurant": 3, "interesting": 4, "experience": 4, "important": 3,
    "everything": 3,
}

_SILENT_E = re.compile(r"(?<=[^leas])e$")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")
_QUIET_ED = re.compile(r"[^aeioutd]ed$")
_LETTER = re.compile(r"[a-z]", re.IGNORECASE)

MAX_COMPLEX_WORDS = 20
LONG_SENTENCE_WORDS = 25
SHORT_SENTENCE_WORDS = 8


def count_syllables(word: str) -> int:
    """Vowel-group syllable estimate with an exception list."""
    word = letters_only(word)
    if len(word) <= 2:
        return 1
    if word in SYLLABLE_EXCEPTIONS:
        return SYLLABLE_EXCEPTIONS[word]

    stem = _SILENT_E.sub("", word)
    if not stem:
        return 1
    count = len(_VOWEL_GROUP.findall(stem)) or 1
    if _QUIET_ED.search(word):
        count -= 1
    return max(1, count)


def is_complex(word: str) -> bool:
    clean = letters_only(word)
    return len(clean) >= 4 and count_syllables(clean) >= 3


def _words(text: str) -> list[str]:
    return [w for w in text.split() if _LETTER.search(w)]


def _sentences(text: str) -> list[str]:
    return [s for s in split_sentences(text, 2) if len(s.split()) >= 2]


@dataclass(frozen=True)
class ReadabilityScores:
    flesch_ease: float = 0.0
    flesch_kincaid: float = 0.0
    gunning_fog: float = 0.0
    coleman_liau: float = 0.0
    smog: float = 0.0
    ari: float = 0.0
    composite_grade: float = 0.0


@dataclass(frozen=True)
class ReadabilityStats:
    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    avg_syllables_per_word: float = 0.0
    complex_word_count: int = 0
    complex_word_percent: float = 0.0
    vocabulary_diversity: int = 0
    reading_time_minutes: int = 0


@dataclass(frozen=True)
class SentenceStructure:
    long_sentences: int = 0
    short_sentences: int = 0
    variance: float = 0.0


@dataclass(frozen=True)
class ReadabilityMetrics:
    scores: ReadabilityScores = field(default_factory=ReadabilityScores)
    level_label: str = "N/A"
    stats: ReadabilityStats = field(default_factory=ReadabilityStats)
    sentence_structure: SentenceStructure = field(default_factory=SentenceStructure)
    complex_words: tuple = ()

    @property
    def is_empty(self) -> bool:
        return self.stats.word_count == 0


def _grade(value: float) -> float:
    return max(0.0, round(value, 1))


class ReadabilityScorer:

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS):
        self._weights = weights

    def analyze(self, text: str) -> ReadabilityMetrics:
        if not text or len(text.strip()) < 10:
            return ReadabilityMetrics()

        sentences = _sentences(text)
        words = _words(text)
        word_count = len(words)
        if word_count < 3:
            return ReadabilityMetrics()
        sentence_count = len(sentences) or 1

        syllables = sum(count_syllables(w) for w in words)
        complex_words = [w for w in words if is_complex(w)]
        letters = sum(len(letters_only(w)) for w in words)

        wps = word_count / sentence_count
        spw = syllables / word_count
        pct_complex = len(complex_words) / word_count * 100

        flesch = clamp(round(206.835 - 1.015 * wps - 84.6 * spw, 1))
        fk = _grade(0.39 * wps + 11.8 * spw - 15.59)
        fog = _grade(0.4 * (wps + pct_complex))
        cl = _grade(
            0.0588 * (letters / word_count * 100)
            - 0.296 * (sentence_count / word_count * 100)
            - 15.8
        )
        if sentence_count >= self._weights.smog_min_sentences:
            smog = _grade(1.0430 * math.sqrt(len(complex_words) * (30 / sentence_count)) + 3.1291)
        else:
            smog = fk
        ari = _grade(4.71 * (letters / word_count) + 0.5 * wps - 21.43)
        composite = round((fk + fog + cl + smog + ari) / 5, 1)

        lengths = [len(_words(s)) for s in sentences]
        if lengths:
            mean = sum(lengths) / len(lengths)
            variance = sum((n - mean) ** 2 for n in lengths) / len(lengths)
        else:
            variance = 0.0

        vocabulary = len({letters_only(w) for w in words})

        metrics = ReadabilityMetrics(
            scores=ReadabilityScores(
                flesch_ease=flesch,
                flesch_kincaid=fk,
                gunning_fog=fog,
                coleman_liau=cl,
                smog=smog,
                ari=ari,
                composite_grade=composite,
            ),
            level_label=band(composite, self._weights.readability_bands, inclusive=True),
            stats=ReadabilityStats(
                word_count=word_count,
                sentence_count=sentence_count,
                avg_words_per_sentence=round(wps, 1),
                avg_syllables_per_word=round(spw, 2),
                complex_word_count=len(complex_words),
                complex_word_percent=round(pct_complex, 1),
                vocabulary_diversity=round(vocabulary / word_count * 100),
                reading_time_minutes=max(1, round(word_count / self._weights.words_per_minute)),
            ),
            sentence_structure=SentenceStructure(
                long_sentences=sum(1 for n in lengths if n > LONG_SENTENCE_WORDS),
                short_sentences=sum(1 for n in lengths if n < SHORT_SENTENCE_WORDS),
                variance=round(variance, 1),
            ),
            complex_words=tuple(unique(letters_only(w) for w in complex_words)[:MAX_COMPLEX_WORDS]),
        )
        logger.debug("Readability scored", extra={"word_count": word_count})
        return metrics


_scorer = ReadabilityScorer()


def score_readability(text: str) -> ReadabilityMetrics:
    return _scorer.analyze(text)
