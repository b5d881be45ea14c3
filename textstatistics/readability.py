"""Module-level readability functions.

Every function delegates to one shared `ReadabilityScorer`. The scorer and its
collaborators hold no per-call state, so the functions are safe to call from
multiple threads.
"""

from __future__ import annotations

from .models.datatypes import StatisticsResult
from .scoring import ReadabilityScorer

_SCORER = ReadabilityScorer()
_COUNTER = _SCORER.counter


def clean_text(text: str) -> str:
    """Return the normalized form of `text`."""

    return _COUNTER.clean_text(text)


def syllable_count(word: str) -> int:
    """Return the estimated syllable count of a single word."""

    return _COUNTER.estimator.count(word)


def text_length(text: str) -> int:
    """Return the raw character length of `text`."""

    return _COUNTER.text_length(text)


def letter_count(text: str) -> int:
    """Return the number of ASCII letters in the normalized text."""

    return _COUNTER.letter_count(text)


def word_count(text: str) -> int:
    """Return the number of words in the normalized text."""

    return _COUNTER.word_count(text)


def sentence_count(text: str) -> int:
    """Return the number of sentence terminators in the normalized text."""

    return _COUNTER.sentence_count(text)


def syllable_total(text: str) -> int:
    """Return the estimated syllables summed over every word."""

    return _COUNTER.syllable_total(text)


def average_words_per_sentence(text: str) -> float:
    """Return words per sentence."""

    return _COUNTER.average_words_per_sentence(text)


def average_syllables_per_word(text: str) -> float:
    """Return syllables per word."""

    return _COUNTER.average_syllables_per_word(text)


def words_with_three_syllables(text: str, count_proper_nouns: bool = True) -> int:
    """Count words with more than two syllables; `count_proper_nouns` has no effect."""

    return _COUNTER.words_with_three_syllables(text, count_proper_nouns)


def percentage_words_with_three_syllables(text: str, count_proper_nouns: bool = True) -> float:
    """Return long words as a percentage of all words; `count_proper_nouns` has no effect."""

    return _COUNTER.percentage_words_with_three_syllables(text, count_proper_nouns)


def flesch_kincaid_reading_ease(text: str) -> float:
    """Return Flesch-Kincaid Reading Ease."""

    return _SCORER.flesch_kincaid_reading_ease(text)


def flesch_kincaid_grade_level(text: str) -> float:
    """Return Flesch-Kincaid Grade Level."""

    return _SCORER.flesch_kincaid_grade_level(text)


def gunning_fog_score(text: str) -> float:
    """Return Gunning-Fog score."""

    return _SCORER.gunning_fog_score(text)


def coleman_liau_index(text: str) -> float:
    """Return Coleman-Liau Index."""

    return _SCORER.coleman_liau_index(text)


def smog_index(text: str) -> float:
    """Return SMOG Index."""

    return _SCORER.smog_index(text)


def automated_readability_index(text: str) -> float:
    """Return Automated Readability Index."""

    return _SCORER.automated_readability_index(text)


def average_grade_level(text: str) -> float:
    """Return the mean of the five grade-level scores."""

    return _SCORER.average_grade_level(text)


def all_statistics(text: str) -> StatisticsResult:
    """Return every count and score for `text` as one immutable result."""

    return _SCORER.all_statistics(text)
