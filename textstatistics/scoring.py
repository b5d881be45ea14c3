"""Readability formulas over lexical counts.

Responsibilities:
- Combine letter, word, sentence and syllable statistics into the six
  standard readability scores and their average grade level.
- Assemble the aggregate `StatisticsResult`.

All scores are unrounded; rounding is left to presentation code.
"""

from __future__ import annotations

import math

from .models.datatypes import ReadabilityScores, StatisticsResult, TextCounts
from .text.counters import LexicalCounter


class ReadabilityScorer:
    """Compute readability scores for raw text."""

    def __init__(self, counter: LexicalCounter | None = None) -> None:
        """Initialize with an injectable lexical counter."""

        self.counter = counter or LexicalCounter()

    def flesch_kincaid_reading_ease(self, text: str) -> float:
        """Return Flesch-Kincaid Reading Ease; higher means easier."""

        text = self.counter.clean_text(text)
        return (
            206.835
            - (1.015 * self.counter.average_words_per_sentence(text))
            - (84.6 * self.counter.average_syllables_per_word(text))
        )

    def flesch_kincaid_grade_level(self, text: str) -> float:
        """Return Flesch-Kincaid Grade Level."""

        text = self.counter.clean_text(text)
        return (
            (0.39 * self.counter.average_words_per_sentence(text))
            + (11.8 * self.counter.average_syllables_per_word(text))
            - 15.59
        )

    def gunning_fog_score(self, text: str) -> float:
        """Return Gunning-Fog score, counting proper nouns as long words."""

        text = self.counter.clean_text(text)
        return (
            self.counter.average_words_per_sentence(text)
            + self.counter.percentage_words_with_three_syllables(text, True)
        ) * 0.4

    def coleman_liau_index(self, text: str) -> float:
        """Return Coleman-Liau Index."""

        text = self.counter.clean_text(text)
        word_count = self.counter.word_count(text)
        return (
            (5.89 * (self.counter.letter_count(text) / word_count))
            - (0.3 * (self.counter.sentence_count(text) / word_count))
            - 15.8
        )

    def smog_index(self, text: str) -> float:
        """Return SMOG Index."""

        text = self.counter.clean_text(text)
        long_words = self.counter.words_with_three_syllables(text, True)
        return 1.043 * math.sqrt(
            (long_words * (30 / self.counter.sentence_count(text))) + 3.1291
        )

    def automated_readability_index(self, text: str) -> float:
        """Return Automated Readability Index."""

        text = self.counter.clean_text(text)
        word_count = self.counter.word_count(text)
        return (
            (4.71 * (self.counter.letter_count(text) / word_count))
            + (0.5 * (word_count / self.counter.sentence_count(text)))
            - 21.43
        )

    def average_grade_level(self, text: str) -> float:
        """Return the mean of the five grade-level scores.

        Reading Ease is not a grade level and is excluded.
        """

        grades = (
            self.flesch_kincaid_grade_level(text),
            self.gunning_fog_score(text),
            self.coleman_liau_index(text),
            self.smog_index(text),
            self.automated_readability_index(text),
        )
        return sum(grades) / len(grades)

    def counts(self, text: str) -> TextCounts:
        """Return base counts and averages for `text`."""

        return TextCounts(
            text_length=self.counter.text_length(text),
            letter_count=self.counter.letter_count(text),
            word_count=self.counter.word_count(text),
            sentence_count=self.counter.sentence_count(text),
            syllable_count=self.counter.syllable_total(text),
            average_words_per_sentence=self.counter.average_words_per_sentence(text),
            average_syllables_per_word=self.counter.average_syllables_per_word(text),
        )

    def scores(self, text: str) -> ReadabilityScores:
        """Return every readability score for `text`."""

        return ReadabilityScores(
            flesch_kincaid_reading_ease=self.flesch_kincaid_reading_ease(text),
            flesch_kincaid_grade_level=self.flesch_kincaid_grade_level(text),
            gunning_fog_score=self.gunning_fog_score(text),
            coleman_liau_index=self.coleman_liau_index(text),
            smog_index=self.smog_index(text),
            automated_readability_index=self.automated_readability_index(text),
            average_grade_level=self.average_grade_level(text),
        )

    def all_statistics(self, text: str) -> StatisticsResult:
        """Return original text, normalized text, counts and scores together."""

        return StatisticsResult(
            original_text=text,
            cleaned_text=self.counter.clean_text(text),
            counts=self.counts(text),
            scores=self.scores(text),
        )
