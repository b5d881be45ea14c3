"""Core datatypes for readability results.

Responsibilities:
- Represent immutable values produced fresh for every scoring call.
- Provide a serializable shape for CLI and JSON rendering.

Key types:
- `TextCounts`, `ReadabilityScores` and the aggregate `StatisticsResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class TextCounts:
    """Base counts and averages of a text.

    Attributes:
        text_length: Raw character length of the original text.
        letter_count: ASCII letters in the normalized text.
        word_count: Space-delimited words in the normalized text.
        sentence_count: Terminators in the normalized text.
        syllable_count: Estimated syllables summed over all words.
        average_words_per_sentence: `word_count / sentence_count`.
        average_syllables_per_word: `syllable_count / word_count`.
    """

    text_length: int
    letter_count: int
    word_count: int
    sentence_count: int
    syllable_count: int
    average_words_per_sentence: float
    average_syllables_per_word: float


@dataclass(frozen=True, slots=True)
class ReadabilityScores:
    """Readability formula outputs, unrounded unless produced by `rounded`."""

    flesch_kincaid_reading_ease: float
    flesch_kincaid_grade_level: float
    gunning_fog_score: float
    coleman_liau_index: float
    smog_index: float
    automated_readability_index: float
    average_grade_level: float

    def rounded(self, precision: int) -> ReadabilityScores:
        """Return a copy with every score rounded to `precision` decimals."""

        return ReadabilityScores(
            **{item.name: round(getattr(self, item.name), precision) for item in fields(self)}
        )


@dataclass(frozen=True, slots=True)
class StatisticsResult:
    """Aggregate statistics for one text.

    Attributes:
        original_text: Raw input text.
        cleaned_text: Normalized text the counts were derived from.
        counts: Base counts and averages.
        scores: Readability formula outputs.
    """

    original_text: str
    cleaned_text: str
    counts: TextCounts
    scores: ReadabilityScores

    @property
    def letter_count(self) -> int:
        """Shortcut for `counts.letter_count`."""

        return self.counts.letter_count

    @property
    def word_count(self) -> int:
        """Shortcut for `counts.word_count`."""

        return self.counts.word_count

    @property
    def sentence_count(self) -> int:
        """Shortcut for `counts.sentence_count`."""

        return self.counts.sentence_count

    @property
    def average_words_per_sentence(self) -> float:
        """Shortcut for `counts.average_words_per_sentence`."""

        return self.counts.average_words_per_sentence

    @property
    def average_syllables_per_word(self) -> float:
        """Shortcut for `counts.average_syllables_per_word`."""

        return self.counts.average_syllables_per_word

    @property
    def flesch_kincaid_reading_ease(self) -> float:
        """Shortcut for `scores.flesch_kincaid_reading_ease`."""

        return self.scores.flesch_kincaid_reading_ease

    @property
    def flesch_kincaid_grade_level(self) -> float:
        """Shortcut for `scores.flesch_kincaid_grade_level`."""

        return self.scores.flesch_kincaid_grade_level

    @property
    def gunning_fog_score(self) -> float:
        """Shortcut for `scores.gunning_fog_score`."""

        return self.scores.gunning_fog_score

    @property
    def coleman_liau_index(self) -> float:
        """Shortcut for `scores.coleman_liau_index`."""

        return self.scores.coleman_liau_index

    @property
    def smog_index(self) -> float:
        """Shortcut for `scores.smog_index`."""

        return self.scores.smog_index

    @property
    def automated_readability_index(self) -> float:
        """Shortcut for `scores.automated_readability_index`."""

        return self.scores.automated_readability_index

    @property
    def average_grade_level(self) -> float:
        """Shortcut for `scores.average_grade_level`."""

        return self.scores.average_grade_level

    def rounded(self, precision: int) -> StatisticsResult:
        """Return a copy with scores and averages rounded for presentation."""

        counts = replace(
            self.counts,
            average_words_per_sentence=round(self.counts.average_words_per_sentence, precision),
            average_syllables_per_word=round(self.counts.average_syllables_per_word, precision),
        )
        return replace(self, counts=counts, scores=self.scores.rounded(precision))

    def as_dict(self, include_text: bool = True) -> dict[str, Any]:
        """Return a JSON-serializable mapping grouped as text, statistics and scores."""

        payload: dict[str, Any] = {
            "text": {
                "statistics": {
                    item.name: getattr(self.counts, item.name) for item in fields(self.counts)
                },
            },
        }
        if include_text:
            payload["text"]["original"] = self.original_text
            payload["text"]["cleaned"] = self.cleaned_text
        payload.update(
            {item.name: getattr(self.scores, item.name) for item in fields(self.scores)}
        )
        return payload
