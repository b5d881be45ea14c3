"""Lexical counts and averages over normalized text.

Responsibilities:
- Derive letter, word, sentence and syllable counts from raw text.
- Recompute normalized text on every call; nothing is cached between calls.

Counts are heuristic: words are space-delimited tokens and sentences are
terminators, so abbreviations such as "Mr." or "U.K." add sentences.
"""

from __future__ import annotations

import re

from .normalizer import TextNormalizer
from .syllables import SyllableEstimator

_NON_LETTER_RE = re.compile(r"[^A-Za-z]+")
_TERMINATOR_RE = re.compile(r"[.!?]")
_LONG_WORD_SYLLABLES = 2


class LexicalCounter:
    """Count letters, words, sentences and syllables of a text."""

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        estimator: SyllableEstimator | None = None,
    ) -> None:
        """Initialize with injectable normalizer and syllable estimator."""

        self.normalizer = normalizer or TextNormalizer()
        self.estimator = estimator or SyllableEstimator()

    def clean_text(self, text: str) -> str:
        """Return the normalized form of `text`."""

        return self.normalizer.normalize(text)

    def words(self, text: str) -> list[str]:
        """Return word tokens of normalized text, terminators still attached."""

        return self.clean_text(text).split(" ")

    @staticmethod
    def text_length(text: str) -> int:
        """Return the raw character length of `text`."""

        return len(text)

    def letter_count(self, text: str) -> int:
        """Count ASCII letters, ignoring terminators, spaces and digits."""

        return len(_NON_LETTER_RE.sub("", self.clean_text(text)))

    def word_count(self, text: str) -> int:
        """Count words as spaces in normalized text plus one."""

        return self.clean_text(text).count(" ") + 1

    def sentence_count(self, text: str) -> int:
        """Count sentence terminators in normalized text."""

        return len(_TERMINATOR_RE.findall(self.clean_text(text)))

    def average_words_per_sentence(self, text: str) -> float:
        """Return words per sentence."""

        return self.word_count(text) / self.sentence_count(text)

    def syllable_total(self, text: str) -> int:
        """Return estimated syllables summed over every word token."""

        return sum(self.estimator.count(word) for word in self.words(text))

    def average_syllables_per_word(self, text: str) -> float:
        """Return estimated syllables per word."""

        return self.syllable_total(text) / self.word_count(text)

    def words_with_three_syllables(self, text: str, count_proper_nouns: bool = True) -> int:
        """Count words with more than two estimated syllables.

        `count_proper_nouns` is accepted for compatibility and has no effect:
        normalization lowercases text before tokens are inspected, so
        capitalized words can no longer be told apart and every long word
        is counted.
        """

        return sum(
            1
            for word in self.words(text)
            if self.estimator.count(word) > _LONG_WORD_SYLLABLES
        )

    def percentage_words_with_three_syllables(
        self, text: str, count_proper_nouns: bool = True
    ) -> float:
        """Return the share of long words as a percentage of all words."""

        long_word_count = self.words_with_three_syllables(text, count_proper_nouns)
        return (long_word_count / self.word_count(text)) * 100
