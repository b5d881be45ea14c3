"""Heuristic syllable estimation for single word tokens."""

from __future__ import annotations

import re

from .syllable_patterns import DEFAULT_PATTERN_TABLE, SyllablePatternTable

_NON_LETTER_RE = re.compile(r"[^a-z]")
_NON_VOWEL_RUN_RE = re.compile(r"[^aeiouy]+")


class SyllableEstimator:
    """Estimate syllables per word from vowel nuclei plus corrective patterns.

    The estimate is a best-effort approximation, not a phonetic analysis.
    Every word, including empty or punctuation-only tokens, counts as at
    least one syllable.
    """

    def __init__(self, table: SyllablePatternTable = DEFAULT_PATTERN_TABLE) -> None:
        """Initialize with an immutable pattern table."""

        self.table = table

    def count(self, word: str) -> int:
        """Return the estimated syllable count of `word`."""

        word = word.lower()
        exception_count = self.table.exceptions.get(word)
        if exception_count is not None:
            return exception_count

        word, affix_count = self._strip_affixes(word)
        word = _NON_LETTER_RE.sub("", word)

        syllable_count = self._count_nuclei(word) + affix_count
        syllable_count -= len(self.table.subtractive_matches(word))
        syllable_count += len(self.table.additive_matches(word))
        return max(1, syllable_count)

    def _strip_affixes(self, word: str) -> tuple[str, int]:
        """Remove matching single-syllable affixes and count how many were taken."""

        affix_count = 0
        for pattern in self.table.affixes:
            if pattern.search(word):
                word = pattern.sub("", word)
                affix_count += 1
        return word, affix_count

    @staticmethod
    def _count_nuclei(word: str) -> int:
        """Count maximal vowel runs in a letters-only word."""

        return sum(1 for part in _NON_VOWEL_RUN_RE.split(word) if part)
