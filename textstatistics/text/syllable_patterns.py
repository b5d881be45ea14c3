"""Static pattern data for the syllable estimator.

These values never change at run time. The table is built once at import time
from compiled regular expressions and exposed as an immutable dataclass so
callers can inject alternative tables without touching estimator logic.

Based in part on Greg Fast's Perl module Lingua::EN::Syllables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Mapping


# Words that do not follow the rule set, keyed by lowercase spelling.
_EXCEPTION_WORDS: dict[str, int] = {
    "simile": 3,
    "forever": 3,
    "shoreline": 2,
    "lion": 2,
}

# Single-syllable prefixes and suffixes, stripped in order and credited once each.
_AFFIX_PATTERNS: tuple[str, ...] = (
    r"^un",
    r"^fore",
    r"ly$",
    r"less$",
    r"ful$",
    r"ers?$",
    r"ings?$",
)

# Counted as two nuclei but pronounced as one syllable.
_SUBTRACTIVE_PATTERNS: tuple[str, ...] = (
    r"cial",
    r"tia",
    r"cius",
    r"cious",
    r"giu",
    r"ion",
    r"iou",
    r"sia$",
    r"[^aeiuoyt]{2,}ed$",
    r".ely$",
    r"[cg]h?e[rsd]?$",
    r"rved?$",
    r"[aeiouy][dt]es?$",
    r"[aeiouy][^aeiouydt]e[rsd]?$",
    r"^[dr]e[aeiou][^aeiou]+$",  # deal, deign
    r"[aeiouy]rse$",  # purse, hearse
)

# Counted as one nucleus but pronounced as two syllables.
_ADDITIVE_PATTERNS: tuple[str, ...] = (
    r"ia",
    r"riet",
    r"dien",
    r"iu",
    r"io",
    r"ii",
    r"[aeiouym]bl$",
    r"[aeiou]{3}",
    r"^mc",
    r"ism$",
    r"([^aeiouy])\1l$",
    r"[^l]lien",
    r"^coa[dglx].",
    r"[^gq]ua[^auieo]",
    r"dnt$",
    r"uity$",
    r"ie(r|st)$",
)


def _compile_all(sources: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    """Compile pattern sources preserving their order."""

    return tuple(re.compile(source) for source in sources)


@dataclass(frozen=True, slots=True)
class SyllablePatternTable:
    """Immutable pattern data consumed by `SyllableEstimator`.

    Attributes:
        exceptions: Literal lowercase word to fixed syllable count; short-circuits
            all pattern logic.
        affixes: Ordered prefix/suffix patterns removed before nucleus counting.
        subtractive: Patterns that each remove one syllable when they match.
        additive: Patterns that each add one syllable when they match.
    """

    exceptions: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType(dict(_EXCEPTION_WORDS))
    )
    affixes: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile_all(_AFFIX_PATTERNS)
    )
    subtractive: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile_all(_SUBTRACTIVE_PATTERNS)
    )
    additive: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile_all(_ADDITIVE_PATTERNS)
    )

    def subtractive_matches(self, word: str) -> tuple[str, ...]:
        """Return sources of subtractive patterns matching `word`."""

        return tuple(pattern.pattern for pattern in self.subtractive if pattern.search(word))

    def additive_matches(self, word: str) -> tuple[str, ...]:
        """Return sources of additive patterns matching `word`."""

        return tuple(pattern.pattern for pattern in self.additive if pattern.search(word))


DEFAULT_PATTERN_TABLE = SyllablePatternTable()
