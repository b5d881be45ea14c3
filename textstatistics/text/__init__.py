"""Text normalization, syllable estimation and lexical counting components.

This package provides the deterministic building blocks that readability
formulas are computed from.
"""

from .counters import LexicalCounter
from .normalizer import TextNormalizer
from .syllable_patterns import DEFAULT_PATTERN_TABLE, SyllablePatternTable
from .syllables import SyllableEstimator

__all__ = [
    "DEFAULT_PATTERN_TABLE",
    "LexicalCounter",
    "SyllableEstimator",
    "SyllablePatternTable",
    "TextNormalizer",
]
