"""Top-level package for Text Statistics.

This package computes letter, word, sentence and syllable counts for a block
of text and the standard readability formulas derived from them. The
module-level functions re-exported here are the main entry points;
`ReadabilityScorer` is available for callers that inject their own
normalizer or syllable pattern table.
"""

from .models import ReadabilityScores, StatisticsResult, TextCounts
from .readability import (
    all_statistics,
    automated_readability_index,
    average_grade_level,
    average_syllables_per_word,
    average_words_per_sentence,
    clean_text,
    coleman_liau_index,
    flesch_kincaid_grade_level,
    flesch_kincaid_reading_ease,
    gunning_fog_score,
    letter_count,
    percentage_words_with_three_syllables,
    sentence_count,
    smog_index,
    syllable_count,
    syllable_total,
    text_length,
    word_count,
    words_with_three_syllables,
)
from .scoring import ReadabilityScorer
from .text import (
    DEFAULT_PATTERN_TABLE,
    LexicalCounter,
    SyllableEstimator,
    SyllablePatternTable,
    TextNormalizer,
)

__all__ = [
    "DEFAULT_PATTERN_TABLE",
    "LexicalCounter",
    "ReadabilityScorer",
    "ReadabilityScores",
    "StatisticsResult",
    "SyllableEstimator",
    "SyllablePatternTable",
    "TextCounts",
    "TextNormalizer",
    "__version__",
    "all_statistics",
    "automated_readability_index",
    "average_grade_level",
    "average_syllables_per_word",
    "average_words_per_sentence",
    "clean_text",
    "coleman_liau_index",
    "flesch_kincaid_grade_level",
    "flesch_kincaid_reading_ease",
    "gunning_fog_score",
    "letter_count",
    "percentage_words_with_three_syllables",
    "sentence_count",
    "smog_index",
    "syllable_count",
    "syllable_total",
    "text_length",
    "word_count",
    "words_with_three_syllables",
]

__version__ = "0.1.0"
