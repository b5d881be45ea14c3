"""Shared typed data models for Text Statistics.

This package contains the immutable result values returned by the scorer and
rendered by the CLI.
"""

from .datatypes import ReadabilityScores, StatisticsResult, TextCounts

__all__ = [
    "ReadabilityScores",
    "StatisticsResult",
    "TextCounts",
]
