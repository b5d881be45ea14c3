"""Unit tests for result value rounding and serialization."""

from __future__ import annotations

import json

from textstatistics.models.datatypes import ReadabilityScores, StatisticsResult, TextCounts


def _result() -> StatisticsResult:
    """Build a result with values that exercise rounding."""

    return StatisticsResult(
        original_text="Hi there.",
        cleaned_text="hi there.",
        counts=TextCounts(
            text_length=9,
            letter_count=7,
            word_count=2,
            sentence_count=1,
            syllable_count=3,
            average_words_per_sentence=2.0,
            average_syllables_per_word=1.5,
        ),
        scores=ReadabilityScores(
            flesch_kincaid_reading_ease=78.245,
            flesch_kincaid_grade_level=2.3333,
            gunning_fog_score=0.8,
            coleman_liau_index=4.8666,
            smog_index=1.8449,
            automated_readability_index=-3.9749,
            average_grade_level=1.1799,
        ),
    )


def test_rounded_rounds_scores_and_averages_only() -> None:
    """Rounding should touch floats but keep counts and text intact."""

    rounded = _result().rounded(1)

    assert rounded.flesch_kincaid_grade_level == 2.3
    assert rounded.coleman_liau_index == 4.9
    assert rounded.automated_readability_index == -4.0
    assert rounded.average_syllables_per_word == 1.5
    assert rounded.word_count == 2
    assert rounded.cleaned_text == "hi there."


def test_as_dict_groups_text_statistics_and_scores() -> None:
    """Serialized results should nest counts under `text.statistics`."""

    payload = _result().as_dict()

    assert payload["text"]["original"] == "Hi there."
    assert payload["text"]["cleaned"] == "hi there."
    assert payload["text"]["statistics"]["letter_count"] == 7
    assert payload["text"]["statistics"]["syllable_count"] == 3
    assert payload["smog_index"] == 1.8449
    assert json.loads(json.dumps(payload)) == payload


def test_as_dict_can_omit_text() -> None:
    """Text fields should be dropped when not requested."""

    payload = _result().as_dict(include_text=False)

    assert "original" not in payload["text"]
    assert "cleaned" not in payload["text"]
    assert payload["average_grade_level"] == 1.1799
