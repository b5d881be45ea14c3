"""Unit tests for readability formulas and result assembly."""

from __future__ import annotations

import math

import pytest

from textstatistics.scoring import ReadabilityScorer

_COMPLEX_TEXT = (
    "Pursuant to the aforementioned regulatory framework, the department will "
    "expeditiously disseminate the requisite documentation at its earliest convenience."
)


def test_scores_for_one_syllable_sentence(simple_sentence: str) -> None:
    """Formulas should match hand-computed values for six one-syllable words."""

    scorer = ReadabilityScorer()

    assert scorer.flesch_kincaid_reading_ease(simple_sentence) == pytest.approx(116.145)
    assert scorer.flesch_kincaid_grade_level(simple_sentence) == pytest.approx(-1.45)
    assert scorer.gunning_fog_score(simple_sentence) == pytest.approx(2.4)
    assert scorer.coleman_liau_index(simple_sentence) == pytest.approx(
        5.89 * 17 / 6 - 0.3 / 6 - 15.8
    )
    assert scorer.smog_index(simple_sentence) == pytest.approx(1.043 * math.sqrt(3.1291))
    assert scorer.automated_readability_index(simple_sentence) == pytest.approx(-5.085)


def test_scores_for_markup_sample(sample_html_text: str) -> None:
    """Formulas should combine the sample's counts without rounding."""

    scorer = ReadabilityScorer()
    words_per_sentence = 9 / 2
    syllables_per_word = 11 / 9

    assert scorer.flesch_kincaid_reading_ease(sample_html_text) == pytest.approx(
        206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    )
    assert scorer.flesch_kincaid_grade_level(sample_html_text) == pytest.approx(
        0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
    )
    assert scorer.gunning_fog_score(sample_html_text) == pytest.approx(
        (words_per_sentence + 100 / 9) * 0.4
    )
    assert scorer.coleman_liau_index(sample_html_text) == pytest.approx(
        5.89 * (34 / 9) - 0.3 * (2 / 9) - 15.8
    )
    assert scorer.smog_index(sample_html_text) == pytest.approx(
        1.043 * math.sqrt(1 * (30 / 2) + 3.1291)
    )
    assert scorer.automated_readability_index(sample_html_text) == pytest.approx(
        4.71 * (34 / 9) + 0.5 * (9 / 2) - 21.43
    )


@pytest.mark.parametrize(
    "text",
    ["", "The cat sat on the mat.", _COMPLEX_TEXT, "<p>One</p><p>Two words</p>"],
)
def test_average_grade_level_is_mean_of_grade_scores(text: str) -> None:
    """Average grade level should be the mean of the five grade-level scores."""

    scorer = ReadabilityScorer()
    grades = [
        scorer.flesch_kincaid_grade_level(text),
        scorer.gunning_fog_score(text),
        scorer.coleman_liau_index(text),
        scorer.smog_index(text),
        scorer.automated_readability_index(text),
    ]

    assert scorer.average_grade_level(text) == pytest.approx(sum(grades) / 5)


def test_reading_ease_does_not_drop_when_short_sentences_are_appended() -> None:
    """Appending short, simple sentences should keep or raise reading ease."""

    scorer = ReadabilityScorer()
    extended = _COMPLEX_TEXT + " We go. It is fun. I can run. The sun is up."

    assert scorer.flesch_kincaid_reading_ease(extended) >= scorer.flesch_kincaid_reading_ease(
        _COMPLEX_TEXT
    )


def test_complex_text_scores_harder_than_simple_text(simple_sentence: str) -> None:
    """Dense text should read harder and need a higher grade level."""

    scorer = ReadabilityScorer()

    assert scorer.flesch_kincaid_reading_ease(_COMPLEX_TEXT) < scorer.flesch_kincaid_reading_ease(
        simple_sentence
    )
    assert scorer.average_grade_level(_COMPLEX_TEXT) > scorer.average_grade_level(simple_sentence)


def test_empty_text_scores_are_finite() -> None:
    """Degenerate input should yield finite values for every formula."""

    result = ReadabilityScorer().all_statistics("")

    assert result.cleaned_text == "."
    assert result.word_count == 1
    assert result.sentence_count == 1
    assert result.flesch_kincaid_reading_ease == pytest.approx(206.835 - 1.015 - 84.6)
    assert all(
        math.isfinite(value)
        for value in (
            result.flesch_kincaid_grade_level,
            result.gunning_fog_score,
            result.coleman_liau_index,
            result.smog_index,
            result.automated_readability_index,
            result.average_grade_level,
        )
    )


def test_all_statistics_assembles_counts_and_scores(sample_html_text: str) -> None:
    """The aggregate result should carry the inputs, counts and every score."""

    scorer = ReadabilityScorer()
    result = scorer.all_statistics(sample_html_text)

    assert result.original_text == sample_html_text
    assert result.cleaned_text == "this is a test delicious. i hope this works."
    assert result.counts.text_length == len(sample_html_text)
    assert result.letter_count == 34
    assert result.word_count == 9
    assert result.sentence_count == 2
    assert result.counts.syllable_count == 11
    assert result.average_words_per_sentence == pytest.approx(4.5)
    assert result.average_syllables_per_word == pytest.approx(11 / 9)
    assert result.smog_index == pytest.approx(scorer.smog_index(sample_html_text))
    assert result.average_grade_level == pytest.approx(
        scorer.average_grade_level(sample_html_text)
    )
