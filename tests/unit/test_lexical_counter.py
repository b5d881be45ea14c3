"""Unit tests for letter, word, sentence and syllable counting."""

from __future__ import annotations

import pytest

from textstatistics.text.counters import LexicalCounter


def test_counts_for_markup_sample(sample_html_text: str) -> None:
    """Counts should be derived from the normalized form of the markup sample."""

    counter = LexicalCounter()

    assert counter.letter_count(sample_html_text) == 34
    assert counter.word_count(sample_html_text) == 9
    assert counter.sentence_count(sample_html_text) == 2
    assert counter.syllable_total(sample_html_text) == 11
    assert counter.words_with_three_syllables(sample_html_text) == 1
    assert counter.average_words_per_sentence(sample_html_text) == pytest.approx(4.5)
    assert counter.average_syllables_per_word(sample_html_text) == pytest.approx(11 / 9)
    assert counter.percentage_words_with_three_syllables(sample_html_text) == pytest.approx(
        100 / 9
    )


def test_letter_count_ignores_punctuation_and_digits() -> None:
    """Only ASCII letters should be counted."""

    assert LexicalCounter().letter_count("ab, cd12!") == 4


@pytest.mark.parametrize("raw", ["", "   ", "\n", "?!", "<p></p>"])
def test_degenerate_input_has_positive_word_and_sentence_counts(raw: str) -> None:
    """Degenerate input should still produce one word and one sentence."""

    counter = LexicalCounter()

    assert counter.word_count(raw) == 1
    assert counter.sentence_count(raw) == 1
    assert counter.letter_count(raw) == 0
    assert counter.average_words_per_sentence(raw) == 1.0
    assert counter.average_syllables_per_word(raw) == 1.0


def test_separator_punctuation_splits_words() -> None:
    """Commas and hyphens count as word boundaries."""

    counter = LexicalCounter()

    assert counter.word_count("Hello,world") == 2
    assert counter.word_count("well-known fact") == 3


def test_abbreviations_inflate_sentence_count() -> None:
    """Abbreviation periods are counted as sentence terminators."""

    assert LexicalCounter().sentence_count("Mr. Smith went to the U.K. today.") == 4


def test_count_proper_nouns_flag_has_no_effect() -> None:
    """Long words are counted the same whether or not proper nouns are requested."""

    counter = LexicalCounter()
    text = "Victoria visited Antarctica with Elizabeth yesterday."

    assert counter.words_with_three_syllables(text, True) == counter.words_with_three_syllables(
        text, False
    )
    assert counter.percentage_words_with_three_syllables(
        text, False
    ) == counter.percentage_words_with_three_syllables(text, True)


def test_text_length_measures_raw_input() -> None:
    """Text length should count raw characters, markup included."""

    assert LexicalCounter.text_length("<b>Hi</b>") == 9
    assert LexicalCounter().text_length("") == 0


def test_words_keep_attached_terminators(sample_html_text: str) -> None:
    """Tokens are split on spaces only, so terminators stay attached."""

    assert LexicalCounter().words(sample_html_text) == [
        "this",
        "is",
        "a",
        "test",
        "delicious.",
        "i",
        "hope",
        "this",
        "works.",
    ]
