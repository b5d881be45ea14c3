"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
statistics tables, JSON documents and per-word syllable rows.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import StatisticsResult

_COUNT_LABELS: tuple[tuple[str, str], ...] = (
    ("text_length", "Text length"),
    ("letter_count", "Letter count"),
    ("word_count", "Word count"),
    ("sentence_count", "Sentence count"),
    ("syllable_count", "Syllable count"),
    ("average_words_per_sentence", "Average words per sentence"),
    ("average_syllables_per_word", "Average syllables per word"),
)

_SCORE_LABELS: tuple[tuple[str, str], ...] = (
    ("flesch_kincaid_reading_ease", "Flesch-Kincaid Reading Ease"),
    ("flesch_kincaid_grade_level", "Flesch-Kincaid Grade Level"),
    ("gunning_fog_score", "Gunning-Fog Score"),
    ("coleman_liau_index", "Coleman-Liau Index"),
    ("smog_index", "SMOG Index"),
    ("automated_readability_index", "Automated Readability Index"),
    ("average_grade_level", "Average Grade Level"),
)


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def _format_value(value: int | float, precision: int) -> str:
    """Format integers verbatim and floats with fixed decimals."""

    if isinstance(value, int):
        return str(value)
    return f"{value:.{precision}f}"


def echo_statistics(result: StatisticsResult, precision: int, show_text: bool) -> None:
    """Print counts and scores as aligned `label: value` rows."""

    rows: list[tuple[str, str]] = []
    if show_text:
        rows.append(("Original text", result.original_text))
        rows.append(("Cleaned text", result.cleaned_text))
    rows.extend(
        (label, _format_value(getattr(result.counts, name), precision))
        for name, label in _COUNT_LABELS
    )
    rows.extend(
        (label, _format_value(getattr(result.scores, name), precision))
        for name, label in _SCORE_LABELS
    )
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"{label + ':':<{width + 1}} {value}")


def echo_statistics_json(result: StatisticsResult, precision: int, show_text: bool) -> None:
    """Print one JSON document with rounded averages and scores."""

    payload = result.rounded(precision).as_dict(include_text=show_text)
    typer.echo(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def echo_syllable_counts(rows: list[tuple[str, int]]) -> None:
    """Print `word: count` rows in input order."""

    for word, count in rows:
        typer.echo(f"{word}: {count}")
