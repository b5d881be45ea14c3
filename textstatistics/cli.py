"""Command-line interface for Text Statistics.

Responsibilities:
- Expose user-facing commands for scoring, cleaning and syllable counting.
- Resolve `StatisticsConfig` from environment, YAML file and CLI options.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_statistics,
    echo_statistics_json,
    echo_syllable_counts,
    exit_with_command_error,
)
from .config import ConfigLoader, StatisticsConfig
from .errors import CommandStageError
from .scoring import ReadabilityScorer
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="textstatistics",
    no_args_is_help=True,
    help="Readability statistics for plain text and simple HTML.",
)

_STDIN_MARKER = Path("-")


def _resolve_config(
    config_file: Path | None,
    output_format: str | None = None,
    precision: int | None = None,
    show_text: bool | None = None,
    encoding: str | None = None,
) -> StatisticsConfig:
    """Resolve effective config as CLI options > YAML file > environment > defaults."""

    try:
        config = ConfigLoader.from_env()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `TEXTSTATISTICS_*` variables and rerun.",
        ) from exc

    if config_file is not None:
        try:
            config = ConfigLoader.from_yaml(config_file, base=config)
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Config file not found: `{config_file}`.",
                hint="Provide an existing path via `--config <path.yaml>`.",
            ) from exc
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid config file `{config_file}`: {exc}",
                hint="Fix config schema/values and rerun.",
            ) from exc
        except Exception as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Failed to load config file `{config_file}`: {exc}",
                hint="Verify YAML syntax and file permissions.",
            ) from exc

    overrides: dict[str, object] = {}
    if output_format is not None:
        overrides["output_format"] = output_format.strip().lower()
    if precision is not None:
        overrides["precision"] = precision
    if show_text is not None:
        overrides["show_text"] = show_text
    if encoding is not None:
        overrides["encoding"] = encoding.strip().lower()

    resolved = replace(config, **overrides)
    try:
        resolved.validate()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Check the command options and rerun.",
        ) from exc
    return resolved


def _read_input(input_path: Path | None, text: str | None, encoding: str) -> str:
    """Return input text from `--text`, a file path, or stdin."""

    if text is not None and input_path is not None:
        raise CommandStageError(
            stage="input",
            detail="Pass either an input path or `--text`, not both.",
        )
    if text is not None:
        return text
    if input_path is None and sys.stdin.isatty():
        raise CommandStageError(
            stage="input",
            detail="No input given and stdin is an interactive terminal.",
            hint="Pass a file path, `--text`, or pipe text in (use `-` to read stdin explicitly).",
        )
    if input_path is None or input_path == _STDIN_MARKER:
        return sys.stdin.read()

    try:
        return input_path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file not found: `{input_path}`.",
            hint="Pass an existing text file, `-` for stdin, or `--text`.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file `{input_path}` is not valid `{encoding}` text.",
            hint="Set `--encoding` or `TEXTSTATISTICS_ENCODING` to the file's encoding.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Failed to read input file `{input_path}`: {exc}",
            hint="Verify the path is a readable file.",
        ) from exc


InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Text or HTML file to analyze; `-` or omitted reads stdin."),
]
TextOption = Annotated[
    str | None,
    typer.Option("--text", "-t", help="Analyze this text instead of reading a file."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="YAML config with presentation settings."),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", help="Encoding used to read the input file."),
]


@app.command()
def score(
    input_path: InputArgument = None,
    text: TextOption = None,
    config_file: ConfigOption = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: `text` or `json`."),
    ] = None,
    precision: Annotated[
        int | None,
        typer.Option("--precision", "-p", min=0, help="Decimal places for averages and scores."),
    ] = None,
    show_text: Annotated[
        bool | None,
        typer.Option("--show-text/--hide-text", help="Include original and cleaned text."),
    ] = None,
    encoding: EncodingOption = None,
) -> None:
    """Print counts and readability scores for a text."""

    logger: RunLogger | None = None
    stage = "config"
    try:
        config = _resolve_config(config_file, output_format, precision, show_text, encoding)
        logger = RunLogger(level=config.log_level)

        stage = "read"
        logger.log_stage_start(stage)
        raw_text = _read_input(input_path, text, config.encoding)
        logger.log_stage_complete(stage, characters=len(raw_text))

        stage = "score"
        logger.log_stage_start(stage)
        result = ReadabilityScorer().all_statistics(raw_text)
        logger.log_stage_complete(
            stage, words=result.word_count, sentences=result.sentence_count
        )
    except Exception as exc:
        if logger is not None:
            logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("score", exc)

    if config.output_format == "json":
        echo_statistics_json(result, config.precision, config.show_text)
    else:
        echo_statistics(result, config.precision, config.show_text)


@app.command()
def clean(
    input_path: InputArgument = None,
    text: TextOption = None,
    config_file: ConfigOption = None,
    encoding: EncodingOption = None,
) -> None:
    """Print the normalized text that counts are computed from."""

    logger: RunLogger | None = None
    stage = "config"
    try:
        config = _resolve_config(config_file, encoding=encoding)
        logger = RunLogger(level=config.log_level)

        stage = "read"
        logger.log_stage_start(stage)
        raw_text = _read_input(input_path, text, config.encoding)
        logger.log_stage_complete(stage, characters=len(raw_text))

        stage = "normalize"
        logger.log_stage_start(stage)
        cleaned = ReadabilityScorer().counter.clean_text(raw_text)
        logger.log_stage_complete(stage, characters=len(cleaned))
    except Exception as exc:
        if logger is not None:
            logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("clean", exc)

    typer.echo(cleaned)


@app.command()
def syllables(
    words: Annotated[list[str], typer.Argument(help="Words to estimate syllables for.")],
) -> None:
    """Print the estimated syllable count of each word."""

    estimator = ReadabilityScorer().counter.estimator
    echo_syllable_counts([(word, estimator.count(word)) for word in words])


def main() -> None:
    """Run the Text Statistics CLI."""

    app()
