"""Unit tests for deterministic phase logging."""

from __future__ import annotations

import io

from textstatistics.telemetry.logger import RunLogger


def test_run_logger_emits_sorted_sanitized_context() -> None:
    """Phase lines should list context keys in sorted order with safe tokens."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_stage_start("read")
    logger.log_stage_complete("score", words=9, source="my file.txt")

    assert sink.getvalue().splitlines() == [
        "[phase] level=INFO stage=read event=start",
        "[phase] level=INFO stage=score event=complete source=my_file.txt words=9",
    ]


def test_run_logger_respects_minimum_level() -> None:
    """Info events should be filtered when the level is raised to ERROR."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink, level="ERROR")

    logger.log_stage_start("read")
    logger.log_stage_failure("read", "CommandStageError")

    assert sink.getvalue().splitlines() == [
        "[phase] level=ERROR stage=read event=failure error_type=CommandStageError",
    ]
