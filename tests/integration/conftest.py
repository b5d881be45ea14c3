"""Integration-test fixtures for deterministic CLI environment."""

from __future__ import annotations

import pytest

_ENV_KEYS = (
    "TEXTSTATISTICS_PRECISION",
    "TEXTSTATISTICS_FORMAT",
    "TEXTSTATISTICS_SHOW_TEXT",
    "TEXTSTATISTICS_ENCODING",
    "TEXTSTATISTICS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_textstatistics_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear `TEXTSTATISTICS_*` variables and silence info-level phase logs."""

    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TEXTSTATISTICS_LOG_LEVEL", "ERROR")
