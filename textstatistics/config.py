"""Configuration model and loaders for the Text Statistics CLI.

Responsibilities:
- Define presentation and I/O settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

The scoring core takes no configuration; these settings only shape how the
CLI reads input and renders results.

Key types:
- `StatisticsConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `StatisticsConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from .parsing import (
    parse_non_negative_int,
    parse_switch,
    token_or_none,
)


_DEFAULT_PRECISION = 1
_DEFAULT_OUTPUT_FORMAT = "text"
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_OUTPUT_FORMATS = frozenset({"text", "json"})
SUPPORTED_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"})


@dataclass(slots=True)
class StatisticsConfig:
    """Settings for reading input and rendering statistics.

    Attributes:
        precision: Decimal places used when rendering averages and scores.
        output_format: `text` for aligned rows or `json` for one JSON document.
        show_text: Whether to include original and cleaned text in the output.
        encoding: Encoding used to read input files.
        log_level: Minimum level for phase log lines.
    """

    precision: int = _DEFAULT_PRECISION
    output_format: str = _DEFAULT_OUTPUT_FORMAT
    show_text: bool = False
    encoding: str = _DEFAULT_ENCODING
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before a command runs."""

        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError("`precision` must be a non-negative integer.")
        if self.precision < 0:
            raise ValueError("`precision` must be a non-negative integer.")
        if self.output_format not in SUPPORTED_OUTPUT_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_OUTPUT_FORMATS))
            raise ValueError(
                f"Unsupported `output_format` value `{self.output_format}`; supported: {supported}."
            )
        if self.log_level not in SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc


class ConfigLoader:
    """Factory methods for creating `StatisticsConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"precision", "output_format", "show_text", "encoding", "log_level"}
    )
    _ENV_KEYS = {
        "precision": "TEXTSTATISTICS_PRECISION",
        "output_format": "TEXTSTATISTICS_FORMAT",
        "show_text": "TEXTSTATISTICS_SHOW_TEXT",
        "encoding": "TEXTSTATISTICS_ENCODING",
        "log_level": "TEXTSTATISTICS_LOG_LEVEL",
    }

    @staticmethod
    def from_yaml(path: Path, base: StatisticsConfig | None = None) -> StatisticsConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep the values of `base` (defaults when omitted).
        """

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        source_label = f"YAML `{path}`"
        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        return ConfigLoader._build_config(
            payload, base, field_label=lambda key: f"{source_label} field `{key}`"
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, base: StatisticsConfig | None = None
    ) -> StatisticsConfig:
        """Create a validated config from `TEXTSTATISTICS_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload: dict[str, Any] = {}
        for key, env_key in ConfigLoader._ENV_KEYS.items():
            value = token_or_none(env_map.get(env_key))
            if value is not None:
                payload[key] = value

        env_labels = ConfigLoader._ENV_KEYS
        return ConfigLoader._build_config(
            payload, base, field_label=lambda key: f"Environment variable `{env_labels[key]}`"
        )

    @staticmethod
    def _build_config(
        payload: Mapping[str, Any],
        base: StatisticsConfig | None,
        field_label: Callable[[str], str],
    ) -> StatisticsConfig:
        """Overlay normalized payload values on `base` and validate the result."""

        resolved = base if base is not None else StatisticsConfig()
        precision = resolved.precision
        output_format = resolved.output_format
        show_text = resolved.show_text
        encoding = resolved.encoding
        log_level = resolved.log_level

        if token_or_none(payload.get("precision")) is not None:
            try:
                precision = parse_non_negative_int(payload["precision"], "precision")
            except ValueError as exc:
                raise ValueError(
                    f"{field_label('precision')} must be a non-negative integer."
                ) from exc

        if "show_text" in payload:
            try:
                show_text = parse_switch(payload["show_text"], "show_text")
            except ValueError as exc:
                raise ValueError(
                    f"{field_label('show_text')} must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                ) from exc

        output_format = (
            ConfigLoader._optional_token(payload, "output_format", str.lower) or output_format
        )
        encoding = ConfigLoader._optional_token(payload, "encoding", str.lower) or encoding
        log_level = ConfigLoader._optional_token(payload, "log_level", str.upper) or log_level

        config = StatisticsConfig(
            precision=precision,
            output_format=output_format,
            show_text=show_text,
            encoding=encoding,
            log_level=log_level,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_token(
        payload: Mapping[str, Any], key: str, fold: Callable[[str], str]
    ) -> str | None:
        """Read an optional string token, normalizing blanks to `None` and folding case."""

        value = token_or_none(payload.get(key))
        if value is None:
            return None
        return fold(value)
