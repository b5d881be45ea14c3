"""Text normalization pipeline for readability counting.

Responsibilities:
- Turn markup-bearing raw text into one canonical, lowercase,
  single-space-delimited, period-terminated string.
- Keep every rule stateless so normalization is deterministic and idempotent.

Key types:
- `TextNormalizer`: ordered composition of normalization rules.
- `NormalizationRule`: protocol implemented by each individual rule.
"""

from __future__ import annotations

import re
from typing import Protocol

TERMINATOR = "."

FULL_STOP_TAGS: tuple[str, ...] = ("li", "p", "h1", "h2", "h3", "h4", "h5", "h6", "dd")


def _trim_and_collapse(text: str) -> str:
    """Strip outer whitespace and collapse inner whitespace runs to one space."""

    return " ".join(text.split())


class NormalizationRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class ClosingBlockTagsToTerminators:
    """Turn closing block-level tags into sentence terminators."""

    def __init__(self, tags: tuple[str, ...] = FULL_STOP_TAGS) -> None:
        """Initialize the rule with the block tag names that end a sentence."""

        alternatives = "|".join(re.escape(tag) for tag in tags)
        self._closing_tag_re = re.compile(rf"</(?:{alternatives})>", re.IGNORECASE)

    def apply(self, text: str) -> str:
        """Replace each closing block tag with a terminator."""

        return self._closing_tag_re.sub(TERMINATOR, text)


class StripTags:
    """Remove every remaining markup tag."""

    _TAG_RE = re.compile(r"<[^>]+>")

    def apply(self, text: str) -> str:
        """Delete tags without inserting whitespace."""

        return self._TAG_RE.sub("", text)


class SeparatorsToSpaces:
    """Count commas, colons, semicolons, brackets and hyphens as spaces."""

    _SEPARATOR_RE = re.compile(r"[,:;()\-]")

    def apply(self, text: str) -> str:
        """Replace separator punctuation with spaces."""

        return self._SEPARATOR_RE.sub(" ", text)


class UnifyTerminators:
    """Map `.`, `!` and `?` onto the canonical terminator."""

    _TERMINATOR_RE = re.compile(r"[.!?]")

    def apply(self, text: str) -> str:
        """Replace every sentence-ending mark with `.`."""

        return self._TERMINATOR_RE.sub(TERMINATOR, text)


class TrimAndTerminate:
    """Trim, collapse whitespace and append a final terminator.

    The appended terminator may duplicate an existing one; `CollapseTerminators`
    folds the duplicate away later.
    """

    def apply(self, text: str) -> str:
        """Return collapsed text with a trailing terminator."""

        return _trim_and_collapse(text) + TERMINATOR


class LineBreaksToSpaces:
    """Replace line breaks and their surrounding spaces with one space."""

    _LINE_BREAK_RE = re.compile(r" *(?:\r\n|\n|\r) *")

    def apply(self, text: str) -> str:
        """Flatten remaining line breaks."""

        return self._LINE_BREAK_RE.sub(" ", text)


class CollapseTerminators:
    """Fold runs of terminators (with interleaved spaces) into one terminator."""

    _TERMINATOR_RUN_RE = re.compile(r"\.[. ]+")

    def apply(self, text: str) -> str:
        """Collapse duplicated terminators."""

        return self._TERMINATOR_RUN_RE.sub(TERMINATOR, text)


class PadTerminators:
    """Attach each terminator to the preceding word and follow it by a space."""

    _PADDED_TERMINATOR_RE = re.compile(r" *\.")

    def apply(self, text: str) -> str:
        """Normalize spacing around terminators, then trim and collapse."""

        return _trim_and_collapse(self._PADDED_TERMINATOR_RE.sub(". ", text))


class CollapseSpaces:
    """Collapse repeated spaces."""

    _SPACES_RE = re.compile(r" +")

    def apply(self, text: str) -> str:
        """Replace runs of spaces with a single space."""

        return self._SPACES_RE.sub(" ", text)


class Lowercase:
    """Lowercase all characters."""

    def apply(self, text: str) -> str:
        """Return lowercased text."""

        return text.lower()


class TextNormalizer:
    """Normalize raw text into the canonical form consumed by lexical counters.

    The default rule order is significant: later rules rely on the output
    shape of earlier ones. Running the normalizer on its own output returns
    the same string.
    """

    def __init__(self, rules: list[NormalizationRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules: tuple[NormalizationRule, ...] = tuple(
            rules
            or [
                ClosingBlockTagsToTerminators(),
                StripTags(),
                SeparatorsToSpaces(),
                UnifyTerminators(),
                TrimAndTerminate(),
                LineBreaksToSpaces(),
                CollapseTerminators(),
                PadTerminators(),
                CollapseSpaces(),
                Lowercase(),
            ]
        )

    def normalize(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
