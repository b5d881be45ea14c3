"""Token parsing for YAML and environment configuration values.

YAML may deliver native ints and bools while environment variables always
deliver strings; every parser here accepts both forms.
"""

from __future__ import annotations


_SWITCH_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def token_or_none(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when missing or blank."""

    if value is None:
        return None
    return str(value).strip() or None


def parse_switch(value: object, field_name: str) -> bool:
    """Parse an on/off setting such as `show_text`.

    Native booleans pass through. Text tokens are matched case-insensitively
    against `true`/`false`, `1`/`0`, `yes`/`no` and `on`/`off`.

    Raises:
        ValueError: If the value is blank or not a recognized token.
    """

    if isinstance(value, bool):
        return value
    token = token_or_none(value)
    if token is not None and token.lower() in _SWITCH_TOKENS:
        return _SWITCH_TOKENS[token.lower()]
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_non_negative_int(value: object, field_name: str) -> int:
    """Parse a non-negative integer from an int or a numeric string token.

    Raises:
        ValueError: If the value is a boolean, non-numeric, or negative.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a non-negative integer.")
    if isinstance(value, int):
        parsed = value
    else:
        token = token_or_none(value)
        if token is None or not (token.isascii() and token.isdigit()):
            raise ValueError(f"`{field_name}` must be a non-negative integer.")
        parsed = int(token)
    if parsed < 0:
        raise ValueError(f"`{field_name}` must be a non-negative integer.")
    return parsed
