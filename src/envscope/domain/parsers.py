"""Typed parsers for raw configuration text.

Each parser takes the raw text and returns the typed value, or None when
the text is not a valid encoding for that type.  Parsers never raise.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_bool(text: str) -> bool | None:
    """Only ``"1"`` and ``"0"`` are booleans."""
    if text == "1":
        return True
    if text == "0":
        return False
    return None


def parse_int(text: str) -> int | None:
    """Parse a base-10 signed integer.

    Stricter than ``int()``: no surrounding whitespace, no digit
    separators, ASCII digits only.

    Examples:
        >>> parse_int("-42")
        -42
        >>> parse_int("+7")
        7
        >>> parse_int(" 7") is None
        True
    """
    if not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Longer than sys.get_int_max_str_digits()
        return None


def parse_str(text: str) -> str:
    return text


PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": parse_bool,
    "int": parse_int,
    "str": parse_str,
}
