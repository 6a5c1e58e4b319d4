"""Dice notation extraction.

Finds ``NdF``, ``NdF+M`` and ``NdF-M`` expressions inside free-form text.
Each numeric group is 1-5 ASCII digits; the ``d``/``D`` separator keeps its
case. Examples: "roll 2d6 please" -> ["2d6"], "2 D 8 - 3" -> ["2D8-3"].

Whitespace is removed before matching so "2 d 6" reads as "2d6". The flip
side is that two rolls separated only by whitespace run together:
"1d6 2d8" becomes "1d62d8" and yields ["1d62"]. Separate rolls with a word
or punctuation.
"""

from __future__ import annotations

import re

_WHITESPACE = str.maketrans("", "", " \t\n")


class InvalidInputError(ValueError):
    """Raised when the dice notation grammar cannot be built."""


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.ASCII)
    except re.error as exc:
        raise InvalidInputError(f"Invalid dice notation grammar: {pattern!r}") from exc


ROLL_RE = _compile(r"(?P<count>\d{1,5})[dD](?P<faces>\d{1,5})(?P<mod>[+-]\d{1,5})?")


def strip_whitespace(text: str) -> str:
    """Remove spaces, tabs and newlines from text."""
    return text.translate(_WHITESPACE)


def parse(*texts: str) -> list[str]:
    """Extract every dice roll from one or more strings.

    Args:
        *texts: Free-form text, e.g. "roll a 2 d 6 and 1d20+3".

    Returns:
        Canonical roll tokens in the order they appear, across all inputs
        in input order. Text without rolls contributes nothing.
    """
    tokens: list[str] = []
    for text in texts:
        tokens.extend(m.group(0) for m in ROLL_RE.finditer(strip_whitespace(text)))
    return tokens


def find_roll(text: str) -> re.Match[str] | None:
    """Return the first dice roll match in text, or None."""
    return ROLL_RE.search(text)
