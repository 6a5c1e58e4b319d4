"""Display strings for roll results.

Short form: "3 + 2 + 3 + 4 (+4) = 16". Full form echoes the rolled
notation first: "4d4+4: 3 + 2 + 3 + 4 (+4) = 16". A single die with no
modifier shows just the die: "6".

HTML forms wrap the short form in ``<strong>`` and split the full form into
``<strong>4d4+4:</strong> <em>...</em>``.
"""

from __future__ import annotations

from collections.abc import Sequence

from markupsafe import Markup

from diceroller.dice import RollResult

_SEPARATOR = ": "


def _render(result: RollResult, full: bool) -> str:
    text = f"{result.source.lower()}{_SEPARATOR}" if full else ""
    text += " + ".join(str(value) for value in result.rolls)

    if result.modifier > 0:
        text += f" (+{result.modifier})"
    elif result.modifier < 0:
        text += f" (-{abs(result.modifier)})"

    # A lone die with no modifier already shows its total.
    if not (result.count == 1 and result.modifier == 0):
        text += f" = {result.total}"
    return text


def _wrap_html(text: str) -> str:
    left, sep, right = text.partition(_SEPARATOR)
    if not sep:
        return str(Markup("<strong>{}</strong>").format(text))
    return str(Markup("<strong>{}:</strong> <em>{}</em>").format(left, right))


def prettify_one(result: RollResult) -> str:
    """Render one result, e.g. "1 + 2 + 3 + 4 = 10"."""
    return _render(result, full=False)


def prettify_one_full(result: RollResult) -> str:
    """Render one result with its notation, e.g. "4d4: 1 + 2 + 3 + 4 = 10"."""
    return _render(result, full=True)


def prettify_html_one(result: RollResult, full: bool = False) -> str:
    """Render one result as HTML.

    Args:
        result: The roll to render.
        full: Echo the rolled notation before the breakdown.

    Returns:
        "<strong>1 + 2 = 3</strong>" or "<strong>2d6:</strong> <em>1 + 2 = 3</em>".
    """
    return _wrap_html(_render(result, full=full))


def prettify(results: Sequence[RollResult]) -> list[str]:
    """Render each result, e.g. ["1 + 2 = 3", "3 + 2 + 3 + 4 (+4) = 16"]."""
    return [prettify_one(result) for result in results]


def prettify_full(results: Sequence[RollResult]) -> list[str]:
    """Render each result with its notation, e.g. ["2d6: 1 + 2 = 3"]."""
    return [prettify_one_full(result) for result in results]


def prettify_html(results: Sequence[RollResult]) -> list[str]:
    """Render each result as HTML, e.g. ["<strong>1 + 2 = 3</strong>"]."""
    return [prettify_html_one(result) for result in results]


def prettify_html_full(results: Sequence[RollResult]) -> list[str]:
    """Render each result as HTML with its notation.

    e.g. ["<strong>2d6:</strong> <em>1 + 2 = 3</em>"]
    """
    return [prettify_html_one(result, full=True) for result in results]
