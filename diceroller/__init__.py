"""Find dice notation in text, roll it, and render the results."""

from diceroller.dice import (
    DiceError,
    InvalidDiceError,
    NoMatchError,
    NumericParseError,
    Roller,
    RollResult,
    roll,
    roll_details,
    roll_one,
    roll_total,
)
from diceroller.notation import InvalidInputError, parse
from diceroller.random_source import (
    LockedRandomSource,
    RandomSource,
    get_random_source,
    reset_random_source,
)
from diceroller.rendering import (
    prettify,
    prettify_full,
    prettify_html,
    prettify_html_full,
    prettify_html_one,
    prettify_one,
    prettify_one_full,
)

__all__ = [
    "DiceError",
    "InvalidDiceError",
    "InvalidInputError",
    "LockedRandomSource",
    "NoMatchError",
    "NumericParseError",
    "RandomSource",
    "RollResult",
    "Roller",
    "get_random_source",
    "parse",
    "prettify",
    "prettify_full",
    "prettify_html",
    "prettify_html_full",
    "prettify_html_one",
    "prettify_one",
    "prettify_one_full",
    "roll",
    "roll_details",
    "roll_one",
    "reset_random_source",
    "roll_total",
]
