"""Dice rolling engine.

Supports standard notation: XdY, XdY+Z, XdY-Z, each number up to 5 digits.
Examples: 2d6, 1d20, 3d10+2, 2d6-1.

The first roll found in a token is the one simulated, so noise around it is
ignored: "4d8/2" rolls 4d8. ``RollResult.source`` reports what was actually
rolled so callers can spot the difference.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from diceroller.config import settings
from diceroller.notation import find_roll
from diceroller.random_source import RandomSource, get_random_source

logger = logging.getLogger(__name__)


class DiceError(ValueError):
    """Raised when a dice token cannot be rolled.

    Batch operations stop at the first failing token. The error then carries
    what was accumulated before it in ``partial`` and the position of the
    failing token in ``index``.
    """

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token
        self.partial: tuple[object, ...] = ()
        self.index: int | None = None


class NoMatchError(DiceError):
    """Raised when a token contains no dice notation."""


class NumericParseError(DiceError):
    """Raised when a numeric group of a token cannot be converted."""

    def __init__(self, message: str, token: str, field: str) -> None:
        super().__init__(message, token)
        self.field = field


class InvalidDiceError(DiceError):
    """Raised when a die has no faces to roll."""


class RollResult(BaseModel):
    """Outcome of rolling one token."""

    model_config = ConfigDict(frozen=True)

    source: str
    faces: int
    count: int
    modifier: int
    rolls: tuple[int, ...]
    total: int


def _to_int(value: str, field: str, token: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise NumericParseError(
            f"Invalid {field} {value!r} in dice notation: {token!r}", token, field
        ) from exc


class Roller:
    """Rolls dice tokens against a random source.

    Args:
        source: Where draws come from. Defaults to the shared process-wide
            source from :func:`diceroller.random_source.get_random_source`.
    """

    def __init__(self, source: RandomSource | None = None) -> None:
        self._source = source if source is not None else get_random_source()

    def details(self, token: str) -> RollResult:
        """Roll the first dice expression found in token.

        Args:
            token: Dice notation, e.g. "2d6+3". Surrounding text is ignored.

        Returns:
            The individual rolls, modifier and total.

        Raises:
            NoMatchError: If token contains no dice notation.
            NumericParseError: If a number in the notation cannot be read.
            InvalidDiceError: If the dice have zero faces.
        """
        m = find_roll(token)
        if not m:
            raise NoMatchError(f"Invalid dice notation: {token!r}", token)

        count = _to_int(m.group("count"), "count", token)
        faces = _to_int(m.group("faces"), "faces", token)
        modifier = _to_int(m.group("mod"), "modifier", token) if m.group("mod") else 0

        if faces == 0:
            raise InvalidDiceError(f"Dice must have at least one face: {token!r}", token)

        rolls = tuple(self._source.randint(1, faces) for _ in range(count))
        result = RollResult(
            source=m.group(0),
            faces=faces,
            count=count,
            modifier=modifier,
            rolls=rolls,
            total=sum(rolls) + modifier,
        )
        if settings.log_rolls:
            logger.debug("Rolled %s: %s (total %d)", result.source, list(rolls), result.total)
        return result

    def roll_one(self, token: str) -> int:
        """Roll one token and return its total."""
        return self.details(token).total

    def roll(self, *tokens: str) -> list[int]:
        """Roll each token in order and return the totals.

        Raises:
            DiceError: On the first token that cannot be rolled, with the
                totals so far in ``partial``.
        """
        totals: list[int] = []
        for index, token in enumerate(tokens):
            try:
                totals.append(self.details(token).total)
            except DiceError as exc:
                _fail(exc, tuple(totals), index)
                raise
        return totals

    def roll_total(self, *tokens: str) -> int:
        """Roll each token in order and return the sum of all totals.

        Raises:
            DiceError: On the first token that cannot be rolled, with the
                running sum as a one-element ``partial``.
        """
        total = 0
        for index, token in enumerate(tokens):
            try:
                total += self.details(token).total
            except DiceError as exc:
                _fail(exc, (total,), index)
                raise
        return total

    def roll_details(self, *tokens: str) -> list[RollResult]:
        """Roll each token in order and return the full results.

        Raises:
            DiceError: On the first token that cannot be rolled, with the
                results so far in ``partial``.
        """
        results: list[RollResult] = []
        for index, token in enumerate(tokens):
            try:
                results.append(self.details(token))
            except DiceError as exc:
                _fail(exc, tuple(results), index)
                raise
        return results


def _fail(exc: DiceError, partial: tuple[object, ...], index: int) -> None:
    exc.partial = partial
    exc.index = index
    logger.debug("Stopped rolling at token %d (%r): %s", index, exc.token, exc)


def roll_one(token: str) -> int:
    """Roll one token on the shared random source and return its total.

    e.g. ``roll_one("2d6")`` -> 7
    """
    return Roller().roll_one(token)


def roll(*tokens: str) -> list[int]:
    """Roll tokens on the shared random source and return their totals.

    e.g. ``roll("2d6", "2d8")`` -> [7, 12]
    """
    return Roller().roll(*tokens)


def roll_total(*tokens: str) -> int:
    """Roll tokens on the shared random source and return the grand total.

    e.g. ``roll_total("2d6", "2d8")`` -> 19
    """
    return Roller().roll_total(*tokens)


def roll_details(*tokens: str) -> list[RollResult]:
    """Roll tokens on the shared random source and return full results."""
    return Roller().roll_details(*tokens)
