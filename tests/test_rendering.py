"""Unit tests for roll result rendering."""

import pytest

from diceroller.dice import RollResult
from diceroller.rendering import (
    prettify,
    prettify_full,
    prettify_html,
    prettify_html_full,
    prettify_html_one,
    prettify_one,
    prettify_one_full,
)

TWO_D6 = RollResult(source="2d6", faces=6, count=2, modifier=0, rolls=(1, 2), total=3)
FOUR_D4 = RollResult(source="4d4+4", faces=4, count=4, modifier=4, rolls=(3, 2, 3, 4), total=16)
ONE_D4_MINUS = RollResult(source="1d4-1", faces=4, count=1, modifier=-1, rolls=(2,), total=1)
ONE_D6 = RollResult(source="1D6", faces=6, count=1, modifier=0, rolls=(6,), total=6)
ZERO_DICE = RollResult(source="0d6+3", faces=6, count=0, modifier=3, rolls=(), total=3)


class TestPlain:
    def test_prettify(self) -> None:
        assert prettify([TWO_D6, FOUR_D4]) == ["1 + 2 = 3", "3 + 2 + 3 + 4 (+4) = 16"]

    def test_negative_modifier(self) -> None:
        assert prettify([ONE_D4_MINUS]) == ["2 (-1) = 1"]

    def test_single_die_no_total(self) -> None:
        assert prettify_one(ONE_D6) == "6"

    def test_zero_dice(self) -> None:
        assert prettify_one(ZERO_DICE) == " (+3) = 3"

    def test_zero_modifier_has_no_suffix(self) -> None:
        multi = RollResult(source="2d8+0", faces=8, count=2, modifier=0, rolls=(8, 1), total=9)
        assert prettify_one(multi) == "8 + 1 = 9"

    def test_prettify_full(self) -> None:
        assert prettify_full([TWO_D6, FOUR_D4]) == [
            "2d6: 1 + 2 = 3",
            "4d4+4: 3 + 2 + 3 + 4 (+4) = 16",
        ]

    def test_prettify_one_full(self) -> None:
        assert prettify_one_full(TWO_D6) == "2d6: 1 + 2 = 3"

    def test_full_lowercases_source(self) -> None:
        assert prettify_one_full(ONE_D6) == "1d6: 6"

    def test_empty(self) -> None:
        assert prettify([]) == []
        assert prettify_full([]) == []


class TestHtml:
    def test_short_form(self) -> None:
        assert prettify_html([TWO_D6, ONE_D6]) == ["<strong>1 + 2 = 3</strong>", "<strong>6</strong>"]

    def test_full_form(self) -> None:
        assert prettify_html_full([TWO_D6, FOUR_D4]) == [
            "<strong>2d6:</strong> <em>1 + 2 = 3</em>",
            "<strong>4d4+4:</strong> <em>3 + 2 + 3 + 4 (+4) = 16</em>",
        ]

    @pytest.mark.parametrize(
        "full, expected",
        [
            (False, "<strong>2 (-1) = 1</strong>"),
            (True, "<strong>1d4-1:</strong> <em>2 (-1) = 1</em>"),
        ],
    )
    def test_one(self, full: bool, expected: str) -> None:
        assert prettify_html_one(ONE_D4_MINUS, full=full) == expected

    def test_returns_plain_str(self) -> None:
        assert type(prettify_html_one(TWO_D6)) is str


@pytest.mark.parametrize("func", [prettify, prettify_full, prettify_html, prettify_html_full])
def test_batch_renderers_documented(func) -> None:
    assert func.__doc__
    assert "e.g." in func.__doc__
