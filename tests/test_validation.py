"""Tests for probability field validation."""

import pytest

from prob_calculator.calc_types import Invalid, Valid
from prob_calculator.validation import (
    EMPTY_MESSAGE,
    PROBABILITY_A_MESSAGE,
    PROBABILITY_B_MESSAGE,
    is_valid_probability,
    parse_probability,
    validate,
)


@pytest.mark.parametrize(
    "a_text, b_text",
    [("", ""), ("", "0.5"), ("0.5", ""), ("", "abc"), ("7", "")],
)
def test_empty_field_reports_both_message(a_text, b_text):
    assert validate(a_text, b_text) == Invalid(EMPTY_MESSAGE)


@pytest.mark.parametrize("a_text", ["1.5", "-0.1", "abc", "nan", "inf", " "])
def test_invalid_a_is_flagged_before_b(a_text):
    assert validate(a_text, "0.5") == Invalid(PROBABILITY_A_MESSAGE)
    # A still wins when B is bad too
    assert validate(a_text, "2") == Invalid(PROBABILITY_A_MESSAGE)


@pytest.mark.parametrize("b_text", ["1.0001", "-1", "x"])
def test_invalid_b_with_valid_a(b_text):
    assert validate("0.3", b_text) == Invalid(PROBABILITY_B_MESSAGE)


def test_bounds_are_inclusive():
    result = validate("0", "1")
    assert isinstance(result, Valid)
    assert result.is_valid


def test_parse_probability():
    assert parse_probability("0.25") == 0.25
    assert parse_probability("1e-1") == pytest.approx(0.1)
    assert parse_probability("1.01") is None
    assert parse_probability("") is None
    assert is_valid_probability("0.5")
    assert not is_valid_probability("five")


def test_digit_separators_are_not_numbers():
    assert parse_probability("0.2_5") is None
    assert validate("0.2_5", "0.5") == Invalid(PROBABILITY_A_MESSAGE)
