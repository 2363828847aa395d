"""
Tests for input validation, sanitizing and currency formatting.
"""

from __future__ import annotations

import math

import pytest

from wage_core.validation import (
    format_currency,
    is_valid_hours_per_day,
    is_valid_monthly_salary,
    is_valid_number,
    is_valid_work_days_per_week,
    parse_float,
    sanitize_input,
)


@pytest.mark.parametrize("value", ["abc", "", "   ", None, True, float("nan"), "--5"])
def test_rejects_non_numeric(value):
    assert is_valid_number(value, 0, 10) is False


def test_range_boundaries_are_inclusive():
    assert is_valid_number(1, 1, 7)
    assert is_valid_number("7", 1, 7)
    assert not is_valid_number(0.999, 1, 7)
    assert not is_valid_number("7.01", 1, 7)


def test_parses_leading_number_like_a_browser():
    assert parse_float("  12.5px") == 12.5
    assert parse_float(".5") == 0.5
    assert parse_float("1e3") == 1000.0
    assert parse_float("-Infinity") == -math.inf
    assert parse_float("x12") is None


def test_infinity_is_out_of_range():
    assert not is_valid_number("Infinity", 0, 1_000_000)
    assert not is_valid_number(math.inf, 0, 1_000_000)


def test_field_specializations():
    assert is_valid_monthly_salary("0")
    assert is_valid_monthly_salary(1_000_000)
    assert not is_valid_monthly_salary(1_000_000.01)
    assert not is_valid_monthly_salary(-1)

    assert is_valid_work_days_per_week(7)
    assert not is_valid_work_days_per_week(0)
    assert not is_valid_work_days_per_week(8)

    assert is_valid_hours_per_day(24)
    assert is_valid_hours_per_day("1")
    assert not is_valid_hours_per_day(24.5)


def test_format_currency():
    assert format_currency(57.7367) == "¥57.74"
    assert format_currency(10000) == "¥10000.00"


@pytest.mark.parametrize("value", [0, float("nan"), math.inf, -math.inf, "junk", None])
def test_format_currency_zero_representation(value):
    assert format_currency(value) == "¥0.00"


def test_sanitize_input():
    assert sanitize_input("42") == 42.0
    assert sanitize_input("8 hours") == 8.0
    assert sanitize_input("nope") == 0.0
    assert sanitize_input(None) == 0.0


def test_huge_integer_becomes_infinite_and_is_rejected():
    assert parse_float(10**400) == math.inf
    assert parse_float(-(10**400)) == -math.inf
    assert not is_valid_monthly_salary(10**400)
    assert sanitize_input(10**400) == math.inf


def test_format_currency_huge_integer():
    assert format_currency(10**400) == "¥0.00"


def test_non_ascii_digits_are_not_numbers():
    assert parse_float("١٢") is None
    assert not is_valid_work_days_per_week("٥")


def test_format_currency_rounds_ties_up():
    assert format_currency(0.125) == "¥0.13"
    assert format_currency(2.5) == "¥2.50"
    assert format_currency(1.005) == "¥1.00"  # 1.005 는 실제로 1.00499...
