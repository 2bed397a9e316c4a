"""Tests for leap years, month lengths and month specifier parsing."""

import pytest

from billing_calc import utils
from billing_calc.errors import BillingError, InvalidFormat, InvalidMonth
from billing_calc.utils import days_in_month, is_leap_year, parse_month


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2004, True), (2001, False), (2100, False), (2024, True), (2023, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (1, 2023, 31),
        (2, 2024, 29),
        (2, 2023, 28),
        (2, 2000, 29),
        (2, 1900, 28),
        (4, 2023, 30),
        (9, 2023, 30),
        (12, 2023, 31),
        (0, 2023, 0),
        (13, 2023, 0),
    ],
)
def test_days_in_month(month, year, expected):
    assert days_in_month(month, year) == expected


class TestParseMonth:
    def test_year_month(self):
        spec = parse_month("2024-02")
        assert (spec.raw_input, spec.year, spec.month, spec.day_count) == ("2024-02", 2024, 2, 29)

    def test_year_month_single_digit(self):
        spec = parse_month("2023-2")
        assert (spec.year, spec.month, spec.day_count) == (2023, 2, 28)

    def test_month_only_uses_reference_year(self):
        spec = parse_month("02", reference_year=2023)
        assert (spec.raw_input, spec.year, spec.month, spec.day_count) == ("02", 2023, 2, 28)

    def test_month_only_leap_reference_year(self):
        assert parse_month("2", reference_year=2024).day_count == 29

    def test_month_only_defaults_to_current_year(self, monkeypatch):
        monkeypatch.setattr(utils, "current_year", lambda: 1999)
        assert parse_month("07").year == 1999

    def test_reference_year_ignored_for_year_month(self):
        assert parse_month("2021-03", reference_year=1999).year == 2021

    @pytest.mark.parametrize("text", ["13", "00", "0", "2024-13", "2024-0", "2024-00"])
    def test_month_out_of_range(self, text):
        with pytest.raises(InvalidMonth, match="must be 1-12"):
            parse_month(text, reference_year=2024)

    @pytest.mark.parametrize(
        "text", ["invalid", "", "123", "24-02", "2024-123", "2024/02", " 02", "2024-02\n", "02-2024"]
    )
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormat, match="use MM or YYYY-MM"):
            parse_month(text, reference_year=2024)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_month("nope")
        with pytest.raises(BillingError):
            parse_month("99")
