"""
Report cell formatting tests.
"""

from datetime import date

import pytest

from hrmetrics.report.formatting import (
    capitalize_label,
    format_currency,
    format_long_date,
    format_month_year,
    format_percent,
    format_rating,
    format_weekday_date,
    performance_grade,
)


class TestNumberFormats:
    def test_currency_has_thousands_separator(self):
        assert format_currency(72_500) == "$72,500"
        assert format_currency(0) == "$0"
        assert format_currency(1_234_567.5) == "$1,234,568"

    @pytest.mark.parametrize(
        "rating, expected",
        [
            (4.3, "4.3"),
            (4.0, "4.0"),
            (4.25, "4.3"),
            (4.35, "4.3"),  # binary value sits just below the half
            (4.45, "4.5"),  # binary value sits just above the half
        ],
    )
    def test_rating_one_decimal(self, rating, expected):
        assert format_rating(rating) == expected

    def test_percent(self):
        assert format_percent(92) == "92%"
        assert format_percent(89.5) == "90%"


class TestDateFormats:
    def test_month_year(self):
        assert format_month_year(date(2019, 3, 15)) == "Mar 2019"

    def test_weekday_date_has_no_zero_padding(self):
        assert format_weekday_date(date(2024, 6, 3)) == "Monday, Jun 3"
        assert format_weekday_date(date(2024, 6, 19)) == "Wednesday, Jun 19"

    def test_long_date(self):
        assert format_long_date(date(2024, 7, 30)) == "July 30, 2024"


class TestLabels:
    def test_capitalize_only_first_letter(self):
        assert capitalize_label("interview") == "Interview"
        assert capitalize_label("high") == "High"
        assert capitalize_label("") == ""

    @pytest.mark.parametrize(
        "rating, grade",
        [
            (4.7, "A+"),
            (4.5, "A+"),
            (4.46, "A+"),  # displayed as 4.5
            (4.2, "A"),
            (4.0, "A"),
            (3.6, "B+"),
            (3.0, "B"),
            (2.9, "C"),
        ],
    )
    def test_performance_grade(self, rating, grade):
        assert performance_grade(rating) == grade
