"""Cell formatting applied while assembling report tables."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from hrmetrics.utils.transforms import round_half_up


def format_currency(amount: int | float) -> str:
    return f"${round_half_up(amount):,}"


def format_rating(rating: float) -> str:
    """One decimal place, halves rounded up on the exact binary value."""
    return str(Decimal(rating).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_percent(value: int | float) -> str:
    return f"{round_half_up(value)}%"


def format_month_year(day: date) -> str:
    return day.strftime("%b %Y")


def format_weekday_date(day: date) -> str:
    """e.g. ``Monday, Jun 3``."""
    return f"{day.strftime('%A, %b')} {day.day}"


def format_long_date(day: date) -> str:
    """e.g. ``October 19, 2026``."""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def capitalize_label(label: str) -> str:
    return label[:1].upper() + label[1:]


def performance_grade(average_rating: float) -> str:
    """Letter grade for a department, thresholded on the displayed one-decimal rating."""
    match float(format_rating(average_rating)):
        case r if r >= 4.5:
            return "A+"
        case r if r >= 4.0:
            return "A"
        case r if r >= 3.5:
            return "B+"
        case r if r >= 3.0:
            return "B"
        case _:
            return "C"
