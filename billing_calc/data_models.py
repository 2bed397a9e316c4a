"""Data models for the billing calculator.

This module defines dataclasses representing the values that flow through the
calculator: parsed month specifiers, the user's time input, the derived rate
snapshot and the final calculation result. The rate configuration itself lives
in ``config.py`` because it carries behaviour (setters and validation).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class MonthSpecifier:
    """A calendar month parsed from user input.

    Attributes
    ----------
    raw_input: str
        The text exactly as the user typed it (``"02"`` or ``"2024-02"``).
    year: int
        The calendar year. For the ``MM`` form this is the reference year
        supplied at parse time.
    month: int
        The month number, 1 to 12.
    day_count: int
        Number of days in the month, taking leap years into account.
    """

    raw_input: str
    year: int
    month: int
    day_count: int


@dataclass
class TimeInput:
    """Worked time supplied by the caller.

    Every list is summed; the order inside a list only matters for which
    invalid value gets reported first. Months are kept as raw strings and
    parsed by the calculator.
    """

    hours: List[int] = field(default_factory=list)
    days: List[int] = field(default_factory=list)
    weeks: List[int] = field(default_factory=list)
    months: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.hours or self.days or self.weeks or self.months)


@dataclass(frozen=True)
class DerivedRates:
    """Rates computed from a ``RateConfig``'s base fields."""

    monthly_hours: int
    hourly_rate: float
    daily_rate: float
    weekly_rate: float


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single calculation.

    ``total_weeks``, ``total_days`` and ``total_hours`` are the raw sums of
    each input category before any unit conversion. ``total_time`` is the
    grand total expressed in hours and ``total_amount`` is that total
    multiplied by the hourly rate in effect when the calculation ran.
    """

    month_details: Tuple[MonthSpecifier, ...]
    total_weeks: int
    total_days: int
    total_hours: int
    total_time: int
    total_amount: float
    currency: str

    @property
    def month_days(self) -> int:
        return sum(m.day_count for m in self.month_details)


RateTable = Dict[str, float]  # "hourly" | "daily" | "weekly" | "monthly"
