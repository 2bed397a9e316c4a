"""Core calculation engine for the billing calculator.

This module turns worked time into a billable amount. Hours are billed as-is,
days and calendar months at ``hours_per_day`` each, and weeks at
``weekly_hours``. The total in hours is multiplied by the hourly rate of the
configuration in effect at call time. Results are returned as an immutable
``CalculationResult``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config import RateConfig
from .data_models import CalculationResult, MonthSpecifier, RateTable, TimeInput
from .errors import BillingError, InvalidInput
from .formatter import format_month_summary, format_rates, format_result
from .utils import parse_month

logger = logging.getLogger(__name__)


def _check_non_negative(values: Iterable[int], label: str) -> None:
    for value in values:
        if value < 0:
            raise InvalidInput(f"{label} cannot be negative: {value}")


class BillingCalculator:
    """Compute billing amounts against a shared ``RateConfig``.

    The calculator keeps a reference to ``config`` and reads it on every call,
    so changes made by the caller between calls are picked up. It never
    modifies the config itself.

    ``reference_year`` is the year used for month specifiers given without a
    year (``"02"``). Leave it as ``None`` to use the current year.
    """

    def __init__(self, config: RateConfig, reference_year: Optional[int] = None) -> None:
        self.config = config
        self.reference_year = reference_year

    def _parse_month(self, text: str) -> MonthSpecifier:
        return parse_month(text, self.reference_year)

    def validate_input(self, time_input: TimeInput) -> None:
        """Check ``time_input`` and raise on the first invalid value.

        Raises
        ------
        InvalidInput
            If any hours, days or weeks value is negative.
        InvalidFormat, InvalidMonth
            If a month specifier cannot be parsed. The message names the
            offending specifier.
        """
        _check_non_negative(time_input.hours, "hours")
        _check_non_negative(time_input.days, "days")
        _check_non_negative(time_input.weeks, "weeks")
        for text in time_input.months:
            try:
                self._parse_month(text)
            except BillingError as exc:
                raise type(exc)(f"invalid month '{text}': {exc}") from exc

    def calculate(self, time_input: TimeInput, currency: str) -> CalculationResult:
        """Validate ``time_input`` and compute the billable amount.

        The total time in hours is::

            hours + days * hours_per_day + weeks * weekly_hours
                  + sum(month.day_count * hours_per_day for each month)

        and the amount is that total times the current hourly rate. The
        currency label is copied to the result unchanged.
        """
        self.validate_input(time_input)

        month_details: List[MonthSpecifier] = [self._parse_month(m) for m in time_input.months]
        total_hours = sum(time_input.hours)
        total_days = sum(time_input.days)
        total_weeks = sum(time_input.weeks)

        config = self.config
        total_time = total_hours
        total_time += total_days * config.hours_per_day
        total_time += total_weeks * config.weekly_hours
        total_time += sum(m.day_count for m in month_details) * config.hours_per_day

        total_amount = total_time * config.hourly_rate
        logger.debug(
            "calculated %d hours (%d months, %d weeks, %d days, %d hours) -> %.2f %s",
            total_time,
            len(month_details),
            total_weeks,
            total_days,
            total_hours,
            total_amount,
            currency,
        )
        return CalculationResult(
            month_details=tuple(month_details),
            total_weeks=total_weeks,
            total_days=total_days,
            total_hours=total_hours,
            total_time=total_time,
            total_amount=total_amount,
            currency=currency,
        )

    def format_result(self, result: CalculationResult) -> str:
        return format_result(result, self.config)

    def format_rates(self, currency: str) -> str:
        return format_rates(self.config, currency)

    def quick_rates(self, currency: str) -> RateTable:
        """Return the current hourly, daily, weekly and monthly rates.

        ``currency`` is accepted so the signature matches the other rate
        helpers; it does not change the values.
        """
        rates = self.config.rates
        return {
            "hourly": rates.hourly_rate,
            "daily": rates.daily_rate,
            "weekly": rates.weekly_rate,
            "monthly": self.config.monthly_salary,
        }

    def month_summary(self, text: str, currency: str) -> str:
        """Return a one-line breakdown of hours and amount for a single month."""
        return format_month_summary(self._parse_month(text), self.config, currency)
