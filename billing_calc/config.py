"""Billing rate configuration.

``RateConfig`` holds the base billing parameters. The hourly, daily and weekly
rates are never stored: each read goes through ``derive_rates`` so they always
agree with the current base fields, even right after a setter runs.

A config is an ordinary object owned by the caller. Several independent
configs can coexist, and a calculator only keeps a reference to the one it was
given. Callers that share a config between threads must serialize mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .data_models import DerivedRates
from .errors import InvalidConfig

logger = logging.getLogger(__name__)

DEFAULT_MONTHLY_SALARY = 2200.0
DEFAULT_WEEKLY_HOURS = 40
DEFAULT_WORK_DAYS = 5
DEFAULT_HOURS_PER_DAY = 8
DEFAULT_WEEKS_PER_MONTH = 4
DEFAULT_CURRENCY = "U$S"


def derive_rates(config: "RateConfig") -> DerivedRates:
    """Compute the derived rates for ``config``.

    The formulas are:

        monthly_hours = weekly_hours * weeks_per_month
        hourly_rate   = monthly_salary / monthly_hours
        daily_rate    = hourly_rate * hours_per_day
        weekly_rate   = hourly_rate * weekly_hours

    Raises
    ------
    InvalidConfig
        If ``monthly_hours`` is not positive, which would make the hourly
        rate undefined.
    """
    monthly_hours = config.weekly_hours * config.weeks_per_month
    if monthly_hours <= 0:
        raise InvalidConfig(f"monthly hours must be positive, got: {monthly_hours}")
    hourly_rate = config.monthly_salary / monthly_hours
    return DerivedRates(
        monthly_hours=monthly_hours,
        hourly_rate=hourly_rate,
        daily_rate=hourly_rate * config.hours_per_day,
        weekly_rate=hourly_rate * config.weekly_hours,
    )


@dataclass
class RateConfig:
    """Base billing parameters.

    Attributes
    ----------
    monthly_salary: float
        Reference salary for a full month of work.
    weekly_hours: int
        Hours in a working week; also the size of one billed week.
    work_days: int
        Working days per week. Informational only, shown in the rate table.
    hours_per_day: int
        Hours in a working day; used for billed days and calendar months.
    weeks_per_month: int
        Weeks used to turn the monthly salary into an hourly rate.
    default_currency: str
        Currency label. It is never converted.
    """

    monthly_salary: float = DEFAULT_MONTHLY_SALARY
    weekly_hours: int = DEFAULT_WEEKLY_HOURS
    work_days: int = DEFAULT_WORK_DAYS
    hours_per_day: int = DEFAULT_HOURS_PER_DAY
    weeks_per_month: int = DEFAULT_WEEKS_PER_MONTH
    default_currency: str = DEFAULT_CURRENCY

    @classmethod
    def create(cls) -> "RateConfig":
        """Return a config populated with the default billing parameters."""
        return cls()

    @classmethod
    def from_overrides(
        cls,
        monthly_salary: Optional[float] = None,
        weekly_hours: Optional[int] = None,
        hours_per_day: Optional[int] = None,
    ) -> "RateConfig":
        """Build a default config and apply each override through its setter."""
        config = cls.create()
        if monthly_salary is not None:
            config.set_monthly_salary(monthly_salary)
        if weekly_hours is not None:
            config.set_weekly_hours(weekly_hours)
        if hours_per_day is not None:
            config.set_hours_per_day(hours_per_day)
        return config

    # Derived rates

    @property
    def rates(self) -> DerivedRates:
        return derive_rates(self)

    @property
    def monthly_hours(self) -> int:
        return self.rates.monthly_hours

    @property
    def hourly_rate(self) -> float:
        return self.rates.hourly_rate

    @property
    def daily_rate(self) -> float:
        return self.rates.daily_rate

    @property
    def weekly_rate(self) -> float:
        return self.rates.weekly_rate

    # Mutators

    def set_monthly_salary(self, salary: float) -> None:
        if salary <= 0:
            raise InvalidConfig(f"monthly salary must be positive, got: {salary:.2f}")
        self.monthly_salary = float(salary)
        logger.debug("monthly salary set to %.2f", self.monthly_salary)

    def set_weekly_hours(self, hours: int) -> None:
        if hours <= 0:
            raise InvalidConfig(f"weekly hours must be positive, got: {hours}")
        self.weekly_hours = hours
        logger.debug("weekly hours set to %d", hours)

    def set_hours_per_day(self, hours: int) -> None:
        if hours <= 0:
            raise InvalidConfig(f"hours per day must be positive, got: {hours}")
        self.hours_per_day = hours
        logger.debug("hours per day set to %d", hours)

    def validate(self) -> None:
        """Raise ``InvalidConfig`` for the first base field that is invalid."""
        if self.monthly_salary <= 0:
            raise InvalidConfig("monthly salary must be positive")
        if self.weekly_hours <= 0:
            raise InvalidConfig("weekly hours must be positive")
        if self.hours_per_day <= 0:
            raise InvalidConfig("hours per day must be positive")
        if self.work_days <= 0:
            raise InvalidConfig("work days must be positive")
        if self.weeks_per_month <= 0:
            raise InvalidConfig("weeks per month must be positive")
        if not self.default_currency:
            raise InvalidConfig("default currency cannot be empty")

    def __str__(self) -> str:
        return (
            f"RateConfig(monthly_salary={self.monthly_salary:.2f}, "
            f"weekly_hours={self.weekly_hours}, "
            f"hours_per_day={self.hours_per_day}, "
            f"currency={self.default_currency})"
        )
