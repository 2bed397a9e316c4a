"""Calendar helpers for the billing calculator.

This module parses the month specifiers accepted on the command line
(``MM`` and ``YYYY-MM``) into ``MonthSpecifier`` objects and works out how
many days each month has. It relies on Python's ``calendar`` module for the
Gregorian leap-year rule.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date
from typing import Optional

from .data_models import MonthSpecifier
from .errors import InvalidFormat, InvalidMonth

logger = logging.getLogger(__name__)

_YEAR_MONTH_RE = re.compile(r"([0-9]{4})-([0-9]{1,2})")
_MONTH_RE = re.compile(r"([0-9]{1,2})")


def current_year() -> int:
    """Return the current calendar year from the local clock."""
    return date.today().year


def is_leap_year(year: int) -> bool:
    """Return ``True`` if ``year`` is a Gregorian leap year.

    A year is a leap year when it is divisible by 4, except centuries that
    are not divisible by 400 (so 2000 is a leap year and 1900 is not).
    """
    return calendar.isleap(year)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Months outside 1-12 yield 0 rather than raising, so callers can use the
    result as a validity check.
    """
    if not 1 <= month <= 12:
        return 0
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def _checked_month(value: str) -> int:
    month = int(value)
    if not 1 <= month <= 12:
        raise InvalidMonth(f"invalid month: {month} (must be 1-12)")
    return month


def parse_month(text: str, reference_year: Optional[int] = None) -> MonthSpecifier:
    """Parse a month specifier into a ``MonthSpecifier``.

    Parameters
    ----------
    text: str
        Either ``"YYYY-MM"`` (four-digit year, one or two digit month) or
        ``"MM"`` (one or two digit month).
    reference_year: Optional[int]
        Year used for the ``MM`` form. When omitted, the current calendar
        year is read at call time.

    Returns
    -------
    MonthSpecifier
        The parsed month, with ``raw_input`` set to ``text`` unchanged.

    Raises
    ------
    InvalidMonth
        If the specifier is well formed but the month is not in 1-12.
    InvalidFormat
        If the specifier matches neither accepted form.
    """
    match = _YEAR_MONTH_RE.fullmatch(text)
    if match:
        year = int(match.group(1))
        month = _checked_month(match.group(2))
    else:
        match = _MONTH_RE.fullmatch(text)
        if not match:
            raise InvalidFormat(f"invalid month format: {text} (use MM or YYYY-MM)")
        month = _checked_month(match.group(1))
        year = reference_year if reference_year is not None else current_year()
    spec = MonthSpecifier(
        raw_input=text,
        year=year,
        month=month,
        day_count=days_in_month(month, year),
    )
    logger.debug("parsed month %r as %04d-%02d (%d days)", text, year, month, spec.day_count)
    return spec
