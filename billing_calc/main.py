"""Command‑line interface for the billing calculator.

This module uses the ``click`` library to expose the calculator as a single
command. Users combine hours, days, weeks and calendar months, and the total
is billed at the hourly rate derived from the configured monthly salary.
``-h`` is taken by ``--hours``, so help is available as ``-?``/``--help``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from typing import List, Optional, Tuple

import click

from .config import DEFAULT_CURRENCY, RateConfig
from .data_models import TimeInput
from .engine import BillingCalculator
from .errors import BillingError
from .utils import current_year

VERSION = "1.0.0"
BUILD_TIME = os.environ.get("BILLING_CALC_BUILD_TIME", "unknown")
GIT_COMMIT = os.environ.get("BILLING_CALC_GIT_COMMIT", "unknown")

EPILOG = """\b
Examples:
  billing-calc -h 120                    # 120 hours
  billing-calc -d 15                     # 15 days
  billing-calc -s 2                      # 2 weeks
  billing-calc -m 02                     # February of the current year
  billing-calc -m 2024-02                # February 2024 (29 days)
  billing-calc -m 01 -d 5                # January + 5 additional days
  billing-calc -s 2 -d 3 -h 4            # 2 weeks + 3 days + 4 hours
  billing-calc -d 15 --currency EUR      # 15 days in euros
  billing-calc -m 2024-01 -m 2024-02     # several months

\b
Month formats:
  MM        month of the current year (e.g. 02)
  YYYY-MM   month of a specific year (e.g. 2024-02)
"""

logger = logging.getLogger(__name__)

_log_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "WARNING") -> None:
    """Send the package's log records to stderr so they never mix with the report.

    Only the ``billing_calc`` logger is configured; handlers installed on the
    root logger by an embedding application are left alone. Calling this again
    replaces the handler from the previous call.
    """
    global _log_handler
    package_logger = logging.getLogger("billing_calc")
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    package_logger.addHandler(_log_handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


def parse_form_list(values: Tuple[str, ...]) -> List[str]:
    """Flatten repeated option values, splitting each on commas.

    ``-m 01 -m 02,03`` yields ``["01", "02", "03"]``. Entries are passed on
    unchanged, blanks included, so malformed values still reach validation.
    """
    return [part for value in values for part in value.split(",")]


def _string_list(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]) -> List[str]:
    return parse_form_list(values)


def _int_list(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]) -> List[int]:
    numbers: List[int] = []
    for item in parse_form_list(values):
        try:
            numbers.append(int(item))
        except ValueError:
            raise click.BadParameter(f"{item!r} is not a valid integer", ctx=ctx, param=param)
    return numbers


def version_banner() -> str:
    return "\n".join(
        [
            f"Billing Calc v{VERSION}",
            f"Build Time: {BUILD_TIME}",
            f"Git Commit: {GIT_COMMIT}",
            f"Python Version: {platform.python_version()}",
        ]
    )


@click.command(
    context_settings={"help_option_names": ["-?", "--help"]},
    epilog=EPILOG,
)
@click.option("--hours", "-h", "hours", multiple=True, callback=_int_list, help="Add worked hours (repeatable)")
@click.option("--days", "-d", "days", multiple=True, callback=_int_list, help="Add worked days (repeatable)")
@click.option("--weeks", "-s", "weeks", multiple=True, callback=_int_list, help="Add worked weeks (repeatable)")
@click.option(
    "--months",
    "-m",
    "months",
    multiple=True,
    callback=_string_list,
    help="Add months in MM or YYYY-MM format (repeatable)",
)
@click.option("--currency", "currency", default=DEFAULT_CURRENCY, show_default=True, help="Currency label")
@click.option("--rates", "show_rates", is_flag=True, help="Show the rate table")
@click.option(
    "--month-summary",
    "month_summaries",
    multiple=True,
    callback=_string_list,
    help="Print a one-line summary for a month (repeatable)",
)
@click.option("--salary", "salary", type=float, envvar="BILLING_CALC_SALARY", help="Monthly salary")
@click.option("--weekly-hours", "weekly_hours", type=int, envvar="BILLING_CALC_WEEKLY_HOURS", help="Hours per week")
@click.option("--hours-per-day", "hours_per_day", type=int, envvar="BILLING_CALC_HOURS_PER_DAY", help="Hours per day")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug information to stderr")
@click.option("--version", "show_version", is_flag=True, help="Show version information")
@click.pass_context
def cli(
    ctx: click.Context,
    hours: List[int],
    days: List[int],
    weeks: List[int],
    months: List[str],
    currency: str,
    show_rates: bool,
    month_summaries: List[str],
    salary: Optional[float],
    weekly_hours: Optional[int],
    hours_per_day: Optional[int],
    verbose: bool,
    show_version: bool,
) -> None:
    """Billing calculator for hours, days, weeks and months.

    Combine several time periods in one call; the total is billed at the
    hourly rate derived from the monthly salary.
    """
    setup_logging("DEBUG" if verbose else "WARNING")

    if show_version:
        click.echo(version_banner())
        return

    try:
        config = RateConfig.from_overrides(
            monthly_salary=salary,
            weekly_hours=weekly_hours,
            hours_per_day=hours_per_day,
        )
        config.validate()
    except BillingError as exc:
        raise click.ClickException(f"configuration error: {exc}") from exc
    logger.debug("using %s", config)

    calculator = BillingCalculator(config, reference_year=current_year())

    if show_rates:
        click.echo(calculator.format_rates(currency), nl=False)
        return

    if month_summaries:
        try:
            for text in month_summaries:
                click.echo(calculator.month_summary(text, currency))
        except BillingError as exc:
            raise click.ClickException(f"calculation error: {exc}") from exc
        return

    time_input = TimeInput(hours=hours, days=days, weeks=weeks, months=months)
    if time_input.is_empty():
        click.echo(ctx.get_help())
        return

    try:
        result = calculator.calculate(time_input, currency)
    except BillingError as exc:
        raise click.ClickException(f"calculation error: {exc}") from exc

    click.echo(calculator.format_result(result), nl=False)


if __name__ == "__main__":
    cli()
