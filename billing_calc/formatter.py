"""Output helpers for the billing calculator.

This module renders calculation results and rate tables as plain text. The
functions build and return strings instead of printing them, so the command
line layer decides where the text goes. Report labels are in Spanish and money
values are always shown with two decimals.
"""

from __future__ import annotations

from typing import List

from .config import RateConfig
from .data_models import CalculationResult, MonthSpecifier


def money(currency: str, amount: float) -> str:
    return f"{currency} {amount:.2f}"


def format_result(result: CalculationResult, config: RateConfig) -> str:
    """Render a calculation result as a time breakdown followed by a summary.

    Breakdown lines for months, weeks, days and additional hours are only
    included when the corresponding input contributed something.
    """
    lines: List[str] = [
        "=== CÁLCULO DE FACTURACIÓN ===",
        "",
        "Desglose de tiempo trabajado:",
    ]
    if result.month_details:
        parts = ", ".join(f"{m.raw_input} ({m.day_count} días)" for m in result.month_details)
        month_days = result.month_days
        lines.append(
            f"  Meses: {parts} = {month_days} días × {config.hours_per_day} horas"
            f" = {month_days * config.hours_per_day} horas"
        )
    if result.total_weeks > 0:
        lines.append(
            f"  Semanas: {result.total_weeks} × {config.weekly_hours} horas"
            f" = {result.total_weeks * config.weekly_hours} horas"
        )
    if result.total_days > 0:
        lines.append(
            f"  Días: {result.total_days} × {config.hours_per_day} horas"
            f" = {result.total_days * config.hours_per_day} horas"
        )
    if result.total_hours > 0:
        lines.append(f"  Horas adicionales: {result.total_hours} horas")
    lines.extend(
        [
            "",
            "RESUMEN:",
            f"  Total de horas: {result.total_time}",
            f"  Tarifa por hora: {money(result.currency, config.hourly_rate)}",
            f"  TOTAL A FACTURAR: {money(result.currency, result.total_amount)}",
        ]
    )
    return "\n".join(lines) + "\n"


def format_rates(config: RateConfig, currency: str) -> str:
    """Render the base configuration and the four derived rates."""
    rates = config.rates
    lines = [
        "=== TABLA DE TARIFAS ===",
        "",
        "Configuración base:",
        f"  Salario mensual: {money(currency, config.monthly_salary)}",
        f"  Horas semanales: {config.weekly_hours}",
        f"  Días laborales: {config.work_days}",
        f"  Horas por día: {config.hours_per_day}",
        f"  Moneda: {currency}",
        "",
        "Tarifas calculadas:",
        f"  Por hora: {money(currency, rates.hourly_rate)}",
        f"  Por día: {money(currency, rates.daily_rate)}",
        f"  Por semana: {money(currency, rates.weekly_rate)}",
        f"  Por mes: {money(currency, config.monthly_salary)}",
        "",
    ]
    return "\n".join(lines) + "\n"


def format_month_summary(month: MonthSpecifier, config: RateConfig, currency: str) -> str:
    hours = month.day_count * config.hours_per_day
    amount = hours * config.hourly_rate
    return (
        f"{month.raw_input}: {month.day_count} días × {config.hours_per_day} horas"
        f" = {hours} horas → {money(currency, amount)}"
    )
