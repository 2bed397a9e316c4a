"""Tests for the rate configuration."""

import pytest

from billing_calc.config import RateConfig, derive_rates
from billing_calc.errors import InvalidConfig


class TestDefaults:
    def test_base_fields(self, config):
        assert config.monthly_salary == 2200.0
        assert config.weekly_hours == 40
        assert config.work_days == 5
        assert config.hours_per_day == 8
        assert config.weeks_per_month == 4
        assert config.default_currency == "U$S"

    def test_derived_rates(self, config):
        assert config.monthly_hours == 160
        assert config.hourly_rate == pytest.approx(13.75)
        assert config.daily_rate == pytest.approx(110.0)
        assert config.weekly_rate == pytest.approx(550.0)

    def test_default_config_is_valid(self, config):
        config.validate()

    def test_configs_are_independent(self):
        first = RateConfig.create()
        second = RateConfig.create()
        first.set_monthly_salary(4400.0)
        assert second.hourly_rate == pytest.approx(13.75)


class TestSetters:
    def test_set_monthly_salary_recomputes(self, config):
        config.set_monthly_salary(3200.0)
        assert config.hourly_rate == pytest.approx(20.0)
        assert config.daily_rate == pytest.approx(160.0)
        assert config.weekly_rate == pytest.approx(800.0)

    def test_set_weekly_hours_recomputes(self, config):
        config.set_weekly_hours(20)
        assert config.monthly_hours == 80
        assert config.hourly_rate == pytest.approx(27.5)
        assert config.weekly_rate == pytest.approx(550.0)

    def test_set_hours_per_day_recomputes(self, config):
        config.set_hours_per_day(6)
        assert config.hourly_rate == pytest.approx(13.75)
        assert config.daily_rate == pytest.approx(82.5)

    @pytest.mark.parametrize("value", [0, -1, -2200.0])
    def test_set_monthly_salary_rejects_non_positive(self, config, value):
        with pytest.raises(InvalidConfig, match="monthly salary must be positive"):
            config.set_monthly_salary(value)
        assert config.monthly_salary == 2200.0

    @pytest.mark.parametrize("value", [0, -40])
    def test_set_weekly_hours_rejects_non_positive(self, config, value):
        with pytest.raises(InvalidConfig, match="weekly hours must be positive"):
            config.set_weekly_hours(value)
        assert config.weekly_hours == 40

    @pytest.mark.parametrize("value", [0, -8])
    def test_set_hours_per_day_rejects_non_positive(self, config, value):
        with pytest.raises(InvalidConfig, match="hours per day must be positive"):
            config.set_hours_per_day(value)
        assert config.hours_per_day == 8


class TestValidate:
    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("monthly_salary", 0.0, "monthly salary"),
            ("weekly_hours", 0, "weekly hours"),
            ("hours_per_day", -1, "hours per day"),
            ("work_days", 0, "work days"),
            ("weeks_per_month", 0, "weeks per month"),
            ("default_currency", "", "default currency"),
        ],
    )
    def test_reports_violated_field(self, config, field, value, message):
        setattr(config, field, value)
        with pytest.raises(InvalidConfig, match=message):
            config.validate()

    def test_first_violation_wins(self, config):
        config.monthly_salary = -1.0
        config.default_currency = ""
        with pytest.raises(InvalidConfig, match="monthly salary"):
            config.validate()


class TestDeriveRates:
    def test_pure_function(self, config):
        rates = derive_rates(config)
        assert rates.hourly_rate == pytest.approx(13.75)
        assert rates == derive_rates(config)

    def test_zero_monthly_hours(self, config):
        config.weeks_per_month = 0
        with pytest.raises(InvalidConfig, match="monthly hours"):
            derive_rates(config)


class TestOverrides:
    def test_no_overrides_matches_defaults(self):
        assert RateConfig.from_overrides() == RateConfig.create()

    def test_overrides_applied(self):
        config = RateConfig.from_overrides(
            monthly_salary=3000.0, weekly_hours=30, hours_per_day=6
        )
        assert config.monthly_hours == 120
        assert config.hourly_rate == pytest.approx(25.0)
        assert config.default_currency == "U$S"

    def test_invalid_override_raises(self):
        with pytest.raises(InvalidConfig):
            RateConfig.from_overrides(weekly_hours=0)


def test_str(config):
    assert str(config) == (
        "RateConfig(monthly_salary=2200.00, weekly_hours=40, hours_per_day=8, currency=U$S)"
    )
