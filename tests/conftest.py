"""Shared fixtures for the billing calculator tests."""

import pytest

from billing_calc.config import RateConfig
from billing_calc.engine import BillingCalculator

# Month specifiers without a year resolve against this, so results never
# depend on the date the suite runs.
REFERENCE_YEAR = 2024


@pytest.fixture
def config():
    return RateConfig.create()


@pytest.fixture
def calculator(config):
    return BillingCalculator(config, reference_year=REFERENCE_YEAR)
