"""Errors raised by the billing calculator.

All errors derive from ``BillingError`` (itself a ``ValueError``) so callers
can catch the whole family at once. Every error is a terminal validation
failure: nothing is retried and no partial result is produced.
"""


class BillingError(ValueError):
    """Base class for every billing calculator error."""


class InvalidConfig(BillingError):
    """A base configuration field violates its invariant."""


class InvalidFormat(BillingError):
    """A month specifier matches neither ``MM`` nor ``YYYY-MM``."""


class InvalidMonth(BillingError):
    """A month specifier has the right shape but a month outside 1-12."""


class InvalidInput(BillingError):
    """Negative hours, days or weeks were supplied."""
