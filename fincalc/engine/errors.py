"""Error kinds raised by the calculation engine.

All subclass ValueError; the API maps them to HTTP 400.
"""


class CalculationError(ValueError):
    """Base class for invalid calculator inputs."""


class InvalidRate(CalculationError):
    """Negative interest, return or inflation rate."""


class InvalidTenure(CalculationError):
    """Zero or negative horizon (years, months, or retirement window)."""


class InvalidFrequency(CalculationError):
    """Compounding frequency outside monthly/quarterly/yearly."""
