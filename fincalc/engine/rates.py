"""Rate and frequency primitives shared by every calculator.

Every formula that divides by a periodic rate goes through the factor
helpers here, each of which has an explicit zero-rate branch.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from fincalc.engine.errors import InvalidFrequency, InvalidRate, InvalidTenure
from fincalc.models.rates import PERIODS_PER_YEAR, CompoundingFrequency

WHOLE_UNITS = Decimal("1")
TWO_PLACES = Decimal("0.01")


def round_currency(amount: float) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(Decimal(str(amount)).quantize(WHOLE_UNITS, ROUND_HALF_UP))


def round_ratio(value: float) -> float:
    return float(Decimal(str(value)).quantize(TWO_PLACES, ROUND_HALF_UP))


def parse_frequency(frequency: CompoundingFrequency | str) -> CompoundingFrequency:
    if isinstance(frequency, CompoundingFrequency):
        return frequency
    try:
        return CompoundingFrequency(frequency)
    except ValueError:
        raise InvalidFrequency(
            f"Unknown compounding frequency {frequency!r}; "
            f"expected one of {[f.value for f in CompoundingFrequency]}"
        ) from None


def periods_per_year(frequency: CompoundingFrequency | str) -> int:
    return PERIODS_PER_YEAR[parse_frequency(frequency)]


def check_rate(annual_rate_percent: float, name: str = "rate") -> None:
    if annual_rate_percent < 0:
        raise InvalidRate(f"{name} must be non-negative, got {annual_rate_percent}")


def check_tenure(years: float, name: str = "years") -> None:
    if years <= 0:
        raise InvalidTenure(f"{name} must be positive, got {years}")


def check_horizon(years: float, name: str = "years") -> None:
    """Like check_tenure, but a zero horizon is allowed and grows nothing."""
    if years < 0:
        raise InvalidTenure(f"{name} must be non-negative, got {years}")


def periodic_rate(annual_rate_percent: float, periods: int) -> float:
    """Convert an annual percentage rate into a per-period decimal rate."""
    check_rate(annual_rate_percent)
    if periods <= 0:
        raise InvalidFrequency(f"periods per year must be positive, got {periods}")
    return annual_rate_percent / 100 / periods


def monthly_rate(annual_rate_percent: float) -> float:
    return periodic_rate(annual_rate_percent, 12)


def annuity_factor(rate: float, periods: float) -> float:
    """Future value of 1 paid at the end of each of `periods` periods.

    ((1 + r)^n - 1) / r, or n when r == 0.
    """
    if rate == 0:
        return periods
    return ((1 + rate) ** periods - 1) / rate


def annuity_due_factor(rate: float, periods: float) -> float:
    """Future value of 1 paid at the start of each period."""
    return annuity_factor(rate, periods) * (1 + rate)


def present_value_factor(rate: float, periods: float) -> float:
    """Present value of 1 paid at the end of each period.

    Loan principal = payment * factor; payment = principal / factor.
    """
    if rate == 0:
        return periods
    growth = (1 + rate) ** periods
    return (growth - 1) / (rate * growth)
