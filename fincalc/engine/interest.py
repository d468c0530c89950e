"""Simple, compound and inflation-adjusted growth of a single amount.

Rates are annual percentages (8.5 means 8.5%). Pure functions. No I/O.
"""

from fincalc.engine.rates import (
    check_horizon,
    check_rate,
    check_tenure,
    parse_frequency,
    round_currency,
    round_ratio,
)
from fincalc.models.rates import CompoundingFrequency, RateSpec
from fincalc.models.results import DepositMaturity, InterestComparison


def simple_interest_amount(principal: float, rate_percent: float, years: float) -> float:
    """Principal plus simple interest: P * (1 + r*t/100)."""
    check_rate(rate_percent)
    return principal * (1 + rate_percent * years / 100)


def compound_amount(
    principal: float,
    rate_percent: float,
    years: float,
    frequency: CompoundingFrequency | str = CompoundingFrequency.YEARLY,
) -> float:
    """Principal compounded n times a year: P * (1 + r/n)^(n*t)."""
    check_rate(rate_percent)
    spec = RateSpec(rate_percent, parse_frequency(frequency))
    return principal * (1 + spec.periodic_rate) ** (spec.periods_per_year * years)


def inflation_adjust(future_value: float, inflation_percent: float, years: float) -> float:
    """Express a future amount in today's money."""
    check_rate(inflation_percent, "inflation rate")
    return future_value / (1 + inflation_percent / 100) ** years


def lump_sum_future_value(amount: float, rate_percent: float, years: float) -> int:
    """One-time investment compounded yearly."""
    check_rate(rate_percent)
    check_horizon(years)
    return round_currency(amount * (1 + rate_percent / 100) ** years)


def effective_annual_rate(start: float, end: float, years: float) -> float:
    """Annualized growth (%) turning `start` into `end` over `years`."""
    if start <= 0 or years <= 0:
        return 0.0
    return ((end / start) ** (1 / years) - 1) * 100


def compare_interest(
    principal: float,
    rate_percent: float,
    years: float,
    frequency: CompoundingFrequency | str = CompoundingFrequency.YEARLY,
    inflation_rate: float = 0,
) -> InterestComparison:
    """Side-by-side simple vs compound growth of the same deposit."""
    simple = simple_interest_amount(principal, rate_percent, years)
    compound = compound_amount(principal, rate_percent, years, frequency)
    effective = effective_annual_rate(principal, compound, years)

    return InterestComparison(
        simple_amount=round_currency(simple),
        simple_interest=round_currency(simple - principal),
        compound_amount=round_currency(compound),
        compound_interest=round_currency(compound - principal),
        effective_annual_rate=round_ratio(effective),
        compounding_advantage=round_ratio(effective - rate_percent) if effective else 0.0,
        inflation_adjusted_simple=round_currency(inflation_adjust(simple, inflation_rate, years)),
        inflation_adjusted_compound=round_currency(
            inflation_adjust(compound, inflation_rate, years)
        ),
    )


def fixed_deposit_maturity(
    principal: float,
    rate_percent: float,
    years: float,
    frequency: CompoundingFrequency | str = CompoundingFrequency.QUARTERLY,
    inflation_rate: float = 0,
) -> DepositMaturity:
    """Maturity of a fixed deposit. Banks compound quarterly by default."""
    check_tenure(years)
    maturity = compound_amount(principal, rate_percent, years, frequency)

    return DepositMaturity(
        maturity_amount=round_currency(maturity),
        total_interest=round_currency(maturity - principal),
        effective_annual_yield=round_ratio(effective_annual_rate(principal, maturity, years)),
        inflation_adjusted_maturity=round_currency(
            inflation_adjust(maturity, inflation_rate, years)
        ),
    )
