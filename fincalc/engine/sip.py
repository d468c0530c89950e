"""Future value of systematic investment plans (SIPs).

Contributions are made at the start of each month (annuity-due), matching
how mutual-fund SIPs are debited.

Pure functions. No I/O.
"""

from fincalc.engine.interest import inflation_adjust, lump_sum_future_value
from fincalc.engine.rates import (
    annuity_due_factor,
    check_horizon,
    check_rate,
    monthly_rate,
    round_currency,
)
from fincalc.models.plans import SIPPlan
from fincalc.models.results import FutureValueResult, SIPPlanResult


def sip_totals(
    monthly_amount: float,
    annual_rate_percent: float,
    years: float,
    step_up_percent: float = 0,
) -> tuple[float, float]:
    """Unrounded (total_invested, future_value)."""
    check_horizon(years)
    m = monthly_rate(annual_rate_percent)
    months = round(years * 12)

    if step_up_percent == 0:
        return monthly_amount * months, monthly_amount * annuity_due_factor(m, months)

    # Each year's block of 12 payments compounds until the end of the horizon
    step_up = step_up_percent / 100
    contribution = monthly_amount
    total_invested = 0.0
    future_value = 0.0
    start = 0
    while start < months:
        remaining = months - start
        months_in_year = min(12, remaining)
        total_invested += contribution * months_in_year
        future_value += contribution * annuity_due_factor(m, remaining)
        contribution *= 1 + step_up
        start += 12

    return total_invested, future_value


def sip_future_value(
    monthly_amount: float,
    annual_rate_percent: float,
    years: float,
    step_up_percent: float = 0,
) -> FutureValueResult:
    """Future value of a monthly SIP, optionally stepped up every year.

    Without step-up: FV = P * ((1+m)^M - 1)/m * (1+m), m = rate/1200, M = years*12.

    With step-up, year k (0-based) contributes P*(1+s)^k per month, and the
    whole stream for that year is valued as an annuity-due over the months
    left until the horizon.
    """
    check_rate(step_up_percent, "step-up")
    invested, future_value = sip_totals(
        monthly_amount, annual_rate_percent, years, step_up_percent
    )
    return FutureValueResult(
        total_invested=round_currency(invested),
        future_value=round_currency(future_value),
        total_returns=round_currency(future_value - invested),
    )


def sip_plan_future_value(plan: SIPPlan) -> SIPPlanResult:
    """SIP plus an optional lump sum invested on day one."""
    sip = sip_future_value(plan.monthly_amount, plan.annual_rate, plan.years, plan.step_up_percent)

    lump_sum_fv = 0
    if plan.lump_sum > 0:
        lump_sum_fv = lump_sum_future_value(plan.lump_sum, plan.annual_rate, plan.years)

    total_invested = sip.total_invested + round_currency(plan.lump_sum)
    future_value = sip.future_value + lump_sum_fv

    return SIPPlanResult(
        sip=sip,
        lump_sum_future_value=lump_sum_fv,
        total_invested=total_invested,
        future_value=future_value,
        total_returns=future_value - total_invested,
        inflation_adjusted_value=round_currency(
            inflation_adjust(future_value, plan.inflation_rate, plan.years)
        ),
    )
