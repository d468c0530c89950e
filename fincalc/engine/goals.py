"""Retirement corpus projection and goal-based SIP solvers.

Pure functions. No I/O.
"""

import math

from scipy.optimize import brentq

from fincalc.config import settings
from fincalc.engine.errors import CalculationError, InvalidTenure
from fincalc.engine.interest import compound_amount, inflation_adjust
from fincalc.engine.rates import (
    annuity_due_factor,
    check_rate,
    check_tenure,
    monthly_rate,
    round_currency,
    round_ratio,
)
from fincalc.engine.sip import sip_totals, sip_future_value
from fincalc.models.plans import RetirementPlan
from fincalc.models.rates import CompoundingFrequency
from fincalc.models.results import CorpusResult, GoalResult, RetirementReadiness

MAX_STEP_UP_PERCENT = 100.0


def retirement_corpus(plan: RetirementPlan) -> CorpusResult:
    """Project savings and a monthly SIP forward to retirement.

    Current savings compound monthly; monthly savings are a level SIP.
    Retirement income assumes the configured safe withdrawal rate.
    """
    years = plan.years_to_retirement
    if years <= 0:
        raise InvalidTenure(
            f"retirement age ({plan.retirement_age}) must be after current age ({plan.current_age})"
        )

    savings_fv = compound_amount(
        plan.current_savings, plan.expected_return, years, CompoundingFrequency.MONTHLY
    )
    sip = sip_future_value(plan.monthly_savings, plan.expected_return, years)

    corpus = savings_fv + sip.future_value
    total_savings = plan.current_savings + sip.total_invested
    monthly_income = corpus * settings.safe_withdrawal_rate / 12

    return CorpusResult(
        retirement_corpus=round_currency(corpus),
        inflation_adjusted_corpus=round_currency(inflation_adjust(corpus, plan.inflation_rate, years)),
        total_savings=round_currency(total_savings),
        total_returns=round_currency(corpus - total_savings),
        monthly_income_in_retirement=round_currency(monthly_income),
    )


def retirement_readiness(plan: RetirementPlan) -> RetirementReadiness:
    """Compare the projected corpus with what the target expenses require.

    Required corpus = annual expenses / safe withdrawal rate (25x at 4%).
    """
    corpus = retirement_corpus(plan)
    annual_expenses = plan.monthly_expenses * 12
    required = annual_expenses / settings.safe_withdrawal_rate

    if plan.monthly_expenses > 0:
        coverage = corpus.monthly_income_in_retirement / plan.monthly_expenses
        years_covered = math.floor(corpus.retirement_corpus / annual_expenses)
    else:
        coverage = 0.0
        years_covered = 0

    return RetirementReadiness(
        corpus=corpus,
        required_corpus=round_currency(required),
        surplus=corpus.retirement_corpus - round_currency(required),
        income_coverage=round_ratio(coverage),
        years_covered=years_covered,
    )


def _goal_gap(
    goal_amount: float, years: float, rate_percent: float, current_savings: float
) -> tuple[float, float]:
    """(future value of current savings, amount still to be funded by the SIP)."""
    check_tenure(years)
    savings_fv = compound_amount(current_savings, rate_percent, years, CompoundingFrequency.MONTHLY)
    return savings_fv, max(0.0, goal_amount - savings_fv)


def goal_based_investment(
    goal_amount: float,
    years: float,
    rate_percent: float,
    current_savings: float = 0,
) -> GoalResult:
    """Monthly SIP needed to reach `goal_amount` in `years`.

    Existing savings compound monthly; the remaining gap is closed by an
    annuity-due SIP. At a zero rate the gap is simply split over the months.
    """
    savings_fv, gap = _goal_gap(goal_amount, years, rate_percent, current_savings)
    months = round(years * 12)

    required = 0.0
    if gap > 0:
        required = gap / annuity_due_factor(monthly_rate(rate_percent), months)

    return GoalResult(
        monthly_sip_required=round_currency(required),
        total_investment=round_currency(current_savings + required * months),
        future_value_of_current_savings=round_currency(savings_fv),
        remaining_goal=round_currency(gap),
    )


def goal_based_step_up_investment(
    goal_amount: float,
    years: float,
    rate_percent: float,
    step_up_percent: float,
    current_savings: float = 0,
) -> GoalResult:
    """Starting monthly SIP which, raised every year by `step_up_percent`, meets the goal.

    The future value is linear in the starting amount, so the answer is the
    gap divided by the future value of a unit stepped-up SIP.
    """
    check_rate(step_up_percent, "step-up")
    if step_up_percent == 0:
        return goal_based_investment(goal_amount, years, rate_percent, current_savings)

    savings_fv, gap = _goal_gap(goal_amount, years, rate_percent, current_savings)

    required = 0.0
    invested = 0.0
    if gap > 0:
        unit_invested, unit_fv = sip_totals(1.0, rate_percent, years, step_up_percent)
        required = gap / unit_fv
        invested = required * unit_invested

    return GoalResult(
        monthly_sip_required=round_currency(required),
        total_investment=round_currency(current_savings + invested),
        future_value_of_current_savings=round_currency(savings_fv),
        remaining_goal=round_currency(gap),
    )


def required_step_up(
    goal_amount: float,
    monthly_amount: float,
    years: float,
    rate_percent: float,
    current_savings: float = 0,
) -> float:
    """Annual step-up (%) that lets a given starting SIP reach the goal.

    Solved with Brent's method between 0% and MAX_STEP_UP_PERCENT. Raises
    CalculationError when even the maximum step-up falls short.
    """
    _, gap = _goal_gap(goal_amount, years, rate_percent, current_savings)
    if gap == 0:
        return 0.0
    if monthly_amount <= 0:
        raise CalculationError("monthly_amount must be positive to reach a goal with a SIP")

    def shortfall(step_up: float) -> float:
        return sip_totals(monthly_amount, rate_percent, years, step_up)[1] - gap

    if shortfall(0.0) >= 0:
        return 0.0
    if shortfall(MAX_STEP_UP_PERCENT) < 0:
        raise CalculationError(
            f"goal of {goal_amount:,.0f} is out of reach even with a "
            f"{MAX_STEP_UP_PERCENT:.0f}% annual step-up"
        )

    step_up = brentq(shortfall, 0.0, MAX_STEP_UP_PERCENT, xtol=1e-8, maxiter=1000)
    return round_ratio(step_up)
