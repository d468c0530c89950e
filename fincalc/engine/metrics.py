"""Summary ratios derived from an amortization schedule.

Pure functions. No I/O.
"""

from collections.abc import Iterable

from fincalc.engine.interest import inflation_adjust
from fincalc.engine.rates import round_currency, round_ratio
from fincalc.models.loan import AmortizationEntry
from fincalc.models.results import AdvancedMetrics


def advanced_loan_metrics(
    schedule: Iterable[AmortizationEntry],
    inflation_rate: float = 0,
) -> AdvancedMetrics:
    """Totals and cost ratios over a (possibly shortened) schedule.

    Every ratio is 0 when its denominator is 0. Tax benefits are summed as
    the schedule reports them; the loan type is already applied per entry
    by the tax policy.
    """
    entries = list(schedule)
    total_tax_benefits = sum(e.tax_benefit for e in entries)
    total_interest = sum(e.interest for e in entries)
    total_principal = sum(e.principal for e in entries)
    total_emi = sum(e.emi for e in entries)

    effective_rate = total_interest / total_principal * 100 if total_principal > 0 else 0.0
    ratio = total_interest / total_principal if total_principal > 0 else 0.0
    average_emi = total_emi / len(entries) if entries else 0.0

    inflation_adjusted = total_emi
    if inflation_rate > 0:
        inflation_adjusted = inflation_adjust(total_emi, inflation_rate, len(entries) / 12)

    return AdvancedMetrics(
        total_tax_benefits=total_tax_benefits,
        total_interest=total_interest,
        total_principal=total_principal,
        total_emi=total_emi,
        effective_interest_rate=round_ratio(effective_rate),
        real_cost_of_loan=total_interest - total_tax_benefits,
        inflation_adjusted_total_cost=round_currency(inflation_adjusted),
        average_monthly_emi=round_currency(average_emi),
        interest_to_principal_ratio=round_ratio(ratio),
    )
