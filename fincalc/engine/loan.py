"""EMI, amortization schedule and affordability for reducing-balance loans.

Pure functions: dataclasses in, dataclasses out. No I/O.
"""

import logging

from scipy.optimize import brentq

from fincalc.config import settings
from fincalc.engine.rates import (
    check_rate,
    check_tenure,
    monthly_rate,
    present_value_factor,
    round_currency,
    round_ratio,
)
from fincalc.engine.tax_benefit import TaxBenefitPolicy, default_tax_policy
from fincalc.models.loan import AmortizationEntry, AmortizationSchedule, LoanTerms
from fincalc.models.results import AffordabilityResult, EMIResult, YearlyLoanSummary

logger = logging.getLogger(__name__)

# Balances below half a paisa are treated as repaid
BALANCE_EPSILON = 0.005


def _payment(principal: float, rate: float, months: int) -> float:
    """Unrounded level payment amortizing `principal` over `months`."""
    if rate == 0:
        return principal / months
    # EMI = P * r(1+r)^n / ((1+r)^n - 1)
    factor = (1 + rate) ** months
    return principal * rate * factor / (factor - 1)


def emi(
    principal: float,
    annual_rate_percent: float,
    years: float,
    fees: float = 0,
    insurance: float = 0,
) -> EMIResult:
    """Equated monthly installment on principal plus financed fees and insurance.

    Totals are based on the whole-unit EMI actually debited each month. At a
    zero rate nothing beyond the principal is repaid.
    """
    check_rate(annual_rate_percent)
    check_tenure(years)
    months = round(years * 12)
    effective_principal = principal + fees + insurance
    r = monthly_rate(annual_rate_percent)

    payment = _payment(effective_principal, r, months)
    if r == 0:
        total_amount = effective_principal
    else:
        total_amount = round_currency(payment) * months

    return EMIResult(
        emi=round_currency(payment),
        total_interest=round_currency(total_amount - effective_principal),
        total_amount=round_currency(total_amount),
        effective_principal=round_currency(effective_principal),
    )


def amortization_schedule(
    terms: LoanTerms,
    tax_policy: TaxBenefitPolicy | None = None,
) -> AmortizationSchedule:
    """Simulate the loan month by month.

    Year-specific rates in `terms.variable_rates` change the interest charged
    but not the EMI. In the prepayment month the lump sum comes off the
    balance; if it exceeds the configured fraction of what is left, that
    month's installment is recomputed over the remaining months. The regular
    EMI resumes afterwards, so any prepayment shortens the tenure and the
    schedule stops once the balance is repaid. A prepayment covering the
    whole balance closes the loan in that month.

    Every entry reports the nominal EMI; `principal` is the part of the
    installment actually paid that month.
    """
    check_rate(terms.annual_rate)
    check_tenure(terms.tenure_years, "tenure_years")
    for year, rate in terms.variable_rates.items():
        check_rate(rate, f"rate for year {year}")

    policy = tax_policy or default_tax_policy()
    months = terms.months
    payment = _payment(terms.effective_principal, monthly_rate(terms.annual_rate), months)
    nominal_emi = round_currency(payment)
    monthly_inflation = terms.inflation_rate / 100 / 12
    prepayment = terms.prepayment

    entries: list[AmortizationEntry] = []
    balance = terms.effective_principal
    cumulative_interest = 0.0

    for month in range(1, months + 1):
        r = monthly_rate(terms.rate_for_month(month))
        interest = balance * r
        paid = payment

        if prepayment and prepayment.month == month and prepayment.amount > 0:
            amount = min(prepayment.amount, balance)
            balance -= amount
            remaining = months - month
            if balance <= BALANCE_EPSILON:
                # Only the month's interest is still owed
                paid = interest
                logger.debug("Prepayment of %.2f in month %d clears the loan", amount, month)
            elif amount > balance * settings.prepayment_recompute_threshold and remaining > 0:
                paid = _payment(balance, r, remaining)
                logger.debug(
                    "Prepayment of %.2f in month %d: installment recomputed to %.2f over %d months",
                    amount, month, paid, remaining,
                )

        principal_paid = paid - interest
        balance -= principal_paid
        cumulative_interest += interest

        inflation_adjusted_emi = payment / (1 + monthly_inflation) ** (month - 1)
        real_rate = (1 + r) / (1 + monthly_inflation) - 1
        real_interest = balance * real_rate if balance > 0 else 0.0
        tax_benefit = policy.benefit(interest, principal_paid, terms.loan_type, terms.tax_section)

        entries.append(AmortizationEntry(
            month=month,
            principal=round_currency(principal_paid),
            interest=round_currency(interest),
            balance=max(0, round_currency(balance)),
            emi=nominal_emi,
            inflation_adjusted_emi=round_currency(inflation_adjusted_emi),
            real_interest=round_currency(real_interest),
            tax_benefit=round_currency(tax_benefit),
            cumulative_interest=round_currency(cumulative_interest),
        ))

        if balance <= BALANCE_EPSILON:
            if month < months:
                logger.debug("Loan repaid in month %d of %d", month, months)
            break

    return AmortizationSchedule(
        entries=entries,
        emi=nominal_emi,
        effective_principal=round_currency(terms.effective_principal),
    )


def yearly_loan_summary(schedule: AmortizationSchedule) -> list[YearlyLoanSummary]:
    """Aggregate a monthly schedule by loan year."""
    yearly: list[YearlyLoanSummary] = []
    year_principal = 0
    year_interest = 0
    year_paid = 0
    year_tax_benefit = 0

    for i, entry in enumerate(schedule.entries, start=1):
        year_principal += entry.principal
        year_interest += entry.interest
        year_paid += entry.principal + entry.interest
        year_tax_benefit += entry.tax_benefit

        if entry.month % 12 == 0 or i == len(schedule.entries):
            yearly.append(YearlyLoanSummary(
                year=(entry.month - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                total_paid=year_paid,
                tax_benefit=year_tax_benefit,
                ending_balance=entry.balance,
            ))
            year_principal = 0
            year_interest = 0
            year_paid = 0
            year_tax_benefit = 0

    return yearly


def loan_affordability(
    monthly_income: float,
    existing_emis: float = 0,
    annual_rate_percent: float | None = None,
    years: float | None = None,
    max_dti: float | None = None,
) -> AffordabilityResult:
    """Largest loan serviceable within a debt-to-income ceiling.

    max EMI = income * max_dti - existing EMIs; the recommended EMI uses the
    more conservative recommended ratio. Each EMI is converted back into a
    principal with the inverse annuity formula.
    """
    rate = settings.default_loan_rate if annual_rate_percent is None else annual_rate_percent
    years = settings.default_loan_tenure_years if years is None else years
    max_dti = settings.max_dti_ratio if max_dti is None else max_dti
    check_rate(rate)
    check_tenure(years)

    r = monthly_rate(rate)
    months = round(years * 12)

    max_emi = max(0.0, monthly_income * max_dti - existing_emis)
    recommended_emi = max(0.0, monthly_income * settings.recommended_dti_ratio - existing_emis)
    if max_emi == 0:
        logger.warning(
            "Existing EMIs of %.2f leave no headroom on income of %.2f", existing_emis, monthly_income
        )

    factor = present_value_factor(r, months)
    return AffordabilityResult(
        max_emi=round_currency(max_emi),
        max_loan_amount=round_currency(max_emi * factor),
        recommended_emi=round_currency(recommended_emi),
        recommended_loan_amount=round_currency(recommended_emi * factor),
    )


def annual_percentage_rate(terms: LoanTerms) -> float:
    """Annual rate (%) the borrower actually pays once fees are financed.

    Solves principal = EMI * PV-factor(x, n) for the monthly rate x, where the
    EMI is computed on principal + fees + insurance but only `principal` is
    disbursed. Uses Brent's method; returns 0 when no rate fits.
    """
    check_rate(terms.annual_rate)
    check_tenure(terms.tenure_years, "tenure_years")
    if terms.principal <= 0:
        return 0.0

    months = terms.months
    payment = _payment(terms.effective_principal, monthly_rate(terms.annual_rate), months)

    def shortfall(x: float) -> float:
        return payment * present_value_factor(x, months) - terms.principal

    if shortfall(0.0) <= 0:
        return 0.0

    # Search between 0% and 1200% a year
    try:
        x = brentq(shortfall, 0.0, 1.0, xtol=1e-12, maxiter=1000)
    except ValueError:
        return 0.0
    return round_ratio(x * 12 * 100)
