"""Result records returned by the engine.

Monetary fields are whole currency units (rounded half-up); rates and
ratios carry two decimals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InterestComparison:
    simple_amount: int
    simple_interest: int
    compound_amount: int
    compound_interest: int
    effective_annual_rate: float  # % p.a. of the compound path
    compounding_advantage: float  # Percentage points over the nominal rate
    inflation_adjusted_simple: int = 0
    inflation_adjusted_compound: int = 0


@dataclass(frozen=True)
class DepositMaturity:
    maturity_amount: int
    total_interest: int
    effective_annual_yield: float
    inflation_adjusted_maturity: int


@dataclass(frozen=True)
class FutureValueResult:
    total_invested: int
    future_value: int
    total_returns: int


@dataclass(frozen=True)
class SIPPlanResult:
    sip: FutureValueResult
    lump_sum_future_value: int
    total_invested: int
    future_value: int
    total_returns: int
    inflation_adjusted_value: int


@dataclass(frozen=True)
class EMIResult:
    emi: int
    total_interest: int
    total_amount: int
    effective_principal: int


@dataclass(frozen=True)
class AffordabilityResult:
    max_emi: int
    max_loan_amount: int
    recommended_emi: int
    recommended_loan_amount: int


@dataclass(frozen=True)
class YearlyLoanSummary:
    year: int
    principal: int
    interest: int
    total_paid: int
    tax_benefit: int
    ending_balance: int


@dataclass(frozen=True)
class CorpusResult:
    retirement_corpus: int
    inflation_adjusted_corpus: int
    total_savings: int
    total_returns: int
    monthly_income_in_retirement: int


@dataclass(frozen=True)
class RetirementReadiness:
    corpus: CorpusResult
    required_corpus: int
    surplus: int  # Negative = shortfall
    income_coverage: float  # Retirement income / monthly expenses
    years_covered: int  # Whole years of expenses the corpus funds, no growth


@dataclass(frozen=True)
class GoalResult:
    monthly_sip_required: int
    total_investment: int
    future_value_of_current_savings: int
    remaining_goal: int = 0


@dataclass(frozen=True)
class AdvancedMetrics:
    total_tax_benefits: int
    total_interest: int
    total_principal: int
    total_emi: int
    effective_interest_rate: float  # Interest as % of principal repaid
    real_cost_of_loan: int  # Interest net of tax benefits
    inflation_adjusted_total_cost: int
    average_monthly_emi: int
    interest_to_principal_ratio: float
