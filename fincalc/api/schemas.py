"""Pydantic schemas for API request/response models.

Rates are annual percentages (8.5 = 8.5%). Responses mirror the engine's
result records field for field.
"""

from pydantic import BaseModel, ConfigDict, Field


# ---- Request schemas ----

class InterestRequest(BaseModel):
    principal: float = Field(..., ge=0)
    rate: float = Field(..., ge=0, description="Annual rate, %")
    years: float = Field(..., gt=0)
    frequency: str = Field("yearly", description="monthly | quarterly | yearly")
    inflation_rate: float = Field(0, ge=0)


class FixedDepositRequest(InterestRequest):
    frequency: str = Field("quarterly", description="monthly | quarterly | yearly")


class SIPRequest(BaseModel):
    monthly_amount: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0)
    years: float = Field(..., gt=0)
    step_up_percent: float = Field(0, ge=0)


class SIPPlanRequest(SIPRequest):
    lump_sum: float = Field(0, ge=0)
    inflation_rate: float = Field(0, ge=0)


class EMIRequest(BaseModel):
    loan_amount: float = Field(..., ge=0)
    annual_rate: float = Field(..., ge=0)
    tenure_years: int = Field(..., gt=0)
    processing_fee: float = Field(0, ge=0)
    insurance: float = Field(0, ge=0)


class VariableRate(BaseModel):
    year: int = Field(..., ge=0, description="0-based loan year")
    rate: float = Field(..., ge=0)


class ScheduleRequest(EMIRequest):
    prepayment_amount: float = Field(0, ge=0)
    prepayment_month: int = Field(0, ge=0, description="1-based month, 0 = none")
    inflation_rate: float = Field(0, ge=0)
    loan_type: str = Field("home", description="home | personal | car | education")
    tax_section: str = Field("none", description="24b | 80c | none")
    variable_rates: list[VariableRate] = []


class AffordabilityRequest(BaseModel):
    monthly_income: float = Field(..., ge=0)
    existing_emis: float = Field(0, ge=0)
    annual_rate: float | None = Field(None, ge=0)
    tenure_years: float | None = Field(None, gt=0)
    max_dti_ratio: float | None = Field(None, gt=0, le=1)


class RetirementRequest(BaseModel):
    current_age: int = Field(..., ge=0)
    retirement_age: int = Field(..., gt=0)
    current_savings: float = Field(0, ge=0)
    monthly_savings: float = Field(0, ge=0)
    expected_return: float = Field(..., ge=0)
    inflation_rate: float = Field(0, ge=0)
    monthly_expenses: float = Field(0, ge=0)


class GoalRequest(BaseModel):
    goal_amount: float = Field(..., ge=0)
    years: float = Field(..., gt=0)
    expected_return: float = Field(..., ge=0)
    current_savings: float = Field(0, ge=0)
    step_up_percent: float = Field(0, ge=0)


class StepUpRequest(BaseModel):
    goal_amount: float = Field(..., ge=0)
    monthly_amount: float = Field(..., ge=0)
    years: float = Field(..., gt=0)
    expected_return: float = Field(..., ge=0)
    current_savings: float = Field(0, ge=0)


# ---- Response schemas ----

class _FromEngine(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class InterestComparisonResponse(_FromEngine):
    simple_amount: int
    simple_interest: int
    compound_amount: int
    compound_interest: int
    effective_annual_rate: float
    compounding_advantage: float
    inflation_adjusted_simple: int
    inflation_adjusted_compound: int


class DepositMaturityResponse(_FromEngine):
    maturity_amount: int
    total_interest: int
    effective_annual_yield: float
    inflation_adjusted_maturity: int


class FutureValueResponse(_FromEngine):
    total_invested: int
    future_value: int
    total_returns: int


class SIPPlanResponse(_FromEngine):
    sip: FutureValueResponse
    lump_sum_future_value: int
    total_invested: int
    future_value: int
    total_returns: int
    inflation_adjusted_value: int


class EMIResponse(_FromEngine):
    emi: int
    total_interest: int
    total_amount: int
    effective_principal: int


class AmortizationEntryResponse(_FromEngine):
    month: int
    principal: int
    interest: int
    balance: int
    emi: int
    inflation_adjusted_emi: int
    real_interest: int
    tax_benefit: int
    cumulative_interest: int


class YearlyLoanSummaryResponse(_FromEngine):
    year: int
    principal: int
    interest: int
    total_paid: int
    tax_benefit: int
    ending_balance: int


class AdvancedMetricsResponse(_FromEngine):
    total_tax_benefits: int
    total_interest: int
    total_principal: int
    total_emi: int
    effective_interest_rate: float
    real_cost_of_loan: int
    inflation_adjusted_total_cost: int
    average_monthly_emi: int
    interest_to_principal_ratio: float


class ScheduleResponse(BaseModel):
    emi: int
    effective_principal: int
    months: int
    annual_percentage_rate: float
    entries: list[AmortizationEntryResponse]
    yearly: list[YearlyLoanSummaryResponse]
    metrics: AdvancedMetricsResponse


class AffordabilityResponse(_FromEngine):
    max_emi: int
    max_loan_amount: int
    recommended_emi: int
    recommended_loan_amount: int


class CorpusResponse(_FromEngine):
    retirement_corpus: int
    inflation_adjusted_corpus: int
    total_savings: int
    total_returns: int
    monthly_income_in_retirement: int


class RetirementResponse(_FromEngine):
    corpus: CorpusResponse
    required_corpus: int
    surplus: int
    income_coverage: float
    years_covered: int


class GoalResponse(_FromEngine):
    monthly_sip_required: int
    total_investment: int
    future_value_of_current_savings: int
    remaining_goal: int


class StepUpResponse(BaseModel):
    step_up_percent: float
