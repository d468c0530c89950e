"""Loan routes: EMI, full amortization schedule and affordability."""

from fastapi import APIRouter, HTTPException

from fincalc.api.schemas import (
    AdvancedMetricsResponse,
    AffordabilityRequest,
    AffordabilityResponse,
    AmortizationEntryResponse,
    EMIRequest,
    EMIResponse,
    ScheduleRequest,
    ScheduleResponse,
    YearlyLoanSummaryResponse,
)
from fincalc.engine.loan import (
    amortization_schedule,
    annual_percentage_rate,
    emi,
    loan_affordability,
    yearly_loan_summary,
)
from fincalc.engine.metrics import advanced_loan_metrics
from fincalc.models.loan import LoanTerms, LoanType, Prepayment, TaxSection

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def _build_terms(req: ScheduleRequest) -> LoanTerms:
    """Convert request data into engine loan terms."""
    prepayment = None
    if req.prepayment_amount > 0 and req.prepayment_month > 0:
        prepayment = Prepayment(amount=req.prepayment_amount, month=req.prepayment_month)

    return LoanTerms(
        principal=req.loan_amount,
        annual_rate=req.annual_rate,
        tenure_years=req.tenure_years,
        prepayment=prepayment,
        variable_rates={vr.year: vr.rate for vr in req.variable_rates},
        processing_fee=req.processing_fee,
        insurance=req.insurance,
        loan_type=LoanType(req.loan_type),
        tax_section=TaxSection(req.tax_section),
        inflation_rate=req.inflation_rate,
    )


@router.post("/emi", response_model=EMIResponse)
async def calculate_emi(req: EMIRequest):
    try:
        result = emi(
            req.loan_amount, req.annual_rate, req.tenure_years, req.processing_fee, req.insurance
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EMIResponse.model_validate(result)


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: ScheduleRequest):
    """Month-by-month schedule with yearly totals and summary metrics."""
    try:
        terms = _build_terms(req)
        result = amortization_schedule(terms)
        apr = annual_percentage_rate(terms)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    metrics = advanced_loan_metrics(result, terms.inflation_rate)

    return ScheduleResponse(
        emi=result.emi,
        effective_principal=result.effective_principal,
        months=len(result),
        annual_percentage_rate=apr,
        entries=[AmortizationEntryResponse.model_validate(e) for e in result.entries],
        yearly=[YearlyLoanSummaryResponse.model_validate(y) for y in yearly_loan_summary(result)],
        metrics=AdvancedMetricsResponse.model_validate(metrics),
    )


@router.post("/affordability", response_model=AffordabilityResponse)
async def affordability(req: AffordabilityRequest):
    try:
        result = loan_affordability(
            req.monthly_income,
            req.existing_emis,
            req.annual_rate,
            req.tenure_years,
            req.max_dti_ratio,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return AffordabilityResponse.model_validate(result)
