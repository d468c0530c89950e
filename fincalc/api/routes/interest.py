"""Simple vs compound interest and fixed deposit routes."""

from fastapi import APIRouter, HTTPException

from fincalc.api.schemas import (
    DepositMaturityResponse,
    FixedDepositRequest,
    InterestComparisonResponse,
    InterestRequest,
)
from fincalc.engine.interest import compare_interest, fixed_deposit_maturity

router = APIRouter(prefix="/api/v1/interest", tags=["interest"])


@router.post("/compare", response_model=InterestComparisonResponse)
async def compare(req: InterestRequest):
    try:
        result = compare_interest(
            req.principal, req.rate, req.years, req.frequency, req.inflation_rate
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return InterestComparisonResponse.model_validate(result)


@router.post("/fixed-deposit", response_model=DepositMaturityResponse)
async def fixed_deposit(req: FixedDepositRequest):
    try:
        result = fixed_deposit_maturity(
            req.principal, req.rate, req.years, req.frequency, req.inflation_rate
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DepositMaturityResponse.model_validate(result)
