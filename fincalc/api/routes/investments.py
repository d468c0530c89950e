"""SIP / mutual fund routes."""

from fastapi import APIRouter, HTTPException

from fincalc.api.schemas import FutureValueResponse, SIPPlanRequest, SIPPlanResponse, SIPRequest
from fincalc.engine.sip import sip_future_value, sip_plan_future_value
from fincalc.models.plans import SIPPlan

router = APIRouter(prefix="/api/v1/sip", tags=["investments"])


@router.post("", response_model=FutureValueResponse)
async def sip(req: SIPRequest):
    try:
        result = sip_future_value(
            req.monthly_amount, req.annual_rate, req.years, req.step_up_percent
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FutureValueResponse.model_validate(result)


@router.post("/plan", response_model=SIPPlanResponse)
async def sip_plan(req: SIPPlanRequest):
    """SIP plus lump sum, with the inflation-adjusted outcome."""
    plan = SIPPlan(
        monthly_amount=req.monthly_amount,
        annual_rate=req.annual_rate,
        years=req.years,
        step_up_percent=req.step_up_percent,
        lump_sum=req.lump_sum,
        inflation_rate=req.inflation_rate,
    )
    try:
        result = sip_plan_future_value(plan)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SIPPlanResponse.model_validate(result)
