"""Retirement and goal planning routes."""

from fastapi import APIRouter, HTTPException

from fincalc.api.schemas import (
    GoalRequest,
    GoalResponse,
    RetirementRequest,
    RetirementResponse,
    StepUpRequest,
    StepUpResponse,
)
from fincalc.engine.goals import (
    goal_based_step_up_investment,
    required_step_up,
    retirement_readiness,
)
from fincalc.models.plans import RetirementPlan

router = APIRouter(prefix="/api/v1/goals", tags=["goals"])


@router.post("/retirement", response_model=RetirementResponse)
async def retirement(req: RetirementRequest):
    """Projected corpus and how it compares with the target expenses."""
    plan = RetirementPlan(
        current_age=req.current_age,
        retirement_age=req.retirement_age,
        current_savings=req.current_savings,
        monthly_savings=req.monthly_savings,
        expected_return=req.expected_return,
        inflation_rate=req.inflation_rate,
        monthly_expenses=req.monthly_expenses,
    )
    try:
        result = retirement_readiness(plan)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RetirementResponse.model_validate(result)


@router.post("/target", response_model=GoalResponse)
async def target(req: GoalRequest):
    """Monthly SIP needed for a target amount, optionally stepped up yearly."""
    try:
        result = goal_based_step_up_investment(
            req.goal_amount,
            req.years,
            req.expected_return,
            req.step_up_percent,
            req.current_savings,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GoalResponse.model_validate(result)


@router.post("/step-up", response_model=StepUpResponse)
async def step_up(req: StepUpRequest):
    """Annual step-up that lets a fixed starting SIP reach the target."""
    try:
        percent = required_step_up(
            req.goal_amount,
            req.monthly_amount,
            req.years,
            req.expected_return,
            req.current_savings,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StepUpResponse(step_up_percent=percent)
