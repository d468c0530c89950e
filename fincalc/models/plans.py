from dataclasses import dataclass


@dataclass(frozen=True)
class SIPPlan:
    monthly_amount: float
    annual_rate: float  # Expected return, percent
    years: float
    step_up_percent: float = 0  # Annual increase of the monthly amount
    lump_sum: float = 0  # One-time investment at the start
    inflation_rate: float = 0


@dataclass(frozen=True)
class RetirementPlan:
    current_age: int
    retirement_age: int
    current_savings: float = 0
    monthly_savings: float = 0
    expected_return: float = 0  # Annual %, compounded monthly
    inflation_rate: float = 0  # Annual %
    monthly_expenses: float = 0  # Target spend at retirement, today's money

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age
