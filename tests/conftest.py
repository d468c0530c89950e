"""Canonical test fixtures used across engine and API tests.

Fixture: 50 lakh home loan at 8.5% for 20 years.
Planner: 30-year-old retiring at 60 with 5 lakh saved and 20k/month SIP.
"""

import pytest

from fincalc.models.loan import LoanTerms, LoanType, Prepayment, TaxSection
from fincalc.models.plans import RetirementPlan, SIPPlan


@pytest.fixture
def home_loan() -> LoanTerms:
    """50L at 8.5% for 20 years, no extras."""
    return LoanTerms(
        principal=5000000,
        annual_rate=8.5,
        tenure_years=20,
    )


@pytest.fixture
def home_loan_with_prepayment() -> LoanTerms:
    """Same loan with a 10L prepayment at the end of year 5."""
    return LoanTerms(
        principal=5000000,
        annual_rate=8.5,
        tenure_years=20,
        prepayment=Prepayment(amount=1000000, month=60),
    )


@pytest.fixture
def home_loan_24b() -> LoanTerms:
    """Home loan claiming the Section 24(b) interest deduction, 6% inflation."""
    return LoanTerms(
        principal=5000000,
        annual_rate=8.5,
        tenure_years=20,
        loan_type=LoanType.HOME,
        tax_section=TaxSection.SECTION_24B,
        inflation_rate=6,
    )


@pytest.fixture
def retirement_plan() -> RetirementPlan:
    return RetirementPlan(
        current_age=30,
        retirement_age=60,
        current_savings=500000,
        monthly_savings=20000,
        expected_return=12,
        inflation_rate=6,
        monthly_expenses=50000,
    )


@pytest.fixture
def sip_plan() -> SIPPlan:
    """10k/month for 10 years at 12% plus a 1L lump sum."""
    return SIPPlan(
        monthly_amount=10000,
        annual_rate=12,
        years=10,
        lump_sum=100000,
        inflation_rate=6,
    )
