"""Per-period tax benefit on loan repayments.

The amortization loop asks a policy for each month's benefit. The Indian
home-loan deductions are one policy; pass NoTaxBenefit (or your own policy)
for other jurisdictions.

Section 24(b): interest on a home loan is deductible up to 2,00,000/year.
Section 80C:   principal repaid on a home loan is deductible up to 1,50,000/year.

Caps are annual, so a month's benefit is min(amount * 12, cap) / 12.
"""

from dataclasses import dataclass
from typing import Protocol

from fincalc.config import settings
from fincalc.models.loan import LoanType, TaxSection


class TaxBenefitPolicy(Protocol):
    def benefit(
        self,
        interest: float,
        principal: float,
        loan_type: LoanType,
        tax_section: TaxSection,
    ) -> float: ...


@dataclass(frozen=True)
class NoTaxBenefit:
    def benefit(self, interest, principal, loan_type, tax_section) -> float:
        return 0.0


@dataclass(frozen=True)
class SectionCapPolicy:
    interest_cap: float  # Section 24(b), per year
    principal_cap: float  # Section 80C, per year

    def benefit(
        self,
        interest: float,
        principal: float,
        loan_type: LoanType,
        tax_section: TaxSection,
    ) -> float:
        if loan_type is not LoanType.HOME:
            return 0.0
        if tax_section is TaxSection.SECTION_24B:
            return min(interest * 12, self.interest_cap) / 12
        if tax_section is TaxSection.SECTION_80C:
            return min(principal * 12, self.principal_cap) / 12
        return 0.0


def default_tax_policy() -> SectionCapPolicy:
    """Policy using the caps from settings."""
    return SectionCapPolicy(
        interest_cap=settings.home_loan_interest_cap,
        principal_cap=settings.home_loan_principal_cap,
    )
