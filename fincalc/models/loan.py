from dataclasses import dataclass, field
from enum import Enum


class LoanType(Enum):
    HOME = "home"
    PERSONAL = "personal"
    CAR = "car"
    EDUCATION = "education"


class TaxSection(Enum):
    SECTION_24B = "24b"  # Home loan interest deduction
    SECTION_80C = "80c"  # Principal repayment deduction
    NONE = "none"


@dataclass(frozen=True)
class Prepayment:
    amount: float
    month: int  # 1-based month in which the lump sum is paid


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate: float  # Percent, e.g. 8.5
    tenure_years: int
    prepayment: Prepayment | None = None
    # 0-based loan year -> annual rate (%) for that year
    variable_rates: dict[int, float] = field(default_factory=dict)
    processing_fee: float = 0  # Financed, added to principal
    insurance: float = 0  # Financed, added to principal
    loan_type: LoanType = LoanType.HOME
    tax_section: TaxSection = TaxSection.NONE
    inflation_rate: float = 0  # Annual %, for real-value fields

    @property
    def effective_principal(self) -> float:
        return self.principal + self.processing_fee + self.insurance

    @property
    def months(self) -> int:
        return self.tenure_years * 12

    def rate_for_month(self, month: int) -> float:
        """Annual rate applying to a 1-based month, honouring per-year overrides."""
        return self.variable_rates.get((month - 1) // 12, self.annual_rate)


@dataclass(frozen=True)
class AmortizationEntry:
    month: int
    principal: int
    interest: int
    balance: int  # Never negative
    emi: int
    inflation_adjusted_emi: int = 0
    real_interest: int = 0
    tax_benefit: int = 0
    cumulative_interest: int = 0


@dataclass(frozen=True)
class AmortizationSchedule:
    entries: list[AmortizationEntry]
    emi: int  # Nominal EMI at origination
    effective_principal: int

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def total_interest(self) -> int:
        return sum(e.interest for e in self.entries)

    @property
    def total_principal(self) -> int:
        return sum(e.principal for e in self.entries)
