from dataclasses import dataclass
from enum import Enum


class CompoundingFrequency(Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


PERIODS_PER_YEAR: dict[CompoundingFrequency, int] = {
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.YEARLY: 1,
}


@dataclass(frozen=True)
class RateSpec:
    annual_rate: float  # Percent, e.g. 8.5
    frequency: CompoundingFrequency = CompoundingFrequency.YEARLY

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self.frequency]

    @property
    def periodic_rate(self) -> float:
        return self.annual_rate / 100 / self.periods_per_year
