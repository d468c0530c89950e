from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINCALC_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Retirement
    safe_withdrawal_rate: float = 0.04  # Annual drawdown as a fraction of corpus

    # Affordability (fractions of monthly income)
    max_dti_ratio: float = 0.40
    recommended_dti_ratio: float = 0.30
    default_loan_rate: float = 8.5  # Annual %
    default_loan_tenure_years: int = 20

    # Prepayment above this fraction of the remaining balance recomputes that month's installment
    prepayment_recompute_threshold: float = 0.10

    # Indian Income Tax Act caps (per financial year, INR)
    # Section 24(b): home loan interest, Section 80C: principal repayment
    home_loan_interest_cap: float = 200000
    home_loan_principal_cap: float = 150000


settings = Settings()
