"""Command-line calculators.

Usage:
    python -m fincalc.cli emi 5000000 8.5 20 --schedule
    python -m fincalc.cli sip 10000 12 10 --step-up 10
    python -m fincalc.cli goal 10000000 15 12 --savings 500000
    python -m fincalc.cli goal 10000000 15 12 --monthly 15000
    python -m fincalc.cli retirement 30 60 --savings 500000 --monthly 20000 --return 11 --expenses 50000
"""

import argparse

from fincalc.engine.errors import CalculationError
from fincalc.engine.goals import (
    goal_based_step_up_investment,
    required_step_up,
    retirement_readiness,
)
from fincalc.engine.loan import amortization_schedule, emi, yearly_loan_summary
from fincalc.engine.metrics import advanced_loan_metrics
from fincalc.engine.sip import sip_future_value
from fincalc.models.loan import LoanTerms, Prepayment
from fincalc.models.plans import RetirementPlan


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def run_emi(args) -> None:
    result = emi(args.amount, args.rate, args.years, args.fee, args.insurance)
    print_header(f"EMI: {args.amount:,.0f} at {args.rate}% for {args.years} years")
    print(f"  Monthly EMI:        {result.emi:>14,}")
    print(f"  Total interest:     {result.total_interest:>14,}")
    print(f"  Total payable:      {result.total_amount:>14,}")
    print(f"  Effective amount:   {result.effective_principal:>14,}")

    if not args.schedule:
        print()
        return

    prepayment = None
    if args.prepay:
        prepayment = Prepayment(amount=args.prepay, month=args.prepay_month)
    terms = LoanTerms(
        principal=args.amount,
        annual_rate=args.rate,
        tenure_years=args.years,
        prepayment=prepayment,
        processing_fee=args.fee,
        insurance=args.insurance,
    )
    schedule = amortization_schedule(terms)
    print()
    print(f"  {'Year':>4}  {'Principal':>12}  {'Interest':>12}  {'Balance':>14}")
    for y in yearly_loan_summary(schedule):
        print(f"  {y.year:>4}  {y.principal:>12,}  {y.interest:>12,}  {y.ending_balance:>14,}")

    metrics = advanced_loan_metrics(schedule)
    print()
    print(f"  Repaid in {len(schedule)} of {terms.months} months")
    print(f"  Interest / principal: {metrics.interest_to_principal_ratio:.2f}")
    print()


def run_sip(args) -> None:
    result = sip_future_value(args.monthly, args.rate, args.years, args.step_up)
    print_header(f"SIP: {args.monthly:,.0f}/month at {args.rate}% for {args.years} years")
    print(f"  Total invested:     {result.total_invested:>14,}")
    print(f"  Future value:       {result.future_value:>14,}")
    print(f"  Returns:            {result.total_returns:>14,}")
    print()


def run_goal(args) -> None:
    if args.monthly:
        step_up = required_step_up(args.goal, args.monthly, args.years, args.rate, args.savings)
        print_header(f"Goal: {args.goal:,.0f} in {args.years} years at {args.rate}%")
        print(f"  Starting SIP:       {args.monthly:>14,.0f}")
        print(f"  Annual step-up:     {step_up:>13.2f}%")
        print()
        return

    result = goal_based_step_up_investment(
        args.goal, args.years, args.rate, args.step_up, args.savings
    )
    print_header(f"Goal: {args.goal:,.0f} in {args.years} years at {args.rate}%")
    print(f"  Monthly SIP needed: {result.monthly_sip_required:>14,}")
    print(f"  Savings grow to:    {result.future_value_of_current_savings:>14,}")
    print(f"  Total investment:   {result.total_investment:>14,}")
    print()


def run_retirement(args) -> None:
    plan = RetirementPlan(
        current_age=args.age,
        retirement_age=args.retire_at,
        current_savings=args.savings,
        monthly_savings=args.monthly,
        expected_return=getattr(args, "return"),
        inflation_rate=args.inflation,
        monthly_expenses=args.expenses,
    )
    result = retirement_readiness(plan)
    corpus = result.corpus
    print_header(f"Retirement at {args.retire_at}")
    print(f"  Corpus:             {corpus.retirement_corpus:>14,}")
    print(f"  In today's money:   {corpus.inflation_adjusted_corpus:>14,}")
    print(f"  Monthly income:     {corpus.monthly_income_in_retirement:>14,}")
    print(f"  Required corpus:    {result.required_corpus:>14,}")
    label = "Surplus" if result.surplus >= 0 else "Shortfall"
    print(f"  {label + ':':<20}{abs(result.surplus):>14,}")
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Personal finance calculators")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("emi", help="Loan EMI and amortization")
    p.add_argument("amount", type=float, help="Loan amount")
    p.add_argument("rate", type=float, help="Annual interest rate, %%")
    p.add_argument("years", type=int, help="Tenure in years")
    p.add_argument("--fee", type=float, default=0, help="Processing fee added to the loan")
    p.add_argument("--insurance", type=float, default=0, help="Insurance added to the loan")
    p.add_argument("--schedule", action="store_true", help="Print the yearly schedule")
    p.add_argument("--prepay", type=float, default=0, help="One-time prepayment amount")
    p.add_argument("--prepay-month", type=int, default=12, help="Month of the prepayment (default: 12)")
    p.set_defaults(func=run_emi)

    p = sub.add_parser("sip", help="SIP future value")
    p.add_argument("monthly", type=float, help="Monthly investment")
    p.add_argument("rate", type=float, help="Expected annual return, %%")
    p.add_argument("years", type=float, help="Investment horizon in years")
    p.add_argument("--step-up", type=float, default=0, help="Annual step-up, %%")
    p.set_defaults(func=run_sip)

    p = sub.add_parser("goal", help="Monthly SIP needed for a goal")
    p.add_argument("goal", type=float, help="Target amount")
    p.add_argument("years", type=float, help="Years to the goal")
    p.add_argument("rate", type=float, help="Expected annual return, %%")
    p.add_argument("--savings", type=float, default=0, help="Money already saved")
    p.add_argument("--step-up", type=float, default=0, help="Annual step-up, %%")
    p.add_argument("--monthly", type=float, default=0,
                   help="Starting SIP; report the step-up it needs instead")
    p.set_defaults(func=run_goal)

    p = sub.add_parser("retirement", help="Retirement corpus projection")
    p.add_argument("age", type=int, help="Current age")
    p.add_argument("retire_at", type=int, help="Retirement age")
    p.add_argument("--savings", type=float, default=0, help="Current savings")
    p.add_argument("--monthly", type=float, default=0, help="Monthly savings")
    p.add_argument("--return", type=float, default=10, help="Expected annual return, %% (default: 10)")
    p.add_argument("--inflation", type=float, default=6, help="Inflation, %% (default: 6)")
    p.add_argument("--expenses", type=float, default=0, help="Monthly expenses at retirement")
    p.set_defaults(func=run_retirement)

    args = parser.parse_args()
    try:
        args.func(args)
    except CalculationError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
