import pytest

from fincalc.engine.errors import InvalidFrequency, InvalidRate, InvalidTenure
from fincalc.engine.interest import (
    compare_interest,
    compound_amount,
    effective_annual_rate,
    fixed_deposit_maturity,
    inflation_adjust,
    lump_sum_future_value,
    simple_interest_amount,
)


class TestSimpleInterest:
    def test_basic(self):
        assert simple_interest_amount(100000, 10, 2) == pytest.approx(120000)

    def test_linear_in_rate(self):
        base = simple_interest_amount(100000, 5, 3) - 100000
        double = simple_interest_amount(100000, 10, 3) - 100000
        assert double == pytest.approx(2 * base)

    def test_linear_in_time(self):
        one = simple_interest_amount(100000, 8, 1) - 100000
        four = simple_interest_amount(100000, 8, 4) - 100000
        assert four == pytest.approx(4 * one)

    def test_negative_rate(self):
        with pytest.raises(InvalidRate):
            simple_interest_amount(100000, -2, 1)


class TestCompoundAmount:
    def test_yearly_is_classic_formula(self):
        assert compound_amount(1000, 10, 2) == pytest.approx(1210)

    def test_monthly(self):
        assert compound_amount(100000, 10, 2, "monthly") == pytest.approx(122039.10, abs=0.01)

    def test_increasing_in_time(self):
        for freq in ("monthly", "quarterly", "yearly"):
            values = [compound_amount(50000, 9, t, freq) for t in (0.5, 1, 2, 5, 10)]
            assert values == sorted(values)
            assert len(set(values)) == len(values)

    def test_increasing_in_rate(self):
        for freq in ("monthly", "quarterly", "yearly"):
            values = [compound_amount(50000, r, 5, freq) for r in (1, 4, 8, 12)]
            assert all(a < b for a, b in zip(values, values[1:]))

    def test_at_least_simple_interest(self):
        for freq in ("monthly", "quarterly", "yearly"):
            for years in (1, 3, 10):
                assert compound_amount(100000, 7, years, freq) >= simple_interest_amount(100000, 7, years) - 1e-6

    def test_equal_to_simple_for_one_yearly_period(self):
        assert compound_amount(100000, 7, 1) == pytest.approx(simple_interest_amount(100000, 7, 1))

    def test_unknown_frequency(self):
        with pytest.raises(InvalidFrequency):
            compound_amount(1000, 10, 2, "fortnightly")


class TestInflationAdjust:
    def test_zero_years_is_identity(self):
        assert inflation_adjust(123456, 6, 0) == 123456

    def test_one_year(self):
        assert inflation_adjust(106, 6, 1) == pytest.approx(100)

    def test_zero_inflation(self):
        assert inflation_adjust(5000, 0, 10) == 5000

    def test_negative_inflation(self):
        with pytest.raises(InvalidRate):
            inflation_adjust(5000, -1, 10)


class TestLumpSum:
    def test_ten_years_at_twelve_percent(self):
        # 1L * 1.12^10 = 310,584.82
        assert lump_sum_future_value(100000, 12, 10) == 310585

    def test_zero_rate(self):
        assert lump_sum_future_value(100000, 0, 10) == 100000

    def test_zero_years_is_identity(self):
        assert lump_sum_future_value(100000, 12, 0) == 100000

    def test_negative_years(self):
        with pytest.raises(InvalidTenure):
            lump_sum_future_value(100000, 12, -1)


class TestEffectiveAnnualRate:
    def test_doubling(self):
        assert effective_annual_rate(100, 200, 1) == pytest.approx(100)

    def test_zero_start(self):
        assert effective_annual_rate(0, 200, 5) == 0.0


class TestCompareInterest:
    def test_yearly_no_advantage_after_one_year(self):
        result = compare_interest(100000, 10, 1)
        assert result.simple_amount == 110000
        assert result.compound_amount == 110000
        assert result.effective_annual_rate == 10.0
        assert result.compounding_advantage == 0.0

    def test_monthly_compounding(self):
        result = compare_interest(100000, 10, 2, "monthly")
        assert result.simple_amount == 120000
        assert result.simple_interest == 20000
        assert result.compound_amount == 122039
        assert result.compound_interest == 22039
        assert result.effective_annual_rate == 10.47
        assert result.compounding_advantage == 0.47

    def test_inflation_adjusted_values(self):
        result = compare_interest(100000, 10, 2, "yearly", inflation_rate=10)
        # 1.21L compounded then deflated by 1.1^2 is back to 1L
        assert result.inflation_adjusted_compound == 100000
        assert result.inflation_adjusted_simple < result.inflation_adjusted_compound


class TestFixedDeposit:
    def test_quarterly_default(self):
        # 1L at 7% compounded quarterly for 5 years
        result = fixed_deposit_maturity(100000, 7, 5)
        assert result.maturity_amount == 141478
        assert result.total_interest == 41478
        assert result.effective_annual_yield == 7.19

    def test_inflation_adjusted(self):
        result = fixed_deposit_maturity(100000, 7, 5, inflation_rate=5)
        assert result.inflation_adjusted_maturity == 110852

    def test_zero_tenure(self):
        with pytest.raises(InvalidTenure):
            fixed_deposit_maturity(100000, 7, 0)
