"""Tests for the phase-out credit and flat surtax calculators."""

import pytest

from taxcalc.sdk.taxes import (
    CreditSchedule,
    PhaseOutRule,
    SurchargeRule,
    compute_additional_tax,
    compute_credit,
    compute_flat_surtax,
)


@pytest.fixture
def schedule():
    return CreditSchedule(credit_per_unit=2200, refundable_cap=1700)


@pytest.fixture
def phase_out():
    return PhaseOutRule(threshold=400000, reduction_per_increment=50, increment_size=1000)


@pytest.fixture
def niit_rule():
    return SurchargeRule(rate=0.038, threshold=250000, effective_year=2013)


class TestComputeCredit:

    def test_below_threshold_full_credit(self, schedule, phase_out):
        assert compute_credit(2, 150000, schedule, phase_out) == 4400

    def test_at_threshold_full_credit(self, schedule, phase_out):
        assert compute_credit(2, 400000, schedule, phase_out) == 4400

    def test_three_children_450k(self, schedule, phase_out):
        """Excess 50,000 -> 50 increments x $50 = $2,500 off $6,600."""
        assert compute_credit(3, 450000, schedule, phase_out) == 4100

    def test_partial_increment_rounds_up(self, schedule, phase_out):
        """$1 over the threshold costs a full $50."""
        assert compute_credit(1, 400001, schedule, phase_out) == 2150

    def test_exact_increment_boundary(self, schedule, phase_out):
        assert compute_credit(1, 401000, schedule, phase_out) == 2150
        assert compute_credit(1, 401000.01, schedule, phase_out) == 2100

    def test_never_negative(self, schedule, phase_out):
        assert compute_credit(1, 10_000_000, schedule, phase_out) == 0

    @pytest.mark.parametrize("magi", [0, 400000, 450000, 1e9])
    def test_zero_units(self, schedule, phase_out, magi):
        assert compute_credit(0, magi, schedule, phase_out) == 0

    def test_non_increasing_in_income(self, schedule, phase_out):
        incomes = [0, 399999, 400000, 400001, 420500, 444000, 480000, 600000]
        credits = [compute_credit(2, m, schedule, phase_out) for m in incomes]
        assert credits == sorted(credits, reverse=True)
        assert all(c >= 0 for c in credits)

    def test_refundable_cap_not_used(self, phase_out):
        low_cap = CreditSchedule(credit_per_unit=2200, refundable_cap=0)
        assert compute_credit(1, 100000, low_cap, phase_out) == 2200


class TestFlatSurtax:

    def test_investment_income_smaller_than_excess(self, niit_rule):
        """Excess 150,000; investment income 30,000 -> 3.8% of 30,000."""
        assert compute_flat_surtax(30000, 400000, niit_rule) == pytest.approx(1140)

    def test_excess_smaller_than_investment_income(self, niit_rule):
        assert compute_flat_surtax(100000, 270000, niit_rule) == pytest.approx(20000 * 0.038)

    def test_below_threshold(self, niit_rule):
        assert compute_flat_surtax(50000, 250000, niit_rule) == 0

    def test_no_investment_income(self, niit_rule):
        assert compute_flat_surtax(0, 1_000_000, niit_rule) == 0


class TestAdditionalTax:

    def test_below_threshold(self):
        rule = SurchargeRule(rate=0.01, threshold=1_000_000)
        assert compute_additional_tax(999_999, rule) == 0

    def test_above_threshold(self):
        rule = SurchargeRule(rate=0.01, threshold=1_000_000)
        assert compute_additional_tax(1_500_000, rule) == pytest.approx(5000)
