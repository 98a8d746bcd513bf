"""Flat-rate surtaxes that sit outside the bracket tables."""

from .schemas import SurchargeRule


def compute_flat_surtax(investment_income: float, modified_gross_income: float, rule: SurchargeRule) -> float:
    """Calculate a Net Investment Income style surtax.

    Taxes the lesser of the investment income and the amount by which MAGI
    exceeds the threshold.
    """
    excess_income = max(0.0, modified_gross_income - rule.threshold)
    return rule.rate * min(investment_income, excess_income)


def compute_additional_tax(income: float, rule: SurchargeRule) -> float:
    """Calculate a jurisdiction add-on (e.g. CA Mental Health Services Tax, 1% over $1M)."""
    return rule.rate * max(0.0, income - rule.threshold)
