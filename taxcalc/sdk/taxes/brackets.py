"""Bracket-walking evaluators.

A bracket table is an ordered sequence of (up_to, rate) pairs with strictly
increasing thresholds. The last threshold is a large sentinel standing for
"no upper bound"; income beyond it is not taxed further, so the sentinel
must exceed any realistic input.
"""

from typing import Iterable

Brackets = Iterable[tuple[float, float]]


def compute_progressive_tax(brackets: Brackets, income: float) -> float:
    """Calculate tax by applying each bracket's rate to the slice of income inside it."""
    total_tax = 0.0
    previous_bracket_max = 0.0

    for bracket_max, rate in brackets:
        income_in_this_bracket = max(0.0, min(income, bracket_max) - previous_bracket_max)
        total_tax += income_in_this_bracket * rate
        previous_bracket_max = bracket_max

        # Higher brackets contribute nothing
        if income <= bracket_max:
            break

    return total_tax


def compute_preferential_tax(amount: float, total_taxable_income: float, brackets: Brackets) -> float:
    """Calculate tax on qualified dividends / long-term gains at preferential rates.

    Follows the IRS Qualified Dividends and Capital Gain Tax Worksheet:
    ordinary income (total minus the preferential amount) fills the brackets
    first and the preferential amount stacks on top, so a slice that crosses a
    threshold is split between the two rates.

    Args:
        amount: Preferential income included in total_taxable_income
        total_taxable_income: Total taxable income, including amount
        brackets: Capital gains (threshold, rate) table

    Returns:
        Tax owed on amount only (not on the ordinary income under it)
    """
    # Can't exceed taxable income
    qualified = min(amount, total_taxable_income)
    ordinary_income = max(0.0, total_taxable_income - qualified)

    qualified_tax = 0.0
    remaining_qualified = qualified
    previous_bracket_max = 0.0

    for bracket_max, rate in brackets:
        if remaining_qualified <= 0:
            break

        # How much room is in this bracket above ordinary income?
        income_floor = max(ordinary_income, previous_bracket_max)
        room_in_bracket = max(0.0, bracket_max - income_floor)
        taxable_at_this_rate = min(remaining_qualified, room_in_bracket)

        qualified_tax += taxable_at_this_rate * rate
        remaining_qualified -= taxable_at_this_rate
        previous_bracket_max = bracket_max

    return qualified_tax


def marginal_rate(brackets: Brackets, income: float) -> float:
    """Rate of the bracket containing income; the last bracket catches everything above.

    Reporting helper for callers (e.g. "you are in the 22% bracket"); never
    used to tax preferential income.
    """
    rate = 0.0
    for bracket_max, rate in brackets:
        if income <= bracket_max:
            break
    return rate
