"""Income tax and credit calculations for married filing jointly.

Each public function validates its inputs, looks up the year's rules,
delegates to the evaluators in taxes/, and rounds to cents exactly once
after any composition (e.g. CA bracket tax plus the Mental Health Services
Tax). Rounding components separately could drift by a cent.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .taxes import (
    JURISDICTIONS,
    STATE_JURISDICTIONS,
    compute_additional_tax,
    compute_credit,
    compute_flat_surtax,
    compute_preferential_tax,
    compute_progressive_tax,
    get_available_years,
    NIIT_EFFECTIVE_YEAR,
    get_net_investment_income_rule,
    load_tax_rules,
    validate_amount,
    validate_count,
    validate_jurisdiction,
    validate_min_year,
    validate_year,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def round_cents(amount: float) -> float:
    """Round to the nearest cent, halves away from zero.

    Uses the shortest repr of the float so 2.675 rounds to 2.68.
    Applying it to an already-rounded amount returns the same amount.
    Precision grows with the magnitude, so very large amounts still round.
    """
    if not math.isfinite(amount):
        return amount
    value = Decimal(repr(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


def supported_years() -> list[int]:
    """Years with bracket tables, ascending."""
    return get_available_years()


def jurisdictions() -> list[str]:
    """Known jurisdiction ids."""
    return list(JURISDICTIONS)


def _income_tax(jurisdiction: str, income: float, year: int) -> float:
    """Unrounded bracket tax plus any jurisdiction surcharge."""
    rules = load_tax_rules(year).jurisdiction(jurisdiction)
    tax = compute_progressive_tax(rules.table, income)
    if rules.surcharge is not None:
        tax += compute_additional_tax(income, rules.surcharge)
    return tax


def income_tax(jurisdiction: str, income: float, year: int) -> float:
    """Calculate income tax for any known jurisdiction.

    Args:
        jurisdiction: 'federal', 'ny' or 'ca' (case-insensitive)
        income: Annual taxable income
        year: Tax year (2023-2026)

    Returns:
        Tax owed, including any add-on surcharge for the jurisdiction

    Raises:
        UnknownJurisdiction, InvalidAmount, UnsupportedYear
    """
    key = validate_jurisdiction(jurisdiction, JURISDICTIONS)
    income = validate_amount(income, "income")
    year = validate_year(year, get_available_years())

    tax = round_cents(_income_tax(key, income, year))
    logger.debug("%s income tax %s on %s: %s", JURISDICTIONS[key], year, income, tax)
    return tax


def federal_income_tax(income: float, year: int) -> float:
    """Calculate federal income tax."""
    return income_tax("federal", income, year)


def state_income_tax(jurisdiction: str, income: float, year: int) -> float:
    """Calculate state income tax, including any state add-on surtax.

    Raises:
        UnknownJurisdiction: If jurisdiction is not a state ('federal' included)
    """
    validate_jurisdiction(jurisdiction, STATE_JURISDICTIONS)
    return income_tax(jurisdiction, income, year)


def ny_income_tax(income: float, year: int) -> float:
    """Calculate New York State income tax."""
    return state_income_tax("ny", income, year)


def ca_income_tax(income: float, year: int) -> float:
    """Calculate California income tax plus 1% Mental Health Services Tax over $1M."""
    return state_income_tax("ca", income, year)


def preferential_income_tax(amount: float, total_taxable_income: float, year: int) -> float:
    """Calculate federal tax on qualified dividends or long-term capital gains.

    The amount is stacked on top of ordinary income (total minus amount), so
    a portion that crosses a rate threshold is taxed at both rates.

    Example: $50,000 of dividends inside $120,000 of 2024 income. Ordinary
    income is $70,000, so $24,050 fills the 0% bracket up to $94,050 and the
    remaining $25,950 is taxed at 15%: $3,892.50.

    Args:
        amount: Qualified dividends / LTCG included in total_taxable_income
        total_taxable_income: Total taxable income (including amount)
        year: Tax year (2023-2026)

    Returns:
        Federal tax owed on the preferential amount
    """
    amount = validate_amount(amount, "amount")
    total_taxable_income = validate_amount(total_taxable_income, "total_taxable_income")
    year = validate_year(year, get_available_years())

    rules = load_tax_rules(year)
    tax = round_cents(compute_preferential_tax(amount, total_taxable_income, rules.capital_gains_table))
    logger.debug("Preferential tax %s on %s of %s: %s", year, amount, total_taxable_income, tax)
    return tax


qualified_dividend_tax = preferential_income_tax
long_term_capital_gains_tax = preferential_income_tax


def net_investment_income_surtax(investment_income: float, modified_gross_income: float, year: int) -> float:
    """Calculate Net Investment Income Tax (3.8% over $250k MAGI for MFJ).

    Applies to any year from the rule's introduction onward, including
    years without bracket tables.
    """
    investment_income = validate_amount(investment_income, "investment_income")
    modified_gross_income = validate_amount(modified_gross_income, "modified_gross_income")
    year = validate_min_year(year, NIIT_EFFECTIVE_YEAR)

    rule = get_net_investment_income_rule(year)
    if rule.effective_year is not None:
        validate_min_year(year, rule.effective_year)

    tax = round_cents(compute_flat_surtax(investment_income, modified_gross_income, rule))
    logger.debug("NIIT %s on %s (MAGI %s): %s", year, investment_income, modified_gross_income, tax)
    return tax


def dependent_credit(unit_count: int, modified_gross_income: float, year: int) -> float:
    """Calculate child tax credit after the MAGI phase-out.

    Args:
        unit_count: Number of qualifying children
        modified_gross_income: MAGI
        year: Tax year (2023-2026)

    Returns:
        Credit amount (never negative)
    """
    unit_count = validate_count(unit_count, "unit_count")
    modified_gross_income = validate_amount(modified_gross_income, "modified_gross_income")
    year = validate_year(year, get_available_years())

    credit_rules = load_tax_rules(year).child_tax_credit
    credit = round_cents(
        compute_credit(unit_count, modified_gross_income, credit_rules.schedule, credit_rules.phase_out)
    )
    logger.debug("Child tax credit %s for %s children (MAGI %s): %s", year, unit_count, modified_gross_income, credit)
    return credit
