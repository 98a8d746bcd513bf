"""taxes - Bracket tables and the calculations built on them.

Scope:
- Year-specific rules loaded from tax_rules/{year}.yaml (MFJ only)
- Progressive bracket tax and stacked preferential-rate tax
- Flat surtaxes (net investment income, jurisdiction add-ons)
- Phase-out credits (child tax credit)
- Input guards shared by the public entry points

Constraints:
- Pure calculation - no rounding, no validation inside the evaluators
- Rules are loaded once and never mutated

Usage:
    from taxcalc.sdk.taxes import compute_progressive_tax, load_tax_rules

    rules = load_tax_rules(2025)
    tax = compute_progressive_tax(rules.federal.table, 100000)
"""

# Bracket evaluators
from .brackets import (
    compute_progressive_tax,
    compute_preferential_tax,
    marginal_rate,
)

# Surtaxes and credits
from .surtax import compute_flat_surtax, compute_additional_tax
from .credits import compute_credit

# Tax rules schemas
from .schemas import (
    BracketTable,
    TaxBracket,
    SurchargeRule,
    PhaseOutRule,
    CreditSchedule,
    CreditRules,
    JurisdictionRules,
    TaxRules,
)

# Tax rules loading
from .rules import (
    JURISDICTIONS,
    STATE_JURISDICTIONS,
    NIIT_EFFECTIVE_YEAR,
    get_available_years,
    load_tax_rules,
    get_net_investment_income_rule,
    clear_cache,
)

# Input guards
from .validation import (
    validate_amount,
    validate_count,
    validate_year,
    validate_min_year,
    validate_year_type,
    validate_jurisdiction,
)

__all__ = [
    # Evaluators
    "compute_progressive_tax",
    "compute_preferential_tax",
    "marginal_rate",
    "compute_flat_surtax",
    "compute_additional_tax",
    "compute_credit",
    # Schemas
    "BracketTable",
    "TaxBracket",
    "SurchargeRule",
    "PhaseOutRule",
    "CreditSchedule",
    "CreditRules",
    "JurisdictionRules",
    "TaxRules",
    # Rules
    "JURISDICTIONS",
    "STATE_JURISDICTIONS",
    "NIIT_EFFECTIVE_YEAR",
    "get_available_years",
    "load_tax_rules",
    "get_net_investment_income_rule",
    "clear_cache",
    # Validation
    "validate_amount",
    "validate_count",
    "validate_year",
    "validate_min_year",
    "validate_year_type",
    "validate_jurisdiction",
]
