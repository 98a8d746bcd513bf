"""Tax Calc SDK - Income tax and credit calculations."""

from .config import (
    get_tax_rules_dir,
    get_log_level,
    configure_logging,
)

from .errors import (
    TaxCalcError,
    InvalidAmount,
    InvalidCount,
    UnsupportedYear,
    UnknownJurisdiction,
    TaxRulesError,
)

from .tax import (
    round_cents,
    supported_years,
    jurisdictions,
    income_tax,
    federal_income_tax,
    state_income_tax,
    ny_income_tax,
    ca_income_tax,
    preferential_income_tax,
    qualified_dividend_tax,
    long_term_capital_gains_tax,
    net_investment_income_surtax,
    dependent_credit,
)

from .taxes import marginal_rate

from . import taxes

__all__ = [
    # Config
    "get_tax_rules_dir",
    "get_log_level",
    "configure_logging",
    # Errors
    "TaxCalcError",
    "InvalidAmount",
    "InvalidCount",
    "UnsupportedYear",
    "UnknownJurisdiction",
    "TaxRulesError",
    # Tax
    "round_cents",
    "supported_years",
    "jurisdictions",
    "income_tax",
    "federal_income_tax",
    "state_income_tax",
    "ny_income_tax",
    "ca_income_tax",
    "preferential_income_tax",
    "qualified_dividend_tax",
    "long_term_capital_gains_tax",
    "net_investment_income_surtax",
    "dependent_credit",
    # Reporting
    "marginal_rate",
    # Taxes module
    "taxes",
]
