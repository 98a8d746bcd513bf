"""Tax rules loading from tax_rules/YYYY.yaml.

Each year file is parsed once per process and validated against the
TaxRules schema. The returned models are frozen; callers never mutate them.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..config import get_tax_rules_dir
from ..errors import TaxRulesError, UnsupportedYear
from .schemas import SurchargeRule, TaxRules

logger = logging.getLogger(__name__)

JURISDICTIONS = {
    "federal": "Federal",
    "ny": "NY",
    "ca": "CA",
}
STATE_JURISDICTIONS = ("ny", "ca")

# First year of the net investment income tax (IRC 1411)
NIIT_EFFECTIVE_YEAR = 2013


def get_available_years() -> list[int]:
    """Get sorted list of available tax rule years (ascending)."""
    return list(_available_years(get_tax_rules_dir()))


@lru_cache(maxsize=None)
def _available_years(rules_dir: Path) -> tuple[int, ...]:
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return tuple(sorted(years))


def load_tax_rules(year: int) -> TaxRules:
    """Load tax rules for a specific year from tax_rules/YYYY.yaml.

    Raises:
        UnsupportedYear: If there is no rules file for the year
        TaxRulesError: If the file is not valid YAML or fails validation
    """
    rules_dir = get_tax_rules_dir()
    if year not in _available_years(rules_dir):
        raise UnsupportedYear(year, supported=_available_years(rules_dir))
    return _load_rules_file(rules_dir / f"{year}.yaml")


@lru_cache(maxsize=None)
def _load_rules_file(config_file: Path) -> TaxRules:
    logger.debug("Loading tax rules from %s", config_file)
    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f)
        return TaxRules.model_validate(data or {})
    except OSError as e:
        raise TaxRulesError(f"Tax rules file not readable: {config_file}") from e
    except yaml.YAMLError as e:
        raise TaxRulesError(f"Tax rules file is not valid YAML: {config_file}: {e}") from e
    except ValidationError as e:
        raise TaxRulesError(f"Invalid tax rules in {config_file}:\n{e}") from e


def get_net_investment_income_rule(year: int) -> SurchargeRule:
    """Get the net investment income tax rule with fallback to prior years.

    The rule is only written in the year file that introduced the current
    parameters; later years inherit it. Looks at years <= the requested year
    in descending order, and falls back to all years when none are earlier.

    Raises:
        TaxRulesError: If no year defines the rule
    """
    rules_dir = get_tax_rules_dir()
    available_years = sorted(_available_years(rules_dir), reverse=True)

    candidate_years = [y for y in available_years if y <= year]
    if not candidate_years:
        candidate_years = available_years

    rule: Optional[SurchargeRule] = None
    for check_year in candidate_years:
        rule = _load_rules_file(rules_dir / f"{check_year}.yaml").net_investment_income_tax
        if rule is not None:
            logger.debug("Net investment income tax rule for %s taken from %s", year, check_year)
            return rule

    raise TaxRulesError("Tax rule 'net_investment_income_tax' not defined in any tax_rules/*.yaml file")


def clear_cache() -> None:
    """Forget parsed rule files (used when TAX_CALC_RULES_PATH changes)."""
    _available_years.cache_clear()
    _load_rules_file.cache_clear()
