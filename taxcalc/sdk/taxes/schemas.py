"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to bracket tables, surcharges, and credit parameters.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


BracketTable = tuple[tuple[float, float], ...]


class TaxBracket(BaseModel):
    """Single tax bracket entry."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: float = Field(..., gt=0, description="Upper bound of the bracket")
    rate: float = Field(..., ge=0, le=1, description="Tax rate as decimal")


def _check_brackets(brackets: list[TaxBracket]) -> list[TaxBracket]:
    """Reject empty tables and thresholds that are not strictly increasing."""
    if not brackets:
        raise ValueError("bracket table must not be empty")
    previous = 0.0
    for bracket in brackets:
        if bracket.up_to <= previous:
            raise ValueError(
                f"bracket thresholds must be strictly increasing "
                f"({bracket.up_to} after {previous})"
            )
        previous = bracket.up_to
    return brackets


def to_table(brackets: list[TaxBracket]) -> BracketTable:
    """Convert validated brackets into the (threshold, rate) pairs the evaluators walk."""
    return tuple((b.up_to, b.rate) for b in brackets)


class SurchargeRule(BaseModel):
    """Flat-rate tax on the amount above a threshold."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=1)
    threshold: float = Field(..., ge=0)
    effective_year: Optional[int] = Field(
        default=None, description="First year the rule applies (open-ended)"
    )


class PhaseOutRule(BaseModel):
    """Credit reduction per (partial) increment of income over a threshold."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: float = Field(..., ge=0)
    reduction_per_increment: float = Field(..., ge=0)
    increment_size: float = Field(..., gt=0)


class CreditSchedule(BaseModel):
    """Per-unit credit amounts for a year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    credit_per_unit: float = Field(..., ge=0)
    refundable_cap: float = Field(
        ..., ge=0, description="Refundable portion per unit (informational)"
    )


class CreditRules(BaseModel):
    """A credit schedule together with its phase-out."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    schedule: CreditSchedule
    phase_out: PhaseOutRule


class JurisdictionRules(BaseModel):
    """Bracket table for one jurisdiction, plus any add-on surcharge."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: list[TaxBracket]
    surcharge: Optional[SurchargeRule] = None

    @field_validator("brackets")
    @classmethod
    def check_brackets(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        return _check_brackets(brackets)

    @property
    def table(self) -> BracketTable:
        return to_table(self.brackets)


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    federal: JurisdictionRules
    ny: JurisdictionRules
    ca: JurisdictionRules
    capital_gains_brackets: list[TaxBracket]
    child_tax_credit: CreditRules
    # Optional sections, inherited from an earlier year when absent
    net_investment_income_tax: Optional[SurchargeRule] = None

    @field_validator("capital_gains_brackets")
    @classmethod
    def check_capital_gains_brackets(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        return _check_brackets(brackets)

    @property
    def capital_gains_table(self) -> BracketTable:
        return to_table(self.capital_gains_brackets)

    def jurisdiction(self, name: str) -> JurisdictionRules:
        return getattr(self, name)
