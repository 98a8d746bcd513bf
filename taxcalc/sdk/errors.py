"""Error types raised by tax calculations.

All errors derive from TaxCalcError (a ValueError) so callers can catch
the whole family in one place. Every error is raised before any table
lookup or arithmetic takes place.
"""

from typing import Any, Iterable, Optional


class TaxCalcError(ValueError):
    """Base class for tax calculation errors."""
    pass


class InvalidAmount(TaxCalcError):
    """Raised when a monetary input is negative, non-finite, or not a number."""

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} must be a non-negative number, got {value!r}")


class InvalidCount(InvalidAmount):
    """Raised when a unit count is negative or not an integer."""

    def __init__(self, field: str, value: Any):
        super().__init__(
            field, value, f"{field} must be a non-negative integer, got {value!r}"
        )


class UnsupportedYear(TaxCalcError):
    """Raised when no table exists for a year, or the year precedes a rule's introduction."""

    def __init__(
        self,
        year: Any,
        supported: Optional[Iterable[int]] = None,
        minimum: Optional[int] = None,
    ):
        self.year = year
        self.supported = sorted(supported) if supported is not None else None
        self.minimum = minimum
        if minimum is not None:
            message = f"Year must be {minimum} or later, got {year!r}"
        elif self.supported:
            message = f"Year must be one of: {', '.join(str(y) for y in self.supported)}; got {year!r}"
        else:
            message = f"Unsupported year: {year!r}"
        super().__init__(message)


class UnknownJurisdiction(TaxCalcError):
    """Raised when a jurisdiction has no bracket table."""

    def __init__(self, jurisdiction: Any, known: Iterable[str]):
        self.jurisdiction = jurisdiction
        self.known = sorted(known)
        super().__init__(
            f"Jurisdiction must be one of: {', '.join(self.known)}; got {jurisdiction!r}"
        )


class TaxRulesError(TaxCalcError):
    """Raised when a tax rules file is missing or fails schema validation."""
    pass
