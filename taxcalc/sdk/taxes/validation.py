"""Input guards run by every public entry point before any calculation."""

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Optional

from ..errors import InvalidAmount, InvalidCount, UnknownJurisdiction, UnsupportedYear


def validate_amount(value: Any, field: str) -> float:
    """Return value as a float if it is a finite, non-negative number.

    Raises:
        InvalidAmount: naming the offending field
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidAmount(field, value)
    try:
        amount = float(value)
    except OverflowError:
        raise InvalidAmount(field, value) from None
    if not math.isfinite(amount) or amount < 0:
        raise InvalidAmount(field, value)
    return amount


def validate_count(value: Any, field: str) -> int:
    """Return value if it is a non-negative int (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidCount(field, value)
    try:
        float(value)
    except OverflowError:
        raise InvalidCount(field, value) from None
    return value


def validate_year_type(
    year: Any, supported: Optional[Iterable[int]] = None, minimum: Optional[int] = None
) -> int:
    """Reject anything that is not an int year (bools included)."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise UnsupportedYear(year, supported=supported, minimum=minimum)
    return year


def validate_year(year: Any, supported: Iterable[int]) -> int:
    """Exact-match check against the years that have tables."""
    supported = list(supported)
    validate_year_type(year, supported=supported)
    if year not in supported:
        raise UnsupportedYear(year, supported=supported)
    return year


def validate_min_year(year: Any, minimum: int) -> int:
    """Floor check for rules that persist once introduced."""
    validate_year_type(year, minimum=minimum)
    if year < minimum:
        raise UnsupportedYear(year, minimum=minimum)
    return year


def validate_jurisdiction(jurisdiction: Any, known: Iterable[str]) -> str:
    """Return the normalized jurisdiction id ("CA " -> "ca")."""
    known = list(known)
    if not isinstance(jurisdiction, str):
        raise UnknownJurisdiction(jurisdiction, known)
    key = jurisdiction.strip().lower()
    if key not in known:
        raise UnknownJurisdiction(jurisdiction, known)
    return key
