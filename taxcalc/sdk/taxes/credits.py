"""Phase-out credit calculation (child tax credit)."""

import math

from .schemas import CreditSchedule, PhaseOutRule


def compute_credit(
    unit_count: int,
    modified_gross_income: float,
    schedule: CreditSchedule,
    phase_out: PhaseOutRule,
) -> float:
    """Calculate a per-unit credit reduced by income above the phase-out threshold.

    Every increment of excess income, including a partial one, reduces the
    credit by reduction_per_increment. Example at $2,200 per child, 3 children,
    MAGI $450,000 and a $400,000 threshold: 50 increments x $50 = $2,500
    reduction, so the credit is $6,600 - $2,500 = $4,100.

    Args:
        unit_count: Number of qualifying units (e.g. children)
        modified_gross_income: MAGI
        schedule: Per-unit credit amount for the year
        phase_out: Threshold and reduction rule

    Returns:
        Credit amount, never negative
    """
    if unit_count == 0:
        return 0.0

    base_credit = schedule.credit_per_unit * unit_count
    if modified_gross_income <= phase_out.threshold:
        return base_credit

    excess_income = modified_gross_income - phase_out.threshold
    increments = math.ceil(excess_income / phase_out.increment_size)
    reduction = increments * phase_out.reduction_per_increment
    return max(0.0, base_credit - reduction)
