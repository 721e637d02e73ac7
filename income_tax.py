"""Income tax bracket utilities.

Rates are shared by every filing status; only the bracket floors differ.
``BRACKET_FLOORS`` lists, per status, the taxable income at which each rate
after the first begins:

    SINGLE: 8025, 32550, 78850, 164550, 357700
    -> 10% on 0..8025, 15% on 8025..32550, ... 35% above 357700

The bottom bracket always starts at 0, so that floor is not stored. All
amounts are nominal dollars for the 2008 tax year.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from filing_status import FilingStatus

MARGINAL_RATES: Tuple[float, ...] = (0.10, 0.15, 0.25, 0.28, 0.33, 0.35)

BRACKET_FLOORS: Dict[FilingStatus, Tuple[float, ...]] = {
    FilingStatus.SINGLE: (8025, 32550, 78850, 164550, 357700),
    FilingStatus.HEAD_OF_HOUSEHOLD: (11450, 43650, 112650, 182400, 357700),
    FilingStatus.MARRIED_FILING_JOINTLY: (16050, 65100, 131450, 200300, 357700),
    FilingStatus.MARRIED_FILING_SEPARATELY: (8025, 32550, 65725, 100150, 178850),
    FilingStatus.QUALIFYING_WIDOWER: (16050, 65100, 131450, 200300, 357700),
}


@dataclass(frozen=True)
class TaxBracket:
    start: float
    end: Optional[float]  # None means no upper bound
    rate: float           # e.g., 0.25 for 25%


@dataclass(frozen=True)
class BracketSlice:
    bracket: TaxBracket
    income: float  # portion of taxable income inside the bracket
    tax: float


def _floors(filing_status: FilingStatus) -> Optional[Tuple[float, ...]]:
    floors = BRACKET_FLOORS.get(filing_status)
    if floors is None:
        return None
    return (0.0, *floors)


def compute_tax(taxable_income: float, filing_status: FilingStatus) -> float:
    """Compute tax owed on ``taxable_income`` for a filing status.

    Walks from the top bracket down: whatever income sits above a bracket's
    floor is taxed at that bracket's rate, then income is clamped to the
    floor before moving to the next bracket.

    Args:
        taxable_income: income after the standard deduction (>=0).
        filing_status: selects the bracket floors.

    Returns:
        Total tax in dollars. A status with no floors taxes nothing.
    """
    floors = _floors(filing_status)
    if floors is None:
        return 0.0

    remaining = taxable_income
    tax = 0.0
    for index in range(len(MARGINAL_RATES) - 1, -1, -1):
        floor = floors[index]
        if remaining > floor:
            tax += (remaining - floor) * MARGINAL_RATES[index]
            remaining = floor
    return tax


def brackets_for(filing_status: FilingStatus) -> List[TaxBracket]:
    """Expand the floor table into ordered low-to-high brackets."""
    floors = _floors(filing_status)
    if floors is None:
        return []
    ends: List[Optional[float]] = [float(f) for f in floors[1:]]
    ends.append(None)
    return [
        TaxBracket(start=float(start), end=end, rate=rate)
        for start, end, rate in zip(floors, ends, MARGINAL_RATES)
    ]


def bracket_breakdown(
    taxable_income: float, filing_status: FilingStatus
) -> List[BracketSlice]:
    """Split taxable income across brackets, bottom to top.

    Brackets the income never reaches are included with zero income so the
    result always has one entry per rate.
    """
    slices: List[BracketSlice] = []
    for b in brackets_for(filing_status):
        upper = float("inf") if b.end is None else b.end
        amount = max(0.0, min(taxable_income, upper) - b.start)
        slices.append(BracketSlice(bracket=b, income=amount, tax=amount * b.rate))
    return slices
