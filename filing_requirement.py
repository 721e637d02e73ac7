"""Filing requirement thresholds.

A return must be filed when gross income reaches the threshold for the
filer's status and age. Joint filers use their own table keyed on how many
of the two spouses are 65 or older.
"""

from filing_status import FilingStatus

SENIOR_AGE = 65

# Indexed by FilingStatus ordinal.
UNDER_65_THRESHOLDS: tuple[float, ...] = (8950, 11500, 17900, 3500, 14400)
AGE_65_OR_OVER_THRESHOLDS: tuple[float, ...] = (10300, 12850, 20000, 3500, 15450)

# Indexed by the number of spouses aged 65 or over.
JOINT_THRESHOLDS: tuple[float, ...] = (17900, 18950, 20000)


def filing_threshold(
    filing_status: FilingStatus, age: int, spouse_age: int | None = None
) -> float | None:
    """Return the gross income at which a return becomes required.

    Returns None for a status outside the tables.
    """
    ordinal = int(filing_status)
    if not 0 <= ordinal < len(UNDER_65_THRESHOLDS):
        return None

    if age < SENIOR_AGE:
        threshold = UNDER_65_THRESHOLDS[ordinal]
    else:
        threshold = AGE_65_OR_OVER_THRESHOLDS[ordinal]

    if filing_status == FilingStatus.MARRIED_FILING_JOINTLY:
        seniors = int(age >= SENIOR_AGE) + int((spouse_age or 0) >= SENIOR_AGE)
        threshold = JOINT_THRESHOLDS[seniors]
    return threshold


def return_required(
    gross_income: float,
    filing_status: FilingStatus,
    age: int,
    spouse_age: int | None = None,
) -> bool:
    threshold = filing_threshold(filing_status, age, spouse_age)
    if threshold is None:
        return False
    return gross_income >= threshold
