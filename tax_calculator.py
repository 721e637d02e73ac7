"""Federal income tax for one filer (or a married couple) for the 2008 year.

Simplifying assumptions:

- Standard deduction only; no itemizing, dependents or credits.
- Each spouse aged 65 or over adds a fixed amount to the standard deduction,
  but the spouse only counts for joint returns.
- Taxable income = max(gross income - standard deduction, 0).
- Whether a return is required depends on gross income, not taxable income.
- The net tax rate is tax due as a percentage of gross income. With no gross
  income it is NaN; callers must check with ``math.isnan``.

Records are built through ``TaxCalculator.unmarried`` or
``TaxCalculator.married``. Every derived figure is recomputed from the stored
fields on each call.
"""

import copy
import logging
import math
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from filing_requirement import SENIOR_AGE, return_required
from filing_status import MARRIED_STATUSES, UNMARRIED_STATUSES, FilingStatus
from income_tax import BracketSlice, bracket_breakdown, compute_tax

logger = logging.getLogger(__name__)

# Marks a record built without a spouse age, as opposed to one passed as None.
_NO_SPOUSE = object()

BASE_STANDARD_DEDUCTIONS: dict[FilingStatus, float] = {
    FilingStatus.SINGLE: 5450.0,
    FilingStatus.MARRIED_FILING_JOINTLY: 10900.0,
    FilingStatus.QUALIFYING_WIDOWER: 10900.0,
    FilingStatus.MARRIED_FILING_SEPARATELY: 5450.0,
    FilingStatus.HEAD_OF_HOUSEHOLD: 8000.0,
}
SENIOR_ADDITIONAL_DEDUCTION = 1050.0


class TaxpayerError(ValueError):
    """A taxpayer record could not be built from the given fields."""

    def __init__(self, value, message: str):
        super().__init__(message)
        self.value = value


class InvalidName(TaxpayerError):
    pass


class InvalidFilingStatus(TaxpayerError):
    pass


class InvalidAge(TaxpayerError):
    pass


class InvalidSpouseAge(TaxpayerError):
    pass


def _reject(error: type[TaxpayerError], value, message: str) -> TaxpayerError:
    logger.debug("rejected taxpayer record: %s (%r)", message, value)
    return error(value, message)


def _check_name(name) -> None:
    if not isinstance(name, str) or len(name) == 0:
        raise _reject(InvalidName, name, "name must be a non-empty string")
    if len(name.split()) < 2:
        raise _reject(InvalidName, name, "name must have at least a first and last name")


def _check_status(filing_status, allowed: frozenset) -> FilingStatus:
    try:
        status = FilingStatus.parse(filing_status)
    except ValueError:
        status = None
    if isinstance(filing_status, str) or status not in allowed:
        raise _reject(
            InvalidFilingStatus, filing_status, "invalid filing status for this constructor"
        )
    return status


def _check_age(age, error: type[TaxpayerError], what: str) -> None:
    if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
        raise _reject(error, age, f"{what} must be a whole number greater than 0")


@dataclass
class TaxSummary:
    name: str
    filing_status: str
    age: int
    spouse_age: int | None
    gross_income: float
    standard_deduction: float
    taxable_income: float
    return_required: bool
    tax_due: float
    net_tax_rate: float  # percent of gross income; NaN when gross income is 0


class TaxCalculator:
    """Taxpayer record plus the rules evaluated against it.

    Prefer the ``unmarried`` and ``married`` factories. Calling the class
    directly validates the same way: leaving out ``spouse_age`` takes the
    unmarried path, passing it (even as None) takes the married path.
    Nothing is bound until every field has passed.
    """

    def __init__(
        self,
        name: str,
        filing_status: FilingStatus | int,
        age: int,
        spouse_age=_NO_SPOUSE,
    ):
        married = spouse_age is not _NO_SPOUSE
        _check_name(name)
        status = _check_status(filing_status, MARRIED_STATUSES if married else UNMARRIED_STATUSES)
        _check_age(age, InvalidAge, "age")
        if married:
            _check_age(spouse_age, InvalidSpouseAge, "spouse age")

        self._name = name
        self._filing_status = status
        self._age = age
        self._spouse_age = spouse_age if married else None
        self._gross_income = 0.0

    @classmethod
    def unmarried(cls, name: str, filing_status: FilingStatus | int, age: int) -> "TaxCalculator":
        """Build a record for a single, head-of-household or widower filer.

        Raises:
            InvalidName: empty name, or fewer than two words.
            InvalidFilingStatus: a married status, or no status at all.
            InvalidAge: age not a whole number greater than 0.
        """
        return cls(name, filing_status, age)

    @classmethod
    def married(
        cls, name: str, filing_status: FilingStatus | int, age: int, spouse_age: int
    ) -> "TaxCalculator":
        """Build a record for a married couple filing jointly or separately.

        Raises:
            InvalidName: empty name, or fewer than two words.
            InvalidFilingStatus: an unmarried status, or no status at all.
            InvalidAge: age not a whole number greater than 0.
            InvalidSpouseAge: spouse age not a whole number greater than 0.
        """
        return cls(name, filing_status, age, spouse_age)

    def __repr__(self) -> str:
        return (
            f"TaxCalculator(name={self._name!r}, filing_status={self._filing_status.name}, "
            f"age={self._age}, spouse_age={self._spouse_age}, "
            f"gross_income={self._gross_income})"
        )

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        # Not validated, unlike the factories.
        self._name = value

    @property
    def filing_status(self) -> FilingStatus:
        return self._filing_status

    @property
    def age(self) -> int:
        return self._age

    @property
    def spouse_age(self) -> int | None:
        return self._spouse_age

    @property
    def gross_income(self) -> float:
        return self._gross_income

    @gross_income.setter
    def gross_income(self, value: float) -> None:
        if value < 0:
            logger.debug("ignoring negative gross income %r for %s", value, self._name)
            return
        self._gross_income = value

    def standard_deduction(self) -> float:
        deduction = BASE_STANDARD_DEDUCTIONS.get(self._filing_status, 0.0)
        if (
            self._filing_status == FilingStatus.MARRIED_FILING_JOINTLY
            and self._spouse_age is not None
            and self._spouse_age >= SENIOR_AGE
        ):
            deduction += SENIOR_ADDITIONAL_DEDUCTION
        if self._age >= SENIOR_AGE:
            deduction += SENIOR_ADDITIONAL_DEDUCTION
        return deduction

    def taxable_income(self) -> float:
        return max(0.0, self._gross_income - self.standard_deduction())

    def is_return_required(self) -> bool:
        return return_required(
            self._gross_income, self._filing_status, self._age, self._spouse_age
        )

    def tax_due(self) -> float:
        return compute_tax(self.taxable_income(), self._filing_status)

    def net_tax_rate(self) -> float:
        """Tax due as a percentage of gross income, or NaN with no income."""
        if self._gross_income == 0:
            return math.nan
        return 100.0 * self.tax_due() / self._gross_income

    def bracket_breakdown(self) -> list[BracketSlice]:
        return bracket_breakdown(self.taxable_income(), self._filing_status)

    def summary(self) -> TaxSummary:
        return TaxSummary(
            name=self._name,
            filing_status=self._filing_status.label,
            age=self._age,
            spouse_age=self._spouse_age,
            gross_income=round(self._gross_income, 2),
            standard_deduction=round(self.standard_deduction(), 2),
            taxable_income=round(self.taxable_income(), 2),
            return_required=self.is_return_required(),
            tax_due=round(self.tax_due(), 2),
            net_tax_rate=round(self.net_tax_rate(), 4),
        )


def income_schedule(
    calculator: TaxCalculator, incomes: Iterable[float]
) -> list[TaxSummary]:
    """Evaluate the record at each gross income without modifying it."""
    scenario = copy.copy(calculator)
    rows: list[TaxSummary] = []
    for income in incomes:
        if income < 0:
            logger.warning("skipping negative gross income %r in schedule", income)
            continue
        scenario.gross_income = income
        rows.append(scenario.summary())
    return rows


def to_dataframe(rows: list[TaxSummary]):
    try:
        import pandas as pd
    except ImportError as exc:
        raise RuntimeError("pandas is required to build a DataFrame output") from exc
    return pd.DataFrame([asdict(r) for r in rows])
