"""Filing status enumeration.

The integer value of each member is the index used by the constant tables in
``income_tax`` and ``filing_requirement``, so the ordering below must not
change.
"""

from enum import IntEnum


class FilingStatus(IntEnum):
    SINGLE = 0
    HEAD_OF_HOUSEHOLD = 1
    MARRIED_FILING_JOINTLY = 2
    MARRIED_FILING_SEPARATELY = 3
    QUALIFYING_WIDOWER = 4

    @property
    def is_married(self) -> bool:
        return self in MARRIED_STATUSES

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: "FilingStatus | int | str") -> "FilingStatus":
        """Resolve a member, an ordinal, or a label like "married_filing_jointly".

        Raises:
            ValueError: if the value names no filing status.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"not a filing status: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            key = key.replace("(", "").replace(")", "")
            status = _LABELS.get(key)
            if status is not None:
                return status
        raise ValueError(f"not a filing status: {value!r}")


MARRIED_STATUSES = frozenset(
    {FilingStatus.MARRIED_FILING_JOINTLY, FilingStatus.MARRIED_FILING_SEPARATELY}
)
UNMARRIED_STATUSES = frozenset(FilingStatus) - MARRIED_STATUSES

_LABELS: dict[str, FilingStatus] = {s.label: s for s in FilingStatus}
_LABELS.update(
    {
        "qualifying_widow": FilingStatus.QUALIFYING_WIDOWER,
        "mfj": FilingStatus.MARRIED_FILING_JOINTLY,
        "mfs": FilingStatus.MARRIED_FILING_SEPARATELY,
        "hoh": FilingStatus.HEAD_OF_HOUSEHOLD,
    }
)
