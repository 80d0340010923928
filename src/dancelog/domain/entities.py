"""Domain model entities for dancelog.

These are pure data classes representing the teaching log, independent of the
storage format. The storage layer maps them to and from the persisted JSON
shape in ``dancelog.database.mappers``.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class InstitutionType(str, Enum):
    """Institutions a session can be taught at.

    The values are the display names and are also what gets persisted.
    """

    DI_LE_BEI_BEI = "迪乐贝贝"
    IMPORT_EXPORT_BANK = "进出口银行"
    OTHER = "其他"


@dataclass(frozen=True)
class NamedInstitution:
    """One of the enumerated institutions."""

    kind: InstitutionType

    def __post_init__(self):
        if self.kind is InstitutionType.OTHER:
            raise ValueError("NamedInstitution cannot use InstitutionType.OTHER; use CustomInstitution")

    @property
    def label(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class CustomInstitution:
    """The "other" institution, carrying a free-text name."""

    name: str

    @property
    def label(self) -> str:
        # Legacy records may carry an empty name
        return self.name or InstitutionType.OTHER.value


Institution = Union[NamedInstitution, CustomInstitution]


@dataclass(frozen=True)
class RecordFields:
    """User-editable fields of a record (everything except id and timestamp)."""

    date: str
    institution: Institution
    amount: Decimal


@dataclass(frozen=True)
class Record:
    """A single teaching-session log entry."""

    id: str
    date: str
    institution: Institution
    amount: Decimal
    timestamp: int

    @property
    def institution_type(self) -> InstitutionType:
        if isinstance(self.institution, CustomInstitution):
            return InstitutionType.OTHER
        return self.institution.kind

    @property
    def custom_institution(self) -> Optional[str]:
        if isinstance(self.institution, CustomInstitution):
            return self.institution.name
        return None

    @property
    def fields(self) -> RecordFields:
        return RecordFields(date=self.date, institution=self.institution, amount=self.amount)


@dataclass(frozen=True)
class MonthlySummary:
    """Dashboard view model for a single month."""

    month_key: str
    records: tuple[Record, ...]
    total: Decimal
    breakdown: tuple[tuple[str, Decimal], ...]
