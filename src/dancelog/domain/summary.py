"""Monthly aggregation of teaching records.

All functions are pure: they read the records they are given and return new
values without touching storage.
"""

from decimal import Decimal
from typing import Iterable, Sequence

from dancelog.domain.entities import MonthlySummary, Record
from dancelog.domain.errors import ValidationError, invalid_month_key
from dancelog.utils.date_parser import MONTH_KEY_PATTERN


def validate_month_key(month_key: str) -> str:
    """Return ``month_key`` if it is a valid ``YYYY-MM`` key.

    Raises:
        ValidationError: If the key is malformed
    """
    match = MONTH_KEY_PATTERN.match(month_key)
    if match is None or not 1 <= int(match.group(2)) <= 12:
        raise ValidationError(invalid_month_key(month_key))
    return month_key


def filter_by_month(records: Iterable[Record], month_key: str) -> list[Record]:
    """Return records dated within ``month_key``, in their original order."""
    validate_month_key(month_key)
    return [record for record in records if record.date.startswith(month_key)]


def sort_by_date_desc(records: Iterable[Record]) -> list[Record]:
    """Sort records by date, newest first. Equal dates keep their relative order."""
    return sorted(records, key=lambda record: record.date, reverse=True)


def total_amount(records: Iterable[Record]) -> Decimal:
    """Sum of record amounts (0 for no records)."""
    return sum((record.amount for record in records), Decimal("0"))


def institution_label(record: Record) -> str:
    """Display label: the institution name, or the custom name for "other"."""
    return record.institution.label


def group_by_institution(records: Iterable[Record]) -> list[tuple[str, Decimal]]:
    """Sum amounts per institution label, largest first.

    Labels with equal sums keep the order in which they were first seen.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        label = institution_label(record)
        totals[label] = totals.get(label, Decimal("0")) + record.amount
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def month_keys(records: Iterable[Record]) -> list[str]:
    """Distinct month keys that have records, newest first."""
    keys = {record.date[:7] for record in records if MONTH_KEY_PATTERN.match(record.date[:7])}
    return sorted(keys, reverse=True)


def build_monthly_summary(records: Sequence[Record], month_key: str) -> MonthlySummary:
    """Build the dashboard view for ``month_key``."""
    monthly = sort_by_date_desc(filter_by_month(records, month_key))
    return MonthlySummary(
        month_key=month_key,
        records=tuple(monthly),
        total=total_amount(monthly),
        breakdown=tuple(group_by_institution(monthly)),
    )
