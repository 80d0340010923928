"""Mapper functions between domain records and the persisted JSON shape.

The stored value is a JSON array of objects::

    [{"id": "...", "date": "YYYY-MM-DD", "institution": "迪乐贝贝",
      "customInstitution": "...", "amount": 100, "timestamp": 1714521600000}]

``customInstitution`` is only written for the "other" institution.
"""

import json
from decimal import Decimal
from typing import Any, Iterable

from dancelog.domain.entities import (
    CustomInstitution,
    InstitutionType,
    NamedInstitution,
    Record,
    Institution,
)
from dancelog.logging_setup import get_logger

logger = get_logger("dancelog.database.mappers")

_INSTITUTION_VALUES = {member.value: member for member in InstitutionType}


def amount_to_json(amount: Decimal) -> int | float:
    """Render an amount as a JSON number (int when integral)."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def institution_from_payload(value: str, custom_name: Any) -> Institution:
    """Resolve stored institution fields into an Institution."""
    kind = _INSTITUTION_VALUES.get(value)
    if kind is InstitutionType.OTHER:
        return CustomInstitution(name=custom_name if isinstance(custom_name, str) else "")
    if kind is None:
        # Unknown institution names are kept as custom labels
        return CustomInstitution(name=value)
    return NamedInstitution(kind=kind)


def record_to_payload(record: Record) -> dict[str, Any]:
    """Convert a domain Record to its persisted dict."""
    payload: dict[str, Any] = {
        "id": record.id,
        "date": record.date,
        "institution": record.institution_type.value,
    }
    if isinstance(record.institution, CustomInstitution):
        payload["customInstitution"] = record.institution.name
    payload["amount"] = amount_to_json(record.amount)
    payload["timestamp"] = record.timestamp
    return payload


def record_from_payload(payload: Any) -> Record:
    """Convert a persisted dict to a domain Record.

    Missing ``timestamp`` defaults to 0 and a missing ``customInstitution`` on
    an "other" record becomes an empty name.

    Raises:
        ValueError: If the entry lacks an id or date, or has an invalid amount
    """
    if not isinstance(payload, dict):
        raise ValueError(f"Expected an object, got {type(payload).__name__}")

    record_id = payload.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise ValueError("Missing record id")

    record_date = payload.get("date")
    if not isinstance(record_date, str) or not record_date:
        raise ValueError(f"Record {record_id} has no date")

    amount = payload.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ValueError(f"Record {record_id} has a non-numeric amount")
    if isinstance(amount, float):
        amount = Decimal(str(amount))
    elif isinstance(amount, int):
        amount = Decimal(amount)
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Record {record_id} has an invalid amount {amount}")

    institution_value = payload.get("institution")
    if not isinstance(institution_value, str):
        institution_value = InstitutionType.OTHER.value

    timestamp = payload.get("timestamp", 0)
    if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float, Decimal)):
        timestamp = 0
    try:
        timestamp = int(timestamp)
    except (ValueError, OverflowError):
        timestamp = 0

    return Record(
        id=record_id,
        date=record_date,
        institution=institution_from_payload(institution_value, payload.get("customInstitution")),
        amount=amount,
        timestamp=timestamp,
    )


def serialize_records(records: Iterable[Record]) -> str:
    """Serialize records to the compact JSON array stored on disk."""
    return json.dumps(
        [record_to_payload(record) for record in records],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def deserialize_records(data: str) -> list[Record]:
    """Parse the stored JSON array into records.

    Entries that cannot be mapped are skipped with a warning.

    Raises:
        ValueError: If ``data`` is not valid JSON or not a JSON array
    """
    entries = json.loads(data, parse_float=Decimal)
    if not isinstance(entries, list):
        raise ValueError(f"Expected a JSON array, got {type(entries).__name__}")

    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(record_from_payload(entry))
        except ValueError as e:
            logger.warning("Skipping stored record at index %d: %s", index, e)
    return records
