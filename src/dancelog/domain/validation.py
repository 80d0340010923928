"""Validation of user-supplied record fields."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from dancelog.domain.entities import (
    CustomInstitution,
    Institution,
    InstitutionType,
    NamedInstitution,
    RecordFields,
)
from dancelog.domain.errors import (
    ValidationError,
    custom_institution_required,
    unknown_institution,
)
from dancelog.utils.amount_parser import parse_amount
from dancelog.utils.date_parser import parse_date

# Command-line aliases for the enumerated institutions
INSTITUTION_ALIASES = {
    "dilebeibei": InstitutionType.DI_LE_BEI_BEI,
    "bank": InstitutionType.IMPORT_EXPORT_BANK,
    "other": InstitutionType.OTHER,
}

# Amounts are kept to the fen and must survive a JSON float unchanged
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT_DIGITS = 15


def institution_choices() -> list[str]:
    """Return accepted institution inputs: display names followed by aliases."""
    return [member.value for member in InstitutionType] + list(INSTITUTION_ALIASES)


def parse_institution_type(value: str) -> InstitutionType:
    """Resolve an institution display name or alias.

    Raises:
        ValidationError: If the value is not a known institution
    """
    value = value.strip()
    for member in InstitutionType:
        if value == member.value or value.upper() == member.name:
            return member
    alias = INSTITUTION_ALIASES.get(value.lower())
    if alias is not None:
        return alias
    raise ValidationError(unknown_institution(value, institution_choices()))


def build_institution(kind: InstitutionType, custom_name: Optional[str] = None) -> Institution:
    """Build an Institution, dropping ``custom_name`` unless ``kind`` is OTHER.

    Raises:
        ValidationError: If kind is OTHER and no custom name is given
    """
    if kind is not InstitutionType.OTHER:
        return NamedInstitution(kind=kind)
    name = (custom_name or "").strip()
    if not name:
        raise ValidationError(custom_institution_required())
    return CustomInstitution(name=name)


def validate_amount(amount: str | Decimal | int | float) -> Decimal:
    """Parse and validate an amount.

    Raises:
        ValidationError: If the amount is missing, not numeric, not finite,
            negative or too large
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid amount: {amount!r}")
    if isinstance(amount, (Decimal, int, float)):
        amount = str(amount)
    try:
        parsed = parse_amount(amount)
    except ValueError as e:
        raise ValidationError(f"Invalid amount: {e}") from e

    try:
        parsed = parsed.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {amount} is too large")
    if len(parsed.as_tuple().digits) > MAX_AMOUNT_DIGITS:
        raise ValidationError(f"Invalid amount: {amount} is too large")
    return parsed


def validate_date(value: str | date) -> str:
    """Normalize a date to ``YYYY-MM-DD``.

    Raises:
        ValidationError: If the date cannot be parsed
    """
    if isinstance(value, date):
        return value.isoformat()
    try:
        return parse_date(value).isoformat()
    except ValueError as e:
        raise ValidationError(f"Invalid date: {e}") from e


def validate_record_fields(
    date: str | date,
    institution: str | InstitutionType,
    amount: str | Decimal | int | float,
    custom_institution: Optional[str] = None,
) -> RecordFields:
    """Validate raw form input into RecordFields.

    Args:
        date: Session date (YYYY-MM-DD, relative phrase or date object)
        institution: Institution display name, alias or InstitutionType
        amount: Amount text or number
        custom_institution: Institution name, required when institution is "other"

    Returns:
        Validated RecordFields

    Raises:
        ValidationError: If any field is invalid
    """
    if not isinstance(institution, InstitutionType):
        institution = parse_institution_type(institution)
    return RecordFields(
        date=validate_date(date),
        institution=build_institution(institution, custom_institution),
        amount=validate_amount(amount),
    )
