"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested record does not exist."""


def record_not_found(record_id: str) -> str:
    """Return message for missing record."""
    return f"Record {record_id} not found"


def custom_institution_required() -> str:
    """Return message when the "other" institution has no name."""
    return "Custom institution name is required when institution is 'other'"


def unknown_institution(value: str, choices: list[str]) -> str:
    """Return message for an institution outside the enumerated set."""
    return f"Unknown institution '{value}'. Choose one of: {', '.join(choices)}"


def invalid_month_key(value: str) -> str:
    """Return message for a malformed month key."""
    return f"Invalid month '{value}': expected YYYY-MM"
