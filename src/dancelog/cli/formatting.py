"""Shared output formatting for CLI commands."""

from decimal import Decimal

import click

from dancelog.domain.entities import Record
from dancelog.domain.summary import institution_label


def format_amount(amount: Decimal) -> str:
    """Format an amount as yuan with two decimals."""
    return f"¥{amount:,.2f}"


def echo_record_details(record: Record) -> None:
    """Print every field of a record, one per line."""
    click.echo(f"  ID: {record.id}")
    click.echo(f"  Date: {record.date}")
    click.echo(f"  Institution: {institution_label(record)}")
    click.echo(f"  Amount: {format_amount(record.amount)}")
