"""Record management commands."""

import click

from dancelog.cli.error_handling import handle_domain_error
from dancelog.cli.formatting import echo_record_details
from dancelog.domain.errors import DomainError, NotFoundError, record_not_found
from dancelog.domain.record_store import RecordStore
from dancelog.domain.validation import build_institution, parse_institution_type, validate_amount, validate_date
from dancelog.domain.entities import RecordFields


@click.group()
def record_group():
    """Manage logged sessions."""
    pass


@record_group.command("show")
@click.argument("record_id")
@click.pass_context
def show_record(ctx, record_id: str) -> None:
    """Show a single record."""
    store: RecordStore = ctx.obj["store"]

    record = store.get(record_id)
    if record is None:
        handle_domain_error(ctx, NotFoundError(record_not_found(record_id)))

    click.echo(f"Record {record_id}")
    echo_record_details(record)


@record_group.command("update")
@click.argument("record_id")
@click.option("--date", "date_str", help="Session date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--institution", help="Institution name or alias (dilebeibei, bank, other)")
@click.option("--custom-institution", help="Institution name when the institution is 'other'")
@click.option("--amount", help="Amount in yuan (e.g., 300 or 150.50)")
@click.pass_context
def update_record(
    ctx,
    record_id: str,
    date_str: str | None,
    institution: str | None,
    custom_institution: str | None,
    amount: str | None,
) -> None:
    """Update a record.

    Fields that are not given keep their current values. Switching away from
    'other' drops the custom institution name.

    Examples:
        dancelog record update lx2k9a3f8q1z --amount 120
        dancelog record update lx2k9a3f8q1z --institution other --custom-institution 私教课
    """
    store: RecordStore = ctx.obj["store"]

    current = store.get(record_id)
    if current is None:
        handle_domain_error(ctx, NotFoundError(record_not_found(record_id)))

    try:
        institution_type = (
            parse_institution_type(institution) if institution is not None else current.institution_type
        )
        if custom_institution is None:
            custom_institution = current.custom_institution

        fields = RecordFields(
            date=validate_date(date_str) if date_str is not None else current.date,
            institution=build_institution(institution_type, custom_institution),
            amount=validate_amount(amount) if amount is not None else current.amount,
        )
        record = store.update(record_id, fields)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated record {record_id}")
    echo_record_details(record)


@record_group.command("delete")
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_record(ctx, record_id: str, yes: bool) -> None:
    """Delete a record.

    Examples:
        dancelog record delete lx2k9a3f8q1z
    """
    store: RecordStore = ctx.obj["store"]

    record = store.get(record_id)
    if record is not None and not yes:
        if not click.confirm(f"Are you sure you want to delete record {record_id} ({record.date})?"):
            click.echo("Deletion cancelled.")
            return

    if not store.remove(record_id):
        handle_domain_error(ctx, NotFoundError(record_not_found(record_id)))

    click.echo(f"Deleted record {record_id}")


def register_commands(cli: click.Group) -> None:
    """Register record commands with main CLI."""
    cli.add_command(record_group, name="record")
