"""Add record command."""

import click
from datetime import date

from dancelog.cli.error_handling import handle_domain_error
from dancelog.cli.formatting import echo_record_details
from dancelog.domain.entities import InstitutionType
from dancelog.domain.errors import ValidationError
from dancelog.domain.record_store import RecordStore
from dancelog.domain.validation import parse_institution_type, validate_record_fields


@click.command("add")
@click.option("--date", "date_str", help="Session date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--institution", help="Institution name or alias (dilebeibei, bank, other)")
@click.option("--custom-institution", help="Institution name when --institution is 'other'")
@click.option("--amount", help="Amount in yuan (e.g., 300 or 150.50)")
@click.pass_context
def add_record(
    ctx,
    date_str: str | None,
    institution: str | None,
    custom_institution: str | None,
    amount: str | None,
):
    """Log a teaching session.

    Options that are left out are asked for in order: date, institution,
    institution name (for 'other') and amount.

    Examples:
        dancelog add --date 2024-05-01 --institution dilebeibei --amount 100
        dancelog add --date today --institution other --custom-institution 私教课 --amount 50
    """
    store: RecordStore = ctx.obj["store"]

    if date_str is None:
        date_str = click.prompt("Date", default=date.today().isoformat())

    if institution is None:
        choices = ", ".join(member.value for member in InstitutionType)
        institution = click.prompt(f"Institution ({choices})", default=InstitutionType.DI_LE_BEI_BEI.value)

    try:
        institution_type = parse_institution_type(institution)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    if institution_type is InstitutionType.OTHER and not custom_institution:
        custom_institution = click.prompt("Institution name")

    if amount is None:
        amount = click.prompt("Amount (元)")

    try:
        fields = validate_record_fields(
            date=date_str,
            institution=institution_type,
            amount=amount,
            custom_institution=custom_institution,
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)

    record = store.add(fields)
    click.echo("Logged session")
    echo_record_details(record)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_record)
