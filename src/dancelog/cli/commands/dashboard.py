"""Monthly dashboard commands."""

import click

from dancelog.cli.error_handling import handle_domain_error
from dancelog.cli.formatting import format_amount
from dancelog.domain.errors import ValidationError
from dancelog.domain.record_store import RecordStore
from dancelog.domain.summary import (
    build_monthly_summary,
    filter_by_month,
    institution_label,
    month_keys,
    total_amount,
)
from dancelog.utils.date_parser import parse_month_key


def _display_breakdown(summary) -> None:
    """Print per-institution totals, largest first."""
    click.echo(f"{'Institution':<30} {'Amount':>15}")
    click.echo("-" * 46)
    for label, amount in summary.breakdown:
        click.echo(f"{label:<30} {format_amount(amount):>15}")
    click.echo("-" * 46)
    click.echo(f"{'TOTAL':<30} {format_amount(summary.total):>15}")


@click.command("dashboard")
@click.option(
    "--month",
    default="this month",
    show_default=True,
    help="Month to show (YYYY-MM or relative like 'last month')",
)
@click.option("--overview", is_flag=True, help="Only show totals by institution")
@click.pass_context
def show_dashboard(ctx, month: str, overview: bool):
    """Show income for a month.

    Lists the month's sessions (newest date first), the month total and the
    breakdown by institution.

    Examples:
        dancelog dashboard
        dancelog dashboard --month 2024-05 --overview
    """
    store: RecordStore = ctx.obj["store"]

    try:
        month_key = parse_month_key(month)
        summary = build_monthly_summary(store.records, month_key)
    except ValueError as e:
        handle_domain_error(ctx, ValidationError(str(e)))

    click.echo(f"\n{summary.month_key}  Income: {format_amount(summary.total)}")

    if not summary.records:
        click.echo("No sessions logged this month.")
        return

    if not overview:
        click.echo(f"\nSessions ({len(summary.records)}):")
        click.echo("-" * 80)
        click.echo(f"{'ID':<22} {'Date':<12} {'Institution':<28} {'Amount':>15}")
        click.echo("-" * 80)
        for record in summary.records:
            click.echo(
                f"{record.id:<22} {record.date:<12} {institution_label(record):<28} "
                f"{format_amount(record.amount):>15}"
            )
        click.echo()

    _display_breakdown(summary)


@click.command("months")
@click.pass_context
def list_months(ctx):
    """List months that have sessions, newest first, with their totals."""
    store: RecordStore = ctx.obj["store"]
    records = store.records

    keys = month_keys(records)
    if not keys:
        click.echo("No sessions logged yet. Run 'add' to log one.")
        return

    for key in keys:
        monthly = filter_by_month(records, key)
        click.echo(f"{key}  {len(monthly):>4} session(s)  {format_amount(total_amount(monthly)):>15}")


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(show_dashboard)
    cli.add_command(list_months)
