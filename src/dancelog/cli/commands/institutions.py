"""Institution listing command."""

import click

from dancelog.domain.validation import INSTITUTION_ALIASES


@click.command("institutions")
def list_institutions():
    """List the institutions a session can be logged against."""
    aliases = {kind: alias for alias, kind in INSTITUTION_ALIASES.items()}
    for kind, alias in aliases.items():
        click.echo(f"{kind.value:<12} (alias: {alias})")


def register_commands(cli):
    """Register institutions command with main CLI."""
    cli.add_command(list_institutions)
