"""Main CLI entry point."""

import click

from dancelog.database.base import StorageError
from dancelog.database.factories import create_sqlite_store
from dancelog.database.repository import RecordRepository
from dancelog.domain.record_store import RecordStore
from dancelog.logging_setup import LOG_LEVEL_ENV_VAR, configure_logging, get_logger

# Import and register all commands at module level
from dancelog.cli.commands import add, dashboard, institutions, record

logger = get_logger("dancelog.cli.main")


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (overrides DANCELOG_DB_PATH environment variable)",
    envvar="DANCELOG_DB_PATH",
)
@click.option(
    "--log-level",
    help="Log level, e.g. DEBUG or WARNING (overrides DANCELOG_LOG_LEVEL)",
    envvar=LOG_LEVEL_ENV_VAR,
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Dancelog - dance teaching session log.

    Record each teaching session (date, institution, amount) and review
    monthly income by institution.
    """
    ctx.ensure_object(dict)

    try:
        configure_logging(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=db_path)
        store.connect()
        try:
            store.initialize_schema()
        except StorageError:
            logger.exception("Record storage is unavailable; continuing with an empty log")
        ctx.call_on_close(store.disconnect)

        record_store = RecordStore(RecordRepository(store))
        record_store.initialize()
        ctx.obj["store"] = record_store


# Register all commands
add.register_commands(cli)
record.register_commands(cli)
dashboard.register_commands(cli)
institutions.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
