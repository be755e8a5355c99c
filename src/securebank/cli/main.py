"""Main CLI entry point."""

from dataclasses import replace

import click

from securebank.cli.error_handling import handle_storage_error
from securebank.config import LOG_FORMATS, BankConfig
from securebank.database.factories import create_file_database
from securebank.domain.errors import StorageError
from securebank.logging import setup_logging

# Import and register all commands at module level
from securebank.cli.commands import account, menu, pin, transfer

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory holding the account files (overrides SECUREBANK_DATA_DIR environment variable)",
    envvar="SECUREBANK_DATA_DIR",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Application log level (overrides SECUREBANK_LOG_LEVEL environment variable)",
    envvar="SECUREBANK_LOG_LEVEL",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS, case_sensitive=False),
    help="Log output format (overrides SECUREBANK_LOG_FORMAT environment variable)",
    envvar="SECUREBANK_LOG_FORMAT",
)
@click.option(
    "--capacity",
    type=click.IntRange(min=1),
    help="Number of account slots (overrides SECUREBANK_CAPACITY environment variable)",
    envvar="SECUREBANK_CAPACITY",
)
@click.pass_context
def cli(
    ctx,
    data_dir: str | None,
    log_level: str | None,
    log_format: str | None,
    capacity: int | None,
):
    """Securebank - PIN-protected bank account records.

    Accounts live in fixed slots of a binary file, numbered 1 to the store
    capacity. Updates, deletes, transfers and PIN changes ask for the
    account's PIN.
    """
    ctx.ensure_object(dict)

    overrides = {}
    if data_dir is not None:
        overrides["data_dir"] = data_dir
    if log_level is not None:
        overrides["log_level"] = log_level
    if log_format is not None:
        overrides["log_format"] = log_format.lower()
    if capacity is not None:
        overrides["capacity"] = capacity
    try:
        config = replace(BankConfig.from_env(), **overrides)
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}", ctx=ctx)
    setup_logging(config.log_level, config.log_format)
    ctx.obj["config"] = config

    # Open the account files only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_file_database(config)
            ctx.call_on_close(db.close)
            db.initialize()
        except StorageError as e:
            handle_storage_error(ctx, e)
        ctx.obj["db"] = db


# Register all commands
account.register_commands(cli)
transfer.register_commands(cli)
pin.register_commands(cli)
menu.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
