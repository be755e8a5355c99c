"""Transfer command."""

import click

from securebank.cli.context import get_account_service
from securebank.cli.error_handling import handle_domain_error, handle_storage_error
from securebank.domain.errors import DomainError, StorageError
from securebank.utils.amount_parser import parse_amount


# Unknown "options" such as -5 are passed through as the AMOUNT argument
@click.command("transfer", context_settings={"ignore_unknown_options": True})
@click.argument("from_account", type=int, metavar="FROM")
@click.argument("to_account", type=int, metavar="TO")
@click.argument("amount", metavar="AMOUNT")
@click.pass_context
def transfer_funds(ctx, from_account: int, to_account: int, amount: str):
    """Transfer funds between two accounts.

    Only the sending account's PIN is asked for.

    Examples:
        securebank transfer 5 6 70.00
    """
    service = get_account_service(ctx)

    try:
        source, destination = service.transfer(from_account, to_account, parse_amount(amount))
        click.echo("[SUCCESS] Transfer complete.")
        click.echo(f"  Account {source.account_number}: {source.balance:.2f}")
        click.echo(f"  Account {destination.account_number}: {destination.balance:.2f}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)


def register_commands(cli):
    """Register transfer command with main CLI."""
    cli.add_command(transfer_funds)
