"""PIN management commands."""

import click

from securebank.cli.context import get_account_service
from securebank.cli.error_handling import handle_domain_error, handle_storage_error
from securebank.domain.errors import DomainError, StorageError


@click.group()
def pin_group():
    """Manage account PINs."""
    pass


@pin_group.command("change")
@click.argument("number", type=int, metavar="ACCOUNT_NUMBER")
@click.pass_context
def change_pin(ctx, number: int):
    """Change an account's PIN. The current PIN is checked first."""
    service = get_account_service(ctx)

    try:
        service.change_pin(number)
        click.echo("[SUCCESS] PIN changed successfully.")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)


def register_commands(cli):
    """Register PIN commands with main CLI."""
    cli.add_command(pin_group, name="pin")
