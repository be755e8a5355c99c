"""Account management commands."""

import click

from securebank.cli.context import get_account_service, get_config
from securebank.cli.error_handling import handle_domain_error, handle_storage_error
from securebank.domain.errors import DomainError, StorageError
from securebank.domain.export import format_accounts_table
from securebank.utils.amount_parser import parse_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("number", type=int, metavar="ACCOUNT_NUMBER")
@click.option("--details", help='Customer details: "LASTNAME FIRSTNAME BALANCE" (prompted if omitted)')
@click.pass_context
def create_account(ctx, number: int, details: str | None):
    """Open a new account and set its PIN.

    The PIN is always entered interactively, twice. It must be between 1
    and 9999 and must differ from the account number.

    Examples:
        securebank account create 5 --details "Smith John 100.00"
        securebank account create 12
    """
    service = get_account_service(ctx)

    try:
        record = service.create_account(number, details)
        click.echo(f"Created account {record.account_number} for {record.first_name} {record.last_name}")
        click.echo(f"Opening balance: {record.balance:.2f}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)


@account_group.command("update")
@click.argument("number", type=int, metavar="ACCOUNT_NUMBER")
@click.option("--amount", help="Charge (+) or payment (-), e.g. 25.00 or -30.00 (prompted if omitted)")
@click.pass_context
def update_account(ctx, number: int, amount: str | None) -> None:
    """Charge or credit an account. Requires the account PIN.

    Examples:
        securebank account update 5 --amount -30.00
        securebank account update 5
    """
    service = get_account_service(ctx)

    try:
        delta = parse_amount(amount) if amount is not None else None
        record = service.adjust_balance(number, delta)
        click.echo(f"New Balance: {record.balance:.2f}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)


@account_group.command("delete")
@click.argument("number", type=int, metavar="ACCOUNT_NUMBER")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, number: int, yes: bool) -> None:
    """Delete an account. Requires the account PIN.

    The slot is blanked and its PIN cleared, so the number can be reused.

    Examples:
        securebank account delete 5
        securebank account delete 5 --yes
    """
    service = get_account_service(ctx)

    try:
        record = service.require_account(number)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account {number} ({record.first_name} {record.last_name})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(number)
        click.echo(f"Deleted account {number}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StorageError as e:
        handle_storage_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all active accounts."""
    service = get_account_service(ctx)

    try:
        records = service.list_accounts()
    except StorageError as e:
        handle_storage_error(ctx, e)

    if not records:
        click.echo("No accounts found.")
        return

    for line in format_accounts_table(records):
        click.echo(line)


@account_group.command("export")
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    help="Report file (defaults to accounts.txt in the data directory)",
)
@click.pass_context
def export_accounts(ctx, output: str | None):
    """Export all active accounts to a fixed-width text file."""
    service = get_account_service(ctx)
    path = output if output is not None else get_config(ctx).export_path

    try:
        count = service.export_accounts(path)
        click.echo(f"Exported {count} account(s) to {path}")
    except StorageError as e:
        handle_storage_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
