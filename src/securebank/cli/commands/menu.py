"""Interactive text menu."""

from typing import Callable, Optional

import click

from securebank.cli.context import get_account_service, get_config
from securebank.cli.error_handling import handle_storage_error
from securebank.config import BankConfig
from securebank.domain.account import AccountService
from securebank.domain.errors import AuthenticationFailedError, DomainError, StorageError
from securebank.domain.export import format_accounts_table
from securebank.domain.prompts import ask_or_abort
from securebank.utils.amount_parser import parse_amount
from securebank.utils.number_parser import parse_unsigned_in_range

BANNER = "SECURE BANKING SOFTWARE"
BOX_WIDTH = 58

MENU_ITEMS = [
    "Export Accounts",
    "Update Account (Auth Required)",
    "Add New Account (Set PIN)",
    "Delete Account (Auth Required)",
    "List Active Accounts",
    "Transfer Funds (Auth Required)",
    "Change PIN",
    "Exit",
]
EXIT_CHOICE = len(MENU_ITEMS)


def print_screen_header(title: str) -> None:
    rule = "+" + "-" * BOX_WIDTH + "+"
    click.echo()
    click.echo(rule)
    click.echo(f"|{BANNER:^{BOX_WIDTH}}|")
    click.echo(rule)
    click.echo(f"| Screen: {title:<{BOX_WIDTH - 9}}|")
    click.echo(rule)


def print_message_box(label: str, message: str) -> None:
    click.echo(f"\n[{label}] {message}")


def enter_choice(service: AccountService) -> int:
    """Show the main menu until a valid choice is entered.

    End of input counts as choosing Exit.
    """
    while True:
        print_screen_header("MAIN MENU")
        for number, item in enumerate(MENU_ITEMS, start=1):
            click.echo(f"|           [{number}] {item:<{BOX_WIDTH - 15}}|")
        click.echo("+" + "-" * BOX_WIDTH + "+")

        answer = service.prompter.ask("Enter choice: ")
        if answer is None:
            return EXIT_CHOICE
        try:
            return parse_unsigned_in_range(answer, 1, EXIT_CHOICE)
        except DomainError:
            click.echo("Invalid choice.")


def _ask_account_number(service: AccountService, config: BankConfig, message: str) -> int:
    return parse_unsigned_in_range(
        ask_or_abort(service.prompter, message), 1, config.capacity
    )


def export_screen(service: AccountService, config: BankConfig) -> None:
    count = service.export_accounts(config.export_path)
    click.echo(f"Exported {count} account(s) to {config.export_path}")


def update_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("UPDATE ACCOUNT")
    number = _ask_account_number(service, config, "Enter account to update: ")
    record = service.adjust_balance(number)
    click.echo(f"New Balance: {record.balance:.2f}")


def create_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("ADD NEW ACCOUNT")
    number = _ask_account_number(
        service, config, f"Enter new account number ( 1 - {config.capacity} ): "
    )
    service.create_account(number)
    print_message_box("SUCCESS", "Account created and PIN hashed.")


def delete_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("DELETE ACCOUNT")
    number = _ask_account_number(service, config, "Enter account number: ")
    service.delete_account(number)
    print_message_box("SUCCESS", "Account deleted.")


def list_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("LIST ACCOUNTS")
    for line in format_accounts_table(service.list_accounts()):
        click.echo(line)


def transfer_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("TRANSFER FUNDS")
    from_account = _ask_account_number(service, config, "Transfer FROM account: ")
    if service.get_account(from_account) is None:
        click.echo("Source account not found.")
        return
    to_account = _ask_account_number(service, config, "Transfer TO account: ")
    if service.get_account(to_account) is None:
        click.echo("Destination account not found.")
        return
    amount = parse_amount(ask_or_abort(service.prompter, "Amount: "))
    service.transfer(from_account, to_account, amount)
    print_message_box("SUCCESS", "Transfer complete.")


def change_pin_screen(service: AccountService, config: BankConfig) -> None:
    print_screen_header("CHANGE PIN")
    number = _ask_account_number(service, config, "Enter account number: ")
    service.change_pin(number)
    print_message_box("SUCCESS", "PIN changed successfully.")


SCREENS: dict[int, Callable[[AccountService, BankConfig], None]] = {
    1: export_screen,
    2: update_screen,
    3: create_screen,
    4: delete_screen,
    5: list_screen,
    6: transfer_screen,
    7: change_pin_screen,
}


def run_screen(
    service: AccountService, config: BankConfig, choice: int
) -> Optional[StorageError]:
    """Run one menu operation, reporting rejected requests.

    Returns:
        The StorageError that stopped the operation, if any
    """
    try:
        SCREENS[choice](service, config)
    except AuthenticationFailedError as e:
        print_message_box("SECURITY ALERT", str(e))
    except DomainError as e:
        click.echo(f"Error: {e}")
    except StorageError as e:
        return e
    return None


@click.command("menu")
@click.pass_context
def menu(ctx):
    """Run the interactive account menu."""
    service = get_account_service(ctx)
    config = get_config(ctx)

    while True:
        choice = enter_choice(service)
        if choice == EXIT_CHOICE:
            break
        error = run_screen(service, config, choice)
        if error is not None:
            handle_storage_error(ctx, error)


def register_commands(cli):
    """Register menu command with main CLI."""
    cli.add_command(menu)
