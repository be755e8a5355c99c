"""Account domain service.

Every operation runs the same sequence: validate inputs, locate the
account(s), authenticate, apply the change, persist it, then write the audit
line. A failure at any step stops the sequence, so nothing is written for a
rejected request.

Writes are not atomic across slots or files. When a transfer's second write
fails, the debit already written stays in place and the StorageError is
passed on to the caller.
"""

import math
from pathlib import Path
from typing import Optional

from securebank.database.base import Database
from securebank.domain.audit import AuditAction, AuditLog
from securebank.domain.credentials import CredentialService
from securebank.domain.entities import AccountRecord
from securebank.domain.errors import (
    AlreadyExistsError,
    AuthenticationFailedError,
    InsufficientFundsError,
    NotFoundError,
    StorageError,
    ValidationError,
    account_already_exists,
    account_not_found,
    authentication_failed,
    insufficient_funds,
)
from securebank.domain.export import write_accounts_report
from securebank.domain.prompts import ask_or_abort
from securebank.logging import get_logger
from securebank.utils.amount_parser import parse_amount
from securebank.utils.details_parser import parse_details

logger = get_logger(__name__)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database, credentials: CredentialService, audit: AuditLog):
        """Initialize account service.

        Args:
            db: Database instance
            credentials: Credential service used for PIN checks and PIN setup
            audit: Audit sink for committed operations and failed challenges
        """
        self.db = db
        self.credentials = credentials
        self.audit = audit

    @property
    def prompter(self):
        return self.credentials.prompter

    def get_account(self, account_number: int) -> Optional[AccountRecord]:
        """Get account by number.

        Returns:
            The record, or None if the slot is empty or holds another number

        Raises:
            OutOfRangeError: If account_number is outside the store
        """
        record = self.db.read_record(account_number)
        if not record.occupies(account_number):
            return None
        return record

    def require_account(self, account_number: int) -> AccountRecord:
        """Get account by number, raising NotFoundError if it does not exist."""
        record = self.get_account(account_number)
        if record is None:
            raise NotFoundError(account_not_found(account_number))
        return record

    def list_accounts(self) -> list[AccountRecord]:
        """List all accounts in ascending account-number order."""
        return list(self.db.iter_records())

    def export_accounts(self, path: Path) -> int:
        """Write all accounts to a fixed-width text report.

        Returns:
            Number of accounts written
        """
        count = write_accounts_report(self.db.iter_records(), path)
        logger.info("Exported %d account(s) to %s", count, path)
        return count

    def _authorize(self, account_number: int) -> None:
        if not self.credentials.authenticate(account_number):
            self.audit.record(
                AuditAction.AUTH_FAIL,
                f"Multiple failed PIN attempts on account {account_number}",
            )
            raise AuthenticationFailedError(authentication_failed(account_number))

    def create_account(self, account_number: int, details: Optional[str] = None) -> AccountRecord:
        """Open an account in an empty slot and set its PIN.

        Args:
            account_number: Slot to open
            details: "lastname firstname balance" line; prompted for if None

        Returns:
            The record as written

        Raises:
            OutOfRangeError: If account_number is outside the store
            AlreadyExistsError: If the slot already holds this account
            ValidationError: If the details line is malformed or the balance negative
            InputExhaustedError: If input ends during the prompts
        """
        existing = self.db.read_record(account_number)
        if existing.account_number == account_number:
            raise AlreadyExistsError(account_already_exists(account_number))

        if details is None:
            details = ask_or_abort(self.prompter, "Enter lastname, firstname, balance\n? ")
        parsed = parse_details(details)
        if parsed.balance < 0:
            raise ValidationError("Invalid customer details: opening balance cannot be negative")

        self.prompter.notify("--- SETUP SECURITY PIN ---")
        pin_hash = self.credentials.set_new_credential(account_number)

        record = AccountRecord(
            account_number=account_number,
            last_name=parsed.last_name,
            first_name=parsed.first_name,
            balance=parsed.balance,
        )
        self.db.create_account(record, pin_hash)
        self.audit.record(AuditAction.CREATE, f"Account {account_number} created")
        logger.info("Created account %d", account_number)
        return record

    def adjust_balance(self, account_number: int, delta: Optional[float] = None) -> AccountRecord:
        """Apply a charge (+) or payment (-) to an account.

        When delta is given it is checked against the balance before the PIN
        challenge. When it is None the current balance is shown after the
        challenge and the amount is prompted for.

        Raises:
            NotFoundError: If the account does not exist
            AuthenticationFailedError: If the PIN challenge fails
            ValidationError: If a prompted amount is not a number
            InsufficientFundsError: If the balance would become negative
        """
        record = self.require_account(account_number)
        if delta is not None:
            self._check_adjustment(record, delta)

        self._authorize(account_number)

        if delta is None:
            self.prompter.notify(f"Current Balance: {record.balance:.2f}")
            delta = parse_amount(ask_or_abort(self.prompter, "Enter charge (+) or payment (-): "))
            self._check_adjustment(record, delta)

        updated = record.with_balance(record.balance + delta)
        self.db.write_record(account_number, updated)
        self.audit.record(AuditAction.UPDATE, f"Acct {account_number} updated by {delta:.2f}")
        logger.info("Adjusted account %d by %.2f", account_number, delta)
        return updated

    def _check_adjustment(self, record: AccountRecord, delta: float) -> None:
        if not math.isfinite(delta):
            raise ValidationError(f"Invalid amount '{delta}'")
        new_balance = record.balance + delta
        if not math.isfinite(new_balance):
            raise ValidationError(f"Invalid amount '{delta}': balance would overflow")
        if new_balance < 0.0:
            raise InsufficientFundsError(insufficient_funds(record.account_number))

    def delete_account(self, account_number: int) -> None:
        """Close an account: blank its slot and clear its PIN.

        Raises:
            NotFoundError: If the account does not exist
            AuthenticationFailedError: If the PIN challenge fails
        """
        self.require_account(account_number)
        self._authorize(account_number)

        self.db.clear_account(account_number)
        self.audit.record(AuditAction.DELETE, f"Account {account_number} deleted")
        logger.info("Deleted account %d", account_number)

    def transfer(
        self, from_account: int, to_account: int, amount: float
    ) -> tuple[AccountRecord, AccountRecord]:
        """Move funds between two accounts. Only the sender is authenticated.

        Returns:
            (source record, destination record) after the transfer

        Raises:
            NotFoundError: If either account does not exist
            ValidationError: If the accounts are the same, amount is not positive,
                or the destination balance would overflow
            InsufficientFundsError: If the source balance is below amount
            AuthenticationFailedError: If the sender's PIN challenge fails
            StorageError: If a write fails; a failure on the destination write
                leaves the source already debited
        """
        source = self.get_account(from_account)
        if source is None:
            raise NotFoundError(f"Source account {from_account} not found")
        destination = self.get_account(to_account)
        if destination is None:
            raise NotFoundError(f"Destination account {to_account} not found")

        if from_account == to_account:
            raise ValidationError("Cannot transfer to self")
        if not math.isfinite(amount) or amount <= 0:
            raise ValidationError("Invalid amount: transfer amount must be positive")
        if source.balance < amount:
            raise InsufficientFundsError(insufficient_funds(from_account))
        if not math.isfinite(destination.balance + amount):
            raise ValidationError(
                f"Invalid amount '{amount}': destination balance would overflow"
            )

        self.prompter.notify(f"Authenticating Sender (Account {from_account})...")
        self._authorize(from_account)

        debited = source.with_balance(source.balance - amount)
        credited = destination.with_balance(destination.balance + amount)

        self.db.write_record(from_account, debited)
        try:
            self.db.write_record(to_account, credited)
        except StorageError:
            logger.error(
                "Transfer of %.2f from %d to %d: source debited but destination write failed",
                amount,
                from_account,
                to_account,
            )
            raise

        self.audit.record(
            AuditAction.TRANSFER, f"{amount:.2f} from {from_account} to {to_account}"
        )
        logger.info("Transferred %.2f from %d to %d", amount, from_account, to_account)
        return debited, credited

    def change_pin(self, account_number: int) -> None:
        """Replace an account's PIN after checking the current one.

        Raises:
            NotFoundError: If the account does not exist
            AuthenticationFailedError: If the current PIN is not confirmed
            InputExhaustedError: If input ends during the prompts
        """
        self.require_account(account_number)
        self.prompter.notify("Please verify current credentials:")
        self._authorize(account_number)

        pin_hash = self.credentials.set_new_credential(account_number)
        self.db.write_credential(account_number, pin_hash)
        self.audit.record(AuditAction.PIN_CHANGE, f"Account {account_number} changed PIN")
        logger.info("Changed PIN for account %d", account_number)
