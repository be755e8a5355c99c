"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class OutOfRangeError(DomainError):
    """Account number or PIN outside its valid bounds."""


class NotFoundError(DomainError):
    """Requested account slot is empty or holds another account number."""


class AlreadyExistsError(DomainError):
    """Create requested on an occupied slot."""


class InsufficientFundsError(DomainError):
    """Operation would leave a balance negative."""


class AuthenticationFailedError(DomainError):
    """PIN challenge failed after all attempts were used."""


class InputExhaustedError(DomainError):
    """Input stream ended in the middle of a prompt sequence."""


class StorageError(OSError):
    """Open, seek, read, write or flush failure on a backing file.

    Not a DomainError: it means the persisted state may be unreliable, so
    callers escalate it instead of treating it as a rejected request.
    """


def account_not_found(account_number: int) -> str:
    """Return message for missing account."""
    return f"Account {account_number} not found"


def account_already_exists(account_number: int) -> str:
    """Return message for create on an occupied slot."""
    return f"Account #{account_number} already exists"


def account_out_of_range(account_number: int, capacity: int) -> str:
    """Return message for an account number outside the store."""
    return f"Account number {account_number} is out of range (1 - {capacity})"


def insufficient_funds(account_number: int) -> str:
    """Return message when a debit exceeds the balance.

    Raised before the PIN challenge, so it must not reveal the balance.
    """
    return f"Insufficient funds in account {account_number}"


def authentication_failed(account_number: int) -> str:
    """Return message when the PIN challenge is exhausted."""
    return f"Too many failed attempts for account {account_number}. Transaction blocked."
