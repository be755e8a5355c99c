"""PIN hashing, the PIN challenge and the PIN-setting workflow."""

from securebank.database.base import Database
from securebank.domain.entities import NO_CREDENTIAL
from securebank.domain.errors import DomainError, ValidationError
from securebank.domain.prompts import Prompter, ask_or_abort, ask_until_valid
from securebank.logging import get_logger
from securebank.utils.number_parser import parse_unsigned, parse_unsigned_in_range

logger = get_logger(__name__)

HASH_SEED = 5381
HASH_MASK = 0xFFFFFFFF


def compute_hash(account_number: int, pin: int) -> int:
    """Hash a PIN, salted with its account number.

    djb2-style mixing: fold the account number in first, then the PIN, and
    keep the low 32 bits. Deterministic, and the same PIN hashes differently
    on different accounts. Not a cryptographic hash: there is no key
    stretching and the PIN space is tiny.
    """
    value = HASH_SEED
    value = (value << 5) + value + account_number
    value = (value << 5) + value + pin
    return value & HASH_MASK


class CredentialService:
    """Service for checking and setting account PINs."""

    def __init__(
        self,
        db: Database,
        prompter: Prompter,
        max_attempts: int = 3,
        min_pin: int = 1,
        max_pin: int = 9999,
    ):
        """Initialize credential service.

        Args:
            db: Database instance
            prompter: Source of PIN entries
            max_attempts: Wrong PINs allowed before the challenge fails
            min_pin: Smallest acceptable new PIN
            max_pin: Largest acceptable new PIN
        """
        self.db = db
        self.prompter = prompter
        self.max_attempts = max_attempts
        self.min_pin = min_pin
        self.max_pin = max_pin

    def authenticate(self, account_number: int) -> bool:
        """Run the PIN challenge for an account.

        An account whose stored hash is 0 has no PIN and passes without a
        prompt. Otherwise the user gets ``max_attempts`` tries; a non-numeric
        entry uses up a try without being compared.

        Returns:
            True on the first matching PIN, False once all tries are used

        Raises:
            InputExhaustedError: If input ends during the challenge
        """
        stored_hash = self.db.read_credential(account_number)
        if stored_hash == NO_CREDENTIAL:
            self.prompter.notify("Notice: No PIN set for this account. Access granted.")
            logger.info("Account %d has no PIN; access granted", account_number)
            return True

        for attempt in range(1, self.max_attempts + 1):
            raw = ask_or_abort(
                self.prompter, f"Enter PIN for Account {account_number}: ", hide_input=True
            )
            try:
                pin = parse_unsigned(raw)
            except ValidationError:
                self.prompter.notify("Invalid input format.")
                continue

            if compute_hash(account_number, pin) == stored_hash:
                self.prompter.notify(">> Identity Verified.")
                return True
            self.prompter.notify(f">> Incorrect PIN. ({attempt}/{self.max_attempts} attempts)")

        logger.warning(
            "PIN challenge failed for account %d after %d attempts",
            account_number,
            self.max_attempts,
        )
        return False

    def _parse_new_pin(self, account_number: int, raw: str) -> int:
        try:
            pin = parse_unsigned_in_range(raw, self.min_pin, self.max_pin)
        except DomainError:
            raise ValidationError(f"PIN must be between {self.min_pin} and {self.max_pin}.")
        if pin == account_number:
            raise ValidationError(
                "Security Policy: PIN cannot be the same as the Account Number."
            )
        return pin

    def set_new_credential(self, account_number: int) -> int:
        """Ask for a new PIN twice and return its hash.

        Repeats until a PIN inside the allowed range, different from the
        account number, is entered and confirmed. Nothing is written here;
        the caller stores the returned hash.

        Raises:
            InputExhaustedError: If input ends before a PIN is confirmed
        """
        while True:
            pin = ask_until_valid(
                self.prompter,
                f"Set new PIN ({self.min_pin} - {self.max_pin}): ",
                lambda raw: self._parse_new_pin(account_number, raw),
                hide_input=True,
            )
            confirmation = ask_or_abort(self.prompter, "Confirm PIN: ", hide_input=True)
            try:
                confirmed = parse_unsigned(confirmation)
            except ValidationError:
                confirmed = None

            if confirmed == pin:
                return compute_hash(account_number, pin)
            self.prompter.notify("PINs do not match. Try again.")
