"""Interactive input boundary.

Domain services never read from a terminal directly. They ask a Prompter
for one line at a time; ``None`` means the input stream has ended, which
every caller treats as an abort rather than as bad input.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar

from securebank.domain.errors import DomainError, InputExhaustedError

T = TypeVar("T")


class Prompter(ABC):
    """Source of interactive input and sink for user-facing notices."""

    @abstractmethod
    def ask(self, message: str, hide_input: bool = False) -> Optional[str]:
        """Show message and return one line of input, or None at end of input."""
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a message that needs no answer."""
        pass


def ask_or_abort(prompter: Prompter, message: str, hide_input: bool = False) -> str:
    """Ask for one line, raising InputExhaustedError at end of input."""
    answer = prompter.ask(message, hide_input=hide_input)
    if answer is None:
        raise InputExhaustedError("Input ended; operation aborted")
    return answer


def ask_until_valid(
    prompter: Prompter,
    message: str,
    parse: Callable[[str], T],
    max_attempts: Optional[int] = None,
    hide_input: bool = False,
) -> T:
    """Ask until parse accepts an answer.

    Each rejected answer is reported through ``prompter.notify`` and uses up
    one attempt.

    Args:
        prompter: Input source
        message: Prompt text
        parse: Converts the raw answer, raising DomainError to reject it
        max_attempts: Attempts allowed; None retries until input ends
        hide_input: Do not echo the answer

    Returns:
        The first accepted, parsed answer

    Raises:
        InputExhaustedError: If input ends before an answer is accepted
        DomainError: The last rejection, once max_attempts answers were rejected
    """
    attempts = 0
    while True:
        raw = ask_or_abort(prompter, message, hide_input=hide_input)
        attempts += 1
        try:
            return parse(raw)
        except InputExhaustedError:
            raise
        except DomainError as e:
            prompter.notify(str(e))
            if max_attempts is not None and attempts >= max_attempts:
                raise
