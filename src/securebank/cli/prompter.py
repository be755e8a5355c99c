"""Terminal implementation of the domain Prompter."""

import sys
from typing import Optional, TextIO

import click

from securebank.domain.prompts import Prompter


class ClickPrompter(Prompter):
    """Read answers from stdin and show notices through click.

    Hidden answers (PINs) use click's no-echo prompt when stdin is a
    terminal. Otherwise each answer is read as a plain line, so piped input
    and CliRunner see end of input as an empty read.
    """

    def __init__(self, input_stream: Optional[TextIO] = None):
        self._input_stream = input_stream

    @property
    def input_stream(self) -> TextIO:
        if self._input_stream is not None:
            return self._input_stream
        return sys.stdin

    def ask(self, message: str, hide_input: bool = False) -> Optional[str]:
        stream = self.input_stream
        if hide_input and stream.isatty():
            try:
                return click.prompt(
                    message, default="", show_default=False, prompt_suffix="", hide_input=True
                )
            except click.Abort:
                return None

        click.echo(message, nl=False)
        line = stream.readline()
        if not line:
            click.echo()
            return None
        return line.rstrip("\r\n")

    def notify(self, message: str) -> None:
        click.echo(message)
