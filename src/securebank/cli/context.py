"""CLI helpers for wiring services from the click context."""

import click

from securebank.cli.prompter import ClickPrompter
from securebank.config import BankConfig
from securebank.domain.account import AccountService
from securebank.domain.audit import AuditLog
from securebank.domain.credentials import CredentialService


def get_config(ctx: click.Context) -> BankConfig:
    return ctx.obj["config"]


def get_account_service(ctx: click.Context) -> AccountService:
    """Build an AccountService over the database opened by the CLI group.

    This keeps prompter and audit wiring consistent across commands.
    """
    config = get_config(ctx)
    db = ctx.obj["db"]
    credentials = CredentialService(
        db,
        ClickPrompter(),
        max_attempts=config.max_pin_attempts,
        min_pin=config.min_pin,
        max_pin=config.max_pin,
    )
    return AccountService(db, credentials, AuditLog(config.audit_path))
