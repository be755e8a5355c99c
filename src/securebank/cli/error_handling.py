"""CLI error handling helpers."""

import click

from securebank.domain.errors import DomainError, StorageError
from securebank.logging import get_logger

logger = get_logger(__name__)

STORAGE_FAILURE_EXIT_CODE = 2


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_storage_error(ctx: click.Context, error: StorageError) -> None:
    """Report a storage failure and exit.

    Account files may be out of step after this, so it exits with a distinct
    status instead of the one used for rejected requests.
    """
    logger.error("Storage failure; account files may be inconsistent: %s", error)
    click.echo(f"Error: storage failure: {error}", err=True)
    ctx.exit(STORAGE_FAILURE_EXIT_CODE)
