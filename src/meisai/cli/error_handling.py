"""CLI error handling helpers."""

import logging

import click

from meisai.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | OSError) -> None:
    """Print ``Error: <message>`` to stderr and exit with status 1."""
    logger.debug("%s failed", ctx.info_name, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
