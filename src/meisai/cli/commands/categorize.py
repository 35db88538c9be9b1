"""Per-transaction category assignment commands."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.errors import DomainError
from meisai.domain.transaction import TransactionService


@click.command("categorize")
@click.argument("transaction_ids", nargs=-1, required=True, type=int)
@click.argument("category_id", nargs=1, type=int)
@click.pass_context
def categorize_transaction(ctx, transaction_ids: tuple[int, ...], category_id: int):
    """Assign a flat category to one or more transactions.

    Only the given transactions change; store mappings are left alone.

    Examples:
        meisai categorize 1 3
        meisai categorize 1 2 3 3
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    # Remove duplicates while preserving order
    unique_ids = list(dict.fromkeys(transaction_ids))

    errors = []
    for txn_id in unique_ids:
        try:
            service.update_category(transaction_id=txn_id, category_id=category_id)
            click.echo(f"Transaction {txn_id} categorized as category {category_id}")
        except DomainError as e:
            errors.append(e)
            click.echo(f"Error: {e}", err=True)

    if errors:
        ctx.exit(1)


@click.command("uncategorize")
@click.argument("transaction_id", type=int)
@click.pass_context
def uncategorize_transaction(ctx, transaction_id: int):
    """Clear the flat category of a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.update_category(transaction_id=transaction_id, category_id=None)
        click.echo(f"Cleared category for transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("categorize-hier")
@click.argument("transaction_id", type=int)
@click.argument("major_id", type=int)
@click.option("--minor", "minor_id", type=int, help="Minor category ID (must belong to the major)")
@click.pass_context
def categorize_transaction_hierarchical(ctx, transaction_id: int, major_id: int, minor_id: int | None):
    """Assign a major (and optional minor) category to a transaction.

    The assignment is shown by `view`; the hierarchical dashboard groups by
    the store mapping instead.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.update_hierarchical_category(transaction_id, major_id, minor_id)
        click.echo(f"Transaction {transaction_id} categorized as major {major_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register categorize commands with main CLI."""
    cli.add_command(categorize_transaction)
    cli.add_command(uncategorize_transaction)
    cli.add_command(categorize_transaction_hierarchical)
