"""Transaction and statement viewing commands."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.category import CategoryService
from meisai.domain.errors import DomainError
from meisai.domain.transaction import TransactionService


@click.command("view")
@click.option("--month", help="Transaction month (YYYY-MM)")
@click.option("--statement", "statement_id", type=int, help="Statement ID")
@click.option("--limit", type=int, help="Maximum number of transactions to show")
@click.option("--offset", type=int, default=0, help="Number of transactions to skip")
@click.pass_context
def view_transactions(ctx, month: str, statement_id: int, limit: int, offset: int):
    """View transactions with optional filters."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    try:
        transactions = service.list_transactions(
            month=month, statement_id=statement_id, limit=limit, offset=offset
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    category_names = {c.id: c.name for c in category_service.list_categories()}
    major_names = {m.id: m.name for m in category_service.list_major_categories()}
    minor_names = {m.id: m.name for m in category_service.list_minor_categories()}

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 122)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Amount':>10}  {'Category':<16} {'Major > Minor':<20} "
        f"{'Store':<30} {'Note':<20}"
    )
    click.echo("-" * 122)

    for txn in transactions:
        category_name = category_names.get(txn.category_id, "") if txn.category_id else ""
        hierarchy = major_names.get(txn.major_category_id, "") if txn.major_category_id else ""
        if hierarchy and txn.minor_category_id:
            hierarchy += f" > {minor_names.get(txn.minor_category_id, '')}"
        amount_str = f"¥{txn.amount:,}"
        click.echo(
            f"{txn.id:<6} {str(txn.transaction_date):<12} {amount_str:>10}  {category_name:<16} "
            f"{hierarchy:<20} {txn.store_name[:30]:<30} {(txn.note or '')[:20]:<20}"
        )


@click.command("months")
@click.pass_context
def list_months(ctx):
    """List months that have transactions."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    months = service.list_available_months()
    if not months:
        click.echo("No transactions found.")
        return

    for month in months:
        click.echo(month)


@click.command("statements")
@click.pass_context
def list_statements(ctx):
    """List imported statements."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    statements = service.list_statements()
    if not statements:
        click.echo("No statements found.")
        return

    click.echo(f"{'ID':<6} {'Payment date':<14} {'Total':>12} {'Domestic':>12} {'Overseas':>12}")
    for statement in statements:
        click.echo(
            f"{statement.id:<6} {str(statement.payment_date):<14} "
            f"{f'¥{statement.total_amount:,}':>12} {f'¥{statement.domestic_amount:,}':>12} "
            f"{f'¥{statement.overseas_amount:,}':>12}"
        )


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(view_transactions)
    cli.add_command(list_months)
    cli.add_command(list_statements)
