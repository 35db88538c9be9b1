"""Dashboard summary command."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.dashboard import DashboardService
from meisai.domain.entities import DashboardMode, DashboardView
from meisai.domain.errors import DomainError


def _yen(amount: int) -> str:
    return f"¥{amount:,}"


def print_dashboard(view: DashboardView) -> None:
    """Render a dashboard view as text."""
    click.echo(f"\nTotal: {_yen(view.total_amount)}")
    click.echo(f"Uncategorized: {view.uncategorized_count} transactions ({_yen(view.uncategorized_amount)})")

    if view.category_breakdown:
        click.echo("\nBy category:")
        for total in view.category_breakdown:
            click.echo(f"  {total.name:<24} {_yen(total.amount):>12}  ({total.count})")

    if view.detailed_category_breakdown:
        click.echo("\nBy category detail:")
        for total in view.detailed_category_breakdown:
            label = total.major_category
            if total.minor_category is not None:
                label += f" > {total.minor_category}"
            click.echo(f"  {label:<24} {_yen(total.amount):>12}  ({total.count})")

    if view.monthly_categories:
        click.echo("\nBy month:")
        for month in view.monthly_categories:
            click.echo(f"  {month.month:<24} {_yen(month.total):>12}")
            for total in month.categories:
                click.echo(f"    {total.name:<22} {_yen(total.amount):>12}  ({total.count})")


@click.command("dashboard")
@click.option("--hierarchical", is_flag=True, help="Group by the current major/minor store mapping")
@click.option("--month", help="Transaction month (YYYY-MM)")
@click.option("--statement", "statement_id", type=int, help="Statement ID")
@click.pass_context
def show_dashboard(ctx, hierarchical: bool, month: str | None, statement_id: int | None):
    """Show spending totals by category and month."""
    db = ctx.obj["db"]
    service = DashboardService(db)
    mode = DashboardMode.HIERARCHICAL if hierarchical else DashboardMode.FLAT

    try:
        view = service.build_dashboard(mode, month=month, statement_id=statement_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    print_dashboard(view)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
