"""Statement import command."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.errors import DomainError
from meisai.domain.statement_import import StatementImportService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--into", "statement_id", type=int, help="Merge rows into an existing statement ID")
@click.pass_context
def import_statement(ctx, csv_file: str, statement_id: int | None):
    """Import a card statement CSV file."""
    db = ctx.obj["db"]
    service = StatementImportService(db)

    try:
        outcome = service.import_file(csv_file, statement_id=statement_id)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Statement: {outcome.statement_id}")
    click.echo(f"  Imported: {outcome.imported_count} transactions")
    click.echo(f"  Skipped: {outcome.duplicate_count} duplicates")
    if outcome.excluded_count:
        click.echo(f"  Excluded: {outcome.excluded_count} issuer lines")
    if outcome.missing_field_count:
        click.echo(f"  Incomplete: {outcome.missing_field_count} rows")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
