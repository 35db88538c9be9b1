"""Main CLI entry point."""

import logging

import click
from meisai.database.factories import create_sqlite_database

# Import and register all commands at module level
from meisai.cli.commands import (
    import_cmd,
    view,
    category,
    mapping,
    categorize,
    dashboard,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MEISAI_DB_PATH environment variable)",
    envvar="MEISAI_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Meisai - Card statement importer and spending dashboard.

    Import monthly card statement CSV exports, categorize spending by store
    and summarize it by category and month.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
import_cmd.register_commands(cli)
view.register_commands(cli)
category.register_commands(cli)
mapping.register_commands(cli)
categorize.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
