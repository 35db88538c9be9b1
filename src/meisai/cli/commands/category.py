"""Category management commands."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.category import CategoryService
from meisai.domain.errors import DomainError


@click.group()
def category_group():
    """Manage flat categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all flat categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new flat category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(name=name)
        click.echo(f"Created category '{name}' (ID: {category_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def major_group():
    """Manage hierarchical categories."""
    pass


@major_group.command("list")
@click.pass_context
def list_major_categories(ctx):
    """List major categories with their minor categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    majors = service.list_major_categories()
    if not majors:
        click.echo("No major categories found.")
        return

    for major in majors:
        click.echo(f"{major.name} (ID: {major.id})")
        for minor in service.list_minor_categories(major.id):
            click.echo(f"  {minor.name} (ID: {minor.id})")


@major_group.command("create")
@click.argument("name")
@click.pass_context
def create_major_category(ctx, name: str):
    """Create a new major category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        major_id = service.create_major_category(name=name)
        click.echo(f"Created major category '{name}' (ID: {major_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@major_group.command("add-minor")
@click.argument("major_id", type=int)
@click.argument("name")
@click.pass_context
def create_minor_category(ctx, major_id: int, name: str):
    """Create a minor category under MAJOR_ID."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        minor_id = service.create_minor_category(major_id, name)
        click.echo(f"Created minor category '{name}' under major {major_id} (ID: {minor_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(major_group, name="major")
