"""Store-to-category mapping commands."""

import click
from meisai.cli.error_handling import handle_domain_error
from meisai.domain.category import CategoryService
from meisai.domain.errors import DomainError


@click.group()
def mapping_group():
    """Map store names to categories for future imports."""
    pass


@mapping_group.command("store")
@click.argument("store_name")
@click.argument("category_id", type=int)
@click.pass_context
def map_store(ctx, store_name: str, category_id: int):
    """Map STORE_NAME to a flat category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.set_store_category(store_name, category_id)
        click.echo(f"Mapped '{store_name}' to category {category_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@mapping_group.command("hier")
@click.argument("store_name")
@click.argument("major_id", type=int)
@click.option("--minor", "minor_id", type=int, help="Minor category ID (must belong to the major)")
@click.pass_context
def map_store_hierarchical(ctx, store_name: str, major_id: int, minor_id: int | None):
    """Map STORE_NAME to a major category and optional minor category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        service.set_store_hierarchical_category(store_name, major_id, minor_id)
        minor_str = f" / minor {minor_id}" if minor_id is not None else ""
        click.echo(f"Mapped '{store_name}' to major {major_id}{minor_str}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@mapping_group.command("list")
@click.pass_context
def list_mappings(ctx):
    """List store mappings of both schemes."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    category_names = {c.id: c.name for c in service.list_categories()}
    major_names = {m.id: m.name for m in service.list_major_categories()}
    minor_names = {m.id: m.name for m in service.list_minor_categories()}

    flat = service.list_store_categories()
    hierarchical = service.list_store_hierarchical_categories()
    if not flat and not hierarchical:
        click.echo("No store mappings found.")
        return

    if flat:
        click.echo("\nFlat mappings:")
        for m in flat:
            click.echo(f"  {m.store_name} -> {category_names.get(m.category_id, m.category_id)}")

    if hierarchical:
        click.echo("\nHierarchical mappings:")
        for m in hierarchical:
            path = str(major_names.get(m.major_category_id, m.major_category_id))
            if m.minor_category_id is not None:
                path += f" > {minor_names.get(m.minor_category_id, m.minor_category_id)}"
            click.echo(f"  {m.store_name} -> {path}")


@mapping_group.command("delete")
@click.argument("store_name")
@click.option("--hier", is_flag=True, help="Delete the hierarchical mapping instead of the flat one")
@click.pass_context
def delete_mapping(ctx, store_name: str, hier: bool):
    """Delete the mapping for STORE_NAME."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        if hier:
            service.delete_store_hierarchical_category(store_name)
        else:
            service.delete_store_category(store_name)
        click.echo(f"Deleted mapping for '{store_name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register mapping commands with main CLI."""
    cli.add_command(mapping_group, name="map")
