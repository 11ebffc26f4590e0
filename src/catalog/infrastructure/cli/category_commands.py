"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.add_category import AddCategoryHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import category_repository


@click.command("add")
@click.option("--name", required=True, help="Category name (unique).")
@click.option("--description", default=None, help="Description.")
def category_add(name: str, description: str | None) -> None:
    """Add a category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name, description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category.id} '{category.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = category_repository().list_all()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<38} {'Name':<24}")
    click.echo("-" * 62)
    for c in categories:
        click.echo(f"{c.id:<38} {c.name:<24}")
