"""CLI commands for the BaseProduct aggregate."""

from __future__ import annotations

import click

from catalog.application.add_base_product import AddBaseProductHandler
from catalog.application.delete_base_product import DeleteBaseProductHandler
from catalog.application.list_base_products import ListBaseProductsHandler
from catalog.application.update_base_product import UpdateBaseProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import (
    base_product_repository,
    category_repository,
    event_publisher,
    variant_projector,
    variant_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Base product name (unique).")
@click.option("--description", default=None, help="Description.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.pass_obj
def base_product_add(
    obj: dict, name: str, description: str | None, category_id: str | None
) -> None:
    """Add a base product to the catalog."""
    handler = AddBaseProductHandler(
        base_product_repo=base_product_repository(),
        category_repo=category_repository(),
        publisher=event_publisher(),
        projector=variant_projector(),
    )

    try:
        dto = handler.handle(
            name, user_id=obj["user"], description=description, category_id=category_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Base product {dto.id} '{dto.name}' added")


@click.command("list")
@click.option("--search", default=None, help="Match name or description.")
@click.option("--category", "category_id", default=None, help="Only this category.")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--page-size", default=10, show_default=True, type=int)
def base_product_list(
    search: str | None, category_id: str | None, page: int, page_size: int
) -> None:
    """List base products."""
    handler = ListBaseProductsHandler(base_product_repository(), variant_projector())

    try:
        result = handler.handle(search, category_id, page, page_size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No base products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<24} {'Category':<16}")
    click.echo("-" * 80)
    for p in result.items:
        click.echo(f"{p.id:<38} {p.name:<24} {(p.category_name or '-'):<16}")


@click.command("update")
@click.option("--id", "base_product_id", required=True, help="Base product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", "category_id", default=None, help="New category ID.")
@click.pass_obj
def base_product_update(
    obj: dict,
    base_product_id: str,
    name: str | None,
    description: str | None,
    category_id: str | None,
) -> None:
    """Update a base product. Options left out keep their current values."""
    handler = UpdateBaseProductHandler(
        base_product_repo=base_product_repository(),
        category_repo=category_repository(),
        publisher=event_publisher(),
        projector=variant_projector(),
    )

    try:
        dto = handler.handle(
            base_product_id,
            user_id=obj["user"],
            name=name,
            description=description,
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Base product {dto.id} '{dto.name}' updated")


@click.command("delete")
@click.option("--id", "base_product_id", required=True, help="Base product ID.")
@click.option("--cascade", is_flag=True, help="Also delete its variants.")
@click.pass_obj
def base_product_delete(obj: dict, base_product_id: str, cascade: bool) -> None:
    """Delete a base product."""
    handler = DeleteBaseProductHandler(
        base_product_repo=base_product_repository(),
        variant_repo=variant_repository(),
        publisher=event_publisher(),
    )

    try:
        handler.handle(base_product_id, user_id=obj["user"], cascade=cascade)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Base product {base_product_id} deleted")
